# analysis.py
# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 09:05:33 2026

"""
# analysis.py
import numpy as np
import matplotlib.pyplot as plt
from integration_driver import ConvergenceError, IntegrationDriver
from msd_system import MSDSystem

def run_frame_sweep(driver: IntegrationDriver, num_frames: int):
    """
    Drives one integration session through the frame indices 1..num_frames,
    exactly as the render loop does, and records the state after every frame.
    The returned arrays include the starting state. The driver is closed afterwards.
    """
    time_points = [driver.t]
    states = [driver.state]
    step_counts = [0]
    failure = None

    with driver:
        for ti in range(1, num_frames + 1):
            try:
                state = driver.advance(ti)
            except ConvergenceError as e:
                failure = f"frame {ti}: {e}"
                print(f"Warning: integration stopped at {failure}")
                break
            time_points.append(driver.t)
            states.append(state)
            step_counts.append(driver.last_step_count)
        stats = driver.stats

    states = np.array(states)
    return {
        'time_points': np.array(time_points),
        'positions': states[:, 0],
        'velocities': states[:, 1],
        'step_counts': np.array(step_counts),
        'stats': stats,
        'failure': failure,
        'method': driver.method,
    }

def compare_to_analytic(msd_system: MSDSystem, results: dict):
    x_true, v_true = msd_system.analytic_state(results['time_points'])
    x_error = np.abs(results['positions'] - x_true)
    v_error = np.abs(results['velocities'] - v_true)
    return {
        'x_analytic': x_true,
        'v_analytic': v_true,
        'max_position_error': float(np.max(x_error)),
        'max_velocity_error': float(np.max(v_error)),
    }

def energy_drift(msd_system: MSDSystem, results: dict):
    """Largest relative change of mechanical energy over the sweep."""
    states = np.column_stack((results['positions'], results['velocities']))
    energy = msd_system.energy(states)
    reference = energy[0] if energy[0] != 0 else 1.0
    return float(np.max(np.abs(energy - energy[0])) / abs(reference))

def summarize_results(msd_system: MSDSystem, results: dict, comparison: dict):
    c, k, M, F = msd_system.params
    print("\n--- Integration Summary ---")
    print(f"Method: {results['method']}")
    print(f"Parameters: c={c:.4f}, k={k:.4f}, M={M:.4f}, F={F:.4f}")
    print(f"Damping regime: {msd_system.damping_regime} (zeta={msd_system.zeta:.4f}, omega_n={msd_system.omega_n:.4f})")
    print(f"Frames integrated: {len(results['time_points']) - 1}")
    if results['failure'] is not None:
        print(f"Integration failed at {results['failure']}")

    stats = results['stats']
    print(f"\nSub-steps: {stats['steps']} (max per frame {np.max(results['step_counts'])})")
    print(f"RHS evaluations: {stats['nfev']}, Jacobian evaluations: {stats['njev']}, LU decompositions: {stats['nlu']}")

    print(f"\nFinal state: position={results['positions'][-1]:.6f}, velocity={results['velocities'][-1]:.6f}")
    x_eq, _ = msd_system.equilibrium
    print(f"Static equilibrium: position={x_eq:.6f}")
    print(f"Max |position error| vs analytic: {comparison['max_position_error']:.3e}")
    print(f"Max |velocity error| vs analytic: {comparison['max_velocity_error']:.3e}")
    if F == 0 and c == 0:
        print(f"Relative energy drift: {energy_drift(msd_system, results):.3e}")

def plot_time_series(integrated_vals, analytic_vals, time_points, title, ylabel, var_name, system_params):
    plt.figure(figsize=(12, 6))
    plt.plot(time_points, analytic_vals, label=f'Analytic {var_name}', color='blue', linewidth=2)
    plt.plot(time_points, integrated_vals, 'o', markersize=3, alpha=0.7, label=f'Integrated {var_name} (per frame)', color='red')
    plt.title(f'{title}\nc={system_params["c"]:.2f}, k={system_params["k"]:.2f}, M={system_params["M"]:.2f}, F={system_params["F"]:.2f}, y0={system_params["y0"]:.2f}, v0={system_params["v0"]:.2f}')
    plt.xlabel('Frame (time)')
    plt.ylabel(ylabel)
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    plt.show()
