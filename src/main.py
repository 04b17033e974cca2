# main.py
# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 11:47:18 2026

"""
# main.py
import sys
import argparse
import config
from msd_system import MSDSystem
from integration_driver import IntegrationDriver
from frame_binding import FrameBinding
from analysis import run_frame_sweep, compare_to_analytic, summarize_results, plot_time_series
from scene import SceneContext, check_interactive_backend

def parse_overrides(argv=None):
    parser = argparse.ArgumentParser(description="Integrate a damped oscillator frame by frame and display it.")

    # Arguments for SYSTEM_PARAMS
    parser.add_argument('--c', type=float, help='Damping coefficient (c). Overrides config.SYSTEM_PARAMS["c"]')
    parser.add_argument('--k', type=float, help='Spring constant (k). Overrides config.SYSTEM_PARAMS["k"]')
    parser.add_argument('--M', type=float, help='Mass (M). Overrides config.SYSTEM_PARAMS["M"]')
    parser.add_argument('--F', type=float, help='Constant forcing (F). Overrides config.SYSTEM_PARAMS["F"]')
    parser.add_argument('--y0', type=float, help='Initial position. Overrides config.SYSTEM_PARAMS["y0"]')
    parser.add_argument('--v0', type=float, help='Initial velocity. Overrides config.SYSTEM_PARAMS["v0"]')

    # Arguments for SOLVER_CONFIG
    parser.add_argument('--method', type=str, help='Implicit method (Radau or BDF). Overrides config.SOLVER_CONFIG["method"]')
    parser.add_argument('--atol', type=float, help='Absolute tolerance. Overrides config.SOLVER_CONFIG["atol"]')
    parser.add_argument('--rtol', type=float, help='Relative tolerance. Overrides config.SOLVER_CONFIG["rtol"]')

    # Argument for SCENE_CONFIG
    parser.add_argument('--binding', type=str, help='State to translation binding (velocity or position). Overrides config.SCENE_CONFIG["binding"]')

    # Arguments for SIMULATION_PARAMS
    parser.add_argument('--num_frames', type=int, help='Frames to integrate in headless mode. Overrides config.SIMULATION_PARAMS["num_frames"]')
    parser.add_argument('--headless', action='store_true', help='Run the frame sweep without opening a window')
    parser.add_argument('--no_plots', action='store_true', help='Skip plots in headless mode')

    args = parser.parse_args(argv)

    # Apply command-line overrides to the config dictionaries
    for name in ('c', 'k', 'M', 'F', 'y0', 'v0'):
        if getattr(args, name) is not None:
            config.SYSTEM_PARAMS[name] = getattr(args, name)
    for name in ('method', 'atol', 'rtol'):
        if getattr(args, name) is not None:
            config.SOLVER_CONFIG[name] = getattr(args, name)
    if args.binding is not None:
        config.SCENE_CONFIG['binding'] = args.binding
    if args.num_frames is not None:
        config.SIMULATION_PARAMS['num_frames'] = args.num_frames
    if args.headless:
        config.SIMULATION_PARAMS['headless'] = True
    if args.no_plots:
        config.SIMULATION_PARAMS['show_plots'] = False
    return args

def run_headless(driver, msd_system):
    results = run_frame_sweep(driver, config.SIMULATION_PARAMS['num_frames'])
    comparison = compare_to_analytic(msd_system, results)
    summarize_results(msd_system, results, comparison)

    if config.SIMULATION_PARAMS['show_plots']:
        plot_time_series(results['positions'], comparison['x_analytic'], results['time_points'],
                         'Integrated and Analytic Position', 'Position', 'Position', config.SYSTEM_PARAMS)
        plot_time_series(results['velocities'], comparison['v_analytic'], results['time_points'],
                         'Integrated and Analytic Velocity', 'Velocity', 'Velocity', config.SYSTEM_PARAMS)
    return results

def run_interactive(driver, binding):
    if not check_interactive_backend():
        driver.close()
        print("[ERROR Display] The matplotlib backend cannot open a window.")
        print("  => Select an interactive backend (e.g. set MPLBACKEND=TkAgg) or run with --headless.")
        print("\n\nThe program will now exit")
        sys.exit(1)

    print("Initialize data of the scene ...")
    scene = SceneContext(driver, binding, config.SCENE_CONFIG)
    print("Initialization finished\n")
    scene.run()

def main(argv=None):
    print(f"Run {sys.argv[0]}")
    if config.SIMULATION_PARAMS.get('ask_params'):
        parse_overrides(argv)

    # 1. Setup System, binding and integrator
    try:
        msd_system = MSDSystem.from_config(config.SYSTEM_PARAMS)
        binding = FrameBinding.from_config(config.SCENE_CONFIG)
        driver = IntegrationDriver.from_config(msd_system, config.SOLVER_CONFIG)
    except ValueError as e:
        print(f"[ERROR Configuration] {e}")
        print("\n\nThe program will now exit")
        sys.exit(1)

    if msd_system.damping_regime == 'undamped':
        print("Warning: No damping, the oscillation will never settle.")

    # 2. Run
    if config.SIMULATION_PARAMS['headless']:
        return run_headless(driver, msd_system)
    run_interactive(driver, binding)

if __name__ == "__main__":
    main()
