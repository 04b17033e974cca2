# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 16:22:48 2026

"""

# run_regime_sweep.py
import subprocess
import itertools
import sys

# Parameter sets for each damping regime
DAMPING_CASES = {
    'ud': {'M': 1.0, 'c': 2.0, 'k': 9.0}, # Under-damped
    'cd': {'M': 1.0, 'c': 6.0, 'k': 9.0}, # Critically-damped
    'od': {'M': 2.0, 'c': 6.0, 'k': 2.0}, # Over-damped
    'un': {'M': 1.0, 'c': 0.0, 'k': 9.0}  # Undamped
}

def build_commands(damping_case_names=('ud', 'cd', 'od', 'un'), methods=('Radau', 'BDF'), num_frames=30):
    commands = []
    for damping_case_name, method in itertools.product(damping_case_names, methods):
        params = DAMPING_CASES[damping_case_name]
        commands.append([
            sys.executable, 'main.py',
            '--M', str(params['M']),
            '--c', str(params['c']),
            '--k', str(params['k']),
            '--method', method,
            '--num_frames', str(num_frames),
            '--headless', '--no_plots'
        ])
    return commands

def run_regime_sweep():
    commands = build_commands()
    print(f"Starting {len(commands)} headless integrations...")

    for i, command in enumerate(commands):
        print(f"\n--- Running Integration {i+1}/{len(commands)} ---")
        print(f"Command: {' '.join(command[1:])}")
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=True)
            print("main.py stdout:\n", result.stdout)
            if result.stderr:
                print("main.py stderr:\n", result.stderr)
        except subprocess.CalledProcessError as e:
            print(f"Integration {i+1} failed with return code {e.returncode}")
            print(f"Stdout: {e.stdout}")
            print(f"Stderr: {e.stderr}")

    print("\nAll headless integrations finished.")

if __name__ == "__main__":
    run_regime_sweep()
