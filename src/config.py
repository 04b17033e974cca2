# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:14:02 2026

"""
# config.py
# Centralized configuration for the integrator and the scene

SYSTEM_PARAMS = {
    'c': 0.2,   # Damping coefficient
    'k': 2.0,   # Spring constant
    'M': 20.0,  # Mass
    'F': 5.0,   # Constant forcing, set to 0.0 for unforced
    'y0': 0.5,  # Initial position
    'v0': 0.0   # Initial velocity
}

SOLVER_CONFIG = {
    'method': 'Radau', # 'Radau' (implicit Runge-Kutta) or 'BDF'
    'atol': 1e-6,
    'rtol': 1e-6,
    'max_steps': 100000 # Sub-step budget for a single advance call
}

SCENE_CONFIG = {
    'binding': 'velocity', # 'velocity' or 'position'
    'anchor': (0.0, 0.0, 3.0),
    'line_origin': (0.0, 0.0, 2.0),
    'start_translation': (0.0, 0.0, 0.0),
    'frame_interval_ms': 16,
    'axis_limits': (-3.0, 3.0),
    'fps_period': 1.0, # Seconds between fps refreshes in the title
    'window_title': 'MSD Display'
}

SIMULATION_PARAMS = {
    'headless': False, # True runs the frame sweep without opening a window
    'num_frames': 200, # Only used when headless is True
    'show_plots': True,
    'ask_params': True # True or False, enables the command line overrides
}
