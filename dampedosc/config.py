# config.py
# Centralized defaults for the simulation session

import logging

# Physical parameters: m*ddx + c*dx + k*x = 0
DEFAULT_PARAMETERS = {
    'x0': 1.0,             # m
    'v0': 0.0,             # m/s
    'mass': 1.0,           # kg
    'stiffness': 1.0,      # N/m
    'damping_coeff': 0.0,  # N*s/m, 0 = undamped
    'phase': 0.0,          # rad
}

DEFAULT_WINDOW = {
    'duration': 20.0,      # s of simulated time
    'sample_count': 100,   # samples across the window
    'speed_factor': 1.0,   # higher = slower playback
}

LOG_LEVEL = logging.INFO
