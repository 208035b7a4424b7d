"""
Trajectory sampler: closed-form (t, x, v) series over a simulation window.

Times are index-based, t_i = i * duration / sample_count for i in
range(sample_count), so the length is fixed and reproducible.
"""

import logging
import math

import numpy as np

from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.core.trajectory import Trajectory
from dampedosc.physics.regimes import natural_frequency
from dampedosc.physics.solutions import solution_for

logger = logging.getLogger(__name__)


def sample_times(window: SimulationWindow) -> np.ndarray:
    """Sample instants of the window (empty when sample_count == 0)."""
    return np.arange(window.sample_count, dtype=float) * window.step


def amplitude_bound(params: PhysicalParameters) -> float:
    """
    xMax = sqrt(x0² + (v0/k)²) with the undamped natural frequency k.

    Display-only normaliser for the position marker: it is the exact amplitude
    of the undamped motion, not a physical bound for the damped regimes.
    """
    k = natural_frequency(params.mass, params.stiffness)
    return math.sqrt(params.x0 ** 2 + (params.v0 / k) ** 2)


def normalized_position(x: float, bound: float) -> float:
    """
    Map x from [-bound, bound] to [0, 1], clamped (marker position on a track).
    A zero bound maps to the centre.
    """
    if bound <= 0:
        return 0.5
    return float(np.clip((x + bound) / (2.0 * bound), 0.0, 1.0))


def sample(params: PhysicalParameters, window: SimulationWindow) -> Trajectory:
    """
    Sample the closed-form solution of the regime the parameters fall in.

    Args:
        params: physical parameters (validated on construction).
        window: duration and sample count.

    Returns:
        Trajectory with exactly window.sample_count samples.

    Raises:
        InvalidParameter: propagated from classification (mass/stiffness <= 0).
    """
    solution = solution_for(params)
    t = sample_times(window)
    x, v = solution(t)
    bound = amplitude_bound(params)
    logger.debug(
        "Sampled %d points over %.4g s (%s, xMax=%.4g)",
        len(t),
        window.duration,
        solution.regime.value,
        bound,
    )
    return Trajectory(t, x, v, regime=solution.regime, amplitude_bound=bound)
