"""Tests for the closed-form trajectory sampler."""

import math

import numpy as np
import pytest

from dampedosc.core.errors import InvalidParameter
from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.physics.regimes import DampingRegime
from dampedosc.physics.sampler import amplitude_bound, normalized_position, sample, sample_times
from dampedosc.physics.solutions import (
    CriticallyDampedSolution,
    OverdampedSolution,
    UnderdampedSolution,
    solution_for,
)


def test_undamped_quarter_period_scenario() -> None:
    params = PhysicalParameters(x0=1.0, v0=0.0, mass=1.0, stiffness=1.0, damping_coeff=0.0, phase=0.0)
    window = SimulationWindow(duration=2 * math.pi, sample_count=4)
    traj = sample(params, window)
    assert traj.regime is DampingRegime.UNDAMPED
    assert len(traj) == 4
    np.testing.assert_allclose(traj.t, [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
    first, second = traj[0], traj[1]
    assert first.t == 0.0
    assert first.x == pytest.approx(1.0)
    assert first.v == pytest.approx(0.0, abs=1e-12)
    assert second.t == pytest.approx(math.pi / 2)
    assert second.x == pytest.approx(0.0, abs=1e-12)
    assert second.v == pytest.approx(-1.0)


def test_critically_damped_scenario() -> None:
    params = PhysicalParameters(x0=1.0, v0=0.0, mass=1.0, stiffness=1.0, damping_coeff=2.0)
    traj = sample(params, SimulationWindow(duration=2.0, sample_count=2))
    assert traj.regime is DampingRegime.CRITICALLY_DAMPED
    assert traj.t[1] == 1.0
    assert traj.x[1] == pytest.approx(math.exp(-1.0) * 2.0)
    assert traj.x[1] == pytest.approx(0.7358, abs=1e-4)
    t = traj.t
    np.testing.assert_allclose(traj.x, np.exp(-t) * (1 + t))


def test_length_and_index_based_times() -> None:
    window = SimulationWindow(duration=20.0, sample_count=100)
    traj = sample(PhysicalParameters(damping_coeff=0.5), window)
    assert len(traj) == 100
    assert traj.t[0] == 0.0
    assert traj.t[-1] == 99 * (20.0 / 100)
    np.testing.assert_allclose(np.diff(traj.t), 0.2)
    # accumulation-prone step still gives a fixed count
    assert len(sample_times(SimulationWindow(duration=1.0, sample_count=3))) == 3


def test_sampling_is_deterministic() -> None:
    params = PhysicalParameters(x0=0.3, v0=-1.1, mass=2.0, stiffness=5.0, damping_coeff=0.7, phase=0.2)
    window = SimulationWindow(duration=7.5, sample_count=333)
    a = sample(params, window)
    b = sample(params, window)
    assert a == b
    for key in ("t", "x", "v"):
        np.testing.assert_allclose(a.get(key), b.get(key), rtol=0, atol=1e-9)


def test_undamped_energy_is_conserved() -> None:
    params = PhysicalParameters(x0=0.5, v0=1.2, mass=2.0, stiffness=3.0, damping_coeff=0.0, phase=0.3)
    traj = sample(params, SimulationWindow(duration=30.0, sample_count=500))
    energy = params.stiffness * traj.x ** 2 + params.mass * traj.v ** 2
    np.testing.assert_allclose(energy, energy[0], rtol=1e-9)


@pytest.mark.parametrize("damping", [0.1, 1.0, 2.0, 4.0])
def test_velocity_is_derivative_of_position(damping: float) -> None:
    params = PhysicalParameters(x0=1.0, v0=0.4, mass=1.0, stiffness=1.0, damping_coeff=damping)
    solution = solution_for(params)
    t = np.linspace(0.0, 5.0, 11)
    h = 1e-6
    x_plus, _ = solution(t + h)
    x_minus, _ = solution(t - h)
    _, v = solution(t)
    np.testing.assert_allclose(v, (x_plus - x_minus) / (2 * h), atol=1e-6)


@pytest.mark.parametrize("damping", [0.1, 2.0, 4.0])
def test_initial_conditions_without_phase(damping: float) -> None:
    params = PhysicalParameters(x0=0.8, v0=-0.5, mass=1.0, stiffness=1.0, damping_coeff=damping)
    first = sample(params, SimulationWindow(duration=1.0, sample_count=10))[0]
    assert first.x == pytest.approx(0.8)
    assert first.v == pytest.approx(-0.5)


def test_damped_regimes_converge_to_critical() -> None:
    base = dict(x0=1.0, v0=0.3, mass=1.0, stiffness=1.0)
    t = np.array([0.5, 1.7, 4.0])
    x_crit, _ = CriticallyDampedSolution(PhysicalParameters(damping_coeff=2.0, **base))(t)
    for eps in (1e-4, 1e-6):
        x_under, _ = UnderdampedSolution(PhysicalParameters(damping_coeff=2.0 - eps, **base))(t)
        x_over, _ = OverdampedSolution(PhysicalParameters(damping_coeff=2.0 + eps, **base))(t)
        np.testing.assert_allclose(x_under, x_crit, atol=1e-3)
        np.testing.assert_allclose(x_over, x_crit, atol=1e-3)


def test_overdamped_decays_without_overflow() -> None:
    params = PhysicalParameters(x0=1.0, v0=0.0, mass=1.0, stiffness=1.0, damping_coeff=50.0)
    traj = sample(params, SimulationWindow(duration=2000.0, sample_count=100))
    assert traj.regime is DampingRegime.OVERDAMPED
    assert np.all(np.isfinite(traj.x))
    assert abs(traj.x[-1]) < 1e-6


def test_phase_shifts_undamped_motion() -> None:
    params = PhysicalParameters(x0=1.0, v0=0.0, damping_coeff=0.0, phase=math.pi / 2)
    first = sample(params, SimulationWindow(duration=1.0, sample_count=4))[0]
    assert first.x == pytest.approx(0.0, abs=1e-12)
    assert first.v == pytest.approx(-1.0)


def test_amplitude_bound_uses_undamped_frequency() -> None:
    params = PhysicalParameters(x0=3.0, v0=4.0, mass=1.0, stiffness=1.0)
    assert amplitude_bound(params) == pytest.approx(5.0)
    assert amplitude_bound(params.replace(damping_coeff=3.0)) == pytest.approx(5.0)
    traj = sample(params.replace(damping_coeff=0.5), SimulationWindow(duration=1.0, sample_count=5))
    assert traj.amplitude_bound == pytest.approx(5.0)


def test_normalized_position() -> None:
    assert normalized_position(0.0, 2.0) == pytest.approx(0.5)
    assert normalized_position(2.0, 2.0) == pytest.approx(1.0)
    assert normalized_position(-2.0, 2.0) == pytest.approx(0.0)
    assert normalized_position(7.0, 2.0) == 1.0
    assert normalized_position(1.0, 0.0) == 0.5


def test_empty_and_single_sample_windows() -> None:
    params = PhysicalParameters()
    empty = sample(params, SimulationWindow(duration=5.0, sample_count=0))
    assert len(empty) == 0
    assert list(empty) == []
    single = sample(params, SimulationWindow(duration=5.0, sample_count=1))
    assert len(single) == 1 and single[0].t == 0.0


def test_trajectory_is_read_only() -> None:
    traj = sample(PhysicalParameters(), SimulationWindow(duration=1.0, sample_count=3))
    with pytest.raises(ValueError):
        traj.x[0] = 10.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"duration": 0.0},
        {"duration": -1.0},
        {"sample_count": -1},
        {"sample_count": 2.5},
        {"speed_factor": 0.0},
        {"duration": float("nan")},
    ],
)
def test_invalid_window_raises(kwargs: dict) -> None:
    with pytest.raises(InvalidParameter):
        SimulationWindow(**kwargs)


@pytest.mark.parametrize("kwargs", [{"mass": 0.0}, {"stiffness": -1.0}, {"damping_coeff": -0.5}, {"x0": "abc"}])
def test_invalid_parameters_raise(kwargs: dict) -> None:
    with pytest.raises(InvalidParameter):
        PhysicalParameters(**kwargs)
