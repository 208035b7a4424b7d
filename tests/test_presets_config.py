"""Tests for presets, JSON configuration and logging setup."""

import logging

import pytest

from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.core.scheduler import ManualScheduler
from dampedosc.core.session import SimulationSession
from dampedosc.io import load_config, save_config
from dampedosc.logging_config import setup_logging
from dampedosc.physics.regimes import DampingRegime, classify
from dampedosc.presets import PRESETS, get_preset


EXPECTED_REGIMES = {
    "undamped": DampingRegime.UNDAMPED,
    "weak_damping": DampingRegime.UNDERDAMPED,
    "strong_damping": DampingRegime.OVERDAMPED,
    "critical_damping": DampingRegime.CRITICALLY_DAMPED,
    "high_frequency": DampingRegime.UNDERDAMPED,
    "low_frequency": DampingRegime.UNDERDAMPED,
    "high_initial_velocity": DampingRegime.UNDERDAMPED,
    "shifted_initial_phase": DampingRegime.UNDERDAMPED,
}


@pytest.mark.parametrize("key", sorted(PRESETS))
def test_presets_are_valid_and_classified(key: str) -> None:
    params = PhysicalParameters(**PRESETS[key].params)
    assert classify(params.mass, params.stiffness, params.damping_coeff) is EXPECTED_REGIMES[key]


def test_get_preset_by_key_or_name() -> None:
    assert get_preset("weak_damping") is PRESETS["weak_damping"]
    assert get_preset("Weak damping") is PRESETS["weak_damping"]
    assert get_preset("HIGH INITIAL VELOCITY").params["v0"] == 5.0
    with pytest.raises(KeyError):
        get_preset("unknown")


def test_save_and_load_config(tmp_path) -> None:
    path = tmp_path / "sub" / "session.json"
    session = SimulationSession(
        PhysicalParameters(x0=0.5, damping_coeff=4.0),
        SimulationWindow(duration=8.0, sample_count=8),
        scheduler=ManualScheduler(),
    )
    save_config(session.to_config(), path)
    loaded = load_config(path)
    assert loaded == session.to_config()
    assert loaded["window"]["sample_count"] == 8
    clone = SimulationSession.from_config(loaded, scheduler=ManualScheduler())
    assert clone.parameters == session.parameters
    assert clone.regime is DampingRegime.OVERDAMPED


def test_setup_logging_does_not_duplicate_handlers(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "dampedosc"
        assert len(logger.handlers) == 2
        logging.getLogger("dampedosc.core.session").warning("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            h.close()
        logger.handlers.clear()
