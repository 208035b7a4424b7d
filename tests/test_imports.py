"""Verify that main modules are importable."""


def test_import_dampedosc() -> None:
    import dampedosc
    assert dampedosc.__version__ == "0.1.0"


def test_import_core() -> None:
    from dampedosc.core import (
        InvalidParameter,
        ManualScheduler,
        PhysicalParameters,
        SimulationSession,
        SimulationWindow,
        ThreadingScheduler,
        Trajectory,
    )
    assert SimulationSession is not None
    assert PhysicalParameters is not None
    assert SimulationWindow is not None
    assert Trajectory is not None
    assert ManualScheduler is not None
    assert ThreadingScheduler is not None
    assert issubclass(InvalidParameter, ValueError)


def test_import_physics() -> None:
    from dampedosc.physics import DampingRegime, classify, sample, solution_for
    assert len(DampingRegime) == 4
    assert callable(classify)
    assert callable(sample)
    assert callable(solution_for)


def test_import_playback() -> None:
    from dampedosc.playback import PlaybackController, PlaybackMode, PlaybackState
    assert PlaybackController is not None
    assert PlaybackMode.STOPPED.value == "stopped"
    assert PlaybackState(is_running=False, cursor_index=0).cursor_index == 0


def test_import_io() -> None:
    from dampedosc.io import load_config, save_config
    assert save_config is not None
    assert load_config is not None
