"""Tests for the playback controller state machine."""

import pytest

from dampedosc.playback import PlaybackController, PlaybackMode, PlaybackState


def test_initial_state() -> None:
    ctrl = PlaybackController(length=5)
    assert ctrl.mode is PlaybackMode.STOPPED
    assert ctrl.state == PlaybackState(is_running=False, cursor_index=0)


def test_toggle_flips_mode_and_keeps_cursor() -> None:
    ctrl = PlaybackController(length=5)
    assert ctrl.toggle() is PlaybackMode.RUNNING
    ctrl.tick()
    ctrl.tick()
    assert ctrl.toggle() is PlaybackMode.STOPPED
    assert ctrl.cursor_index == 2
    assert ctrl.toggle() is PlaybackMode.RUNNING
    assert ctrl.cursor_index == 2


def test_restart_stops_and_rewinds() -> None:
    ctrl = PlaybackController(length=5)
    ctrl.toggle()
    for _ in range(3):
        ctrl.tick()
    ctrl.restart()
    assert ctrl.state == PlaybackState(is_running=False, cursor_index=0)
    ctrl.restart()
    assert ctrl.state == PlaybackState(is_running=False, cursor_index=0)


def test_tick_wraps_around() -> None:
    ctrl = PlaybackController(length=3)
    ctrl.toggle()
    assert [ctrl.tick() for _ in range(7)] == [1, 2, 0, 1, 2, 0, 1]


def test_tick_ignored_when_stopped_or_empty() -> None:
    ctrl = PlaybackController(length=4)
    assert ctrl.tick() == 0
    empty = PlaybackController(length=0)
    empty.toggle()
    assert empty.tick() == 0
    assert empty.cursor_index == 0


def test_reset_rewinds_without_changing_mode() -> None:
    ctrl = PlaybackController(length=10)
    ctrl.toggle()
    for _ in range(6):
        ctrl.tick()
    ctrl.reset(4)
    assert ctrl.is_running
    assert ctrl.cursor_index == 0
    assert ctrl.length == 4
    ctrl.toggle()
    ctrl.reset(2)
    assert not ctrl.is_running


def test_negative_length_rejected() -> None:
    with pytest.raises(ValueError):
        PlaybackController(length=-1)
