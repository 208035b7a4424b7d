"""Playback controller: cursor over a sampled trajectory with start/stop/restart."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class PlaybackMode(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot dello stato di riproduzione."""

    is_running: bool
    cursor_index: int


class PlaybackController:
    """
    Two-state machine (STOPPED, RUNNING) driving a cursor index.

    The cursor wraps around at the end of the trajectory (looping playback).
    With an empty trajectory the cursor stays at 0 and tick() does nothing.
    """

    def __init__(self, length: int = 0) -> None:
        """
        Args:
            length: number of samples of the current trajectory.
        """
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self._length = length
        self._mode = PlaybackMode.STOPPED
        self._cursor = 0

    @property
    def mode(self) -> PlaybackMode:
        return self._mode

    @property
    def is_running(self) -> bool:
        return self._mode is PlaybackMode.RUNNING

    @property
    def cursor_index(self) -> int:
        return self._cursor

    @property
    def length(self) -> int:
        return self._length

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(is_running=self.is_running, cursor_index=self._cursor)

    def toggle(self) -> PlaybackMode:
        """STOPPED -> RUNNING or RUNNING -> STOPPED; cursor unchanged."""
        if self._mode is PlaybackMode.RUNNING:
            self._mode = PlaybackMode.STOPPED
        else:
            self._mode = PlaybackMode.RUNNING
        logger.debug("Playback %s at index %d", self._mode.value, self._cursor)
        return self._mode

    def restart(self) -> None:
        """Force STOPPED and rewind to the first sample."""
        self._mode = PlaybackMode.STOPPED
        self._cursor = 0

    def tick(self) -> int:
        """Advance the cursor by one sample while running; returns the cursor."""
        if self._mode is PlaybackMode.RUNNING and self._length > 0:
            self._cursor = (self._cursor + 1) % self._length
        return self._cursor

    def reset(self, length: int) -> None:
        """New trajectory: rewind the cursor, keep the mode."""
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self._length = length
        self._cursor = 0
