"""Riproduzione della traiettoria (cursore, start/stop/restart)."""

from dampedosc.playback.controller import PlaybackController, PlaybackMode, PlaybackState

__all__ = ["PlaybackController", "PlaybackMode", "PlaybackState"]
