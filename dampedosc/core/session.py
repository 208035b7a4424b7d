"""Simulation session: parameters -> trajectory -> playback cursor, with one timer."""

import functools
import logging
import threading
from typing import Any, Dict, Optional

from dampedosc.config import DEFAULT_PARAMETERS, DEFAULT_WINDOW
from dampedosc.core.errors import InvalidParameter
from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.core.scheduler import CancelHandle, Scheduler, ThreadingScheduler
from dampedosc.core.trajectory import Sample, Trajectory
from dampedosc.physics.regimes import DampingRegime, classify
from dampedosc.physics.sampler import sample
from dampedosc.playback.controller import PlaybackController, PlaybackState
from dampedosc.presets import get_preset

logger = logging.getLogger(__name__)

_PARAM_FIELDS = ("x0", "v0", "mass", "stiffness", "damping_coeff", "phase")
_WINDOW_FIELDS = ("duration", "sample_count", "speed_factor")

# Accepted parameter names -> dataclass field
_ALIASES: Dict[str, str] = {name: name for name in _PARAM_FIELDS + _WINDOW_FIELDS}
_ALIASES.update(
    {
        "dampingCoeff": "damping_coeff",
        "sampleCount": "sample_count",
        "speedFactor": "speed_factor",
    }
)


def _field_name(name: str) -> str:
    try:
        return _ALIASES[name]
    except KeyError:
        raise InvalidParameter(f"Unknown parameter {name!r}", name) from None


class SimulationSession:
    """
    Holds the current parameters, the sampled trajectory and the playback state.

    Every change goes through one transition: validate, recompute the
    trajectory, then rewind the cursor and reinstall the timer. On failure the
    previous trajectory and playback state are kept.
    """

    def __init__(
        self,
        parameters: Optional[PhysicalParameters] = None,
        window: Optional[SimulationWindow] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        """
        Args:
            parameters: physical parameters (default from config.DEFAULT_PARAMETERS)
            window: duration, sample count, speed (default from config.DEFAULT_WINDOW)
            scheduler: timer source for playback (default: ThreadingScheduler)
        """
        self._params = parameters or PhysicalParameters(**DEFAULT_PARAMETERS)
        self._window = window or SimulationWindow(**DEFAULT_WINDOW)
        self._scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.RLock()
        self._timer: Optional[CancelHandle] = None
        # Bumped on every teardown; ticks carrying an older value are dropped
        self._timer_generation = 0
        self._trajectory = sample(self._params, self._window)
        self._playback = PlaybackController(len(self._trajectory))

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], scheduler: Optional[Scheduler] = None
    ) -> "SimulationSession":
        """
        Build a session from {"parameters": {...}, "window": {...}};
        missing keys fall back to the defaults.
        """
        params = dict(DEFAULT_PARAMETERS)
        params.update({_field_name(k): v for k, v in config.get("parameters", {}).items()})
        window = dict(DEFAULT_WINDOW)
        window.update({_field_name(k): v for k, v in config.get("window", {}).items()})
        return cls(PhysicalParameters(**params), SimulationWindow(**window), scheduler=scheduler)

    def to_config(self) -> Dict[str, Any]:
        with self._lock:
            return {"parameters": self._params.to_dict(), "window": self._window.to_dict()}

    # --- read side ---

    @property
    def parameters(self) -> PhysicalParameters:
        return self._params

    @property
    def window(self) -> SimulationWindow:
        return self._window

    @property
    def regime(self) -> DampingRegime:
        return classify(self._params.mass, self._params.stiffness, self._params.damping_coeff)

    @property
    def amplitude_bound(self) -> float:
        """Display-only xMax of the current trajectory."""
        return self._trajectory.amplitude_bound

    @property
    def playback_state(self) -> PlaybackState:
        with self._lock:
            return self._playback.state

    @property
    def is_running(self) -> bool:
        return self._playback.is_running

    @property
    def cursor_index(self) -> int:
        return self._playback.cursor_index

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    def get_current_sample(self) -> Sample:
        """Sample under the cursor, ZERO_SAMPLE when the trajectory is empty."""
        with self._lock:
            return self._trajectory.sample_at(self._playback.cursor_index)

    def get_trajectory(self) -> Trajectory:
        """Current trajectory (read-only arrays)."""
        return self._trajectory

    # --- write side ---

    def set_parameter(self, name: str, value: Any) -> None:
        """
        Update one field of the physical parameters or of the window.

        Raises:
            InvalidParameter: unknown name or invalid value; nothing is changed.
        """
        self.set_parameters(**{name: value})

    def set_parameters(self, **values: Any) -> None:
        """Bulk update, applied all-or-nothing."""
        with self._lock:
            try:
                changes = {_field_name(k): v for k, v in values.items()}
                param_changes = {k: v for k, v in changes.items() if k in _PARAM_FIELDS}
                window_changes = {k: v for k, v in changes.items() if k in _WINDOW_FIELDS}
                params = self._params.replace(**param_changes) if param_changes else self._params
                window = self._window.replace(**window_changes) if window_changes else self._window
                resample = (
                    params != self._params
                    or window.duration != self._window.duration
                    or window.sample_count != self._window.sample_count
                )
                trajectory = sample(params, window) if resample else self._trajectory
            except InvalidParameter as e:
                logger.warning("Rejected update %s: %s", values, e)
                raise

            retime = window.speed_factor != self._window.speed_factor
            self._params = params
            self._window = window
            if resample:
                self._trajectory = trajectory
                self._playback.reset(len(trajectory))
                logger.debug("Trajectory recomputed: %r", trajectory)
            # Any new trajectory (physical, duration or count change) restarts the
            # tick phase together with the cursor
            if resample or retime:
                self._reschedule()

    def apply_preset(self, name: str) -> None:
        """
        Apply a named preset (see dampedosc.presets) as one bulk update.

        Raises:
            InvalidParameter: unknown preset (name="preset").
        """
        try:
            preset = get_preset(name)
        except KeyError as e:
            logger.warning("Rejected preset %r", name)
            raise InvalidParameter(e.args[0], "preset", name) from None
        self.set_parameters(**preset.params)
        logger.info("Applied preset %r (%s)", preset.name, self.regime.value)

    def toggle_running(self) -> bool:
        """Start or stop playback; returns True when running."""
        with self._lock:
            self._playback.toggle()
            self._reschedule()
            return self._playback.is_running

    def restart(self) -> None:
        """Stop playback and rewind to the first sample."""
        with self._lock:
            self._playback.restart()
            self._reschedule()

    def close(self) -> None:
        """Tear down the timer."""
        with self._lock:
            self._cancel_timer()

    def __enter__(self) -> "SimulationSession":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # --- timer ---

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            # A cancelled timer thread may already be blocked on the lock
            if generation != self._timer_generation:
                return
            self._playback.tick()

    def _cancel_timer(self) -> None:
        self._timer_generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _reschedule(self) -> None:
        self._cancel_timer()
        if self._playback.is_running and len(self._trajectory) > 0:
            period = self._window.tick_period
            self._timer = self._scheduler.schedule_repeating(
                period, functools.partial(self._on_tick, self._timer_generation)
            )
            logger.debug("Timer installed, period %.4g s", period)
