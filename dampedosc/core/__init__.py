"""Core: parametri, traiettoria, scheduler e sessione di simulazione."""

from dampedosc.core.errors import InvalidParameter
from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.core.trajectory import ZERO_SAMPLE, Sample, Trajectory
from dampedosc.core.scheduler import CancelHandle, ManualScheduler, Scheduler, ThreadingScheduler
from dampedosc.core.session import SimulationSession

__all__ = [
    "InvalidParameter",
    "PhysicalParameters",
    "SimulationWindow",
    "Sample",
    "Trajectory",
    "ZERO_SAMPLE",
    "Scheduler",
    "CancelHandle",
    "ManualScheduler",
    "ThreadingScheduler",
    "SimulationSession",
]
