"""
DampedOsc: oscillatore smorzato massa-molla-smorzatore
(classificazione del regime, traiettoria in forma chiusa, riproduzione).
"""

__version__ = "0.1.0"

from dampedosc.core.errors import InvalidParameter
from dampedosc.core.params import PhysicalParameters, SimulationWindow
from dampedosc.core.session import SimulationSession
from dampedosc.core.trajectory import ZERO_SAMPLE, Sample, Trajectory
from dampedosc.physics.regimes import DampingRegime, classify
from dampedosc.physics.sampler import sample

__all__ = [
    "__version__",
    "InvalidParameter",
    "PhysicalParameters",
    "SimulationWindow",
    "SimulationSession",
    "Sample",
    "Trajectory",
    "ZERO_SAMPLE",
    "DampingRegime",
    "classify",
    "sample",
]
