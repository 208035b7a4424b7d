"""Campioni (t, x, v) e traiettoria immutabile prodotta dal sampler."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, Optional

import numpy as np

if TYPE_CHECKING:
    from dampedosc.physics.regimes import DampingRegime

_KEYS = ("t", "x", "v")


@dataclass(frozen=True)
class Sample:
    """Posizione e velocità all'istante t."""

    t: float
    x: float
    v: float


ZERO_SAMPLE = Sample(0.0, 0.0, 0.0)


def _frozen(a: np.ndarray) -> np.ndarray:
    out = np.array(a, dtype=float).ravel()
    out.setflags(write=False)
    return out


class Trajectory:
    """
    Serie temporale a lunghezza fissa di campioni (t, x, v).

    Gli array sono in sola lettura: una traiettoria non viene mai modificata,
    solo sostituita da una nuova quando cambiano i parametri.
    """

    def __init__(
        self,
        t: np.ndarray,
        x: np.ndarray,
        v: np.ndarray,
        regime: Optional["DampingRegime"] = None,
        amplitude_bound: float = 0.0,
    ) -> None:
        """
        Args:
            t, x, v: array della stessa lunghezza (tempi crescenti).
            regime: regime di smorzamento che ha generato la serie.
            amplitude_bound: xMax per la normalizzazione della posizione (solo display).
        """
        self._t = _frozen(t)
        self._x = _frozen(x)
        self._v = _frozen(v)
        if not (len(self._t) == len(self._x) == len(self._v)):
            raise ValueError(
                f"t, x, v must have the same length, got {len(self._t)}, {len(self._x)}, {len(self._v)}"
            )
        self.regime = regime
        self.amplitude_bound = float(amplitude_bound)

    @classmethod
    def empty(cls, regime: Optional["DampingRegime"] = None) -> "Trajectory":
        """Traiettoria senza campioni."""
        return cls(np.array([]), np.array([]), np.array([]), regime=regime)

    @property
    def t(self) -> np.ndarray:
        return self._t

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def v(self) -> np.ndarray:
        return self._v

    def get(self, key: str) -> np.ndarray:
        """Serie per una chiave ('t', 'x' o 'v')."""
        if key not in _KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {k: self.get(k) for k in _KEYS}

    def sample_at(self, index: int) -> Sample:
        """Campione all'indice, ZERO_SAMPLE se la traiettoria è vuota."""
        if len(self) == 0:
            return ZERO_SAMPLE
        return self[index]

    def __getitem__(self, index: int) -> Sample:
        return Sample(float(self._t[index]), float(self._x[index]), float(self._v[index]))

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self[i]

    def __len__(self) -> int:
        return len(self._t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return (
            self.regime == other.regime
            and self.amplitude_bound == other.amplitude_bound
            and all(np.array_equal(self.get(k), other.get(k)) for k in _KEYS)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        regime = self.regime.value if self.regime is not None else None
        return f"Trajectory(n={len(self)}, regime={regime!r})"
