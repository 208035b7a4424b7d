"""
Soluzioni in forma chiusa dell'oscillatore smorzato, una per regime.

Ogni classe riceve i parametri fisici, precalcola le costanti (k, b, ampiezze)
e valuta posizione e velocità su un vettore di tempi con numpy.
"""

import math
from typing import Dict, Tuple, Type

import numpy as np

from dampedosc.core.params import PhysicalParameters
from dampedosc.physics.regimes import DampingRegime, classify, decay_rate, natural_frequency


class ClosedFormSolution:
    """
    Base per le soluzioni x(t), v(t) di m*ddx + c*dx + k*x = 0.
    Il metodo evaluate() va implementato nelle sottoclassi.
    """

    regime: DampingRegime

    def __init__(self, params: PhysicalParameters) -> None:
        self.params = params
        self.k = natural_frequency(params.mass, params.stiffness)
        self.b = decay_rate(params.mass, params.damping_coeff)

    def evaluate(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Posizione e velocità agli istanti t."""
        raise NotImplementedError("Sottoclassi devono implementare evaluate(t).")

    def __call__(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return self.evaluate(np.asarray(t, dtype=float))


class UndampedSolution(ClosedFormSolution):
    """
    Oscillatore armonico: x = A cos(kt+u) + B sin(kt+u), A = x0, B = v0/k.
    """

    regime = DampingRegime.UNDAMPED

    def __init__(self, params: PhysicalParameters) -> None:
        super().__init__(params)
        self.A = params.x0
        self.B = params.v0 / self.k

    def evaluate(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        arg = self.k * t + self.params.phase
        cos, sin = np.cos(arg), np.sin(arg)
        x = self.A * cos + self.B * sin
        v = self.k * (-self.A * sin + self.B * cos)
        return x, v


class UnderdampedSolution(ClosedFormSolution):
    """
    Oscillazione smorzata con pulsazione k1 = sqrt(k² - b²):
    x = e^{-bt} (A cos(k1 t+u) + B sin(k1 t+u)), A = x0, B = (v0 + b x0) / k1.
    """

    regime = DampingRegime.UNDERDAMPED

    def __init__(self, params: PhysicalParameters) -> None:
        super().__init__(params)
        self.k1 = math.sqrt(self.k * self.k - self.b * self.b)
        self.A = params.x0
        self.B = (params.v0 + self.b * params.x0) / self.k1

    def evaluate(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        b, k1, A, B = self.b, self.k1, self.A, self.B
        arg = k1 * t + self.params.phase
        cos, sin = np.cos(arg), np.sin(arg)
        envelope = np.exp(-b * t)
        x = envelope * (A * cos + B * sin)
        v = envelope * ((-b * A + k1 * B) * cos + (-b * B - k1 * A) * sin)
        return x, v


class OverdampedSolution(ClosedFormSolution):
    """
    Ritorno aperiodico con n = sqrt(b² - k²):
    x = e^{-bt} (c1 e^{nt+u} + c2 e^{-(nt+u)}).
    """

    regime = DampingRegime.OVERDAMPED

    def __init__(self, params: PhysicalParameters) -> None:
        super().__init__(params)
        b = self.b
        self.n = n = math.sqrt(b * b - self.k * self.k)
        # x(0) = c1 + c2 = x0, v(0) = (n-b) c1 - (n+b) c2 = v0
        self.c1 = (params.x0 * (b + n) + params.v0) / (2 * n)
        self.c2 = (params.x0 * (n - b) - params.v0) / (2 * n)

    def evaluate(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        b, n, c1, c2 = self.b, self.n, self.c1, self.c2
        arg = n * t + self.params.phase
        # e^{-bt} e^{±nt} combined into one exponent: avoids inf * 0 for large t
        fast = np.exp(-b * t + arg)
        slow = np.exp(-b * t - arg)
        x = c1 * fast + c2 * slow
        v = (n - b) * c1 * fast + (-n - b) * c2 * slow
        return x, v


class CriticallyDampedSolution(ClosedFormSolution):
    """
    Smorzamento critico: x = e^{-bt} (c1 + c2 t), c1 = x0, c2 = v0 + b x0.
    Nessun argomento modale: la fase non ha effetto.
    """

    regime = DampingRegime.CRITICALLY_DAMPED

    def __init__(self, params: PhysicalParameters) -> None:
        super().__init__(params)
        self.c1 = params.x0
        self.c2 = params.v0 + self.b * params.x0

    def evaluate(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        b, c1, c2 = self.b, self.c1, self.c2
        envelope = np.exp(-b * t)
        x = envelope * (c1 + c2 * t)
        v = envelope * (c2 - b * (c1 + c2 * t))
        return x, v


SOLUTIONS: Dict[DampingRegime, Type[ClosedFormSolution]] = {
    DampingRegime.UNDAMPED: UndampedSolution,
    DampingRegime.UNDERDAMPED: UnderdampedSolution,
    DampingRegime.OVERDAMPED: OverdampedSolution,
    DampingRegime.CRITICALLY_DAMPED: CriticallyDampedSolution,
}


def solution_for(params: PhysicalParameters) -> ClosedFormSolution:
    """Soluzione del regime in cui cadono i parametri."""
    regime = classify(params.mass, params.stiffness, params.damping_coeff)
    return SOLUTIONS[regime](params)
