"""Momentum coefficients for Nesterov-accelerated proximal iterations."""

from __future__ import annotations

import math


class NesterovStepper:
    """
    Generator of the extrapolation weight ``omega`` used by accelerated PGM.

    The stepper keeps the momentum scalar ``t`` (initially 1). Each call to
    :meth:`omega` advances ``t`` to ``0.5 * (1 + sqrt(4 t^2 + 1))`` and returns
    ``(t_old - 1) / t_new``. The first coefficient is therefore 0 and the
    sequence increases strictly toward 1 without reaching it. When
    acceleration is disabled every call returns 0 and ``t`` stays at 1.

    A stepper belongs to a single optimization run; create a new one for every
    run instead of resetting it.
    """

    def __init__(self, accelerated: bool = False) -> None:
        self._t = 1.0
        self._accelerated = bool(accelerated)

    @property
    def t(self) -> float:
        return self._t

    @property
    def accelerated(self) -> bool:
        return self._accelerated

    def omega(self) -> float:
        if not self._accelerated:
            return 0.0
        t_next = 0.5 * (1.0 + math.sqrt(4.0 * self._t * self._t + 1.0))
        om = (self._t - 1.0) / t_next
        self._t = t_next
        return om

    def __repr__(self) -> str:
        return f"NesterovStepper(accelerated={self._accelerated}, t={self._t!r})"


__all__ = ["NesterovStepper"]
