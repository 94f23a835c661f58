"""
Proximal Gradient Method with optional Nesterov acceleration and relaxation.

The caller supplies the proximal ("forward-backward") step ``prox_f(x, step)``;
this module only drives the iteration. Relaxation follows Combettes (2009),
Algorithm 3.4, and Xu & Yin (2015): the relaxed displacement is folded back
into the iterate before the convergence test.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .core import Array, ParameterLengthMismatch, PGMResult, ProxStep
from .logging import get_logger
from .nesterov import NesterovStepper
from .vector import add, l2sq, mul_scalar, sub

logger = get_logger(__name__)

Callback = Callable[[int, Array, float], None]


def pgm(
    x0: Array,
    prox_f: ProxStep,
    step_f: Array,
    accelerated: bool = False,
    relax: Optional[float] = None,
    e_rel: float = 1e-6,
    max_iter: int = 1000,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> PGMResult:
    """
    Run the Proximal Gradient Method from ``x0``.

    Args:
        x0: Starting vector. Not modified.
        prox_f: Proximal step ``prox_f(x, step_f) -> x_new``.
        step_f: Per-dimension step sizes handed to ``prox_f``.
        accelerated: Use Nesterov extrapolation between iterates.
        relax: Relaxation factor in ``(0, 1.5)``; ``None`` disables relaxation.
        e_rel: Relative error tolerance of the convergence test.
        max_iter: Maximum number of iterations.
        callback: Called as ``callback(it, x, omega)`` after every iteration.
        history: Record a copy of the iterate after every iteration.

    Returns:
        :class:`PGMResult` holding the final iterate, the converged flag and
        the last update ``x - x_prev``. Running out of iterations is reported
        through ``converged=False``, not as an error.

    Raises:
        ParameterLengthMismatch: ``step_f`` or the output of ``prox_f`` does not
            match the length of ``x0``.
    """
    if relax is not None:
        assert 0 < relax < 1.5, f"relax must lie in (0, 1.5), got {relax}"

    x = np.asarray(x0, dtype=float).reshape(-1).copy()
    step_f = np.asarray(step_f, dtype=float).reshape(-1)
    if step_f.size != x.size:
        raise ParameterLengthMismatch(x.size, step_f.size, what="step_f")

    stepper = NesterovStepper(accelerated=accelerated)
    x_prev = x.copy()
    delta = np.zeros_like(x)
    hist: list[np.ndarray] = []
    converged = False
    nit = 0

    for it in range(max_iter):
        omega = stepper.omega()
        if omega > 0:
            x_tilde = add(x, mul_scalar(sub(x, x_prev), omega))
        else:
            x_tilde = x
        logger.debug("it=%d omega=%s x_tilde=%s", it, omega, x_tilde)

        x_prev = x
        x = np.asarray(prox_f(x_tilde, step_f), dtype=float).reshape(-1)

        if relax is not None:
            x = add(x, mul_scalar(sub(x, x_prev), relax - 1.0))

        delta = sub(x, x_prev)
        nit = it + 1
        if history:
            hist.append(x.copy())
        if callback is not None:
            callback(it, x.copy(), omega)

        converged = l2sq(delta) <= e_rel**2 * l2sq(x)
        if converged:
            break

    logger.info("Completed %d iterations", nit)
    if not converged:
        logger.warning("Solution did not converge after %d iterations", nit)

    return PGMResult(x=x, converged=converged, delta=delta, nit=nit, history=hist)


__all__ = ["pgm"]
