"""
Ready-made proximal steps for :func:`~proximal_optimize.pgm.pgm`.

Every callable returned here has the signature ``prox(x, step) -> x_new``
where ``step`` holds one step size per dimension.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .core import Array, ProxStep
from .vector import max_scalar, mul, mul_scalar, sub

Gradient = Callable[[Array], Array]


def gradient_step(grad: Gradient) -> ProxStep:
    """Forward (explicit gradient) step ``x - step * grad(x)``."""

    def prox(x: Array, step: Array) -> Array:
        return sub(x, mul(step, grad(x)))

    return prox


def prox_id(x: Array, step: Array) -> Array:
    """Identity; turns :func:`forward_backward` into plain gradient descent."""
    return np.array(x, dtype=float)


def prox_plus(x: Array, step: Array) -> Array:
    """Projection onto the non-negative orthant."""
    return max_scalar(x, 0.0)


def prox_soft(thresh: float) -> ProxStep:
    """
    Soft thresholding, the proximal map of ``thresh * ||x||_1``.

    The threshold of dimension ``i`` is ``thresh * step[i]``.
    """
    if thresh < 0:
        raise ValueError("thresh must be non-negative")

    def prox(x: Array, step: Array) -> Array:
        x = np.asarray(x, dtype=float)
        shrunk = max_scalar(sub(np.abs(x), mul_scalar(step, thresh)), 0.0)
        return mul(np.sign(x), shrunk)

    return prox


def prox_box(lower: float | Array, upper: float | Array) -> ProxStep:
    """Projection onto the box ``lower <= x <= upper``."""
    if np.any(np.asarray(lower) > np.asarray(upper)):
        raise ValueError("lower bound exceeds upper bound")

    def prox(x: Array, step: Array) -> Array:
        return np.clip(np.asarray(x, dtype=float), lower, upper)

    return prox


def forward_backward(grad: Gradient, prox_g: ProxStep) -> ProxStep:
    """
    Forward-backward step for ``f + g`` with smooth ``f``.

    Takes a gradient step on ``f`` and applies ``prox_g`` to the result with
    the same step sizes.
    """
    forward = gradient_step(grad)

    def prox(x: Array, step: Array) -> Array:
        return prox_g(forward(x, step), step)

    return prox


__all__ = [
    "Gradient",
    "forward_backward",
    "gradient_step",
    "prox_box",
    "prox_id",
    "prox_plus",
    "prox_soft",
]
