"""
Elementwise arithmetic on real vectors.

Every function accepts any 1-D sequence of reals and returns a newly allocated
``float64`` array (or a float for reductions). Inputs are never modified, so a
result never aliases an argument.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .core import ParameterLengthMismatch

VectorLike = Union[np.ndarray, Sequence[float]]


def _as_vector(x: VectorLike) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if x.ndim > 1:
        raise ValueError(f"expected a 1-D vector, got shape {x.shape}")
    return x.reshape(-1)


def _pair(a: VectorLike, b: VectorLike) -> tuple[np.ndarray, np.ndarray]:
    a = _as_vector(a)
    b = _as_vector(b)
    if a.size != b.size:
        raise ParameterLengthMismatch(a.size, b.size, what="second operand")
    return a, b


def add(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return ``a + b``; raises :class:`ParameterLengthMismatch` on unequal lengths."""
    a, b = _pair(a, b)
    return a + b


def sub(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return ``a - b``; raises :class:`ParameterLengthMismatch` on unequal lengths."""
    a, b = _pair(a, b)
    return a - b


def mul(a: VectorLike, b: VectorLike) -> np.ndarray:
    """
    Return the elementwise product of ``a`` and ``b``.

    Call sites guarantee equal lengths, so a mismatch is a programming error
    and fails the assertion instead of raising a recoverable error.
    """
    a = _as_vector(a)
    b = _as_vector(b)
    assert a.size == b.size, f"length mismatch: {a.size} != {b.size}"
    return a * b


def sub_scalar(x: VectorLike, scalar: float) -> np.ndarray:
    """Subtract ``scalar`` from every element of ``x``."""
    return _as_vector(x) - scalar


def mul_scalar(x: VectorLike, scalar: float) -> np.ndarray:
    """Multiply every element of ``x`` by ``scalar``."""
    return _as_vector(x) * scalar


def max_scalar(x: VectorLike, scalar: float) -> np.ndarray:
    """
    For each element of ``x`` keep the element or ``scalar``, whichever is greater.

    A NaN element is replaced by ``scalar``.
    """
    return np.fmax(_as_vector(x), scalar)


def inner_product(a: VectorLike, b: VectorLike) -> float:
    """Sum of elementwise products; raises :class:`ParameterLengthMismatch` on unequal lengths."""
    a, b = _pair(a, b)
    return float(np.dot(a, b))


def sum_of_squares(x: VectorLike) -> float:
    x = _as_vector(x)
    return float(np.dot(x, x))


# Name used by the relative-error convergence test.
l2sq = sum_of_squares


__all__ = [
    "VectorLike",
    "add",
    "sub",
    "mul",
    "sub_scalar",
    "mul_scalar",
    "max_scalar",
    "inner_product",
    "sum_of_squares",
    "l2sq",
]
