"""
Derivative-free coordinate hill climbing with adaptive step sizes.

The optimizer works even when the objective is not differentiable. Any
callable taking a float vector may be optimized as long as its values can be
ordered with ``<``, ``>`` and ``==``.

Example
-------
>>> import numpy as np
>>> from proximal_optimize import HillClimbOptimizer
>>> def rosen(x):
...     return (1 - x[0]) * (1 - x[0]) + 100 * (x[1] - x[0] * x[0]) * (x[1] - x[0] * x[0])
>>> opt = HillClimbOptimizer(2)
>>> opt.iterations = 10000
>>> x = opt.optimize(np.array([-1.2, 1.0]), rosen)
>>> bool(np.allclose(x, [1.0, 1.0], atol=1e-2))
True
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence

import numpy as np

from .core import (
    Array,
    HillClimbConfig,
    Objective,
    Ordering,
    ParameterLengthMismatch,
    SolutionNoBetter,
    StartUnorderable,
)
from .logging import get_logger

logger = get_logger(__name__)


def compare_fitness(a: Any, b: Any) -> Optional[Ordering]:
    """
    Partial-order comparison of two fitness values.

    Returns None when the values are incomparable: NaN against anything, or
    types without an ordering such as ``None`` or ``complex``.
    """
    try:
        if a < b:
            return Ordering.LESS
        if a > b:
            return Ordering.GREATER
    except TypeError:
        return None
    if a == b:
        return Ordering.EQUAL
    return None


@dataclass
class DimensionParameters:
    """Adaptive search state of a single input dimension."""

    step_size: float
    expansion_ratio: float
    compression_ratio: float


def _check_ratio(value: float, name: str) -> float:
    value = float(value)
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class HillClimbOptimizer:
    """
    Hill climber that probes one coordinate at a time.

    Each iteration evaluates the objective at the current position and then,
    for every dimension, at the position shifted by that dimension's signed
    step. All trials of an iteration start from the same base position. An
    improving trial is accepted and its step grows by the expansion ratio; a
    worse (or incomparable) trial reverses the step and shrinks it by the
    compression ratio; an exactly flat trial only shrinks it.

    The optimizer always runs the full iteration budget. The per-dimension
    state set through the setters is copied at the start of every
    :meth:`optimize` call, so consecutive calls start from the same steps.
    """

    def __init__(self, num_parameters: int, config: Optional[HillClimbConfig] = None) -> None:
        if num_parameters < 0:
            raise ValueError("num_parameters must be non-negative")
        config = config or HillClimbConfig()
        self._parameters = [
            DimensionParameters(
                step_size=config.initial_step_size,
                expansion_ratio=config.expansion_ratio,
                compression_ratio=config.compression_ratio,
            )
            for _ in range(num_parameters)
        ]
        self._iterations = config.iterations
        self._maximize = config.maximize

    @property
    def num_parameters(self) -> int:
        return len(self._parameters)

    @property
    def iterations(self) -> int:
        """Number of iterations performed by :meth:`optimize`."""
        return self._iterations

    @iterations.setter
    def iterations(self, iterations: int) -> None:
        if iterations < 0:
            raise ValueError("iterations must be non-negative")
        self._iterations = int(iterations)

    @property
    def maximizing(self) -> bool:
        return self._maximize

    def maximize(self) -> None:
        """Search for parameters that maximize the objective."""
        self._maximize = True

    def minimize(self) -> None:
        """Search for parameters that minimize the objective (the default)."""
        self._maximize = False

    @property
    def step_sizes(self) -> np.ndarray:
        return np.array([p.step_size for p in self._parameters], dtype=float)

    @property
    def expansion_ratios(self) -> np.ndarray:
        return np.array([p.expansion_ratio for p in self._parameters], dtype=float)

    @property
    def compression_ratios(self) -> np.ndarray:
        return np.array([p.compression_ratio for p in self._parameters], dtype=float)

    def _per_dimension(self, values: Sequence[float], what: str) -> list[float]:
        values = list(np.asarray(values, dtype=float).reshape(-1))
        if len(values) != len(self._parameters):
            raise ParameterLengthMismatch(len(self._parameters), len(values), what=what)
        return values

    def initial_step_size(self, step_size: float) -> None:
        for param in self._parameters:
            param.step_size = float(step_size)

    def initial_step_sizes(self, step_sizes: Sequence[float]) -> None:
        values = self._per_dimension(step_sizes, "step_sizes")
        for param, value in zip(self._parameters, values):
            param.step_size = float(value)

    def step_expansion_ratio(self, ratio: float) -> None:
        ratio = _check_ratio(ratio, "expansion ratio")
        for param in self._parameters:
            param.expansion_ratio = ratio

    def step_expansion_ratios(self, ratios: Sequence[float]) -> None:
        values = [
            _check_ratio(r, "expansion ratio")
            for r in self._per_dimension(ratios, "expansion_ratios")
        ]
        for param, value in zip(self._parameters, values):
            param.expansion_ratio = value

    def step_compression_ratio(self, ratio: float) -> None:
        ratio = _check_ratio(ratio, "compression ratio")
        for param in self._parameters:
            param.compression_ratio = ratio

    def step_compression_ratios(self, ratios: Sequence[float]) -> None:
        values = [
            _check_ratio(r, "compression ratio")
            for r in self._per_dimension(ratios, "compression_ratios")
        ]
        for param, value in zip(self._parameters, values):
            param.compression_ratio = value

    def _directed(self, test_fit: Any, current_fit: Any) -> Optional[Ordering]:
        # GREATER always means "better" after this.
        cmp = compare_fitness(test_fit, current_fit)
        if cmp is not None and not self._maximize:
            cmp = cmp.reverse()
        return cmp

    def optimize(self, start: Array, func: Objective) -> np.ndarray:
        """
        Search from ``start`` for a better value of ``func``.

        Args:
            start: Starting position; its length must equal ``num_parameters``.
            func: Objective evaluated on float vectors. It must not modify its
                argument.

        Returns:
            The final position, strictly better than ``start``.

        Raises:
            ParameterLengthMismatch: ``start`` has the wrong length.
            StartUnorderable: ``func(start)`` does not compare equal to itself.
            SolutionNoBetter: the final position does not improve on ``start``.
        """
        current_pos = np.asarray(start, dtype=float).reshape(-1).copy()
        if current_pos.size != len(self._parameters):
            raise ParameterLengthMismatch(len(self._parameters), current_pos.size, what="start")

        start_fit = func(current_pos.copy())
        if compare_fitness(start_fit, start_fit) is None:
            raise StartUnorderable(f"objective value at start is unorderable: {start_fit!r}")

        parameters = [replace(p) for p in self._parameters]
        candidate = current_pos.copy()

        for iteration in range(self._iterations):
            current_fit = func(current_pos)
            candidate[:] = current_pos

            for i, param in enumerate(parameters):
                old_val = candidate[i]
                candidate[i] = current_pos[i] + param.step_size
                test_fit = func(candidate)

                cmp = self._directed(test_fit, current_fit)
                if cmp is Ordering.GREATER:
                    param.step_size = param.step_size * param.expansion_ratio
                    current_pos[i] = candidate[i]
                elif cmp is Ordering.EQUAL:
                    param.step_size = param.step_size * param.compression_ratio
                else:
                    param.step_size = param.step_size * -1.0 * param.compression_ratio

                # Trials within one iteration all start from the same base.
                candidate[i] = old_val

            logger.debug("iteration %d: fit=%r pos=%s", iteration, current_fit, current_pos)

        final_fit = func(current_pos)
        logger.info(
            "Completed %d iterations: start fit=%r, final fit=%r",
            self._iterations,
            start_fit,
            final_fit,
        )
        if self._directed(final_fit, start_fit) is not Ordering.GREATER:
            raise SolutionNoBetter(
                f"final fit {final_fit!r} is not better than start fit {start_fit!r}"
            )
        return current_pos


__all__ = ["DimensionParameters", "HillClimbOptimizer", "compare_fitness"]
