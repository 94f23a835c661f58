"""Core types shared by the hill-climbing optimizer and the PGM driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], Any]
ProxStep = Callable[[Array, Array], Array]

DEFAULT_EXPANSION_RATIO = 1.5
DEFAULT_COMPRESSION_RATIO = 0.5
DEFAULT_INITIAL_STEP_SIZE = 1.0
DEFAULT_NUM_ITERATIONS = 100


class ProximalOptimizeError(Exception):
    """Base class for failures reported by the optimizers."""


class ParameterLengthMismatch(ProximalOptimizeError, ValueError):
    """A vector does not have the length its counterpart requires.

    Raised for arithmetic operands of differing length, for a start vector
    whose length differs from the optimizer's dimension count and for
    per-dimension setters given the wrong number of values.
    """

    def __init__(self, expected: int, actual: int, what: str = "vector") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} has length {actual}, expected {expected}")


class StartUnorderable(ProximalOptimizeError):
    """The objective value at the start position cannot be compared with itself."""


class SolutionNoBetter(ProximalOptimizeError):
    """The final position is not strictly better than the start position."""


class Ordering(Enum):
    """Outcome of comparing two fitness values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


@dataclass(frozen=True)
class HillClimbConfig:
    """
    Immutable defaults for a :class:`~proximal_optimize.hill_climb.HillClimbOptimizer`.

    Attributes:
        expansion_ratio: Factor applied to a step after an improving move.
        compression_ratio: Factor applied to a step after a failed or flat trial.
        initial_step_size: Signed step every dimension starts from.
        iterations: Number of full sweeps over all dimensions.
        maximize: Search for a maximum instead of a minimum.
    """

    expansion_ratio: float = DEFAULT_EXPANSION_RATIO
    compression_ratio: float = DEFAULT_COMPRESSION_RATIO
    initial_step_size: float = DEFAULT_INITIAL_STEP_SIZE
    iterations: int = DEFAULT_NUM_ITERATIONS
    maximize: bool = False

    def __post_init__(self) -> None:
        if self.expansion_ratio <= 0:
            raise ValueError("expansion_ratio must be positive")
        if self.compression_ratio <= 0:
            raise ValueError("compression_ratio must be positive")
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")


@dataclass
class PGMResult:
    """
    Outcome of :func:`~proximal_optimize.pgm.pgm`.

    Unpacks as ``x, converged, delta`` so callers interested only in the
    triple can ignore the bookkeeping fields.

    Attributes:
        x: Final iterate.
        converged: Whether the relative-error bound was met.
        delta: Difference between the last two iterates.
        nit: Number of iterations performed.
        history: Iterates after every iteration when requested.
    """

    x: Array
    converged: bool
    delta: Array
    nit: int = 0
    history: List[Array] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.x, self.converged, self.delta))


__all__ = [
    "Array",
    "Objective",
    "ProxStep",
    "DEFAULT_EXPANSION_RATIO",
    "DEFAULT_COMPRESSION_RATIO",
    "DEFAULT_INITIAL_STEP_SIZE",
    "DEFAULT_NUM_ITERATIONS",
    "ProximalOptimizeError",
    "ParameterLengthMismatch",
    "StartUnorderable",
    "SolutionNoBetter",
    "Ordering",
    "HillClimbConfig",
    "PGMResult",
]
