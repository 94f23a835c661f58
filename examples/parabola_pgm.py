"""
Example: Proximal Gradient Method on a shifted parabola

Minimizes ``f(x, y) = (x - 1)^2 + (y - 0.5)^2`` from ``(-1, -1)`` with plain,
accelerated and relaxed PGM, then repeats the plain run with the iterate
constrained to the non-negative quadrant.
"""

import logging

import numpy as np

from proximal_optimize import (
    configure_logging,
    forward_backward,
    gradient_step,
    pgm,
    prox_plus,
)

CENTER = np.array([1.0, 0.5])


def f(xy: np.ndarray) -> float:
    return float(np.sum((xy - CENTER) ** 2))


def grad_f(xy: np.ndarray) -> np.ndarray:
    return 2.0 * xy - 2.0 * CENTER


def steps_f() -> np.ndarray:
    # Lipschitz constant of grad_f is 2
    lipschitz = 2.0
    slack = 0.1
    return np.array([slack / lipschitz, slack / lipschitz])


def main() -> None:
    configure_logging(level=logging.WARNING)
    xy0 = np.array([-1.0, -1.0])
    print(f"The function minimum at x=1, y=0.5 is: {f(CENTER)}")

    for label, kwargs in [
        ("plain", {}),
        ("accelerated", {"accelerated": True}),
        ("relaxed", {"relax": 1.4}),
    ]:
        res = pgm(xy0, gradient_step(grad_f), steps_f(), e_rel=1e-6, max_iter=1000, **kwargs)
        print(
            f"{label:>12}: converged={res.converged} after {res.nit} iterations, "
            f"x={res.x}, f(x)={f(res.x):.3e}"
        )

    # Shift the optimum outside the feasible quadrant
    shifted = np.array([1.0, -0.5])
    res = pgm(
        xy0,
        forward_backward(lambda xy: 2.0 * (xy - shifted), prox_plus),
        steps_f(),
        max_iter=1000,
    )
    print(f"  projected: converged={res.converged}, x={res.x}")


if __name__ == "__main__":
    main()
