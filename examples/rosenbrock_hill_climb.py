"""
Example: Coordinate hill climbing on the Rosenbrock function

The Rosenbrock valley is a classic pathological case for gradient methods.
The hill climber needs no gradient; it only compares objective values.
"""

import numpy as np

from proximal_optimize import HillClimbOptimizer, SolutionNoBetter


def rosenbrock(x: np.ndarray) -> float:
    return (1.0 - x[0]) * (1.0 - x[0]) + 100.0 * (x[1] - x[0] * x[0]) * (x[1] - x[0] * x[0])


def main() -> None:
    opt = HillClimbOptimizer(2)
    for start, iterations in [([-1.2, 1.0], 10_000), ([2.0, 2.0], 40_000), ([0.0, 0.0], 10_000)]:
        opt.iterations = iterations
        pos = np.array(start)
        print(f"Start position: {pos}, value: {rosenbrock(pos)}")
        try:
            pos = opt.optimize(pos, rosenbrock)
        except SolutionNoBetter as exc:
            print(f"No improvement: {exc}")
            continue
        print(f"End position:   {pos}, value: {rosenbrock(pos)}")


if __name__ == "__main__":
    main()
