import math

import numpy as np

from proximal_optimize.nesterov import NesterovStepper


def test_unaccelerated_stepper_is_inert():
    stepper = NesterovStepper()
    for _ in range(1000):
        assert stepper.omega() == 0.0
    assert stepper.t == 1.0
    assert not stepper.accelerated


def test_first_accelerated_omega_is_zero():
    stepper = NesterovStepper(accelerated=True)
    assert stepper.omega() == 0.0
    assert stepper.t == 0.5 * (1.0 + math.sqrt(5.0))


def test_accelerated_omega_increases_toward_one():
    stepper = NesterovStepper(accelerated=True)
    omegas = np.array([stepper.omega() for _ in range(500)])
    assert np.all(np.diff(omegas) > 0)
    assert np.all(omegas < 1.0)
    assert omegas[-1] > 0.99


def test_momentum_strictly_increases():
    stepper = NesterovStepper(accelerated=True)
    ts = [stepper.t]
    for _ in range(50):
        stepper.omega()
        ts.append(stepper.t)
    assert all(b > a > 0 for a, b in zip(ts, ts[1:]))


def test_independent_steppers_do_not_share_state():
    first = NesterovStepper(accelerated=True)
    for _ in range(10):
        first.omega()
    second = NesterovStepper(accelerated=True)
    assert second.t == 1.0
    assert second.omega() == 0.0
