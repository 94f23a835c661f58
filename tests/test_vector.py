import numpy as np
import pytest

from proximal_optimize.core import ParameterLengthMismatch
from proximal_optimize.vector import (
    add,
    inner_product,
    l2sq,
    max_scalar,
    mul,
    mul_scalar,
    sub,
    sub_scalar,
    sum_of_squares,
)


def test_add_sub_round_trip(rng: np.random.Generator):
    for n in (1, 3, 17):
        a = rng.normal(size=n)
        b = rng.normal(size=n)
        assert np.allclose(sub(add(a, b), b), a)


def test_elementwise_values():
    a = [1.0, -2.0, 3.5]
    b = [0.5, 4.0, -1.0]
    assert np.array_equal(add(a, b), [1.5, 2.0, 2.5])
    assert np.array_equal(sub(a, b), [0.5, -6.0, 4.5])
    assert np.array_equal(mul(a, b), [0.5, -8.0, -3.5])
    assert inner_product(a, b) == pytest.approx(0.5 - 8.0 - 3.5)


@pytest.mark.parametrize("op", [add, sub, inner_product])
def test_length_mismatch_raises(op):
    with pytest.raises(ParameterLengthMismatch):
        op([1.0, 2.0], [1.0, 2.0, 3.0])


def test_length_mismatch_is_value_error():
    with pytest.raises(ValueError):
        add([1.0], [])


def test_mul_length_mismatch_asserts():
    with pytest.raises(AssertionError):
        mul([1.0, 2.0], [1.0])


def test_scalar_operations():
    x = np.array([-1.0, 0.0, 2.5])
    assert np.array_equal(sub_scalar(x, 1.0), [-2.0, -1.0, 1.5])
    assert np.array_equal(mul_scalar(x, -2.0), [2.0, -0.0, -5.0])
    assert np.array_equal(max_scalar(x, 0.5), [0.5, 0.5, 2.5])
    assert np.array_equal(max_scalar([np.nan, -1.0], 0.0), [0.0, 0.0])


@pytest.mark.parametrize("op", [add, sub, inner_product])
def test_matrix_operand_rejected(op):
    with pytest.raises(ValueError):
        op(np.ones((2, 2)), np.ones(4))


def test_sum_of_squares():
    assert sum_of_squares([3.0, -4.0]) == 25.0
    assert sum_of_squares([]) == 0.0
    assert l2sq is sum_of_squares


def test_results_are_fresh_arrays():
    a = np.array([1.0, 2.0])
    b = np.array([3.0, 4.0])
    a_before = a.copy()
    b_before = b.copy()
    results = [
        add(a, b),
        sub(a, b),
        mul(a, b),
        sub_scalar(a, 0.0),
        mul_scalar(a, 1.0),
        max_scalar(a, -1.0),
    ]
    for result in results:
        assert result is not a
        assert not np.shares_memory(result, a)
        assert not np.shares_memory(result, b)
    assert np.array_equal(a, a_before)
    assert np.array_equal(b, b_before)
