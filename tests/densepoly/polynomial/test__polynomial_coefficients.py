import pytest
import torch

from densepoly.polynomial import (
    DegreeError,
    polynomial_coeff_get,
    polynomial_coeff_set,
    polynomial_degree,
    polynomial_one,
    polynomial_reduce,
    polynomial_to_array,
    polynomial_x_to_the,
    polynomial_zero,
)


class TestPolynomialCoeffGet:
    """Tests for polynomial_coeff_get."""

    def test_coeff_get(self):
        p = polynomial_x_to_the(3)
        assert polynomial_coeff_get(p, 3) == 1.0
        assert polynomial_coeff_get(p, 4) == 0.0
        assert polynomial_coeff_get(p, 2) == 0.0

    def test_far_past_degree(self):
        assert polynomial_coeff_get(polynomial_one(), 1000) == 0.0

    def test_returns_float(self):
        assert isinstance(polynomial_coeff_get(polynomial_one(), 0), float)

    def test_negative_index_raises(self):
        with pytest.raises(DegreeError):
            polynomial_coeff_get(polynomial_one(), -1)


class TestPolynomialCoeffSet:
    """Tests for polynomial_coeff_set."""

    def test_coeff_set(self):
        p = polynomial_x_to_the(3)
        polynomial_coeff_set(p, 3, 5.0)
        polynomial_coeff_set(p, 2, 4.0)
        polynomial_coeff_set(p, 0, 1.0)
        assert polynomial_coeff_get(p, 4) == 0.0
        assert polynomial_coeff_get(p, 3) == 5.0
        assert polynomial_coeff_get(p, 2) == 4.0
        assert polynomial_coeff_get(p, 1) == 0.0
        assert polynomial_coeff_get(p, 0) == 1.0

    def test_grow_zero_fills_tail(self):
        p = polynomial_one()
        polynomial_coeff_set(p, 6, 2.0)
        torch.testing.assert_close(
            polynomial_to_array(p),
            torch.tensor(
                [1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 2.0], dtype=torch.float64
            ),
        )

    def test_growth_is_amortized(self):
        p = polynomial_one()
        polynomial_coeff_set(p, 1, 1.0)
        assert p.capacity == 2
        polynomial_coeff_set(p, 2, 1.0)
        assert p.capacity == 4
        polynomial_coeff_set(p, 3, 1.0)
        assert p.capacity == 4

    def test_grow_far_past_capacity(self):
        p = polynomial_one()
        polynomial_coeff_set(p, 100, 1.0)
        assert p.capacity == 101
        assert polynomial_degree(p) == 100

    def test_set_zero_above_degree_keeps_degree(self):
        p = polynomial_x_to_the(2)
        polynomial_coeff_set(p, 8, 0.0)
        assert polynomial_degree(p) == 2
        assert p.capacity >= 9

    def test_set_below_degree_keeps_degree(self):
        p = polynomial_x_to_the(4)
        polynomial_coeff_set(p, 2, 0.0)
        polynomial_coeff_set(p, 1, 3.0)
        assert polynomial_degree(p) == 4

    def test_negative_zero_counts_as_zero(self):
        p = polynomial_x_to_the(2)
        polynomial_coeff_set(p, 2, -0.0)
        assert polynomial_degree(p) == 0

    def test_nan_counts_as_nonzero(self):
        p = polynomial_zero()
        polynomial_coeff_set(p, 3, float("nan"))
        assert polynomial_degree(p) == 3

    def test_negative_index_raises(self):
        with pytest.raises(DegreeError):
            polynomial_coeff_set(polynomial_one(), -1, 1.0)


class TestPolynomialReduce:
    """Tests for polynomial_reduce."""

    def test_reduce_shrinks_capacity(self):
        p = polynomial_x_to_the(3)
        polynomial_coeff_set(p, 10, 1.0)
        polynomial_coeff_set(p, 10, 0.0)
        assert p.capacity == 11

        assert polynomial_reduce(p) is p
        assert p.capacity == 4
        assert polynomial_degree(p) == 3
        assert polynomial_coeff_get(p, 3) == 1.0

    def test_reduce_then_grow(self):
        p = polynomial_reduce(polynomial_x_to_the(1))
        polynomial_coeff_set(p, 2, 5.0)
        torch.testing.assert_close(
            polynomial_to_array(p),
            torch.tensor([0.0, 1.0, 5.0], dtype=torch.float64),
        )
