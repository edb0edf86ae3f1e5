import pytest
import torch

from densepoly.polynomial import (
    DegreeError,
    HandleError,
    polynomial_coeff_get,
    polynomial_coeff_set,
    polynomial_copy,
    polynomial_degree,
    polynomial_destroy,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_new,
    polynomial_one,
    polynomial_to_array,
    polynomial_x,
    polynomial_x_to_the,
    polynomial_zero,
)


class TestPolynomialConstructors:
    """Tests for the constructor functions."""

    def test_new(self):
        """New polynomial has degree 0 and a single slot."""
        p = polynomial_new()
        assert polynomial_degree(p) == 0
        assert p.capacity == 1
        polynomial_destroy(p)

    def test_new_written_before_read(self):
        p = polynomial_new()
        polynomial_coeff_set(p, 0, 3.0)
        assert polynomial_evaluate(p, 10.0) == 3.0

    def test_zero(self):
        p = polynomial_zero()
        assert polynomial_degree(p) == 0
        assert polynomial_evaluate(p, 10.0) == 0.0

    def test_one(self):
        p = polynomial_one()
        assert polynomial_degree(p) == 0
        assert polynomial_evaluate(p, 10.0) == 1.0

    def test_x(self):
        p = polynomial_x()
        assert polynomial_degree(p) == 1
        assert polynomial_evaluate(p, 10.0) == 10.0
        torch.testing.assert_close(
            polynomial_to_array(p),
            torch.tensor([0.0, 1.0], dtype=torch.float64),
        )

    def test_x_to_the(self):
        p = polynomial_x_to_the(3)
        assert polynomial_degree(p) == 3
        assert polynomial_evaluate(p, 10.0) == 1000.0

    def test_x_to_the_zero_is_one(self):
        assert polynomial_equal(polynomial_x_to_the(0), polynomial_one())

    def test_x_to_the_negative_raises(self):
        with pytest.raises(DegreeError):
            polynomial_x_to_the(-2)


class TestPolynomialCopy:
    """Tests for polynomial_copy."""

    def test_copy_is_equal(self):
        p = polynomial_x_to_the(4)
        polynomial_coeff_set(p, 1, -2.5)
        assert polynomial_equal(polynomial_copy(p), p)

    def test_copy_is_independent(self):
        p = polynomial_x_to_the(2)
        q = polynomial_copy(p)
        polynomial_coeff_set(q, 0, 9.0)
        polynomial_coeff_set(q, 7, 1.0)
        assert polynomial_coeff_get(p, 0) == 0.0
        assert polynomial_degree(p) == 2
        assert polynomial_degree(q) == 7

    def test_copy_keeps_capacity(self):
        p = polynomial_one()
        polynomial_coeff_set(p, 5, 1.0)
        polynomial_coeff_set(p, 5, 0.0)
        q = polynomial_copy(p)
        assert q.capacity == p.capacity
        assert polynomial_degree(q) == 0

    def test_copy_survives_destroy(self):
        p = polynomial_x()
        q = polynomial_copy(p)
        polynomial_destroy(p)
        assert polynomial_evaluate(q, 2.0) == 2.0


class TestPolynomialDestroy:
    """Tests for polynomial_destroy."""

    def test_destroy_twice_raises(self):
        p = polynomial_x()
        polynomial_destroy(p)
        with pytest.raises(HandleError):
            polynomial_destroy(p)

    def test_destroy_none_raises(self):
        with pytest.raises(HandleError, match="null"):
            polynomial_destroy(None)

    def test_use_after_destroy_raises(self):
        p = polynomial_x()
        polynomial_destroy(p)
        with pytest.raises(HandleError):
            polynomial_coeff_get(p, 0)
        with pytest.raises(HandleError):
            polynomial_degree(p)
        with pytest.raises(HandleError):
            polynomial_evaluate(p, 1.0)
        with pytest.raises(HandleError):
            polynomial_coeff_set(p, 0, 1.0)

    def test_repr_after_destroy(self):
        p = polynomial_x()
        polynomial_destroy(p)
        assert repr(p) == "Polynomial(<released>)"
