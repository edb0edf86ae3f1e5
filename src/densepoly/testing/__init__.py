"""Testing helpers for densepoly.

The strategies are built on hypothesis, which is installed with densepoly.

Example usage:

    import hypothesis

    from densepoly.polynomial import polynomial_add, polynomial_new
    from densepoly.testing.strategies import polynomials

    @hypothesis.given(polynomials(), polynomials())
    def test_add_commutes(p1, p2):
        assert polynomial_add(polynomial_new(), p1, p2) == polynomial_add(
            polynomial_new(), p2, p1
        )
"""

from . import strategies

__all__ = [
    "strategies",
]
