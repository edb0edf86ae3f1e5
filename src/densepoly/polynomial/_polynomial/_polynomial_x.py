from ._polynomial import Polynomial
from ._polynomial_x_to_the import polynomial_x_to_the


def polynomial_x() -> Polynomial:
    """Return 1.0 * x^1 + 0.0 * x^0."""
    return polynomial_x_to_the(1)
