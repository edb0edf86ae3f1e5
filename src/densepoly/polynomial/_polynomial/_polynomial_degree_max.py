from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_degree_compare import polynomial_degree_compare


def polynomial_degree_max(p1: Polynomial, p2: Polynomial) -> int:
    """Return the larger of the degrees of p1 and p2."""
    if polynomial_degree_compare(p1, p2) == -1:
        return polynomial_degree(p2)
    return polynomial_degree(p1)
