from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree


def polynomial_degree_compare(p1: Polynomial, p2: Polynomial) -> int:
    """Compare the degrees of two polynomials.

    Returns
    -------
    int
        -1 if deg(p1) < deg(p2), 0 if they are equal, 1 otherwise.
    """
    d1 = polynomial_degree(p1)
    d2 = polynomial_degree(p2)

    if d1 < d2:
        return -1
    elif d1 == d2:
        return 0
    else:
        return 1
