from ._polynomial import Polynomial
from ._polynomial_degree_max import polynomial_degree_max


def polynomial_subtract(
    q: Polynomial, p1: Polynomial, p2: Polynomial
) -> Polynomial:
    """Subtract two polynomials into q.

    Computes element-wise difference of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p1 and/or p2.
    p1, p2 : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        q, holding p1 - p2. ``polynomial_subtract(q, p, p)`` leaves q as
        the zero polynomial of degree 0.
    """
    n = polynomial_degree_max(p1, p2) + 1

    a = p1._snapshot(n)
    b = p2._snapshot(n)

    return q._assign(a - b)
