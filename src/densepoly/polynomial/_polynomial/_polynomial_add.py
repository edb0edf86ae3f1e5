from ._polynomial import Polynomial
from ._polynomial_degree_max import polynomial_degree_max


def polynomial_add(q: Polynomial, p1: Polynomial, p2: Polynomial) -> Polynomial:
    """Add two polynomials into q.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees. The degree of q is rescanned after
    the sum, so cancelling top terms lowers it.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p1 and/or p2.
    p1, p2 : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        q, holding p1 + p2.
    """
    n = polynomial_degree_max(p1, p2) + 1

    # Snapshot inputs before q is resized; q may alias either of them
    a = p1._snapshot(n)
    b = p2._snapshot(n)

    return q._assign(a + b)
