from ._polynomial import Polynomial


def polynomial_divide_scalar(
    q: Polynomial, p: Polynomial, c: float
) -> Polynomial:
    """Divide polynomial by scalar into q.

    Parameters
    ----------
    q : Polynomial
        Output polynomial, resized as needed. May be the same handle as p.
    p : Polynomial
        Dividend polynomial.
    c : float
        Divisor. Zero is not rejected; the coefficients become infinite
        or NaN following IEEE division.

    Returns
    -------
    Polynomial
        q, holding p / c.
    """
    return q._assign(p._snapshot() / float(c))
