from densepoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial


def polynomial_coeff_set(p: Polynomial, i: int, a: float) -> None:
    """Set the coefficient of x^i in place.

    Grows the buffer when i is past its capacity. Setting a nonzero
    coefficient above the degree raises the degree to i; zeroing the top
    coefficient lowers the degree to the next nonzero coefficient below
    it (or to 0 when none is left).

    Parameters
    ----------
    p : Polynomial
        The polynomial to modify.
    i : int
        Non-negative power.
    a : float
        New coefficient value.

    Raises
    ------
    DegreeError
        If i is negative.

    Examples
    --------
    >>> p = polynomial_x_to_the(3)
    >>> polynomial_coeff_set(p, 4, 2.0)
    >>> polynomial_degree(p)
    4
    >>> polynomial_coeff_set(p, 4, 0.0)
    >>> polynomial_degree(p)
    3
    """
    if i < 0:
        raise DegreeError(f"Coefficient index must be non-negative, got {i}")

    a = float(a)

    p._reserve(i + 1)
    p._coefficients[i] = a

    if a != 0.0:
        if i > p._degree:
            p._degree = i
    elif i == p._degree:
        p._normalize(i - 1)
