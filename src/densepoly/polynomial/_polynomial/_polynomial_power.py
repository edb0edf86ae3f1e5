from densepoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial
from ._polynomial_copy import polynomial_copy
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_one import polynomial_one


def polynomial_power(q: Polynomial, p: Polynomial, k: int) -> Polynomial:
    """Raise polynomial to non-negative integer power into q.

    Uses binary exponentiation (repeated squaring) with direct convolution,
    so products of exactly representable terms stay exact at any degree.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p.
    p : Polynomial
        Base polynomial.
    k : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        q, holding p^k. ``k = 0`` gives the constant 1.

    Raises
    ------
    DegreeError
        If k is negative.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 1.0])  # 1 + x
    >>> polynomial_to_array(polynomial_power(polynomial_new(), p, 3))
    tensor([1., 3., 3., 1.], dtype=torch.float64)
    """
    if k < 0:
        raise DegreeError(f"Exponent must be non-negative, got {k}")

    result = polynomial_one()
    base = polynomial_copy(p)

    while k > 0:
        if k & 1:
            polynomial_multiply(result, result, base)
        k >>= 1
        if k > 0:
            polynomial_multiply(base, base, base)

    return q._assign(result._snapshot())
