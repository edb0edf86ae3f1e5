from typing import Optional, Tuple

import torch

from densepoly.polynomial._degree_error import DegreeError
from densepoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial


def polynomial_divide(
    q: Polynomial,
    r: Optional[Polynomial],
    p1: Polynomial,
    p2: Polynomial,
) -> Tuple[Polynomial, Optional[Polynomial]]:
    """Divide p1 by p2, writing quotient into q and remainder into r.

    Computes quotient and remainder such that p1 = p2 * q + r,
    where deg(r) < deg(p2) or r is zero.

    Parameters
    ----------
    q : Polynomial
        Output for the quotient. May alias p1 or p2.
    r : Polynomial or None
        Output for the remainder, or None to discard it. May alias p1 or
        p2, but not q.
    p1 : Polynomial
        Dividend polynomial.
    p2 : Polynomial
        Divisor polynomial.

    Returns
    -------
    tuple of Polynomial
        (q, r).

    Raises
    ------
    DegreeError
        If p2 is the zero polynomial.
    PolynomialError
        If q and r are the same polynomial.

    Examples
    --------
    >>> p1 = polynomial_from_array([-1.0, 0.0, 0.0, 1.0])  # x^3 - 1
    >>> p2 = polynomial_from_array([-1.0, 1.0])  # x - 1
    >>> q, r = polynomial_divide(polynomial_new(), polynomial_new(), p1, p2)
    >>> polynomial_to_array(q)  # x^2 + x + 1
    tensor([1., 1., 1.], dtype=torch.float64)
    """
    if q is r:
        raise PolynomialError(
            "Quotient and remainder must be distinct polynomials"
        )

    remainder = p1._snapshot()
    divisor = p2._snapshot()

    n_p = remainder.numel()
    n_q = divisor.numel()

    lead = divisor[-1].item()
    if lead == 0.0:
        raise DegreeError("Cannot divide by zero polynomial")

    quotient = torch.zeros(max(n_p - n_q + 1, 1), dtype=torch.float64)

    # Long division, eliminating the top remaining term each step
    for i in range(n_p - n_q, -1, -1):
        c = remainder[i + n_q - 1].item() / lead
        quotient[i] = c
        remainder[i : i + n_q] -= c * divisor
        remainder[i + n_q - 1] = 0.0

    q._assign(quotient)
    if r is not None:
        r._assign(remainder[: max(n_q - 1, 1)].clone())

    return q, r
