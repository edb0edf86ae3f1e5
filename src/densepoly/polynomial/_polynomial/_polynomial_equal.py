import torch

from ._polynomial import Polynomial


def polynomial_equal(p1: Polynomial, p2: Polynomial) -> bool:
    """Check exact polynomial equality.

    Parameters
    ----------
    p1, p2 : Polynomial
        Polynomials to compare.

    Returns
    -------
    bool
        True if the degrees match and every coefficient up to the degree
        compares equal under IEEE-754 ``==``.

    Notes
    -----
    No tolerance is applied. Compare ``polynomial_to_array`` outputs with
    ``torch.testing.assert_close`` or ``torch.allclose`` for approximate
    equality. As with ``==`` on floats, NaN coefficients never compare
    equal and ``-0.0`` equals ``0.0``.
    """
    a = p1._buffer()
    b = p2._buffer()

    if p1._degree != p2._degree:
        return False

    n = p1._degree + 1
    return torch.equal(a[:n], b[:n])
