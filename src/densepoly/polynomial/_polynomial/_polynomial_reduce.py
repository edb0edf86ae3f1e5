from ._polynomial import Polynomial


def polynomial_reduce(p: Polynomial) -> Polynomial:
    """Compact p in place so its capacity is exactly degree + 1.

    Returns
    -------
    Polynomial
        p, with the same coefficients and degree.
    """
    p._shrink()
    return p
