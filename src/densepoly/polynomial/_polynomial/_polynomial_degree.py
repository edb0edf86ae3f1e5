from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Index of the highest nonzero coefficient, 0 for the zero
        polynomial.

    Notes
    -----
    The degree is cached and kept normalized by every operation, so this
    never rescans the coefficients.
    """
    p._validate()
    return p._degree
