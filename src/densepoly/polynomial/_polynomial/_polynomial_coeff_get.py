from densepoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial


def polynomial_coeff_get(p: Polynomial, i: int) -> float:
    """Return the coefficient of x^i.

    Parameters
    ----------
    p : Polynomial
        The polynomial.
    i : int
        Non-negative power.

    Returns
    -------
    float
        Stored coefficient for i <= degree(p), otherwise 0.0.
    """
    if i < 0:
        raise DegreeError(f"Coefficient index must be non-negative, got {i}")

    buffer = p._buffer()
    if i > p._degree:
        return 0.0
    return buffer[i].item()
