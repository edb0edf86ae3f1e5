import torch

from densepoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial


def polynomial_x_to_the(k: int) -> Polynomial:
    """Return the monomial x^k.

    Parameters
    ----------
    k : int
        Non-negative power to which x is raised.

    Returns
    -------
    Polynomial
        Degree k polynomial with 1.0 at index k and 0.0 elsewhere.

    Raises
    ------
    DegreeError
        If k is negative.

    Examples
    --------
    >>> polynomial_to_array(polynomial_x_to_the(3))
    tensor([0., 0., 0., 1.], dtype=torch.float64)
    """
    if k < 0:
        raise DegreeError(f"Power of x must be non-negative, got {k}")

    coefficients = torch.zeros(k + 1, dtype=torch.float64)
    coefficients[k] = 1.0
    return Polynomial(coefficients, k)
