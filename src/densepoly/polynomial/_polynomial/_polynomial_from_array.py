from typing import Sequence, Union

import torch
from torch import Tensor

from densepoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial


def polynomial_from_array(values: Union[Tensor, Sequence[float]]) -> Polynomial:
    """Create polynomial from coefficients in ascending order.

    Parameters
    ----------
    values : Tensor or sequence of float
        One-dimensional coefficients; values[i] is the coefficient of x^i.
        The data is copied.

    Returns
    -------
    Polynomial
        Normalized polynomial. Trailing zeros do not count toward the
        degree.

    Raises
    ------
    PolynomialError
        If values is empty or not one-dimensional.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 2.0, 0.0, 0.0])  # 1 + 2x
    >>> polynomial_degree(p)
    1
    """
    coefficients = torch.as_tensor(values, dtype=torch.float64)

    if coefficients.dim() != 1:
        raise PolynomialError(
            f"Coefficients must be one-dimensional, got shape "
            f"{tuple(coefficients.shape)}"
        )
    if coefficients.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    p = Polynomial(coefficients.detach().clone().cpu(), 0)
    p._normalize(coefficients.numel() - 1)
    return p
