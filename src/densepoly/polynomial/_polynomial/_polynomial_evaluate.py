from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(
    p: Polynomial, x: Union[float, Tensor]
) -> Union[float, Tensor]:
    """Evaluate polynomial using Horner's method.

    Starts from the top coefficient and repeatedly multiplies by x and adds
    the next lower coefficient, so a degree n polynomial costs n
    multiplications and n additions.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : float or Tensor
        Evaluation point, or a tensor of points evaluated elementwise.

    Returns
    -------
    float or Tensor
        p(x). A float for a scalar x; a float64 tensor with the shape of
        x otherwise.

    Notes
    -----
    Non-finite inputs are not special-cased; NaN and infinity propagate
    through IEEE arithmetic. A constant polynomial returns its constant
    term for every x.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, 2.0)
    17.0
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    # Lowest coefficient last
    coefficients = p._snapshot().flip(0).tolist()

    if isinstance(x, Tensor):
        x = x.to(torch.float64)
        result = torch.full_like(x, coefficients[0])
        for c in coefficients[1:]:
            result = result * x + c
        return result

    x = float(x)
    result = coefficients[0]
    for c in coefficients[1:]:
        result = result * x + c
    return result
