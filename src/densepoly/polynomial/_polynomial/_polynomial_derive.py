import torch

from ._polynomial import Polynomial


def polynomial_derive(q: Polynomial, p: Polynomial) -> Polynomial:
    """Differentiate polynomial into q.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p.
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        q, holding dp/dx. A constant polynomial gives zero.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_to_array(polynomial_derive(polynomial_new(), p))  # 2 + 6x
    tensor([2., 6.], dtype=torch.float64)
    """
    coefficients = p._snapshot()
    n = coefficients.numel()

    if n <= 1:
        # Derivative of constant is zero
        return q._assign(torch.zeros(1, dtype=torch.float64))

    # d/dx (a_0 + a_1*x + ... + a_n*x^n) = a_1 + 2*a_2*x + ... + n*a_n*x^(n-1)
    indices = torch.arange(1, n, dtype=torch.float64)
    return q._assign(coefficients[1:] * indices)
