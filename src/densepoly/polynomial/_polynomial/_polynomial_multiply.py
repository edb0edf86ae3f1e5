import torch
from torch import Tensor

from ._polynomial import Polynomial


def _multiply_direct(a: Tensor, b: Tensor) -> Tensor:
    """Direct O(n*m) convolution of two coefficient tensors."""
    result = torch.zeros(a.numel() + b.numel() - 1, dtype=torch.float64)
    n = b.numel()
    for i, c in enumerate(a.tolist()):
        result[i : i + n] += c * b
    return result


def polynomial_multiply(
    q: Polynomial, p1: Polynomial, p2: Polynomial
) -> Polynomial:
    """Multiply two polynomials into q.

    Computes convolution of coefficients, q[i + j] += p1[i] * p2[j]. Result
    degree is deg(p1) + deg(p2), or 0 if either factor is zero.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p1 and/or p2.
    p1, p2 : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        q, holding p1 * p2.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 2.0])  # 1 + 2x
    >>> r = polynomial_from_array([3.0, 4.0])  # 3 + 4x
    >>> polynomial_to_array(polynomial_multiply(polynomial_new(), p, r))
    tensor([ 3., 10.,  8.], dtype=torch.float64)
    """
    return q._assign(_multiply_direct(p1._snapshot(), p2._snapshot()))
