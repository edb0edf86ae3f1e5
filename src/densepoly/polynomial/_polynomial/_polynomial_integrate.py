import torch

from ._polynomial import Polynomial


def polynomial_integrate(
    q: Polynomial,
    p: Polynomial,
    constant: float = 0.0,
) -> Polynomial:
    """Compute antiderivative (indefinite integral) into q.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p.
    p : Polynomial
        Input polynomial.
    constant : float
        Integration constant (default 0).

    Returns
    -------
    Polynomial
        q, holding the antiderivative with the given constant term.
        Degree increases by 1 unless p is zero.

    Examples
    --------
    >>> p = polynomial_from_array([2.0, 6.0])  # 2 + 6x
    >>> polynomial_to_array(polynomial_integrate(polynomial_new(), p))
    tensor([0., 2., 3.], dtype=torch.float64)
    """
    coefficients = p._snapshot()
    n = coefficients.numel()

    # Integral of (a_0 + a_1*x + ... + a_n*x^n)
    # = C + a_0*x + a_1*x^2/2 + ... + a_n*x^(n+1)/(n+1)
    indices = torch.arange(1, n + 1, dtype=torch.float64)
    integrated = coefficients / indices

    c = torch.tensor([float(constant)], dtype=torch.float64)
    return q._assign(torch.cat([c, integrated]))
