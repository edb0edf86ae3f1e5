import warnings

import torch

from densepoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial


def polynomial_scale(q: Polynomial, p: Polynomial, k: int) -> Polynomial:
    """Multiply polynomial by x^k into q.

    Parameters
    ----------
    q : Polynomial
        Output polynomial, resized as needed. May be the same handle as p.
    p : Polynomial
        Polynomial to shift.
    k : int
        Power of x. Negative values divide by x^|k|, shifting coefficients
        down and discarding those below x^|k|.

    Returns
    -------
    Polynomial
        q, holding p * x^k.

    Raises
    ------
    DegreeError
        If deg(p) + k is negative.

    Warns
    -----
    RuntimeWarning
        If a negative shift discards nonzero coefficients.

    Examples
    --------
    >>> p = polynomial_from_array([1.0, 2.0])  # 1 + 2x
    >>> polynomial_to_array(polynomial_scale(polynomial_new(), p, 2))
    tensor([0., 0., 1., 2.], dtype=torch.float64)
    """
    values = p._snapshot()
    degree = p._degree + k

    if degree < 0:
        raise DegreeError(
            f"Cannot scale a degree {p._degree} polynomial by x^{k}"
        )

    if k >= 0:
        shifted = torch.cat([torch.zeros(k, dtype=torch.float64), values])
    else:
        if torch.any(values[:-k] != 0):
            warnings.warn(
                f"Scaling by x^{k} discards nonzero coefficients below "
                f"x^{-k}",
                RuntimeWarning,
                stacklevel=2,
            )
        shifted = values[-k:]

    return q._assign(shifted)
