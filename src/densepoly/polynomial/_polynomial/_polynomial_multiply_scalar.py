from ._polynomial import Polynomial


def polynomial_multiply_scalar(
    q: Polynomial, p: Polynomial, c: float
) -> Polynomial:
    """Multiply polynomial by scalar into q.

    Parameters
    ----------
    q : Polynomial
        Output polynomial, resized as needed. May be the same handle as p.
    p : Polynomial
        Polynomial to scale.
    c : float
        Scalar factor. Infinite or NaN factors propagate.

    Returns
    -------
    Polynomial
        q, holding c * p.
    """
    return q._assign(p._snapshot() * float(c))
