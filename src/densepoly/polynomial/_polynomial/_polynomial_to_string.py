from ._polynomial import Polynomial


def polynomial_to_string(p: Polynomial) -> str:
    """Render p as a sum of terms from the highest power down.

    Each term is written ``"<coefficient> x^<power>"`` and terms are joined
    by ``" + "``. Zero coefficients are omitted; the zero polynomial is
    ``"0.0 x^0"``.

    Examples
    --------
    >>> polynomial_to_string(polynomial_from_array([1.0, 0.0, -3.0]))
    '-3.0 x^2 + 1.0 x^0'
    """
    coefficients = p._snapshot().tolist()

    terms = [
        f"{c!r} x^{i}"
        for i, c in reversed(list(enumerate(coefficients)))
        if c != 0.0
    ]

    if not terms:
        return "0.0 x^0"
    return " + ".join(terms)
