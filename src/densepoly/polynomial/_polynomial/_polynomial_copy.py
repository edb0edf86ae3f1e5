from ._polynomial import Polynomial


def polynomial_copy(p: Polynomial) -> Polynomial:
    """Return an independent copy of p.

    The copy keeps p's capacity and shares no storage with it.
    """
    return Polynomial(p._buffer().clone(), p._degree)
