from torch import Tensor

from ._polynomial import Polynomial


def polynomial_to_array(p: Polynomial) -> Tensor:
    """Return the coefficients of p indexed by power.

    Returns
    -------
    Tensor
        New float64 tensor of length degree(p) + 1. It does not share
        storage with p.
    """
    return p._snapshot()
