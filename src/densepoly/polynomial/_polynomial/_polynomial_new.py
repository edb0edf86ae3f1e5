import torch

from ._polynomial import Polynomial


def polynomial_new() -> Polynomial:
    """Allocate a degree 0 polynomial with a one-slot buffer.

    Returns
    -------
    Polynomial
        Polynomial with no guarantee about the value of its constant
        coefficient. Write it (or use the polynomial as an output of an
        arithmetic operation) before reading it.
    """
    return Polynomial(torch.empty(1, dtype=torch.float64), 0)
