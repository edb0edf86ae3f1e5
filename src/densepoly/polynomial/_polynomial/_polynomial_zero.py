import torch

from ._polynomial import Polynomial


def polynomial_zero() -> Polynomial:
    """Return the zero polynomial 0.0 * x^0."""
    return Polynomial(torch.zeros(1, dtype=torch.float64), 0)
