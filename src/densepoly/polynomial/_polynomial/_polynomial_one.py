import torch

from ._polynomial import Polynomial


def polynomial_one() -> Polynomial:
    """Return the constant polynomial 1.0 * x^0."""
    return Polynomial(torch.ones(1, dtype=torch.float64), 0)
