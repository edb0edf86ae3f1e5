"""Hypothesis strategies for polynomial testing."""

from ._coefficients import coefficients
from ._polynomials import polynomials
from ._real_numbers import real_numbers

__all__ = [
    "coefficients",
    "polynomials",
    "real_numbers",
]
