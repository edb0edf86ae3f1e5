"""densepoly: dense univariate polynomials over float64 coefficients."""

from . import polynomial

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
