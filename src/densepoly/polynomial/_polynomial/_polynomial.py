from typing import Optional, Union

import torch
from torch import Tensor

from densepoly.polynomial._handle_error import HandleError

GROWTH_FACTOR = 2


class Polynomial:
    """Dense univariate polynomial in power basis with float64 coefficients.

    Represents p(x) = c[0] + c[1]*x + c[2]*x^2 + ... + c[degree]*x^degree.

    A Polynomial is a mutable handle that exclusively owns a growable
    coefficient buffer. The buffer may be longer than ``degree + 1``; slots
    past the degree always read as zero. The cached degree is the index of
    the highest nonzero coefficient, or 0 for the zero polynomial.

    Use the constructors (``polynomial_zero``, ``polynomial_x_to_the``,
    ``polynomial_from_array``, ...) rather than instantiating directly.

    Attributes
    ----------
    capacity : int
        Number of slots in the coefficient buffer.

    Examples
    --------
    Output-buffer arithmetic:
        q = polynomial_new()
        polynomial_add(q, p1, p2)      # q <- p1 + p2
        polynomial_add(p1, p1, p2)     # in place, p1 <- p1 + p2

    Operator overloading (allocates a new result):
        p + q    # polynomial_add
        p - q    # polynomial_subtract
        p * q    # polynomial_multiply_auto
        p * c    # polynomial_multiply_scalar
        p / c    # polynomial_divide_scalar
        p ** n   # polynomial_power
        p // q   # quotient of polynomial_divide
        p % q    # remainder of polynomial_divide
        -p       # polynomial_multiply_scalar(..., -1.0)
        p(x)     # polynomial_evaluate
        p == q   # polynomial_equal
    """

    __slots__ = ("_coefficients", "_degree")

    def __init__(self, coefficients: Tensor, degree: int = 0):
        self._coefficients = coefficients
        self._degree = degree

    @property
    def capacity(self) -> int:
        return self._buffer().numel()

    # Buffer management. Only the polynomial operations call these.

    def _validate(self) -> None:
        if self._coefficients is None:
            raise HandleError("polynomial has already been released")

    def _buffer(self) -> Tensor:
        self._validate()
        return self._coefficients

    def _reserve(self, length: int) -> None:
        """Grow the buffer to hold at least ``length`` slots.

        Existing values are copied into the new buffer before it replaces
        the old one; the newly allocated tail is zero.
        """
        buffer = self._buffer()
        capacity = buffer.numel()
        if length <= capacity:
            return

        grown = torch.zeros(
            max(length, GROWTH_FACTOR * capacity), dtype=torch.float64
        )
        grown[:capacity] = buffer
        self._coefficients = grown

    def _fit(self, degree: int) -> None:
        """Make room for ``degree`` and zero every slot past it."""
        self._reserve(degree + 1)
        self._coefficients[degree + 1 :] = 0.0

    def _normalize(self, start: int) -> None:
        """Recompute the degree scanning downward from ``start``."""
        if start < 0:
            self._degree = 0
            return

        nonzero = torch.nonzero(self._buffer()[: start + 1]).flatten()
        self._degree = int(nonzero[-1]) if nonzero.numel() > 0 else 0

    def _snapshot(self, length: Optional[int] = None) -> Tensor:
        """Independent copy of the coefficients, zero-padded to ``length``."""
        buffer = self._buffer()
        if length is None:
            length = self._degree + 1

        values = torch.zeros(length, dtype=torch.float64)
        n = min(self._degree + 1, length)
        values[:n] = buffer[:n]
        return values

    def _assign(self, values: Tensor) -> "Polynomial":
        """Overwrite this polynomial with ``values`` and renormalize.

        ``values`` must not share storage with this polynomial's buffer.
        """
        degree = values.numel() - 1
        self._fit(degree)
        self._coefficients[: degree + 1] = values
        self._normalize(degree)
        return self

    def _shrink(self) -> None:
        self._coefficients = self._snapshot()

    def _release(self) -> None:
        self._validate()
        self._coefficients = None
        self._degree = 0

    # Operators

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add
        from ._polynomial_new import polynomial_new

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_add(polynomial_new(), self, other)

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_add(self, self, other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_new import polynomial_new
        from ._polynomial_subtract import polynomial_subtract

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_subtract(polynomial_new(), self, other)

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_subtract(self, self, other)

    def __mul__(self, other: Union["Polynomial", float]) -> "Polynomial":
        from ._polynomial_multiply_fft import polynomial_multiply_auto
        from ._polynomial_multiply_scalar import polynomial_multiply_scalar
        from ._polynomial_new import polynomial_new

        if isinstance(other, Polynomial):
            return polynomial_multiply_auto(polynomial_new(), self, other)
        if isinstance(other, (int, float)):
            return polynomial_multiply_scalar(polynomial_new(), self, other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Polynomial":
        from ._polynomial_multiply_scalar import polynomial_multiply_scalar
        from ._polynomial_new import polynomial_new

        if isinstance(other, (int, float)):
            return polynomial_multiply_scalar(polynomial_new(), self, other)
        return NotImplemented

    def __imul__(self, other: Union["Polynomial", float]) -> "Polynomial":
        from ._polynomial_multiply_fft import polynomial_multiply_auto
        from ._polynomial_multiply_scalar import polynomial_multiply_scalar

        if isinstance(other, Polynomial):
            return polynomial_multiply_auto(self, self, other)
        if isinstance(other, (int, float)):
            return polynomial_multiply_scalar(self, self, other)
        return NotImplemented

    def __truediv__(self, other: float) -> "Polynomial":
        from ._polynomial_divide_scalar import polynomial_divide_scalar
        from ._polynomial_new import polynomial_new

        if isinstance(other, (int, float)):
            return polynomial_divide_scalar(polynomial_new(), self, other)
        return NotImplemented

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_divide import polynomial_divide
        from ._polynomial_new import polynomial_new

        if not isinstance(other, Polynomial):
            return NotImplemented
        quotient, _ = polynomial_divide(polynomial_new(), None, self, other)
        return quotient

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_divide import polynomial_divide
        from ._polynomial_new import polynomial_new

        if not isinstance(other, Polynomial):
            return NotImplemented
        _, remainder = polynomial_divide(
            polynomial_new(), polynomial_new(), self, other
        )
        return remainder

    def __divmod__(self, other: "Polynomial"):
        from ._polynomial_divide import polynomial_divide
        from ._polynomial_new import polynomial_new

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_divide(
            polynomial_new(), polynomial_new(), self, other
        )

    def __neg__(self) -> "Polynomial":
        from ._polynomial_multiply_scalar import polynomial_multiply_scalar
        from ._polynomial_new import polynomial_new

        return polynomial_multiply_scalar(polynomial_new(), self, -1.0)

    def __pow__(self, k: int) -> "Polynomial":
        from ._polynomial_new import polynomial_new
        from ._polynomial_power import polynomial_power

        return polynomial_power(polynomial_new(), self, k)

    def __call__(self, x: Union[float, Tensor]) -> Union[float, Tensor]:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __eq__(self, other: object) -> bool:
        from ._polynomial_equal import polynomial_equal

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_equal(self, other)

    __hash__ = None

    def __str__(self) -> str:
        from ._polynomial_to_string import polynomial_to_string

        return polynomial_to_string(self)

    def __repr__(self) -> str:
        if self._coefficients is None:
            return "Polynomial(<released>)"
        return f"Polynomial({self._snapshot()!r})"
