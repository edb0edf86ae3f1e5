"""FFT-based polynomial multiplication for high-degree polynomials.

For high-degree polynomials, FFT-based multiplication has complexity O(n log n)
compared to O(n^2) for direct convolution, making it significantly faster for
large polynomials.
"""

import torch
from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_multiply import _multiply_direct

# Threshold for switching to FFT-based multiplication
# Below this degree, direct convolution is typically faster
FFT_THRESHOLD = 64


def _next_power_of_2(n: int) -> int:
    """Return the smallest power of 2 >= n."""
    if n <= 0:
        return 1
    return 1 << (n - 1).bit_length()


def _multiply_fft(a: Tensor, b: Tensor) -> Tensor:
    n_result = a.numel() + b.numel() - 1

    # FFT length (round up to power of 2 for efficiency)
    n_fft = _next_power_of_2(n_result)

    a_fft = torch.fft.rfft(a, n=n_fft)
    b_fft = torch.fft.rfft(b, n=n_fft)

    result = torch.fft.irfft(a_fft * b_fft, n=n_fft)[:n_result]

    # A zero factor must give an exact zero product, not rounding noise
    if not torch.any(a) or not torch.any(b):
        result = torch.zeros_like(result)

    return result.contiguous()


def polynomial_multiply_fft(
    q: Polynomial, p1: Polynomial, p2: Polynomial
) -> Polynomial:
    """Multiply two polynomials into q using FFT-based convolution.

    Uses the Fast Fourier Transform to compute the convolution of polynomial
    coefficients in O(n log n) time, compared to O(n^2) for direct convolution.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p1 and/or p2.
    p1, p2 : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        q, holding p1 * p2.

    Notes
    -----
    ``polynomial_multiply_auto`` takes this path once either factor reaches
    degree ``FFT_THRESHOLD``; below it the direct convolution wins.

    The result agrees with ``polynomial_multiply`` within floating-point
    tolerance, not bit for bit. Coefficients that should cancel to zero may
    be left as tiny rounding residues, which count toward the degree. Use
    ``polynomial_multiply`` where exact zeros matter.

    Both coefficient vectors are zero-padded to the smallest power of two
    holding deg(p1) + deg(p2) + 1 terms, transformed with ``torch.fft.rfft``,
    multiplied pointwise, and brought back with ``torch.fft.irfft``.
    """
    return q._assign(_multiply_fft(p1._snapshot(), p2._snapshot()))


def polynomial_multiply_auto(
    q: Polynomial, p1: Polynomial, p2: Polynomial
) -> Polynomial:
    """Multiply two polynomials into q, automatically selecting the algorithm.

    Uses FFT-based multiplication for high-degree polynomials and direct
    convolution for low-degree polynomials.

    Parameters
    ----------
    q : Polynomial
        Output polynomial. May be the same handle as p1 and/or p2.
    p1, p2 : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        q, holding p1 * p2.

    Notes
    -----
    The threshold for switching to FFT is currently set to degree 64.
    This is a heuristic based on typical performance characteristics, and
    the optimal threshold may vary by hardware.
    """
    a = p1._snapshot()
    b = p2._snapshot()

    if max(a.numel(), b.numel()) - 1 >= FFT_THRESHOLD:
        return q._assign(_multiply_fft(a, b))
    return q._assign(_multiply_direct(a, b))
