"""Time direct, FFT and auto multiplication of random dense polynomials.

Each method writes into one output polynomial that is reused across runs,
so after warmup no timed call allocates a new buffer.
"""

import time

import torch

from densepoly.polynomial import (
    FFT_THRESHOLD,
    polynomial_from_array,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_new,
)

METHODS = {
    "direct": polynomial_multiply,
    "fft": polynomial_multiply_fft,
    "auto": polynomial_multiply_auto,
}


def benchmark_multiply(degree: int, method: str, repeats: int = 100) -> float:
    """Mean milliseconds per product of two random degree-``degree`` factors."""
    multiply = METHODS[method]

    p1 = polynomial_from_array(torch.randn(degree + 1, dtype=torch.float64))
    p2 = polynomial_from_array(torch.randn(degree + 1, dtype=torch.float64))
    q = polynomial_new()

    for _ in range(10):
        multiply(q, p1, p2)

    start = time.perf_counter()
    for _ in range(repeats):
        multiply(q, p1, p2)

    return (time.perf_counter() - start) * 1000 / repeats


def main():
    names = list(METHODS)
    header = f"{'degree':>8}" + "".join(f"{name + ' ms':>14}" for name in names)

    print(header)
    print("-" * len(header))

    for degree in (2 ** k for k in range(3, 12)):
        timings = [benchmark_multiply(degree, name) for name in names]
        fastest = names[timings.index(min(timings))]
        row = f"{degree:>8}" + "".join(f"{ms:>14.4f}" for ms in timings)
        print(f"{row}  {fastest}")

    print()
    print(f"auto uses fft from degree {FFT_THRESHOLD}")


if __name__ == "__main__":
    main()
