"""Dense univariate polynomials in power basis with float64 coefficients."""

from ._degree_error import DegreeError
from ._handle_error import HandleError
from ._polynomial import (
    Polynomial,
    polynomial_add,
    polynomial_coeff_get,
    polynomial_coeff_set,
    polynomial_copy,
    polynomial_degree,
    polynomial_degree_compare,
    polynomial_degree_max,
    polynomial_derive,
    polynomial_destroy,
    polynomial_divide,
    polynomial_divide_scalar,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_from_array,
    polynomial_integrate,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_multiply_scalar,
    polynomial_new,
    polynomial_one,
    polynomial_power,
    polynomial_reduce,
    polynomial_scale,
    polynomial_subtract,
    polynomial_to_array,
    polynomial_to_string,
    polynomial_x,
    polynomial_x_to_the,
    polynomial_zero,
)
from ._polynomial._polynomial_multiply_fft import FFT_THRESHOLD
from ._polynomial_error import PolynomialError

__all__ = [
    "DegreeError",
    "FFT_THRESHOLD",
    "HandleError",
    "PolynomialError",
    "Polynomial",
    "polynomial_add",
    "polynomial_coeff_get",
    "polynomial_coeff_set",
    "polynomial_copy",
    "polynomial_degree",
    "polynomial_degree_compare",
    "polynomial_degree_max",
    "polynomial_derive",
    "polynomial_destroy",
    "polynomial_divide",
    "polynomial_divide_scalar",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_from_array",
    "polynomial_integrate",
    "polynomial_multiply",
    "polynomial_multiply_auto",
    "polynomial_multiply_fft",
    "polynomial_multiply_scalar",
    "polynomial_new",
    "polynomial_one",
    "polynomial_power",
    "polynomial_reduce",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_to_array",
    "polynomial_to_string",
    "polynomial_x",
    "polynomial_x_to_the",
    "polynomial_zero",
]
