from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_coeff_get import polynomial_coeff_get
from ._polynomial_coeff_set import polynomial_coeff_set
from ._polynomial_copy import polynomial_copy
from ._polynomial_degree import polynomial_degree
from ._polynomial_degree_compare import polynomial_degree_compare
from ._polynomial_degree_max import polynomial_degree_max
from ._polynomial_derive import polynomial_derive
from ._polynomial_destroy import polynomial_destroy
from ._polynomial_divide import polynomial_divide
from ._polynomial_divide_scalar import polynomial_divide_scalar
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_array import polynomial_from_array
from ._polynomial_integrate import polynomial_integrate
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_multiply_fft import (
    polynomial_multiply_auto,
    polynomial_multiply_fft,
)
from ._polynomial_multiply_scalar import polynomial_multiply_scalar
from ._polynomial_new import polynomial_new
from ._polynomial_one import polynomial_one
from ._polynomial_power import polynomial_power
from ._polynomial_reduce import polynomial_reduce
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_to_array import polynomial_to_array
from ._polynomial_to_string import polynomial_to_string
from ._polynomial_x import polynomial_x
from ._polynomial_x_to_the import polynomial_x_to_the
from ._polynomial_zero import polynomial_zero

__all__ = [
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
