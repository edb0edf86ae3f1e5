from densepoly.polynomial._polynomial_error import PolynomialError


class HandleError(PolynomialError):
    """Null or released polynomial handle.

    Raised when a polynomial is used after ``polynomial_destroy`` has
    released its coefficient buffer, when it is destroyed twice, or when
    ``None`` is passed where a polynomial handle is required.
    """

    pass
