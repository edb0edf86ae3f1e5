from typing import Optional

from densepoly.polynomial._handle_error import HandleError

from ._polynomial import Polynomial


def polynomial_destroy(p: Optional[Polynomial]) -> None:
    """Release the coefficient buffer owned by p.

    Parameters
    ----------
    p : Polynomial
        Polynomial to release. Any later operation on it raises.

    Raises
    ------
    HandleError
        If p is None or has already been released.
    """
    if p is None:
        raise HandleError("attempting to release a null polynomial")

    p._release()
