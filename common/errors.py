"""
Error taxonomy for the geodesy package.

Every failure is reported synchronously to the immediate caller. The
computations are deterministic, so nothing here is meant to be retried:
an operation either returns a complete result or raises one of these.

Hierarchy
---------
GeodesyError
    InputValidationError (also a ValueError)
        GridReferenceRangeError
    ConvergenceError (also an ArithmeticError)
    PreconditionError (also a RuntimeError)
"""

from typing import Optional


class GeodesyError(Exception):
    """Base class for all errors raised by this package."""


class InputValidationError(GeodesyError, ValueError):
    """An argument is outside its declared domain.

    Raised for out-of-range latitudes and longitudes, non-finite numbers,
    non-positive sampling spacing or count, invalid ellipsoid constants
    and quantities with incompatible units. Always raised before any
    numerical work starts.
    """


class GridReferenceRangeError(InputValidationError):
    """Grid reference precision outside the supported range."""


class ConvergenceError(GeodesyError, ArithmeticError):
    """The inverse-problem iteration did not converge.

    Attributes
    ----------
    iterations : int
        Number of iterations performed before giving up.
    residual : float, optional
        Longitude residual (radians) of the last iterate.
    """

    def __init__(self, message: str, iterations: int, residual: Optional[float] = None):
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual


class PreconditionError(GeodesyError, RuntimeError):
    """An operation was requested on an object that cannot support it.

    For example, asking for a fractional position on a geodesic line
    that was set up from an azimuth and therefore has no total length.
    """
