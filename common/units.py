"""
Unit Registry for Geodesic Inputs.

This module provides a centralized unit system using the `pint` library.
The numerical core works in meters and degrees throughout; callers may
pass either bare numbers (interpreted in those units) or pint quantities,
which are converted at the boundary. A quantity with the wrong
dimensionality is rejected before any geodesic computation starts.

Example Usage
-------------
>>> from common.units import Q_, to_meters
>>> to_meters(Q_(12, 'nautical_mile'))
22224.0
"""

import math
from numbers import Real
from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.errors import InputValidationError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

LengthLike = Union[float, int, pint.Quantity]
AngleLike = Union[float, int, pint.Quantity]


def _convert(value, target_unit: str, what: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            magnitude = value.to(target_unit).magnitude
        except pint.DimensionalityError as e:
            raise InputValidationError(
                f"{what} has incompatible units. "
                f"Expected something convertible to {target_unit}, got {value.units}"
            ) from e
    elif isinstance(value, Real) and not isinstance(value, bool):
        magnitude = value
    else:
        raise InputValidationError(
            f"{what} must be a number or a pint quantity, got {type(value).__name__}"
        )

    magnitude = float(magnitude)
    if not math.isfinite(magnitude):
        raise InputValidationError(f"{what} must be finite, got {magnitude}")
    return magnitude


def to_meters(value: LengthLike, what: str = "Distance") -> float:
    """Convert a length to meters.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare numbers are taken to already be in meters.
    what : str
        Name used in error messages.

    Returns
    -------
    float
        The length in meters.

    Raises
    ------
    InputValidationError
        If the value is not finite or is not a length.
    """
    return _convert(value, "meter", what)


def to_degrees(value: AngleLike, what: str = "Angle") -> float:
    """Convert an angle to degrees.

    Bare numbers are taken to already be in degrees.
    """
    return _convert(value, "degree", what)

