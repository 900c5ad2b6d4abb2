"""
Azimuth Presentation.

The solver always produces azimuths in (-180, 180], clockwise from north.
Navigation displays usually want compass bearings in [0, 360) instead.
The conversion is a pure presentation step: it is applied to results by
the caller with an explicit :class:`AzimuthMode`, never by changing how
the solver computes.
"""

import dataclasses
import math
from enum import Enum
from typing import TypeVar, Union

from common.errors import InputValidationError
from geospatial.geomath import ang_normalize

T = TypeVar("T")

_AZIMUTH_FIELDS = ("azimuth", "initial_azimuth", "final_azimuth")


class AzimuthMode(Enum):
    """Range in which azimuths are reported."""
    SIGNED = "signed"      # (-180, 180]
    COMPASS = "compass"    # [0, 360)

    @classmethod
    def parse(cls, value: Union['AzimuthMode', str]) -> 'AzimuthMode':
        """Accept a mode or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            names = ", ".join(m.value for m in cls)
            raise InputValidationError(
                f"Unknown azimuth mode {value!r}; expected one of {names}"
            ) from e


def format_azimuth(value: float, mode: AzimuthMode = AzimuthMode.SIGNED) -> float:
    """Reduce an azimuth in degrees to the range of ``mode``.

    Parameters
    ----------
    value : float
        Azimuth in degrees, any finite value.
    mode : AzimuthMode
        SIGNED gives (-180, 180], COMPASS gives [0, 360).

    Returns
    -------
    float
        The azimuth in the requested range.

    Examples
    --------
    >>> format_azimuth(-90.0, AzimuthMode.COMPASS)
    270.0
    >>> format_azimuth(270.0, AzimuthMode.SIGNED)
    -90.0
    """
    if not math.isfinite(value):
        raise InputValidationError(f"Azimuth must be finite, got {value}")
    mode = AzimuthMode.parse(mode)
    signed = ang_normalize(value)
    if mode is AzimuthMode.SIGNED:
        return signed
    compass = signed + 360.0 if signed < 0 else signed
    # -1e-17 + 360 rounds to 360
    if compass >= 360.0:
        compass = 0.0
    return compass + 0.0


def apply_azimuth_mode(result: T, mode: AzimuthMode) -> T:
    """Copy of a result dataclass with its azimuth fields in ``mode``.

    Works on any dataclass instance with ``azimuth``, ``initial_azimuth``
    or ``final_azimuth`` fields (InverseResult, DirectResult, Waypoint).
    Fields set to None are left alone.
    """
    if not dataclasses.is_dataclass(result) or isinstance(result, type):
        raise InputValidationError(
            f"Cannot present azimuths of {type(result).__name__}"
        )
    changes = {}
    for field in dataclasses.fields(result):
        if field.name in _AZIMUTH_FIELDS:
            value = getattr(result, field.name)
            if value is not None:
                changes[field.name] = format_azimuth(value, mode)
    return dataclasses.replace(result, **changes)
