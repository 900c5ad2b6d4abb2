"""
Type Definitions for the Geodesy Package.

This module defines the value types that cross the package boundary.

Design Rationale
----------------
Host applications already have their own coordinate types (a platform
location struct, a ``(lat, lon)`` tuple, an ORM row...). Rather than one
set of methods per coordinate type, the solver accepts anything that
*has* a latitude and a longitude (:class:`LatLonLike`) and converts it once
into the single internal representation, :class:`GeodeticPoint`.

Angles in this module are in DEGREES.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

from common.errors import InputValidationError


@runtime_checkable
class LatLonLike(Protocol):
    """Anything exposing ``latitude`` and ``longitude`` in degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True)
class GeodeticPoint:
    """A geodetic position on the ellipsoid surface.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in DEGREES. Range: [-90, 90].
    longitude : float
        Geodetic longitude in DEGREES. Accepted range: [-180, 180].
        Points produced by the solver always have longitude in (-180, 180].

    Notes
    -----
    - Value type: two points are equal iff both components are equal.
    - Longitude is not wrapped on construction; out-of-range input is an
      error, not something to silently fix.

    Examples
    --------
    >>> lax = GeodeticPoint(33.9424964, -118.4080486)
    >>> lax.to_tuple()
    (33.9424964, -118.4080486)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinate ranges."""
        lat = _finite(self.latitude, "Latitude")
        lon = _finite(self.longitude, "Longitude")
        if not -90.0 <= lat <= 90.0:
            raise InputValidationError(
                f"Latitude {lat} deg out of range [-90, 90]. "
                f"Did you swap latitude and longitude?"
            )
        if not -180.0 <= lon <= 180.0:
            raise InputValidationError(
                f"Longitude {lon} deg out of range [-180, 180]."
            )
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    def to_tuple(self) -> Tuple[float, float]:
        """Return ``(latitude, longitude)`` in degrees."""
        return self.latitude, self.longitude

    def to_radians(self) -> Tuple[float, float]:
        """Return ``(latitude, longitude)`` in radians."""
        return math.radians(self.latitude), math.radians(self.longitude)

    @classmethod
    def from_radians(cls, lat_rad: float, lon_rad: float) -> 'GeodeticPoint':
        """Create a point from radians (convenience constructor)."""
        return cls(math.degrees(lat_rad), math.degrees(lon_rad))


@dataclass(frozen=True)
class Waypoint:
    """A sampled position along a geodesic.

    Attributes
    ----------
    point : GeodeticPoint
        The position.
    azimuth : float, optional
        Forward azimuth of the geodesic at ``point`` in degrees, or None
        when the sampler was asked for positions only.
    distance : float, optional
        Distance from the line origin in meters, when known.
    """
    point: GeodeticPoint
    azimuth: Optional[float] = None
    distance: Optional[float] = None

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude


def _finite(value: Any, what: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"{what} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise InputValidationError(f"{what} must be finite, got {number}")
    return number


def as_point(obj: Any) -> GeodeticPoint:
    """Adapt a host coordinate object to a :class:`GeodeticPoint`.

    Parameters
    ----------
    obj : GeodeticPoint, LatLonLike, object with ``lat``/``lon``, or sequence
        Sequences are read as ``(latitude, longitude)``.

    Returns
    -------
    GeodeticPoint
        Validated point.

    Raises
    ------
    InputValidationError
        If the object has no recognisable latitude/longitude, or if the
        values are out of range.
    """
    if isinstance(obj, GeodeticPoint):
        return obj
    if isinstance(obj, LatLonLike):
        return GeodeticPoint(obj.latitude, obj.longitude)
    if hasattr(obj, "lat") and hasattr(obj, "lon"):
        return GeodeticPoint(obj.lat, obj.lon)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if len(obj) != 2:
            raise InputValidationError(
                f"Coordinates were given in an unexpected format: {obj!r}"
            )
        return GeodeticPoint(obj[0], obj[1])
    raise InputValidationError(
        f"Cannot read latitude/longitude from {type(obj).__name__}"
    )
