"""
MGRS Grid References.

Conversion between geodetic points and Military Grid Reference System
strings is delegated to the ``mgrs`` library (GEOTRANS under the hood).
This module only adapts the library to the package's point type, error
taxonomy and precision convention:

==========  ===========================
precision   cell size
==========  ===========================
-1          grid zone designator only
0           100 km square
1 .. 5      10 km, 1 km, 100 m, 10 m, 1 m
==========  ===========================
"""

import re
from numbers import Integral
from typing import Any, Optional

import mgrs
from mgrs.core import MGRSError

from common.errors import GridReferenceRangeError, InputValidationError
from common.logging_config import get_logger
from common.types import GeodeticPoint, as_point

logger = get_logger(__name__)

MIN_PRECISION = -1
MAX_PRECISION = 5

# Latitude bands C..X, 8 degrees each from 80S; X runs to 84N
_BANDS = "CDEFGHJKLMNPQRSTUVWX"
_ZONE_ONLY = re.compile(r"^(\d{1,2})([C-HJ-NP-X])$")
# Polar caps (UPS): minimum latitude and longitude of each cap half
_POLAR_CORNERS = {"A": (-90.0, -180.0), "B": (-90.0, 0.0),
                  "Y": (84.0, -180.0), "Z": (84.0, 0.0)}
# Widened or merged zones around Norway and Svalbard: west edge
_IRREGULAR_WEST = {(32, "V"): 3.0, (31, "X"): 0.0, (33, "X"): 9.0,
                   (35, "X"): 21.0, (37, "X"): 33.0}
_MISSING_ZONES = {(32, "X"), (34, "X"), (36, "X")}


class GridReferenceConverter:
    """Convert between :class:`GeodeticPoint` and MGRS strings.

    Examples
    --------
    >>> converter = GridReferenceConverter()
    >>> converter.to_grid_reference((38.8895, -77.0352), precision=0)
    '18SUJ'
    """

    def __init__(self):
        self._mgrs = mgrs.MGRS()

    def to_grid_reference(self, point: Any, precision: int = MAX_PRECISION) -> str:
        """Grid reference of the cell containing ``point``.

        Parameters
        ----------
        point : GeodeticPoint or LatLonLike
            Position in degrees.
        precision : int
            -1 for the grid zone only, 0 for the 100 km square, 1..5 for
            10 km down to 1 m.

        Raises
        ------
        GridReferenceRangeError
            If ``precision`` is outside [-1, 5].
        """
        if isinstance(precision, bool) or not isinstance(precision, Integral):
            raise GridReferenceRangeError(
                f"Grid reference precision must be an integer, got {precision!r}"
            )
        if not MIN_PRECISION <= precision <= MAX_PRECISION:
            raise GridReferenceRangeError(
                f"Grid reference precision {precision} outside "
                f"[{MIN_PRECISION}, {MAX_PRECISION}]"
            )
        p = as_point(point)
        try:
            ref = self._mgrs.toMGRS(p.latitude, p.longitude,
                                    MGRSPrecision=max(precision, 0))
        except MGRSError as e:
            raise InputValidationError(
                f"Cannot express ({p.latitude}, {p.longitude}) as a grid reference: {e}"
            ) from e
        if isinstance(ref, bytes):
            ref = ref.decode("ascii")
        if precision < 0:
            # drop the two-letter 100 km square identifier
            ref = ref[:-2]
        return ref

    def from_grid_reference(self, reference: str) -> GeodeticPoint:
        """South-west corner of the cell named by ``reference``.

        A bare grid zone designator such as ``"18S"`` (precision -1) names
        the whole zone; its south-west corner is returned.

        Raises
        ------
        InputValidationError
            If the string is not a valid grid reference.
        """
        if not isinstance(reference, str) or not reference.strip():
            raise InputValidationError(
                f"Grid reference must be a non-empty string, got {reference!r}"
            )
        text = reference.strip().upper()
        corner = _zone_corner(text)
        if corner is not None:
            logger.debug("Grid zone %s -> (%.1f, %.1f)", text, *corner)
            return GeodeticPoint(*corner)
        try:
            lat, lon = self._mgrs.toLatLon(text)
        except MGRSError as e:
            raise InputValidationError(f"Invalid grid reference {reference!r}: {e}") from e
        logger.debug("Grid reference %s -> (%.6f, %.6f)", reference, lat, lon)
        return GeodeticPoint(lat, lon)


def _zone_corner(text: str) -> Optional[tuple]:
    """South-west corner of a zone-only reference, or None for other strings."""
    if text in _POLAR_CORNERS:
        return _POLAR_CORNERS[text]
    match = _ZONE_ONLY.match(text)
    if match is None:
        return None
    zone, band = int(match.group(1)), match.group(2)
    if not 1 <= zone <= 60 or (zone, band) in _MISSING_ZONES:
        raise InputValidationError(f"No grid zone {text!r}")
    lat = -80.0 + 8.0 * _BANDS.index(band)
    lon = _IRREGULAR_WEST.get((zone, band), -180.0 + 6.0 * (zone - 1))
    return lat, lon


def to_grid_reference(point: Any, precision: int = MAX_PRECISION) -> str:
    """Module-level shortcut for :meth:`GridReferenceConverter.to_grid_reference`."""
    return GridReferenceConverter().to_grid_reference(point, precision)


def from_grid_reference(reference: str) -> GeodeticPoint:
    """Module-level shortcut for :meth:`GridReferenceConverter.from_grid_reference`."""
    return GridReferenceConverter().from_grid_reference(reference)
