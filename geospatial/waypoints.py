"""
Waypoint Sampling Along a Geodesic.

Route displays and track generators need the geodesic between two points
as a list of intermediate positions. Two sampling rules are supported:

* by spacing: every ``S`` meters from the origin, ``0, S, 2S, ...``,
  stopping strictly before the far end (the end point itself is never
  emitted, since the caller already has it);
* by count: ``count`` points evenly spaced strictly between the ends, at
  ``s13 * k / (count + 1)`` for ``k = 1 .. count``.

Distances are generated with numpy so that the number of samples follows
numpy's half-open ``arange`` rule exactly.
"""

import math
from numbers import Integral
from typing import List

import numpy as np

from common.errors import InputValidationError, PreconditionError
from common.logging_config import get_logger
from common.types import Waypoint
from common.units import LengthLike, to_meters
from geospatial.azimuth import AzimuthMode, apply_azimuth_mode
from geospatial.geodesic_line import GeodesicLine

logger = get_logger(__name__)


class WaypointSampler:
    """Sample waypoints from a :class:`GeodesicLine` with a total length.

    The sampler holds only its presentation options; each call returns a
    new list and nothing is carried over between calls.

    Parameters
    ----------
    include_azimuth : bool
        Attach the forward azimuth at each waypoint (default True). When
        False, waypoints carry ``azimuth=None``.
    azimuth_mode : AzimuthMode
        Range of the attached azimuths (default SIGNED).

    Examples
    --------
    >>> from geospatial.solver import GeodesicSolver
    >>> line = GeodesicSolver().inverse_line((0.0, 0.0), (0.0, 10.0))
    >>> len(WaypointSampler().sample_by_count(line, 9))
    9
    """

    def __init__(self, include_azimuth: bool = True,
                 azimuth_mode: AzimuthMode = AzimuthMode.SIGNED):
        self.include_azimuth = include_azimuth
        self.azimuth_mode = AzimuthMode.parse(azimuth_mode)

    def __repr__(self) -> str:
        return (f"WaypointSampler(include_azimuth={self.include_azimuth!r}, "
                f"azimuth_mode={self.azimuth_mode})")

    def sample_by_spacing(self, line: GeodesicLine, spacing: LengthLike) -> List[Waypoint]:
        """Waypoints every ``spacing`` meters, from the origin up to s13.

        Parameters
        ----------
        line : GeodesicLine
            Line with a total length (from ``inverse_line`` or
            ``direct_line``).
        spacing : float or pint.Quantity
            Distance between consecutive waypoints, > 0.

        Returns
        -------
        List[Waypoint]
            The origin first; the last waypoint lies strictly before s13.
            A zero-length line gives an empty list.

        Raises
        ------
        InputValidationError
            If ``spacing`` is not a positive length.
        PreconditionError
            If the line has no total length.
        """
        step = to_meters(spacing, "Spacing")
        if step <= 0:
            raise InputValidationError(f"Spacing must be positive, got {step} m")
        s13 = self._total_distance(line)
        distances = np.arange(0.0, s13, step)
        logger.debug("Sampling %d waypoints every %.3f m over %.3f m",
                     distances.size, step, s13)
        return self._sample(line, distances)

    def sample_by_count(self, line: GeodesicLine, count: int) -> List[Waypoint]:
        """``count`` waypoints evenly spaced strictly between the ends.

        Raises
        ------
        InputValidationError
            If ``count`` is not a positive integer.
        PreconditionError
            If the line has no total length.
        """
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise InputValidationError(f"Count must be an integer, got {count!r}")
        if count <= 0:
            raise InputValidationError(f"Count must be positive, got {count}")
        s13 = self._total_distance(line)
        increment = s13 / (count + 1)
        distances = np.arange(1, int(count) + 1, dtype=np.float64) * increment
        return self._sample(line, distances)

    @staticmethod
    def _total_distance(line: GeodesicLine) -> float:
        if not line.has_distance:
            raise PreconditionError(
                "Waypoints need a line with a total distance; "
                "use inverse_line or direct_line"
            )
        s13 = line.distance
        if not math.isfinite(s13):
            raise InputValidationError(f"Line distance must be finite, got {s13}")
        return s13

    def _sample(self, line: GeodesicLine, distances: np.ndarray) -> List[Waypoint]:
        waypoints = []
        for s in distances:
            waypoint = line.position(float(s))
            if self.include_azimuth:
                waypoint = apply_azimuth_mode(waypoint, self.azimuth_mode)
            else:
                waypoint = Waypoint(point=waypoint.point, distance=waypoint.distance)
            waypoints.append(waypoint)
        return waypoints
