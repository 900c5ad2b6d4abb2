"""
Geodesic Distance Calculations on the WGS84 Ellipsoid.

Convenience functions over a shared WGS84 :class:`GeodesicSolver`, taking
and returning plain degrees and meters. These calculations are valid for
any pair of points, from meters apart to antipodal.

Implementation
--------------
Each call goes through one module-level solver; the ellipsoid series
tables are therefore built once per process. Points are validated on the
way in exactly as for :class:`GeodesicSolver` itself, so out-of-range
coordinates raise :class:`~common.errors.InputValidationError`.

Azimuths are returned in (-180, 180] unless an explicit
``azimuth_mode`` asks for compass bearings.
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.errors import InputValidationError
from geospatial.azimuth import AzimuthMode, apply_azimuth_mode, format_azimuth
from geospatial.geomath import ang_diff
from geospatial.solver import DirectResult, GeodesicSolver, InverseResult


# Shared solver for WGS84; immutable, so safe to use from any thread
_wgs84_solver = GeodesicSolver()


def geodesic_inverse(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float,
    azimuth_mode: AzimuthMode = AzimuthMode.SIGNED,
) -> InverseResult:
    """Solve the inverse geodesic problem.

    Given two points, find the distance and azimuths between them.

    Parameters
    ----------
    lat1_deg, lon1_deg : float
        First point in degrees.
    lat2_deg, lon2_deg : float
        Second point in degrees.
    azimuth_mode : AzimuthMode
        Range of the returned azimuths.

    Returns
    -------
    InverseResult
        Distance in meters, initial and final azimuths in degrees.

    Examples
    --------
    >>> # Los Angeles to New York (JFK)
    >>> result = geodesic_inverse(33.9424964, -118.4080486, 40.6399278, -73.7786925)
    >>> print(f"Distance: {result.distance / 1000:.0f} km")
    Distance: 3983 km
    """
    result = _wgs84_solver.inverse((lat1_deg, lon1_deg), (lat2_deg, lon2_deg))
    return apply_azimuth_mode(result, azimuth_mode)


def geodesic_direct(
    lat1_deg: float,
    lon1_deg: float,
    azimuth_deg: float,
    distance_m: float,
    azimuth_mode: AzimuthMode = AzimuthMode.SIGNED,
) -> DirectResult:
    """Solve the direct geodesic problem.

    Given a starting point, azimuth, and distance, find the endpoint.

    Parameters
    ----------
    lat1_deg, lon1_deg : float
        Starting point in degrees.
    azimuth_deg : float
        Forward azimuth in degrees (clockwise from north).
    distance_m : float
        Distance to travel in meters; may be negative.
    azimuth_mode : AzimuthMode
        Range of the returned final azimuth.

    Returns
    -------
    DirectResult
        Destination and forward azimuth there.
    """
    result = _wgs84_solver.direct((lat1_deg, lon1_deg), azimuth_deg, distance_m)
    return apply_azimuth_mode(result, azimuth_mode)


def geodesic_distance(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float
) -> float:
    """Compute geodesic distance between two points in meters."""
    return geodesic_inverse(lat1_deg, lon1_deg, lat2_deg, lon2_deg).distance


def geodesic_distance_batch(
    lat1_deg: NDArray[np.float64],
    lon1_deg: NDArray[np.float64],
    lat2_deg: NDArray[np.float64],
    lon2_deg: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Compute geodesic distances for arrays of point pairs.

    Parameters
    ----------
    lat1_deg, lon1_deg : array_like
        First points in degrees.
    lat2_deg, lon2_deg : array_like
        Second points in degrees.

    Returns
    -------
    ndarray
        Geodesic distances in meters, with the broadcast shape of the
        inputs.

    Notes
    -----
    Inputs are broadcast against each other, so one point against many
    works as expected.
    """
    lat1, lon1, lat2, lon2 = np.broadcast_arrays(
        np.asarray(lat1_deg, dtype=np.float64),
        np.asarray(lon1_deg, dtype=np.float64),
        np.asarray(lat2_deg, dtype=np.float64),
        np.asarray(lon2_deg, dtype=np.float64),
    )
    distances = np.empty(lat1.shape, dtype=np.float64)
    for index in np.ndindex(lat1.shape):
        distances[index] = _wgs84_solver.inverse(
            (float(lat1[index]), float(lon1[index])),
            (float(lat2[index]), float(lon2[index])),
        ).distance
    return distances


def compute_azimuth(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float,
    azimuth_mode: AzimuthMode = AzimuthMode.SIGNED,
) -> float:
    """Compute the forward azimuth from point 1 to point 2 in degrees."""
    return geodesic_inverse(lat1_deg, lon1_deg, lat2_deg, lon2_deg,
                            azimuth_mode).initial_azimuth


def interpolate_geodesic(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float,
    num_points: int
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Interpolate points along a geodesic between two endpoints.

    Parameters
    ----------
    lat1_deg, lon1_deg : float
        First point in degrees.
    lat2_deg, lon2_deg : float
        Second point in degrees.
    num_points : int
        Number of points including endpoints, >= 2.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (latitudes_deg, longitudes_deg) arrays of interpolated points.

    Notes
    -----
    Points are equally spaced in distance along the geodesic. The end
    points are returned exactly as given.
    """
    if num_points < 2:
        raise InputValidationError(
            f"num_points must be at least 2 to include both endpoints, got {num_points}"
        )
    line = _wgs84_solver.inverse_line((lat1_deg, lon1_deg), (lat2_deg, lon2_deg))
    distances = np.linspace(0, line.distance, num_points)

    lats = np.zeros(num_points)
    lons = np.zeros(num_points)

    lats[0] = lat1_deg
    lons[0] = lon1_deg
    lats[-1] = lat2_deg
    lons[-1] = lon2_deg

    for i in range(1, num_points - 1):
        waypoint = line.position(float(distances[i]))
        lats[i] = waypoint.latitude
        lons[i] = waypoint.longitude

    return lats, lons


def compute_heading_change(
    heading1_deg: float,
    heading2_deg: float
) -> float:
    """Compute the signed change in heading (turn angle).

    Parameters
    ----------
    heading1_deg : float
        Initial heading in degrees, in any range.
    heading2_deg : float
        Final heading in degrees, in any range.

    Returns
    -------
    float
        Signed heading change in degrees.
        Positive = clockwise (rightward) turn.
        Negative = counterclockwise (leftward) turn.
        Range: (-180, 180]
    """
    delta, _ = ang_diff(heading1_deg, heading2_deg)
    return format_azimuth(delta, AzimuthMode.SIGNED)
