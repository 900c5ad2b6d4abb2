# tests/test_distance_calculations.py
import numpy as np
import pytest

from common.errors import InputValidationError
from geospatial.azimuth import AzimuthMode
from geospatial.distance_calculations import (
    compute_azimuth,
    compute_heading_change,
    geodesic_direct,
    geodesic_distance,
    geodesic_distance_batch,
    geodesic_inverse,
    interpolate_geodesic,
)

LAX = (33.9424964, -118.4080486)
JFK = (40.6399278, -73.7786925)


def test_geodesic_distance_lax_jfk():
    assert geodesic_distance(*LAX, *JFK) == pytest.approx(3982961, abs=1)


def test_inverse_and_direct_agree():
    inverse = geodesic_inverse(*LAX, *JFK)
    direct = geodesic_direct(*LAX, inverse.initial_azimuth, inverse.distance)
    assert direct.destination.latitude == pytest.approx(JFK[0], abs=1e-9)
    assert direct.destination.longitude == pytest.approx(JFK[1], abs=1e-9)


def test_compass_mode_on_facade():
    signed = compute_azimuth(*JFK, *LAX)
    compass = compute_azimuth(*JFK, *LAX, azimuth_mode=AzimuthMode.COMPASS)
    assert signed < 0
    assert compass == pytest.approx(signed + 360.0)
    direct = geodesic_direct(0.0, 0.0, 270.0, 1000.0, azimuth_mode=AzimuthMode.COMPASS)
    assert direct.final_azimuth == pytest.approx(270.0)


def test_batch_matches_scalar():
    lat1 = np.array([0.0, 10.0, LAX[0]])
    lon1 = np.array([0.0, 20.0, LAX[1]])
    lat2 = np.array([0.0, -30.0, JFK[0]])
    lon2 = np.array([1.0, 100.0, JFK[1]])
    distances = geodesic_distance_batch(lat1, lon1, lat2, lon2)
    expected = [geodesic_distance(a, b, c, d) for a, b, c, d in zip(lat1, lon1, lat2, lon2)]
    assert distances.dtype == np.float64
    assert distances == pytest.approx(expected)


def test_batch_broadcasts_one_to_many():
    lat2 = np.array([[1.0, 2.0], [3.0, 4.0]])
    distances = geodesic_distance_batch(0.0, 0.0, lat2, 0.0)
    assert distances.shape == (2, 2)
    assert distances[0, 0] < distances[1, 1]


def test_interpolate_includes_endpoints():
    lats, lons = interpolate_geodesic(*LAX, *JFK, num_points=5)
    assert lats.shape == lons.shape == (5,)
    assert (lats[0], lons[0]) == LAX
    assert (lats[-1], lons[-1]) == JFK
    midpoint = geodesic_direct(*LAX, compute_azimuth(*LAX, *JFK), geodesic_distance(*LAX, *JFK) / 2)
    assert lats[2] == pytest.approx(midpoint.destination.latitude, abs=1e-9)
    assert lons[2] == pytest.approx(midpoint.destination.longitude, abs=1e-9)


def test_interpolate_needs_two_points():
    with pytest.raises(InputValidationError):
        interpolate_geodesic(*LAX, *JFK, num_points=1)


@pytest.mark.parametrize("h1, h2, expected", [
    (10.0, 30.0, 20.0),
    (350.0, 10.0, 20.0),
    (10.0, 350.0, -20.0),
    (179.0, -179.0, 2.0),
    (0.0, 180.0, 180.0),
])
def test_heading_change(h1, h2, expected):
    assert compute_heading_change(h1, h2) == pytest.approx(expected)
