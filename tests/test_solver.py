# tests/test_solver.py
import logging
import math

import pytest

from common.errors import ConvergenceError, InputValidationError
from common.types import GeodeticPoint
from common.units import Q_
from geospatial import geomath as gm
from geospatial import solver as solver_module
from geospatial.ellipsoid import EllipsoidModel
from geospatial.solver import GeodesicSolver

# (lat1, lon1, lat2, lon2)
REFERENCE_PAIRS = [
    (33.9424964, -118.4080486, 40.6399278, -73.7786925),  # LAX - JFK
    (40.7128, -74.0060, 51.5074, -0.1278),                # New York - London
    (-33.8688, 151.2093, 51.5074, -0.1278),               # Sydney - London
    (10.0, 20.0, -30.0, 20.0),                            # meridional
    (0.0, 0.0, 0.0, 179.5),                               # equatorial, past the equatorial limit
    (0.0, 0.0, 0.0, 45.0),                                # equatorial
    (0.0, 0.0, 0.5, 179.5),                               # nearly antipodal
    (-30.0, 0.0, 29.9, 179.8),                            # nearly antipodal
    (89.9, 10.0, -89.8, -170.0),                          # near both poles
    (90.0, 0.0, 10.0, 45.0),                              # from the pole
    (1.0, 2.0, 1.0000001, 2.0000001),                     # very short
    (-45.0, 170.0, -44.0, -170.0),                        # across the antimeridian
]


def _final_azimuth(back_azimuth):
    return gm.ang_normalize(back_azimuth + 180.0)


def _azimuth_gap(a, b):
    d, e = gm.ang_diff(a, b)
    return abs(d + e)


def test_lax_jfk_distance(solver, lax, jfk):
    """Distance LAX to JFK on WGS84 is 3,982,961 m to the meter"""
    result = solver.inverse(lax, jfk)
    assert result.distance == pytest.approx(3982961, abs=1)


@pytest.mark.parametrize("lat1, lon1, lat2, lon2", REFERENCE_PAIRS)
def test_inverse_matches_reference(solver, reference_geod, lat1, lon1, lat2, lon2):
    result = solver.inverse((lat1, lon1), (lat2, lon2))
    az12, az21, dist = reference_geod.inv(lon1, lat1, lon2, lat2)

    assert result.distance == pytest.approx(dist, abs=1e-6)
    assert _azimuth_gap(result.initial_azimuth, az12) < 1e-8
    assert _azimuth_gap(result.final_azimuth, _final_azimuth(az21)) < 1e-8


@pytest.mark.parametrize("lat1, lon1, lat2, lon2", REFERENCE_PAIRS)
def test_direct_matches_reference(solver, reference_geod, lat1, lon1, lat2, lon2):
    azimuth, _, distance = reference_geod.inv(lon1, lat1, lon2, lat2)
    result = solver.direct((lat1, lon1), azimuth, distance)
    lon_ref, lat_ref, back_ref = reference_geod.fwd(lon1, lat1, azimuth, distance)

    assert result.destination.latitude == pytest.approx(lat_ref, abs=1e-10)
    assert _azimuth_gap(result.destination.longitude, lon_ref) < 1e-10
    assert _azimuth_gap(result.final_azimuth, _final_azimuth(back_ref)) < 1e-8


def test_exactly_antipodal_points_converge(solver, reference_geod):
    result = solver.inverse((0.0, 0.0), (0.0, 180.0))
    _, _, dist = reference_geod.inv(0.0, 0.0, 180.0, 0.0)
    assert result.distance == pytest.approx(dist, abs=1e-6)
    assert result.distance == pytest.approx(20003931.4586, abs=1e-3)


@pytest.mark.parametrize("lat1, lon1, lat2, lon2", REFERENCE_PAIRS)
def test_inverse_is_symmetric(solver, lat1, lon1, lat2, lon2):
    forward = solver.inverse((lat1, lon1), (lat2, lon2))
    backward = solver.inverse((lat2, lon2), (lat1, lon1))
    assert backward.distance == pytest.approx(forward.distance, rel=1e-13, abs=1e-9)
    # reversing the path reverses the azimuths
    assert _azimuth_gap(backward.initial_azimuth, forward.final_azimuth + 180.0) < 1e-8
    assert _azimuth_gap(backward.final_azimuth, forward.initial_azimuth + 180.0) < 1e-8


@pytest.mark.parametrize("lat1, lon1, lat2, lon2", REFERENCE_PAIRS[:4])
def test_direct_inverts_inverse(solver, lat1, lon1, lat2, lon2):
    inverse = solver.inverse((lat1, lon1), (lat2, lon2))
    direct = solver.direct((lat1, lon1), inverse.initial_azimuth, inverse.distance)
    assert direct.destination.latitude == pytest.approx(lat2, abs=1e-9)
    assert _azimuth_gap(direct.destination.longitude, lon2) < 1e-9
    assert _azimuth_gap(direct.final_azimuth, inverse.final_azimuth) < 1e-8


# (lat1, lon1, azimuth, distance), distances below half a meridian
DIRECT_CASES = [
    (0.0, 0.0, 30.0, 5_000_000.0),
    (45.0, 10.0, -120.0, 9_000_000.0),
    (-60.0, 100.0, 170.0, 1_200_000.0),
    (10.0, -170.0, 89.0, 7_500_000.0),
    (0.0, 0.0, 90.0, 1_000_000.0),
    (89.0, 0.0, 45.0, 3_000_000.0),
    (-20.0, 35.0, -5.0, 9_900_000.0),
]


@pytest.mark.parametrize("lat1, lon1, azimuth, distance", DIRECT_CASES)
def test_inverse_recovers_direct(solver, lat1, lon1, azimuth, distance):
    direct = solver.direct((lat1, lon1), azimuth, distance)
    inverse = solver.inverse((lat1, lon1), direct.destination)
    assert inverse.distance == pytest.approx(distance, abs=1e-6)
    assert _azimuth_gap(inverse.initial_azimuth, azimuth) < 1e-8
    assert _azimuth_gap(inverse.final_azimuth, direct.final_azimuth) < 1e-8


def test_nearly_antipodal_inverse_converges(solver):
    result = solver.inverse((-30.0, 0.0), (29.9, 179.8))
    assert result.distance == pytest.approx(19989832.83, abs=0.01)
    line = solver.inverse_line((-30.0, 0.0), (29.9, 179.8))
    assert line.distance == pytest.approx(result.distance, abs=1e-6)


def test_coincident_points(solver):
    result = solver.inverse((12.5, -45.0), (12.5, -45.0))
    assert result.distance == 0.0
    assert result.initial_azimuth == 0.0
    assert result.final_azimuth == 0.0


def test_both_points_at_pole(solver):
    result = solver.inverse((90.0, 0.0), (90.0, 50.0))
    assert result.distance == 0.0
    assert result.initial_azimuth == 0.0


def test_azimuths_are_signed(solver):
    result = solver.inverse((0.0, 10.0), (0.0, 0.0))
    assert result.initial_azimuth == pytest.approx(-90.0)
    for pair in REFERENCE_PAIRS:
        r = solver.inverse(pair[:2], pair[2:])
        assert -180.0 < r.initial_azimuth <= 180.0
        assert -180.0 < r.final_azimuth <= 180.0


def test_azimuth_due_south_is_180(solver):
    result = solver.inverse((10.0, 0.0), (-10.0, -1e-17))
    assert result.initial_azimuth == 180.0
    assert result.final_azimuth == 180.0


def test_direct_due_east_along_equator(solver):
    result = solver.direct((0.0, 0.0), 90.0, 1_000_000)
    expected = math.degrees(1_000_000 / solver.ellipsoid.a)
    assert result.destination.latitude == pytest.approx(0.0, abs=1e-12)
    assert result.destination.longitude == pytest.approx(expected, abs=1e-12)
    assert result.final_azimuth == pytest.approx(90.0)


def test_negative_distance_goes_backwards(solver):
    backwards = solver.direct((20.0, 30.0), 45.0, -500_000)
    reversed_azimuth = solver.direct((20.0, 30.0), -135.0, 500_000)
    assert backwards.destination.latitude == pytest.approx(
        reversed_azimuth.destination.latitude, abs=1e-9)
    assert backwards.destination.longitude == pytest.approx(
        reversed_azimuth.destination.longitude, abs=1e-9)


def test_distance_beyond_circumference(solver):
    circumference = 2 * math.pi * solver.ellipsoid.a
    result = solver.direct((0.0, 0.0), 90.0, 10 * circumference)
    assert result.destination.latitude == pytest.approx(0.0, abs=1e-9)
    assert abs(result.destination.longitude) < 1e-6


def test_destination_longitude_is_reduced(solver):
    result = solver.direct((0.0, 170.0), 90.0, 2_000_000)
    assert -180.0 < result.destination.longitude <= 180.0
    assert result.destination.longitude < 0


def test_accepts_pint_quantities(solver):
    plain = solver.direct((10.0, 10.0), 30.0, 250_000)
    quantity = solver.direct((10.0, 10.0), Q_(30.0, "degree"), Q_(250, "km"))
    assert quantity.destination.latitude == pytest.approx(plain.destination.latitude, abs=1e-12)
    assert quantity.destination.longitude == pytest.approx(plain.destination.longitude, abs=1e-12)


def test_accepts_host_coordinate_objects(solver, lax, jfk):
    class HostLocation:
        def __init__(self, latitude, longitude):
            self.latitude = latitude
            self.longitude = longitude

    a = solver.inverse(HostLocation(lax.latitude, lax.longitude), jfk.to_tuple())
    b = solver.inverse(lax, jfk)
    assert a == b


@pytest.mark.parametrize("point", [
    (91.0, 0.0),
    (-90.5, 0.0),
    (0.0, 180.5),
    (math.nan, 0.0),
    (0.0, math.inf),
])
def test_invalid_points_rejected(solver, point):
    with pytest.raises(InputValidationError):
        solver.inverse(point, (0.0, 0.0))
    with pytest.raises(InputValidationError):
        solver.direct(point, 0.0, 1000.0)


@pytest.mark.parametrize("azimuth, distance", [
    (math.nan, 1000.0),
    (0.0, math.inf),
    (0.0, math.nan),
    (0.0, Q_(3, "second")),
    ("north", 1000.0),
])
def test_invalid_direct_arguments_rejected(solver, azimuth, distance):
    with pytest.raises(InputValidationError):
        solver.direct((0.0, 0.0), azimuth, distance)


def test_exhausted_iteration_budget_raises(solver, lax, jfk, monkeypatch):
    monkeypatch.setattr(solver_module, "MAXIT2", 0)
    with pytest.raises(ConvergenceError) as excinfo:
        solver.inverse(lax, jfk)
    assert excinfo.value.iterations == 0
    assert isinstance(excinfo.value, ArithmeticError)


def test_sphere_reduces_to_great_circle():
    radius = 6371000.0
    sphere = GeodesicSolver(EllipsoidModel(radius, 0.0, "sphere"))
    lat1, lon1, lat2, lon2 = map(math.radians, (10.0, 20.0, -30.0, 100.0))
    central = math.acos(math.sin(lat1) * math.sin(lat2)
                        + math.cos(lat1) * math.cos(lat2) * math.cos(lon2 - lon1))
    result = sphere.inverse((10.0, 20.0), (-30.0, 100.0))
    assert result.distance == pytest.approx(radius * central, rel=1e-10)
    assert sphere.inverse((0.0, 0.0), (0.0, 90.0)).distance == pytest.approx(
        radius * math.pi / 2, rel=1e-12)


def test_reduced_length_of_short_line_matches_distance(solver):
    result = solver.inverse((0.0, 0.0), (0.001, 0.001))
    assert result.reduced_length == pytest.approx(result.distance, rel=1e-6)


def test_result_point_types(solver):
    result = solver.direct((0.0, 0.0), 0.0, 1000.0)
    assert isinstance(result.destination, GeodeticPoint)


def test_convergence_failure_is_logged(solver, lax, jfk, monkeypatch, caplog):
    monkeypatch.setattr(solver_module, "MAXIT2", 0)
    with caplog.at_level(logging.WARNING, logger="geospatial.solver"):
        with pytest.raises(ConvergenceError):
            solver.inverse(lax, jfk)
    assert "failed to converge" in caplog.text
