# tests/test_ellipsoid.py
import dataclasses
import math

import pytest

from common.errors import InputValidationError
from geospatial.ellipsoid import EllipsoidModel, WGS84Ellipsoid


def test_wgs84_defining_constants():
    assert WGS84Ellipsoid.a == 6378137.0
    assert WGS84Ellipsoid.f == pytest.approx(1 / 298.257223563, rel=1e-15)
    assert WGS84Ellipsoid.name == "WGS84"


def test_wgs84_derived_values():
    assert WGS84Ellipsoid.b == pytest.approx(6356752.314245, abs=1e-6)
    assert WGS84Ellipsoid.e2 == pytest.approx(0.00669437999014, rel=1e-11)
    assert WGS84Ellipsoid.ep2 == pytest.approx(0.00673949674228, rel=1e-11)
    assert WGS84Ellipsoid.n == pytest.approx(WGS84Ellipsoid.f / (2 - WGS84Ellipsoid.f))
    assert WGS84Ellipsoid.mean_radius == pytest.approx(6371008.7714, abs=1e-3)


def test_from_inverse_flattening_matches_wgs84():
    model = EllipsoidModel.from_inverse_flattening(6378137.0, 298.257223563, "WGS84")
    assert model.f == pytest.approx(WGS84Ellipsoid.f, rel=1e-15)


def test_sphere_is_accepted():
    sphere = EllipsoidModel.from_inverse_flattening(6371000.0, math.inf, "sphere")
    assert sphere.is_sphere
    assert sphere.b == sphere.a
    assert sphere.e2 == 0.0


@pytest.mark.parametrize("a, f", [
    (0.0, 0.003),
    (-6378137.0, 0.003),
    (math.nan, 0.003),
    (math.inf, 0.003),
    (6378137.0, 1.0),
    (6378137.0, -0.01),
    (6378137.0, math.nan),
])
def test_invalid_constants_rejected(a, f):
    with pytest.raises(InputValidationError):
        EllipsoidModel(a=a, f=f)


def test_inverse_flattening_must_exceed_one():
    with pytest.raises(InputValidationError):
        EllipsoidModel.from_inverse_flattening(6378137.0, 1.0)


def test_ellipsoid_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        WGS84Ellipsoid.a = 1.0
