# tests/test_constants.py
import pytest

from common.constants import PhysicalConstants
from common.units import Q_, to_meters
from geospatial.ellipsoid import WGS84Ellipsoid


def test_defining_constants_are_exact():
    assert PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.is_exact
    assert PhysicalConstants.EARTH_FLATTENING.is_exact
    assert not PhysicalConstants.EARTH_SEMI_MINOR_AXIS.is_exact


@pytest.mark.parametrize("name, derived", [
    ("EARTH_SEMI_MINOR_AXIS", WGS84Ellipsoid.b),
    ("EARTH_ECCENTRICITY_SQUARED", WGS84Ellipsoid.e2),
    ("EARTH_SECOND_ECCENTRICITY_SQUARED", WGS84Ellipsoid.ep2),
    ("EARTH_MEAN_RADIUS", WGS84Ellipsoid.mean_radius),
])
def test_derived_values_match_tabulated(name, derived):
    constant = PhysicalConstants.as_dict()[name]
    assert derived == pytest.approx(constant.value, abs=constant.uncertainty)


def test_nautical_mile_matches_unit_registry():
    assert to_meters(Q_(1, "nautical_mile")) == pytest.approx(
        PhysicalConstants.NAUTICAL_MILE_TO_M.value)
