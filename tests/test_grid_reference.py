# tests/test_grid_reference.py
import pytest

from common.errors import GridReferenceRangeError, InputValidationError
from common.types import GeodeticPoint
from geospatial.grid_reference import (
    GridReferenceConverter,
    from_grid_reference,
    to_grid_reference,
)

WASHINGTON_MONUMENT = GeodeticPoint(38.8895, -77.0352)


@pytest.fixture
def converter():
    return GridReferenceConverter()


def test_precision_levels(converter):
    assert converter.to_grid_reference(WASHINGTON_MONUMENT, -1) == "18S"
    assert converter.to_grid_reference(WASHINGTON_MONUMENT, 0) == "18SUJ"
    one_meter = converter.to_grid_reference(WASHINGTON_MONUMENT, 5)
    assert one_meter.startswith("18SUJ")
    assert len(one_meter) == len("18SUJ") + 10


def test_each_precision_step_adds_two_digits(converter):
    lengths = [len(converter.to_grid_reference(WASHINGTON_MONUMENT, p)) for p in range(0, 6)]
    assert lengths == [5, 7, 9, 11, 13, 15]


@pytest.mark.parametrize("precision", [-2, 6, 2.0, True])
def test_precision_out_of_range(converter, precision):
    with pytest.raises(GridReferenceRangeError):
        converter.to_grid_reference(WASHINGTON_MONUMENT, precision)


def test_range_error_is_validation_error():
    assert issubclass(GridReferenceRangeError, InputValidationError)


def test_round_trip_within_cell(converter):
    reference = converter.to_grid_reference(WASHINGTON_MONUMENT, 5)
    corner = converter.from_grid_reference(reference)
    assert isinstance(corner, GeodeticPoint)
    assert corner.latitude == pytest.approx(WASHINGTON_MONUMENT.latitude, abs=1e-4)
    assert corner.longitude == pytest.approx(WASHINGTON_MONUMENT.longitude, abs=1e-4)


def test_module_shortcuts():
    reference = to_grid_reference((38.8895, -77.0352), 3)
    assert reference.startswith("18SUJ")
    point = from_grid_reference(reference)
    assert point.latitude == pytest.approx(38.8895, abs=0.01)


@pytest.mark.parametrize("reference", ["", "   ", None])
def test_empty_reference_rejected(converter, reference):
    with pytest.raises(InputValidationError):
        converter.from_grid_reference(reference)


@pytest.mark.parametrize("reference, corner", [
    ("18S", (32.0, -78.0)),
    ("18s", (32.0, -78.0)),
    ("1C", (-80.0, -180.0)),
    ("60X", (72.0, 174.0)),
    ("32V", (56.0, 3.0)),
    ("31X", (72.0, 0.0)),
    ("Z", (84.0, 0.0)),
])
def test_zone_only_reference_gives_south_west_corner(converter, reference, corner):
    point = converter.from_grid_reference(reference)
    assert (point.latitude, point.longitude) == corner


def test_zone_precision_round_trip(converter):
    zone = converter.to_grid_reference(WASHINGTON_MONUMENT, -1)
    corner = converter.from_grid_reference(zone)
    assert converter.to_grid_reference(corner, -1) == zone
    assert corner.latitude <= WASHINGTON_MONUMENT.latitude < corner.latitude + 8
    assert corner.longitude <= WASHINGTON_MONUMENT.longitude < corner.longitude + 6


@pytest.mark.parametrize("reference", ["0S", "61S", "32X", "36X"])
def test_invalid_reference_rejected(converter, reference):
    with pytest.raises(InputValidationError):
        converter.from_grid_reference(reference)
