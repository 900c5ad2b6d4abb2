# tests/conftest.py
import pytest
from pyproj import Geod

from common.types import GeodeticPoint
from geospatial.solver import GeodesicSolver


@pytest.fixture(scope="session")
def solver():
    return GeodesicSolver()


@pytest.fixture(scope="session")
def reference_geod():
    """Independent GeographicLib implementation used as an oracle."""
    return Geod(ellps="WGS84")


@pytest.fixture
def lax():
    return GeodeticPoint(33.9424964, -118.4080486)


@pytest.fixture
def jfk():
    return GeodeticPoint(40.6399278, -73.7786925)


@pytest.fixture
def lax_jfk_line(solver, lax, jfk):
    return solver.inverse_line(lax, jfk)
