"""
Common utilities and infrastructure for the geodesy package.

This package provides foundational components used across all modules:
- Physical constants of the reference ellipsoid
- Unit registry and length / angle coercion
- Point and waypoint value types
- Error taxonomy
- Logging configuration
"""

from common.constants import PhysicalConstants
from common.errors import (
    ConvergenceError,
    GeodesyError,
    GridReferenceRangeError,
    InputValidationError,
    PreconditionError,
)
from common.logging_config import get_logger, set_package_level
from common.types import GeodeticPoint, LatLonLike, Waypoint, as_point
from common.units import Q_, to_degrees, to_meters, ureg

__all__ = [
    "PhysicalConstants",
    "GeodesyError",
    "InputValidationError",
    "GridReferenceRangeError",
    "ConvergenceError",
    "PreconditionError",
    "get_logger",
    "set_package_level",
    "GeodeticPoint",
    "LatLonLike",
    "Waypoint",
    "as_point",
    "ureg",
    "Q_",
    "to_meters",
    "to_degrees",
]
