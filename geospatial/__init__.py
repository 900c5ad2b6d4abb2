"""
Ellipsoidal Geodesy.

All Earth-surface geometry of the package lives here: the direct and
inverse geodesic problems on the WGS84 ellipsoid, geodesic lines and the
waypoints sampled from them.

This module provides:
- The reference ellipsoid model
- The geodesic solver and geodesic lines
- Waypoint sampling
- Azimuth presentation (signed or compass)
- MGRS grid references
- Degree-based convenience functions
"""

from geospatial.ellipsoid import EllipsoidModel, WGS84Ellipsoid

from geospatial.solver import (
    DirectResult,
    GeodesicSolver,
    InverseResult,
)
from geospatial.geodesic_line import GeodesicLine
from geospatial.waypoints import WaypointSampler
from geospatial.azimuth import AzimuthMode, apply_azimuth_mode, format_azimuth
from geospatial.config import GeodesyConfig
from geospatial.grid_reference import (
    GridReferenceConverter,
    from_grid_reference,
    to_grid_reference,
)

from geospatial.distance_calculations import (
    compute_azimuth,
    compute_heading_change,
    geodesic_direct,
    geodesic_distance,
    geodesic_distance_batch,
    geodesic_inverse,
    interpolate_geodesic,
)

__all__ = [
    # Ellipsoid
    "EllipsoidModel",
    "WGS84Ellipsoid",
    # Solver
    "GeodesicSolver",
    "GeodesicLine",
    "InverseResult",
    "DirectResult",
    "WaypointSampler",
    # Presentation
    "AzimuthMode",
    "format_azimuth",
    "apply_azimuth_mode",
    # Configuration
    "GeodesyConfig",
    # Grid references
    "GridReferenceConverter",
    "to_grid_reference",
    "from_grid_reference",
    # Distance calculations
    "geodesic_inverse",
    "geodesic_direct",
    "geodesic_distance",
    "geodesic_distance_batch",
    "compute_azimuth",
    "interpolate_geodesic",
    "compute_heading_change",
]
