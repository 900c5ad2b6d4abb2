"""
Geodesy Configuration.

A :class:`GeodesyConfig` gathers the few settings a host application may
want to choose once: the two ellipsoid constants, how azimuths are
presented and how verbose the package logs. It is plain data; building the
numerical objects from it is explicit (:meth:`GeodesyConfig.build_solver`).
"""

import dataclasses
import hashlib
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from common.constants import PhysicalConstants
from common.errors import InputValidationError
from common.logging_config import set_package_level
from geospatial.azimuth import AzimuthMode
from geospatial.ellipsoid import EllipsoidModel
from geospatial.solver import GeodesicSolver


@dataclass(frozen=True)
class GeodesyConfig:
    """Settings for one geodesy setup.

    Attributes
    ----------
    semi_major_axis : float
        Equatorial radius in meters (default: WGS84).
    flattening : float
        Flattening (default: WGS84).
    ellipsoid_name : str
        Label for the ellipsoid.
    azimuth_mode : AzimuthMode
        Range in which azimuths are presented to the application.
    log_level : str
        Level for the package loggers.
    """
    semi_major_axis: float = PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.value
    flattening: float = PhysicalConstants.EARTH_FLATTENING.value
    ellipsoid_name: str = "WGS84"
    azimuth_mode: AzimuthMode = AzimuthMode.SIGNED
    log_level: str = "INFO"

    def __post_init__(self):
        object.__setattr__(self, "azimuth_mode", AzimuthMode.parse(self.azimuth_mode))
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InputValidationError(f"Unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)
        # Fail early on bad ellipsoid constants
        self.build_ellipsoid()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'GeodesyConfig':
        """Build a config from a plain mapping, e.g. parsed JSON.

        Raises
        ------
        InputValidationError
            On unknown keys or invalid values.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InputValidationError(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )
        return cls(**dict(values))

    def to_dict(self) -> Dict[str, Union[str, float]]:
        return {
            "semi_major_axis": self.semi_major_axis,
            "flattening": self.flattening,
            "ellipsoid_name": self.ellipsoid_name,
            "azimuth_mode": self.azimuth_mode.value,
            "log_level": self.log_level,
        }

    def config_hash(self) -> str:
        """Deterministic short hash identifying this configuration."""
        config_str = json.dumps(self.to_dict(), sort_keys=True, default=str)
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    def build_ellipsoid(self) -> EllipsoidModel:
        return EllipsoidModel(a=self.semi_major_axis, f=self.flattening,
                              name=self.ellipsoid_name)

    def build_solver(self) -> GeodesicSolver:
        """Solver on the configured ellipsoid; also applies the log level."""
        set_package_level(self.log_level)
        return GeodesicSolver(self.build_ellipsoid())
