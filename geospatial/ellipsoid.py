"""
Reference Ellipsoid Model.

An ellipsoid of revolution is fully defined by two constants, the
equatorial radius ``a`` and the flattening ``f``. Every other quantity the
geodesic solver needs is derived from that pair, so replacing WGS84 by
another oblate ellipsoid is a matter of constructing a different
:class:`EllipsoidModel`.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Oblate ellipsoid of revolution, 0 <= f < 1

The sphere (f = 0) is accepted. All series coefficients of the solver
vanish in that case and the geodesic reduces to a great circle, so no
special code path is needed.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Karney, C.F.F. (2013). Algorithms for geodesics. J. Geodesy 87(1), 43-55.
"""

import math
from dataclasses import dataclass
from functools import cached_property

from common.constants import PhysicalConstants
from common.errors import InputValidationError


@dataclass(frozen=True)
class EllipsoidModel:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = f (2 - f)
    ep2 : float
        Second eccentricity squared: e'² = e² / (1 - e²)
    n : float
        Third flattening: n = f / (2 - f)

    Derived values are computed on first access and cached; the instance
    itself can never change after construction.
    """
    a: float
    f: float
    name: str = "custom"

    def __post_init__(self):
        """Validate the defining constants."""
        if not (isinstance(self.a, (int, float)) and math.isfinite(self.a) and self.a > 0):
            raise InputValidationError(
                f"Equatorial radius must be a finite positive number of meters, got {self.a!r}"
            )
        if not (isinstance(self.f, (int, float)) and math.isfinite(self.f) and 0 <= self.f < 1):
            raise InputValidationError(
                f"Flattening must lie in [0, 1), got {self.f!r}"
            )
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "f", float(self.f))

    @classmethod
    def from_inverse_flattening(cls, a: float, inverse_f: float, name: str = "custom") -> 'EllipsoidModel':
        """Build an ellipsoid from ``a`` and ``1/f`` as usually tabulated.

        An inverse flattening of ``inf`` gives the sphere.
        """
        if not inverse_f > 1:
            raise InputValidationError(
                f"Inverse flattening must be greater than 1, got {inverse_f!r}"
            )
        return cls(a=a, f=1.0 / inverse_f, name=name)

    @property
    def is_sphere(self) -> bool:
        return self.f == 0

    @cached_property
    def f1(self) -> float:
        """Ratio of polar to equatorial radius, 1 - f."""
        return 1.0 - self.f

    @cached_property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * self.f1

    @cached_property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @cached_property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (self.f1 * self.f1)

    @cached_property
    def n(self) -> float:
        """Third flattening, the expansion parameter of the series."""
        return self.f / (2 - self.f)

    @cached_property
    def mean_radius(self) -> float:
        """Arithmetic mean radius R1 = (2a + b) / 3 in meters."""
        return (2 * self.a + self.b) / 3


# WGS84 ellipsoid - the standard reference for this system
WGS84Ellipsoid = EllipsoidModel(
    a=PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=PhysicalConstants.EARTH_FLATTENING.value,
    name="WGS84"
)
