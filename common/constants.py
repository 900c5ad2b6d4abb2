"""
Physical Constants for Ellipsoidal Geodesy.

Only the two defining constants of WGS84 enter the computation. The
derived values are tabulated alongside them, with the figures published
in the standard, so that the numbers the solver derives can be checked
against an authoritative source.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Unit conversions: IEEE/ASTM SI 10-2016
"""

from dataclasses import dataclass
from typing import Dict, Final

_TR8350 = "WGS84, NIMA TR8350.2"


@dataclass(frozen=True)
class Constant:
    """A tabulated constant and where it comes from.

    Attributes
    ----------
    value : float
        Tabulated value.
    unit : str
        SI unit, or "1" for dimensionless numbers.
    source : str
        Reference for the value.
    description : str
        What the constant is.
    uncertainty : float
        Rounding of the tabulated figure; 0 for defined values.
    """
    value: float
    unit: str
    source: str
    description: str
    uncertainty: float = 0.0

    @property
    def is_exact(self) -> bool:
        return self.uncertainty == 0.0


class PhysicalConstants:
    """Registry of the constants the geodesy package relies on.

    ``EARTH_SEMI_MAJOR_AXIS`` and ``EARTH_FLATTENING`` define the
    ellipsoid; the rest are derived and listed for cross-checking.
    """

    # Defining constants
    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        6_378_137.0, "m", _TR8350, "Equatorial radius a")
    EARTH_FLATTENING: Final[Constant] = Constant(
        1.0 / 298.257223563, "1", _TR8350, "Flattening f = (a - b) / a")

    # Derived, as tabulated
    EARTH_SEMI_MINOR_AXIS: Final[Constant] = Constant(
        6_356_752.3142, "m", _TR8350 + " table 3.3", "Polar radius b", 1e-4)
    EARTH_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        6.69437999014e-3, "1", _TR8350 + " table 3.3", "First eccentricity squared", 1e-14)
    EARTH_SECOND_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        6.73949674228e-3, "1", _TR8350 + " table 3.3", "Second eccentricity squared", 1e-14)
    EARTH_MEAN_RADIUS: Final[Constant] = Constant(
        6_371_008.7714, "m", _TR8350 + " table 3.5", "Arithmetic mean radius R1", 1e-4)

    # Unit conversions
    NAUTICAL_MILE_TO_M: Final[Constant] = Constant(
        1852.0, "m", "IEEE/ASTM SI 10-2016", "Meters per international nautical mile")

    @classmethod
    def as_dict(cls) -> Dict[str, Constant]:
        """All registered constants by name."""
        return {
            name: value for name, value in vars(cls).items()
            if isinstance(value, Constant)
        }
