"""
Geodesic Lines.

A :class:`GeodesicLine` is one geodesic fixed by its starting point and
azimuth. Setting it up evaluates every series coefficient that depends
only on the line; a position query afterwards costs a handful of
trigonometric evaluations. Use a line whenever more than one point on the
same geodesic is needed (waypoints, interpolation, plotting).

Positions are evaluated for *any* distance: negative distances go
backwards from the origin and distances beyond the line's total length
keep following the same geodesic. Nothing is clamped to the segment.
"""

import copy
import math
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from common.errors import InputValidationError, PreconditionError
from common.types import GeodeticPoint, Waypoint
from common.units import LengthLike, to_meters
from geospatial import geomath as gm
from geospatial import series

if TYPE_CHECKING:
    from geospatial.ellipsoid import EllipsoidModel
    from geospatial.solver import GeodesicSolver


class GeodesicLine:
    """A geodesic through a point with a given azimuth.

    Instances are normally obtained from
    :meth:`GeodesicSolver.inverse_line`, :meth:`GeodesicSolver.line` or
    :meth:`GeodesicSolver.direct_line`. They are immutable; every
    :meth:`position` call is independent of previous ones.

    Parameters
    ----------
    solver : GeodesicSolver
        Solver whose ellipsoid the line lives on.
    lat1, lon1 : float
        Origin in degrees (already validated).
    azi1 : float
        Azimuth at the origin in degrees.
    salp1, calp1 : float, optional
        Sine and cosine of ``azi1`` when known more accurately than the
        degree value (as after an inverse solution).
    distance : float, optional
        Total length s13 in meters, when the line joins two points.
    arc_length : float, optional
        Total arc length a13 on the auxiliary sphere in degrees.
    """

    def __init__(
        self,
        solver: 'GeodesicSolver',
        lat1: float,
        lon1: float,
        azi1: float,
        salp1: float = math.nan,
        calp1: float = math.nan,
        distance: Optional[float] = None,
        arc_length: Optional[float] = None,
    ):
        self._solver = solver
        self._b = solver.ellipsoid.b
        self._f = solver.ellipsoid.f
        self._f1 = solver.ellipsoid.f1

        self.lat1 = gm.lat_fix(lat1)
        self.lon1 = lon1
        if math.isnan(salp1) or math.isnan(calp1):
            self.azi1 = gm.ang_normalize(azi1)
            self.salp1, self.calp1 = gm.sincosd(gm.ang_round(azi1))
        else:
            self.azi1 = azi1
            self.salp1 = salp1
            self.calp1 = calp1

        self._s13 = distance
        self._a13 = arc_length

        sbet1, cbet1 = gm.sincosd(gm.ang_round(self.lat1))
        sbet1 *= self._f1
        # Ensure cbet1 = +epsilon at poles
        sbet1, cbet1 = gm.norm(sbet1, cbet1)
        cbet1 = max(math.sqrt(gm.MIN_NORMAL), cbet1)
        self._dn1 = math.sqrt(1 + solver.ellipsoid.ep2 * gm.sq(sbet1))

        # alp0 in [0, pi/2 - |bet1|]
        self._salp0 = self.salp1 * cbet1
        self._calp0 = math.hypot(self.calp1, self.salp1 * sbet1)
        # sig = 0 is the nearest northward crossing of the equator;
        # tan(bet1) = tan(sig1) * cos(alp1), tan(omg1) = sin(alp0) * tan(sig1)
        self._ssig1 = sbet1
        self._somg1 = self._salp0 * sbet1
        self._csig1 = self._comg1 = (
            cbet1 * self.calp1 if sbet1 != 0 or self.calp1 != 0 else 1.0)
        self._ssig1, self._csig1 = gm.norm(self._ssig1, self._csig1)

        self._k2 = gm.sq(self._calp0) * solver.ellipsoid.ep2
        eps = self._k2 / (2 * (1 + math.sqrt(1 + self._k2)) + self._k2)

        self._A1m1 = series.a1m1(eps)
        self._C1a = series.new_coefficients(series.N_C1 + 1)
        series.c1(eps, self._C1a)
        self._B11 = gm.sin_cos_series(True, self._ssig1, self._csig1, self._C1a)
        s = math.sin(self._B11)
        c = math.cos(self._B11)
        # tau1 = sig1 + B11
        self._stau1 = self._ssig1 * c + self._csig1 * s
        self._ctau1 = self._csig1 * c - self._ssig1 * s

        self._C1pa = series.new_coefficients(series.N_C1P + 1)
        series.c1p(eps, self._C1pa)

        self._A2m1 = series.a2m1(eps)
        self._C2a = series.new_coefficients(series.N_C2 + 1)
        series.c2(eps, self._C2a)
        self._B21 = gm.sin_cos_series(True, self._ssig1, self._csig1, self._C2a)

        self._C3a = series.new_coefficients(series.N_C3)
        solver._c3f(eps, self._C3a)
        self._A3c = -self._f * self._salp0 * solver._a3f(eps)
        self._B31 = gm.sin_cos_series(True, self._ssig1, self._csig1, self._C3a)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def origin(self) -> GeodeticPoint:
        return GeodeticPoint(self.lat1, self.lon1)

    @property
    def azimuth(self) -> float:
        """Azimuth at the origin in degrees, (-180, 180]."""
        return self.azi1

    @property
    def ellipsoid(self) -> 'EllipsoidModel':
        return self._solver.ellipsoid

    @property
    def distance(self) -> Optional[float]:
        """Total length s13 in meters, or None for an open-ended line."""
        return self._s13

    @property
    def arc_length(self) -> Optional[float]:
        """Total arc length a13 in degrees, or None if not known."""
        return self._a13

    @property
    def has_distance(self) -> bool:
        return self._s13 is not None

    def __repr__(self) -> str:
        return (
            f"GeodesicLine(origin=({self.lat1!r}, {self.lon1!r}), "
            f"azimuth={self.azi1!r}, distance={self._s13!r})"
        )

    def with_distance(self, distance: float) -> 'GeodesicLine':
        """Copy of this line with its total length set to ``distance``."""
        line = copy.copy(self)
        line._s13 = distance
        line._a13 = self.evaluate(distance)[3]
        return line

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, s12: float) -> Tuple[float, float, float, float, float]:
        """Evaluate the line at distance ``s12`` meters from the origin.

        Returns
        -------
        Tuple[float, float, float, float, float]
            (lat2, lon2, azi2, a12, m12): position and forward azimuth in
            degrees, arc length in degrees, reduced length in meters.
        """
        tau12 = s12 / (self._b * (1 + self._A1m1))
        s = math.sin(tau12)
        c = math.cos(tau12)
        # tau2 = tau1 + tau12
        B12 = -gm.sin_cos_series(True,
                                 self._stau1 * c + self._ctau1 * s,
                                 self._ctau1 * c - self._stau1 * s,
                                 self._C1pa)
        sig12 = tau12 - (B12 - self._B11)
        ssig12 = math.sin(sig12)
        csig12 = math.cos(sig12)
        if abs(self._f) > 0.01:
            # The reverted distance series is inaccurate for |f| > 1/100,
            # so correct sig12 with one Newton iteration.
            ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
            csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
            B12 = gm.sin_cos_series(True, ssig2, csig2, self._C1a)
            serr = (1 + self._A1m1) * (sig12 + (B12 - self._B11)) - s12 / self._b
            sig12 = sig12 - serr / math.sqrt(1 + self._k2 * gm.sq(ssig2))
            ssig12 = math.sin(sig12)
            csig12 = math.cos(sig12)

        # sig2 = sig1 + sig12
        ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
        csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
        dn2 = math.sqrt(1 + self._k2 * gm.sq(ssig2))
        if abs(self._f) > 0.01:
            B12 = gm.sin_cos_series(True, ssig2, csig2, self._C1a)
        AB1 = (1 + self._A1m1) * (B12 - self._B11)

        # sin(bet2) = cos(alp0) * sin(sig2)
        sbet2 = self._calp0 * ssig2
        cbet2 = math.hypot(self._salp0, self._calp0 * csig2)
        if cbet2 == 0:
            # salp0 = 0 and csig2 = 0: break the degeneracy
            cbet2 = csig2 = math.sqrt(gm.MIN_NORMAL)
        # tan(alp0) = cos(sig2) * tan(alp2)
        salp2 = self._salp0
        calp2 = self._calp0 * csig2

        # tan(omg2) = sin(alp0) * tan(sig2)
        somg2 = self._salp0 * ssig2
        comg2 = csig2
        omg12 = math.atan2(somg2 * self._comg1 - comg2 * self._somg1,
                           comg2 * self._comg1 + somg2 * self._somg1)
        lam12 = omg12 + self._A3c * (
            sig12 + (gm.sin_cos_series(True, ssig2, csig2, self._C3a) - self._B31))
        lon12 = math.degrees(lam12)
        lon2 = gm.ang_normalize(gm.ang_normalize(self.lon1) + gm.ang_normalize(lon12))
        lat2 = gm.atan2d(sbet2, self._f1 * cbet2)
        azi2 = gm.atan2d(salp2, calp2)

        B22 = gm.sin_cos_series(True, ssig2, csig2, self._C2a)
        AB2 = (1 + self._A2m1) * (B22 - self._B21)
        J12 = (self._A1m1 - self._A2m1) * sig12 + (AB1 - AB2)
        m12 = self._b * ((dn2 * (self._csig1 * ssig2) - self._dn1 * (self._ssig1 * csig2))
                         - self._csig1 * csig2 * J12)

        return lat2, lon2, azi2, math.degrees(sig12), m12

    def position(self, distance: LengthLike) -> Waypoint:
        """Point and forward azimuth at ``distance`` along the line.

        Parameters
        ----------
        distance : float or pint.Quantity
            Distance from the origin in meters. May be negative or exceed
            the line's total length; the geodesic is extrapolated.

        Returns
        -------
        Waypoint
            Position, forward azimuth (degrees, (-180, 180]) and distance.
        """
        s12 = to_meters(distance)
        lat2, lon2, azi2, _, _ = self.evaluate(s12)
        return Waypoint(point=GeodeticPoint(lat2, lon2), azimuth=azi2, distance=s12)

    def position_at_fraction(self, fraction: float) -> Waypoint:
        """Point at ``fraction`` of the line's total length.

        Raises
        ------
        PreconditionError
            If the line has no total length (set up from an azimuth only).
        InputValidationError
            If ``fraction`` is not a finite number.
        """
        if self._s13 is None:
            raise PreconditionError(
                "Fractional position is undefined on a line without a total "
                "distance; build the line from two endpoints or give it a length"
            )
        try:
            fraction = float(fraction)
        except (TypeError, ValueError) as e:
            raise InputValidationError(f"Fraction must be a number, got {fraction!r}") from e
        if not math.isfinite(fraction):
            raise InputValidationError(f"Fraction must be finite, got {fraction}")
        return self.position(fraction * self._s13)

    def positions(self, distances: Iterable[LengthLike]) -> List[Waypoint]:
        """Evaluate :meth:`position` for each distance in order."""
        return [self.position(d) for d in distances]

