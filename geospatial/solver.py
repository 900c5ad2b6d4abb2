"""
Direct and Inverse Geodesic Problems on an Ellipsoid of Revolution.

This module solves the two classical problems of geodesy:

* the *direct* problem: given a point, an azimuth and a distance, find
  the end point and the azimuth there;
* the *inverse* problem: given two points, find the shortest distance
  between them and the azimuths at both ends.

Scientific Context
------------------
Domain: Geodesy, differential geometry on curved surfaces
Model: Geodesic on an oblate ellipsoid, mapped onto an auxiliary sphere

The geodesic is mapped to a great circle on an auxiliary sphere. The
distance and longitude along it are then given by integrals that are
expanded in series of the third flattening; these are evaluated with
Clenshaw summation (see :mod:`geospatial.series`). The inverse problem is
solved by Newton's method on the azimuth at the first point, with the
derivative supplied by the reduced length. For nearly antipodal points
the starting guess comes from the astroid equation and the iteration
falls back on bisection whenever a Newton step leaves the bracket.

Why Simpler Models Are Invalid
------------------------------
1. Haversine / spherical formulas: up to 0.5% error in distance.
2. Vincenty's iteration: fails to converge for nearly antipodal points
   and is accurate only to about 0.1 mm.

This implementation is accurate to about 15 nm for WGS84 and converges
for every pair of points; if the iteration ever exhausts its budget, a
:class:`~common.errors.ConvergenceError` is raised instead of returning a
silently wrong answer.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

import math
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Tuple

from common.errors import ConvergenceError
from common.logging_config import get_logger
from common.types import GeodeticPoint, as_point
from common.units import AngleLike, LengthLike, to_degrees, to_meters
from geospatial import geomath as gm
from geospatial import series
from geospatial.ellipsoid import EllipsoidModel, WGS84Ellipsoid
from geospatial.geodesic_line import GeodesicLine

logger = get_logger(__name__)

# Iteration budget: Newton's method for the first MAXIT1 steps, then
# bisection of the bracket up to MAXIT2 steps in total.
MAXIT1 = 20
MAXIT2 = MAXIT1 + gm.DIGITS + 10

TINY = math.sqrt(gm.MIN_NORMAL)
TOL0 = gm.EPSILON
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
# Check on bisection interval
TOLB = TOL0 * TOL2
XTHRESH = 1000 * TOL2


@dataclass(frozen=True)
class InverseResult:
    """Solution of the inverse problem.

    Attributes
    ----------
    distance : float
        Geodesic (shortest path) distance in meters, >= 0.
    initial_azimuth : float
        Azimuth at the first point in degrees, clockwise from north.
    final_azimuth : float
        Forward azimuth at the second point in degrees.
    arc_length : float
        Arc length on the auxiliary sphere in degrees.
    reduced_length : float
        Reduced length m12 of the geodesic in meters.
    """
    distance: float
    initial_azimuth: float
    final_azimuth: float
    arc_length: float
    reduced_length: float


@dataclass(frozen=True)
class DirectResult:
    """Solution of the direct problem.

    Attributes
    ----------
    destination : GeodeticPoint
        End point; longitude reduced to (-180, 180].
    final_azimuth : float
        Forward azimuth at the destination in degrees.
    arc_length : float
        Arc length on the auxiliary sphere in degrees.
    reduced_length : float
        Reduced length m12 of the geodesic in meters.
    """
    destination: GeodeticPoint
    final_azimuth: float
    arc_length: float
    reduced_length: float


class _InverseSolution(NamedTuple):
    a12: float
    s12: float
    salp1: float
    calp1: float
    salp2: float
    calp2: float
    m12: float


class GeodesicSolver:
    """Geodesic calculations on one reference ellipsoid.

    The solver precomputes the ellipsoid-dependent series coefficients
    once; after construction it holds no mutable state and may be shared
    freely between threads.

    Parameters
    ----------
    ellipsoid : EllipsoidModel
        Reference ellipsoid (default: WGS84).

    Examples
    --------
    >>> solver = GeodesicSolver()
    >>> result = solver.inverse((33.9424964, -118.4080486), (40.6399278, -73.7786925))
    >>> f"{result.distance / 1000:.0f} km"
    '3983 km'
    """

    def __init__(self, ellipsoid: EllipsoidModel = WGS84Ellipsoid):
        self._ellipsoid = ellipsoid
        self.a = ellipsoid.a
        self.f = ellipsoid.f
        self._f1 = ellipsoid.f1
        self._e2 = ellipsoid.e2
        self._ep2 = ellipsoid.ep2
        self._n = ellipsoid.n
        self._b = ellipsoid.b
        # The sig12 threshold for "really short". Using the auxiliary
        # sphere solution with dnm computed at (bet1 + bet2) / 2, the
        # relative error in the azimuth consistency check is
        # sig12^2 * abs(f) * min(1, 1-f/2) / 2.
        self._etol2 = 0.1 * TOL2 / math.sqrt(
            max(0.001, abs(self.f)) * min(1.0, 1 - self.f / 2) / 2
        )
        self._a3x = series.a3_table(self._n)
        self._c3x = series.c3_table(self._n)
        logger.debug(
            "Initialised geodesic solver for %s (a=%.3f m, 1/f=%s)",
            ellipsoid.name, self.a, (1 / self.f) if self.f else "inf",
        )

    @property
    def ellipsoid(self) -> EllipsoidModel:
        return self._ellipsoid

    def __repr__(self) -> str:
        return f"GeodesicSolver(ellipsoid={self._ellipsoid!r})"

    # ------------------------------------------------------------------
    # Series helpers bound to this ellipsoid
    # ------------------------------------------------------------------

    def _a3f(self, eps: float) -> float:
        return series.a3(self._a3x, eps)

    def _c3f(self, eps: float, c: List[float]) -> None:
        series.c3(self._c3x, eps, c)

    def _lengths(self, eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
                 c1a, c2a) -> Tuple[float, float, float]:
        """Distance and reduced length, both scaled by 1/b.

        Returns
        -------
        Tuple[float, float, float]
            (s12b, m12b, m0)
        """
        A1 = series.a1m1(eps)
        series.c1(eps, c1a)
        A2 = series.a2m1(eps)
        series.c2(eps, c2a)
        m0 = A1 - A2
        A1 += 1
        A2 += 1

        B1 = (gm.sin_cos_series(True, ssig2, csig2, c1a)
              - gm.sin_cos_series(True, ssig1, csig1, c1a))
        s12b = A1 * (sig12 + B1)
        B2 = (gm.sin_cos_series(True, ssig2, csig2, c2a)
              - gm.sin_cos_series(True, ssig1, csig1, c2a))
        J12 = m0 * sig12 + (A1 * B1 - A2 * B2)
        # Parentheses around (csig1 * ssig2) and (ssig1 * csig2) ensure
        # accurate cancellation for coincident points.
        m12b = (dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2)
                - csig1 * csig2 * J12)
        return s12b, m12b, m0

    # ------------------------------------------------------------------
    # Inverse problem
    # ------------------------------------------------------------------

    def _inverse_start(self, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
                       lam12, slam12, clam12, c1a, c2a):
        """Starting azimuth for Newton's method.

        Returns a positive sig12 (and the final azimuth) when the points
        are close enough for the auxiliary-sphere solution to be final.
        """
        sig12 = -1.0
        salp2 = calp2 = dnm = math.nan

        # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
        sbet12 = sbet2 * cbet1 - cbet2 * sbet1
        cbet12 = cbet2 * cbet1 + sbet2 * sbet1
        sbet12a = sbet2 * cbet1 + cbet2 * sbet1

        shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
        if shortline:
            sbetm2 = gm.sq(sbet1 + sbet2)
            # sin((bet1+bet2)/2)^2 = (sbet1 + sbet2)^2 / ((sbet1 + sbet2)^2 + (cbet1 + cbet2)^2)
            sbetm2 /= sbetm2 + gm.sq(cbet1 + cbet2)
            dnm = math.sqrt(1 + self._ep2 * sbetm2)
            omg12 = lam12 / (self._f1 * dnm)
            somg12 = math.sin(omg12)
            comg12 = math.cos(omg12)
        else:
            somg12 = slam12
            comg12 = clam12

        salp1 = cbet2 * somg12
        if comg12 >= 0:
            calp1 = sbet12 + cbet2 * sbet1 * gm.sq(somg12) / (1 + comg12)
        else:
            calp1 = sbet12a - cbet2 * sbet1 * gm.sq(somg12) / (1 - comg12)

        ssig12 = math.hypot(salp1, calp1)
        csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

        if shortline and ssig12 < self._etol2:
            # really short lines
            salp2 = cbet1 * somg12
            calp2 = sbet12 - cbet1 * sbet2 * (
                gm.sq(somg12) / (1 + comg12) if comg12 >= 0 else 1 - comg12)
            salp2, calp2 = gm.norm(salp2, calp2)
            # Set return value
            sig12 = math.atan2(ssig12, csig12)
        elif (abs(self._n) >= 0.1 or csig12 >= 0
              or ssig12 >= 6 * abs(self._n) * math.pi * gm.sq(cbet1)):
            # Nothing to do, zeroth order spherical approximation is OK
            pass
        else:
            # Scale lam12 and bet2 to x, y coordinate system where antipodal
            # point is at origin and singular point is at y = 0, x = -1.
            lam12x = math.atan2(-slam12, -clam12)  # lam12 - pi
            k2 = gm.sq(sbet1) * self._ep2
            eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
            lamscale = self.f * cbet1 * self._a3f(eps) * math.pi
            betscale = lamscale * cbet1
            x = lam12x / lamscale
            y = sbet12a / betscale

            if y > -TOL1 and x > -1 - XTHRESH:
                salp1 = min(1.0, -x)
                calp1 = -math.sqrt(1 - gm.sq(salp1))
            else:
                # Estimate alp1 by solving the astroid problem.
                k = gm.astroid(x, y)
                omg12a = lamscale * (-x * k / (1 + k))
                somg12 = math.sin(omg12a)
                comg12 = -math.cos(omg12a)
                # Update spherical estimate of alp1 using omg12 instead of lam12
                salp1 = cbet2 * somg12
                calp1 = sbet12a - cbet2 * sbet1 * gm.sq(somg12) / (1 - comg12)

        # Sanity check on starting guess.  Backwards check allows NaN through.
        if not salp1 <= 0:
            salp1, calp1 = gm.norm(salp1, calp1)
        else:
            salp1 = 1.0
            calp1 = 0.0
        return sig12, salp1, calp1, salp2, calp2, dnm

    def _lambda12(self, sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1,
                  slam120, clam120, diffp, c1a, c2a, c3a):
        """Longitude difference reached by leaving point 1 at azimuth alp1.

        Returns the residual against the target longitude, the geometry of
        the trial geodesic and, when ``diffp``, the derivative of the
        residual with respect to alp1.
        """
        if sbet1 == 0 and calp1 == 0:
            # Break degeneracy of equatorial line
            calp1 = -TINY

        # sin(alp1) * cos(bet1) = sin(alp0)
        salp0 = salp1 * cbet1
        calp0 = math.hypot(calp1, salp1 * sbet1)  # calp0 > 0

        # tan(bet1) = tan(sig1) * cos(alp1)
        # tan(omg1) = sin(alp0) * tan(sig1)
        ssig1 = sbet1
        somg1 = salp0 * sbet1
        csig1 = comg1 = calp1 * cbet1
        ssig1, csig1 = gm.norm(ssig1, csig1)

        # sin(alp2) * cos(bet2) = sin(alp0); abs(bet2) = -bet1 is kept
        # symmetric to avoid a singular Newton step.
        salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
        # calp2 = sqrt(sq(calp0) - sq(sbet2)) / cbet2, alp2 in [0, pi/2]
        if cbet2 != cbet1 or abs(sbet2) != -sbet1:
            calp2 = math.sqrt(
                gm.sq(calp1 * cbet1)
                + ((cbet2 - cbet1) * (cbet1 + cbet2) if cbet1 < -sbet1
                   else (sbet1 - sbet2) * (sbet1 + sbet2))) / cbet2
        else:
            calp2 = abs(calp1)

        # tan(bet2) = tan(sig2) * cos(alp2)
        # tan(omg2) = sin(alp0) * tan(sig2).
        ssig2 = sbet2
        somg2 = salp0 * sbet2
        csig2 = comg2 = calp2 * cbet2
        ssig2, csig2 = gm.norm(ssig2, csig2)

        # sig12 = sig2 - sig1, limit to [0, pi]
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2),
                           csig1 * csig2 + ssig1 * ssig2)
        # omg12 = omg2 - omg1, limit to [0, pi]
        somg12 = max(0.0, comg1 * somg2 - somg1 * comg2)
        comg12 = comg1 * comg2 + somg1 * somg2
        # eta = omg12 - lam120
        eta = math.atan2(somg12 * clam120 - comg12 * slam120,
                         comg12 * clam120 + somg12 * slam120)

        k2 = gm.sq(calp0) * self._ep2
        eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
        self._c3f(eps, c3a)
        B312 = (gm.sin_cos_series(True, ssig2, csig2, c3a)
                - gm.sin_cos_series(True, ssig1, csig1, c3a))
        domg12 = -self.f * self._a3f(eps) * salp0 * (sig12 + B312)
        lam12 = eta + domg12

        if diffp:
            if calp2 == 0:
                dlam12 = -2 * self._f1 * dn1 / sbet1
            else:
                _, dlam12, _ = self._lengths(eps, sig12, ssig1, csig1, dn1,
                                             ssig2, csig2, dn2, c1a, c2a)
                dlam12 *= self._f1 / (calp2 * cbet2)
        else:
            dlam12 = math.nan

        return (lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
                eps, domg12, dlam12)

    def _gen_inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> _InverseSolution:
        """Solve the inverse problem for validated coordinates in degrees."""
        # Compute longitude difference (AngDiff does this carefully).
        lon12, lon12s = gm.ang_diff(lon1, lon2)
        # Make longitude difference positive.
        lonsign = 1.0 if lon12 >= 0 else -1.0
        # If very close to being on the same half-meridian, then make it so.
        lon12 = lonsign * gm.ang_round(lon12)
        lon12s = gm.ang_round((180 - lon12) - lonsign * lon12s)
        lam12 = math.radians(lon12)
        if lon12 > 90:
            slam12, clam12 = gm.sincosd(lon12s)
            clam12 = -clam12
        else:
            slam12, clam12 = gm.sincosd(lon12)

        # If really close to the equator, treat as on equator.
        lat1 = gm.ang_round(gm.lat_fix(lat1))
        lat2 = gm.ang_round(gm.lat_fix(lat2))
        # Swap points so that point with higher (abs) latitude is point 1.
        # If one latitude is a nan, then it becomes lat1.
        swapp = -1.0 if abs(lat1) < abs(lat2) else 1.0
        if swapp < 0:
            lonsign *= -1
            lat2, lat1 = lat1, lat2
        # Make lat1 <= 0
        latsign = 1.0 if lat1 < 0 else -1.0
        lat1 *= latsign
        lat2 *= latsign

        # Canonical form: 0 <= lon12 <= 180, -90 <= lat1 <= 0,
        # lat1 <= lat2 <= -lat1. lonsign, swapp and latsign undo it.

        sbet1, cbet1 = gm.sincosd(lat1)
        sbet1 *= self._f1
        # Ensure cbet1 = +epsilon at poles
        sbet1, cbet1 = gm.norm(sbet1, cbet1)
        cbet1 = max(TINY, cbet1)

        sbet2, cbet2 = gm.sincosd(lat2)
        sbet2 *= self._f1
        sbet2, cbet2 = gm.norm(sbet2, cbet2)
        cbet2 = max(TINY, cbet2)

        # Force bet2 = +/- bet1 exactly when the difference of the two
        # latitudes vanishes; Lambda12 relies on this symmetry.
        if cbet1 < -sbet1:
            if cbet2 == cbet1:
                sbet2 = math.copysign(sbet1, sbet2)
        elif abs(sbet2) == -sbet1:
            cbet2 = cbet1

        dn1 = math.sqrt(1 + self._ep2 * gm.sq(sbet1))
        dn2 = math.sqrt(1 + self._ep2 * gm.sq(sbet2))

        # index zero elements of these arrays are unused
        c1a = series.new_coefficients(series.N_C1 + 1)
        c2a = series.new_coefficients(series.N_C2 + 1)
        c3a = series.new_coefficients(series.N_C3)

        meridian = lat1 == -90 or slam12 == 0
        salp1 = calp1 = salp2 = calp2 = math.nan
        s12x = m12x = a12 = math.nan

        if meridian:
            # Endpoints are on a single full meridian, so the geodesic might
            # lie on a meridian.
            calp1 = clam12
            salp1 = slam12  # Head to the target longitude
            calp2 = 1.0
            salp2 = 0.0  # At the target we're heading north

            # tan(bet) = tan(sig) * cos(alp)
            ssig1 = sbet1
            csig1 = calp1 * cbet1
            ssig2 = sbet2
            csig2 = calp2 * cbet2

            # sig12 = sig2 - sig1
            sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2),
                               csig1 * csig2 + ssig1 * ssig2)
            s12x, m12x, _ = self._lengths(self._n, sig12, ssig1, csig1, dn1,
                                          ssig2, csig2, dn2, c1a, c2a)

            # sig12 > pi/2 on a meridian is not a shortest path, and zero
            # length geodesics may give m12 < 0.
            if sig12 < 1 or m12x >= 0:
                # Need at least 2, to handle 90 0 90 180
                if sig12 < 3 * TINY or (sig12 < TOL0 and (s12x < 0 or m12x < 0)):
                    sig12 = m12x = s12x = 0.0
                m12x *= self._b
                s12x *= self._b
                a12 = math.degrees(sig12)
            else:
                # m12 < 0, i.e., prolate and too close to anti-podal
                meridian = False

        if (not meridian and sbet1 == 0
                # Mimic the way Lambda12 works with calp1 = 0
                and (self.f <= 0 or lon12s >= self.f * 180)):
            # Geodesic runs along equator
            calp1 = calp2 = 0.0
            salp1 = salp2 = 1.0
            s12x = self.a * lam12
            sig12 = lam12 / self._f1
            m12x = self._b * math.sin(sig12)
            a12 = lon12 / self._f1

        elif not meridian:
            # Now point1 and point2 belong within a hemisphere bounded by a
            # meridian and geodesic is neither meridional or equatorial.

            # Figure a starting point for Newton's method
            sig12, salp1, calp1, salp2, calp2, dnm = self._inverse_start(
                sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12, slam12, clam12,
                c1a, c2a)

            if sig12 >= 0:
                # Short lines (InverseStart sets salp2, calp2, dnm)
                s12x = sig12 * self._b * dnm
                m12x = gm.sq(dnm) * self._b * math.sin(sig12 / dnm)
                a12 = math.degrees(sig12)
            else:
                s12x, m12x, a12, salp1, calp1, salp2, calp2 = self._newton(
                    sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1,
                    slam12, clam12, c1a, c2a, c3a, (lat1, lat2, lon12))

        # Convert calp, salp to azimuth accounting for lonsign, swapp, latsign.
        if swapp < 0:
            salp2, salp1 = salp1, salp2
            calp2, calp1 = calp1, calp2

        salp1 *= swapp * lonsign
        calp1 *= swapp * latsign
        salp2 *= swapp * lonsign
        calp2 *= swapp * latsign

        # Returned value in [0, 180]; avoid a negative zero distance
        return _InverseSolution(a12, 0.0 + s12x, salp1, calp1, salp2, calp2, m12x)

    def _newton(self, sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1,
                slam12, clam12, c1a, c2a, c3a, context):
        """Newton's method with bisection fallback on the azimuth alp1."""
        numit = 0
        tripn = tripb = False
        # Bracketing range
        salp1a = TINY
        calp1a = 1.0
        salp1b = TINY
        calp1b = -1.0
        v = math.nan

        while numit < MAXIT2:
            (v, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
             eps, domg12, dv) = self._lambda12(
                sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1,
                slam12, clam12, numit < MAXIT1, c1a, c2a, c3a)
            # Reversed test to allow escape with NaNs
            if tripb or not abs(v) >= (8 if tripn else 1) * TOL0:
                break
            # Update bracketing values
            if v > 0 and (numit > MAXIT1 or calp1 / salp1 > calp1b / salp1b):
                salp1b = salp1
                calp1b = calp1
            elif v < 0 and (numit > MAXIT1 or calp1 / salp1 < calp1a / salp1a):
                salp1a = salp1
                calp1a = calp1

            numit += 1
            if numit < MAXIT1 and dv > 0:
                dalp1 = -v / dv
                sdalp1 = math.sin(dalp1)
                cdalp1 = math.cos(dalp1)
                nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
                if nsalp1 > 0 and abs(dalp1) < math.pi:
                    calp1 = calp1 * cdalp1 - salp1 * sdalp1
                    salp1 = nsalp1
                    salp1, calp1 = gm.norm(salp1, calp1)
                    # slope -> 0 can spoil quadratic convergence
                    tripn = abs(v) <= 16 * TOL0
                    continue
            # Newton step rejected: bisect the bracket instead
            salp1 = (salp1a + salp1b) / 2
            calp1 = (calp1a + calp1b) / 2
            salp1, calp1 = gm.norm(salp1, calp1)
            tripn = False
            tripb = (abs(salp1a - salp1) + (calp1a - calp1) < TOLB
                     or abs(salp1 - salp1b) + (calp1 - calp1b) < TOLB)
        else:
            logger.warning(
                "Inverse problem failed to converge after %d iterations "
                "(residual %.3e rad, canonical lat1=%r lat2=%r lon12=%r)",
                numit, v, *context,
            )
            raise ConvergenceError(
                f"Inverse geodesic did not converge after {numit} iterations "
                f"(longitude residual {v:.3e} rad)",
                iterations=numit,
                residual=v,
            )

        logger.debug("Inverse problem converged in %d iterations", numit)
        s12x, m12x, _ = self._lengths(eps, sig12, ssig1, csig1, dn1,
                                      ssig2, csig2, dn2, c1a, c2a)
        return (s12x * self._b, m12x * self._b, math.degrees(sig12),
                salp1, calp1, salp2, calp2)

    def _solve_inverse(self, point_a: GeodeticPoint, point_b: GeodeticPoint) -> _InverseSolution:
        solution = self._gen_inverse(point_a.latitude, point_a.longitude,
                                     point_b.latitude, point_b.longitude)
        if solution.s12 == 0:
            # Coincident points: the azimuth is undefined, report north.
            solution = solution._replace(salp1=0.0, calp1=1.0, salp2=0.0, calp2=1.0)
        return solution

    def inverse(self, point_a: Any, point_b: Any) -> InverseResult:
        """Solve the inverse geodesic problem.

        Given two points, find the distance and azimuths between them.

        Parameters
        ----------
        point_a, point_b : GeodeticPoint or LatLonLike
            First and second point, in degrees.

        Returns
        -------
        InverseResult
            Distance in meters, initial and final azimuths in degrees in
            (-180, 180]. Coincident points give distance 0 and both
            azimuths 0.

        Raises
        ------
        InputValidationError
            If either point is out of range.
        ConvergenceError
            If Newton's method exhausts its iteration budget.
        """
        p1 = as_point(point_a)
        p2 = as_point(point_b)
        sol = self._solve_inverse(p1, p2)
        return InverseResult(
            distance=sol.s12,
            initial_azimuth=gm.atan2d(sol.salp1, sol.calp1),
            final_azimuth=gm.atan2d(sol.salp2, sol.calp2),
            arc_length=sol.a12,
            reduced_length=sol.m12,
        )

    # ------------------------------------------------------------------
    # Direct problem and lines
    # ------------------------------------------------------------------

    def line(self, origin: Any, azimuth: AngleLike) -> GeodesicLine:
        """Set up a geodesic line from a point and an azimuth.

        The line has no defined total length, so fractional positions are
        not available on it.
        """
        p1 = as_point(origin)
        azi1 = to_degrees(azimuth, "Azimuth")
        return GeodesicLine(self, p1.latitude, p1.longitude, azi1)

    def direct_line(self, origin: Any, azimuth: AngleLike, distance: LengthLike) -> GeodesicLine:
        """Set up a geodesic line of a given length from a point and azimuth."""
        p1 = as_point(origin)
        azi1 = to_degrees(azimuth, "Azimuth")
        s13 = to_meters(distance)
        line = GeodesicLine(self, p1.latitude, p1.longitude, azi1)
        return line.with_distance(s13)

    def inverse_line(self, point_a: Any, point_b: Any) -> GeodesicLine:
        """Set up the geodesic line joining two points.

        The inverse problem is solved once; the total distance and the
        initial azimuth are cached on the returned line, so subsequent
        :meth:`GeodesicLine.position` calls only evaluate the series.
        """
        p1 = as_point(point_a)
        p2 = as_point(point_b)
        sol = self._solve_inverse(p1, p2)
        azi1 = gm.atan2d(sol.salp1, sol.calp1)
        return GeodesicLine(self, p1.latitude, p1.longitude, azi1,
                            salp1=sol.salp1, calp1=sol.calp1,
                            distance=sol.s12, arc_length=sol.a12)

    def direct(self, origin: Any, azimuth: AngleLike, distance: LengthLike) -> DirectResult:
        """Solve the direct geodesic problem.

        Given a starting point, azimuth, and distance, find the endpoint.

        Parameters
        ----------
        origin : GeodeticPoint or LatLonLike
            Starting point in degrees.
        azimuth : float or pint.Quantity
            Azimuth at the origin, degrees clockwise from north.
        distance : float or pint.Quantity
            Distance in meters. Negative values travel backwards along the
            geodesic; values larger than the circumference simply keep
            going round.

        Returns
        -------
        DirectResult
            Destination point and forward azimuth there.

        Examples
        --------
        >>> solver = GeodesicSolver()
        >>> result = solver.direct((0.0, 0.0), 90.0, 1_000_000)
        >>> f"{result.destination.longitude:.4f}"
        '8.9832'
        """
        p1 = as_point(origin)
        azi1 = to_degrees(azimuth, "Azimuth")
        s12 = to_meters(distance)
        line = GeodesicLine(self, p1.latitude, p1.longitude, azi1)
        lat2, lon2, azi2, a12, m12 = line.evaluate(s12)
        return DirectResult(
            destination=GeodeticPoint(lat2, lon2),
            final_azimuth=azi2,
            arc_length=a12,
            reduced_length=m12,
        )
