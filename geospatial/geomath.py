"""
Angle arithmetic for the geodesic solver.

The solver needs angles that are exact where they can be: ``sincosd(90)``
must give exactly ``(1, 0)``, longitude differences must not lose the
low-order bits of nearly-equal inputs, and a latitude of -90 must be
recognised as the pole. These helpers do the degree-domain reductions
before converting to radians, which is where the exactness comes from.

All functions operate on Python floats.
"""

import math
import sys
from typing import List, Sequence, Tuple

DIGITS = sys.float_info.mant_dig
EPSILON = sys.float_info.epsilon
MIN_NORMAL = sys.float_info.min


def sq(x: float) -> float:
    return x * x


def norm(x: float, y: float) -> Tuple[float, float]:
    """Scale ``(x, y)`` to unit length."""
    r = math.hypot(x, y)
    return x / r, y / r


def sum_error(u: float, v: float) -> Tuple[float, float]:
    """Error-free sum: ``s + t == u + v`` exactly, with ``s = fl(u + v)``."""
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    return s, t


def polyval(order: int, coeffs: Sequence[float], start: int, x: float) -> float:
    """Evaluate a polynomial by Horner's rule.

    ``coeffs[start:start + order + 1]`` holds the coefficients, highest
    power first. A negative order gives 0.
    """
    y = coeffs[start] if order >= 0 else 0.0
    while order > 0:
        order -= 1
        start += 1
        y = y * x + coeffs[start]
    return y


def ang_round(x: float) -> float:
    """Round tiny angles so that ``90 - ang_round(x)`` is exact.

    Values smaller in magnitude than 1/16 are coarsened to a multiple of
    about 1e-19 degrees; this avoids problems with underflow near zero.
    """
    z = 1 / 16.0
    y = abs(x)
    if y < z:
        y = z - (z - y)
    return math.copysign(y, x) if x != 0 else x


def remainder(x: float, y: float) -> float:
    """Remainder of ``x / y`` in [-y/2, y/2)."""
    y = abs(y)
    z = math.fmod(x, y)
    if z < -y / 2:
        return z + y
    if z < y / 2:
        return z
    return z - y


def ang_normalize(x: float) -> float:
    """Reduce an angle to (-180, 180]."""
    y = remainder(x, 360.0)
    return 180.0 if y == -180 else y


def lat_fix(x: float) -> float:
    """NaN for latitudes outside [-90, 90], otherwise the latitude."""
    return math.nan if abs(x) > 90 else x


def ang_diff(x: float, y: float) -> Tuple[float, float]:
    """Exact difference ``y - x`` reduced to (-180, 180].

    Returns
    -------
    Tuple[float, float]
        ``(d, e)`` with ``d + e`` the exact difference and ``d`` rounded.
    """
    d, t = sum_error(ang_normalize(-x), ang_normalize(y))
    d = ang_normalize(d)
    return sum_error(-180.0 if d == 180 and t > 0 else d, t)


def sincosd(x: float) -> Tuple[float, float]:
    """Sine and cosine of ``x`` degrees, exact at multiples of 90."""
    r = math.fmod(x, 360.0)
    q = 0 if math.isnan(r) else int(round(r / 90))
    r -= 90 * q
    r = math.radians(r)
    s = math.sin(r)
    c = math.cos(r)
    q %= 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s
    # remove the sign of zero on the cosine
    c += 0.0
    if x == 0:
        s = x
    return s, c


def atan2d(y: float, x: float) -> float:
    """``atan2`` in degrees, with the result in (-180, 180]."""
    # Reduce to the first octant before calling atan2 so that
    # atan2d(1, 1) == 45 exactly.
    if abs(y) > abs(x):
        q = 2
        x, y = y, x
    else:
        q = 0
    if x < 0:
        q += 1
        x = -x
    ang = math.degrees(math.atan2(y, x))
    if q == 1:
        ang = (180.0 if y >= 0 else -180.0) - ang
    elif q == 2:
        ang = 90.0 - ang
    elif q == 3:
        ang = -90.0 + ang
    # tiny negative y with x < 0 rounds to -180
    return 180.0 if ang == -180 else ang


def sin_cos_series(sinp: bool, sinx: float, cosx: float, c: List[float]) -> float:
    """Evaluate a trigonometric series by Clenshaw summation.

    sinp True:  sum(c[i] * sin(2 i x), i = 1..n)
    sinp False: sum(c[i] * cos((2 i + 1) x), i = 0..n-1)
    """
    k = len(c)
    n = k - (1 if sinp else 0)
    ar = 2 * (cosx - sinx) * (cosx + sinx)  # 2 cos(2x)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0
    n //= 2
    while n:
        n -= 1
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]
    return 2 * sinx * cosx * y0 if sinp else cosx * (y0 - y1)


def astroid(x: float, y: float) -> float:
    """Largest root ``k`` of the astroid equation.

    Solves ``k^4 + 2k^3 - (x^2 + y^2 - 1) k^2 - 2 y^2 k - y^2 = 0`` for the
    positive root. Used to start Newton's method for nearly antipodal
    points, where the spherical starting guess is poor.
    """
    p = sq(x)
    q = sq(y)
    r = (p + q - 1) / 6
    if q == 0 and r <= 0:
        # y = 0 with |x| <= 1: the root is k = 0
        return 0.0

    S = p * q / 4
    r2 = sq(r)
    r3 = r * r2
    # The discriminant of the quadratic equation for T3.  This is zero on
    # the evolute curve p^(1/3)+q^(1/3) = 1
    disc = S * (S + 2 * r3)
    u = r
    if disc >= 0:
        T3 = S + r3
        # Pick the sign on the sqrt to maximize abs(T3), which minimizes
        # loss of precision due to cancellation.
        T3 += -math.sqrt(disc) if T3 < 0 else math.sqrt(disc)
        T = math.copysign(abs(T3) ** (1 / 3.0), T3)
        u += T + (r2 / T if T != 0 else 0.0)
    else:
        ang = math.atan2(math.sqrt(-disc), -(S + r3))
        u += 2 * r * math.cos(ang / 3)
    v = math.sqrt(sq(u) + q)
    uv = q / (v - u) if u < 0 else u + v
    w = (uv - q) / (2 * v)
    return uv / (math.sqrt(uv + sq(w)) + w)
