"""
Series expansions for geodesics on an ellipsoid of revolution.

The distance, longitude and reduced-length integrals along a geodesic are
expanded in the small parameter ``eps`` (which depends on the equatorial
azimuth of the geodesic) and, for the longitude integral, in the third
flattening ``n`` of the ellipsoid. Coefficients are kept to sixth order,
which gives full double precision for |f| <= 1/50.

Coefficient tables list, for each power of ``eps``, a polynomial in
``eps**2`` (or ``n``) followed by its common denominator. They are read
with :func:`geospatial.geomath.polyval`.

References
----------
Karney, C.F.F. (2013). Algorithms for geodesics. J. Geodesy 87(1), 43-55,
eqs. (15)-(25) and the addenda published with GeographicLib.
"""

from typing import List

from geospatial.geomath import polyval, sq

ORDER = 6
N_A1 = N_C1 = N_C1P = N_A2 = N_C2 = N_A3 = N_C3 = ORDER
N_C3X = (N_C3 * (N_C3 - 1)) // 2

_A1_COEFF = [1, 4, 64, 0, 256]

_C1_COEFF = [
    -1, 6, -16, 32,          # C1[1]
    -9, 64, -128, 2048,      # C1[2]
    9, -16, 768,             # C1[3]
    3, -5, 512,              # C1[4]
    -7, 1280,                # C1[5]
    -7, 2048,                # C1[6]
]

_C1P_COEFF = [
    205, -432, 768, 1536,     # C1p[1]
    4005, -4736, 3840, 12288,  # C1p[2]
    -225, 116, 384,           # C1p[3]
    -7173, 2695, 7680,        # C1p[4]
    3467, 7680,               # C1p[5]
    38081, 61440,             # C1p[6]
]

_A2_COEFF = [-11, -28, -192, 0, 256]

_C2_COEFF = [
    1, 2, 16, 32,            # C2[1]
    35, 64, 384, 2048,       # C2[2]
    15, 80, 768,             # C2[3]
    7, 35, 512,              # C2[4]
    63, 1280,                # C2[5]
    77, 2048,                # C2[6]
]

# A3, from the eps^5 term down to eps^0; each a polynomial in n
_A3_COEFF = [
    -3, 128,
    -2, -3, 64,
    -1, -3, -1, 16,
    3, -1, -2, 8,
    1, -1, 2,
    1, 1,
]

# C3[l], l = 1..5, from the eps^5 term down to eps^l; each a polynomial in n
_C3_COEFF = [
    3, 128,
    2, 5, 128,
    -1, 3, 3, 64,
    -1, 0, 1, 8,
    -1, 1, 4,
    5, 256,
    1, 3, 128,
    -3, -2, 3, 64,
    1, -3, 2, 32,
    7, 512,
    -10, 9, 384,
    5, -9, 5, 192,
    7, 512,
    -14, 7, 512,
    21, 2560,
]


def new_coefficients(size: int) -> List[float]:
    """Scratch array for a series; index 0 is unused by the sine series."""
    return [0.0] * size


def a1m1(eps: float) -> float:
    """A1 - 1, the scale of the distance integral."""
    m = N_A1 // 2
    t = polyval(m, _A1_COEFF, 0, sq(eps)) / _A1_COEFF[m + 1]
    return (t + eps) / (1 - eps)


def _fill_sine_series(coeffs: List[int], nterms: int, eps: float, c: List[float]) -> None:
    eps2 = sq(eps)
    d = eps
    o = 0
    for l in range(1, nterms + 1):
        m = (nterms - l) // 2
        c[l] = d * polyval(m, coeffs, o, eps2) / coeffs[o + m + 1]
        o += m + 2
        d *= eps


def c1(eps: float, c: List[float]) -> None:
    """Coefficients C1[l] of the distance integral, written into ``c``."""
    _fill_sine_series(_C1_COEFF, N_C1, eps, c)


def c1p(eps: float, c: List[float]) -> None:
    """Coefficients C1'[l] of the reverted distance series."""
    _fill_sine_series(_C1P_COEFF, N_C1P, eps, c)


def a2m1(eps: float) -> float:
    """A2 - 1, the scale of the reduced-length integral."""
    m = N_A2 // 2
    t = polyval(m, _A2_COEFF, 0, sq(eps)) / _A2_COEFF[m + 1]
    return (t - eps) / (1 + eps)


def c2(eps: float, c: List[float]) -> None:
    """Coefficients C2[l] of the reduced-length integral."""
    _fill_sine_series(_C2_COEFF, N_C2, eps, c)


def a3_table(n: float) -> List[float]:
    """Coefficients of A3 as a polynomial in eps, for third flattening n."""
    table = []
    o = 0
    for j in range(N_A3 - 1, -1, -1):
        m = min(N_A3 - j - 1, j)
        table.append(polyval(m, _A3_COEFF, o, n) / _A3_COEFF[o + m + 1])
        o += m + 2
    return table


def c3_table(n: float) -> List[float]:
    """Coefficients of C3[l] as polynomials in eps, for third flattening n."""
    table = []
    o = 0
    for l in range(1, N_C3):
        for j in range(N_C3 - 1, l - 1, -1):
            m = min(N_C3 - j - 1, j)
            table.append(polyval(m, _C3_COEFF, o, n) / _C3_COEFF[o + m + 1])
            o += m + 2
    return table


def a3(table: List[float], eps: float) -> float:
    """A3 evaluated at eps using a table from :func:`a3_table`."""
    return polyval(N_A3 - 1, table, 0, eps)


def c3(table: List[float], eps: float, c: List[float]) -> None:
    """C3[l] evaluated at eps using a table from :func:`c3_table`."""
    mult = 1.0
    o = 0
    for l in range(1, N_C3):
        m = N_C3 - l - 1
        mult *= eps
        c[l] = mult * polyval(m, table, o, eps)
        o += m + 1
