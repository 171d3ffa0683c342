# The MIT License (MIT)
# 
# Copyright (c) 2026 The meeus developers
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Angular separation (chapter 17).

Separations between two bodies given equatorial coordinates (or any pair of
spherical coordinates, such as ecliptic longitude and latitude), and the
minimum separation of two moving bodies from three-row ephemerides.
"""

import logging
import numpy as np

from .base import COS_SMALL_ANGLE, hav
from .errors import NoConvergenceError
from .interp import Len3, columns
from .units import Angle

logger = logging.getLogger(__name__)

#Newton iteration on the rectangular coordinates of the second body
RECT_MAX_ITERATIONS = 10
RECT_TOLERANCE = 1e-5

def sep(r1, d1, r2, d2):
    """Angular separation between two points, (17.1) p. 109

    Near zero separation, where (17.1) loses precision, the
    approximation (17.2) p. 111 is used instead.

    Parameters
    ----------
    r1, d1, r2, d2 : float
        right ascension and declination of each point, radians

    Returns
    -------
    d : Angle
    """
    sd1, cd1 = np.sin(d1), np.cos(d1)
    sd2, cd2 = np.sin(d2), np.cos(d2)
    cd = sd1*sd2 + cd1*cd2*np.cos(r1 - r2)
    if cd < COS_SMALL_ANGLE:
        return Angle(np.arccos(cd))
    dm = (d1 + d2) / 2
    return Angle(np.hypot((r2 - r1)*np.cos(dm), d2 - d1))

def sep_hav(r1, d1, r2, d2):
    """Angular separation by the haversine formula, p. 115

    Precise for all separations.
    """
    return Angle(2 * np.arcsin(np.sqrt(hav(d2 - d1) + np.cos(d1)*np.cos(d2)*hav(r2 - r1))))

def sep_pauwels(r1, d1, r2, d2):
    """Angular separation by Pauwels' formula, p. 116

    Precise for all separations.
    """
    sd1, cd1 = np.sin(d1), np.cos(d1)
    sd2, cd2 = np.sin(d2), np.cos(d2)
    cdr = np.cos(r2 - r1)
    x = cd1*sd2 - sd1*cd2*cdr
    y = cd2 * np.sin(r2 - r1)
    z = sd1*sd2 + cd1*cd2*cdr
    return Angle(np.arctan2(np.hypot(x, y), z))

def relative_position(r1, d1, r2, d2):
    """Position angle of body 1 relative to body 2, (17.6) p. 116

    Measured from north through east.
    """
    sdr, cdr = np.sin(r1 - r2), np.cos(r1 - r2)
    sd2, cd2 = np.sin(d2), np.cos(d2)
    return Angle(np.arctan2(sdr, cd2*np.tan(d1) - sd2*cdr))

def min_sep(jd1, jd3, r1, d1, r2, d2):
    """Minimum separation of two moving bodies, p. 111

    Separations at the three times are interpolated and the extremum found.

    Parameters
    ----------
    jd1, jd3 : float
        times of the first and last of three equally spaced rows
    r1, d1 : sequence of float
        three rows of coordinates of the first body, radians
    r2, d2 : sequence of float
        three rows of coordinates of the second body, radians

    Returns
    -------
    d : Angle
        the minimum separation

    Raises
    ------
    InvalidLengthError
        if any coordinate sequence doesn't have exactly three rows
    NoExtremumError, ExtremumOutsideError
        if the separations have no minimum inside the table
    """
    r1, d1, r2, d2 = columns(3, r1=r1, d1=d1, r2=r2, d2=d2)
    y = [sep(r1[i], d1[i], r2[i], d2[i]) for i in range(3)]
    _, d = Len3(jd1, jd3, y).extremum()
    return Angle(d)

def _uv(r1, d1, r2, d2):
    """Rectangular coordinates of body 2 centered on body 1, p. 112"""
    sd1, cd1 = np.sin(d1), np.cos(d1)
    dr = r2 - r1
    tdr = np.tan(dr)
    thdr = np.tan(dr/2)
    K = 1 / (1 + sd1*sd1*tdr*thdr)
    sdd = np.sin(d2 - d1)
    u = -K * (1 - (sd1/cd1)*sdd) * cd1 * tdr
    v = K * (sdd + sd1*cd1*tdr*thdr)
    return u, v

def min_sep_rect(jd1, jd3, r1, d1, r2, d2, max_iterations=None, tolerance=None):
    """Minimum separation of two moving bodies by the rectangular coordinate method, p. 112-113

    The motion of body 2 relative to body 1 is projected on a plane and the
    time of closest approach found by Newton's method. Arguments are as for
    :func:`min_sep`; jd1 and jd3 only fix the (equal) row spacing.

    Parameters
    ----------
    max_iterations : int, optional
        default RECT_MAX_ITERATIONS
    tolerance : float, optional
        iteration stops when the step in the interpolating factor is
        smaller than this, default RECT_TOLERANCE

    Raises
    ------
    InvalidLengthError
    NoConvergenceError
        if the step doesn't shrink below tolerance in max_iterations
    OutOfRangeError
        if the closest approach falls outside the three rows
    """
    if max_iterations is None:
        max_iterations = RECT_MAX_ITERATIONS
    if tolerance is None:
        tolerance = RECT_TOLERANCE
    r1, d1, r2, d2 = columns(3, r1=r1, d1=d1, r2=r2, d2=d2)
    us, vs = np.transpose([_uv(r1[i], d1[i], r2[i], d2[i]) for i in range(3)])
    u3 = Len3(-1, 1, us)
    v3 = Len3(-1, 1, vs)
    up0 = (us[2] - us[0]) / 2
    vp0 = (vs[2] - vs[0]) / 2
    up1 = us[0] + us[2] - 2*us[1]
    vp1 = vs[0] + vs[2] - 2*vs[1]
    dn = -(us[1]*up0 + vs[1]*vp0) / (up0*up0 + vp0*vp0)
    n = dn
    for i in range(max_iterations):
        u = u3.interpolate_n(n, allow_extrapolation=False)
        v = v3.interpolate_n(n, allow_extrapolation=False)
        if abs(dn) < tolerance:
            logger.debug('closest approach at n = %r after %d iterations', n, i)
            return Angle(np.hypot(u, v))
        up = up0 + n*up1
        vp = vp0 + n*vp1
        dn = -(u*up + v*vp) / (up*up + vp*vp)
        n += dn
    raise NoConvergenceError(f'Failure to converge in {max_iterations} iterations', max_iterations)
