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

"""Equinoxes and solstices (chapter 27).

:func:`march`, :func:`june`, :func:`september` and :func:`december` use the
mean instant of table 27.A/27.B corrected by the 24 periodic terms of table
27.C, good to about a minute for years -1000 to +3000.

:func:`march2` etc. refine the mean instant by iterating (27.1) on the Sun's
apparent longitude, which by default comes from :mod:`meeus.solar`.
"""

import logging
import numpy as np

from .base import horner, j2000_century
from .errors import NoConvergenceError
from .julian import JDE
from . import solar

logger = logging.getLogger(__name__)

#Table 27.A, years -1000 to +1000
_MC0 = (1721139.29189, 365242.13740, .06134, .00111, -.00071)
_JC0 = (1721233.25401, 365241.72562, -.05323, .00907, .00025)
_SC0 = (1721325.70455, 365242.49558, -.11677, -.00297, .00074)
_DC0 = (1721414.39987, 365242.88257, -.00769, -.00933, -.00006)

#Table 27.B, years +1000 to +3000
_MC2 = (2451623.80984, 365242.37404, .05169, -.00411, -.00057)
_JC2 = (2451716.56767, 365241.62603, .00325, .00888, -.00030)
_SC2 = (2451810.21715, 365242.01767, -.11575, .00337, .00078)
_DC2 = (2451900.05952, 365242.74049, -.06223, -.00823, .00032)

#Table 27.C: A, B (degrees), C (degrees per century)
_TERMS = np.array([
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
])

#(27.1) stops when the correction is below this, days
CORRECTION_TOLERANCE = .000005
MAX_ITERATIONS = 50

def _mean(year, c0, c2):
    """JDE0 from table 27.A or 27.B"""
    if year < 1000:
        return horner(year*.001, c0)
    return horner((year - 2000)*.001, c2)

def _approximate(year, c0, c2):
    J0 = _mean(year, c0, c2)
    T = j2000_century(J0)
    W = np.deg2rad(35999.373*T - 2.47)
    dl = 1 + .0334*np.cos(W) + .0007*np.cos(2*W)
    a, b, c = _TERMS.T
    S = np.sum(a*np.cos(np.deg2rad(b + c*T)))
    return JDE(J0 + .00001*S/dl)

def march(year):
    """March equinox, JDE"""
    return _approximate(year, _MC0, _MC2)

def june(year):
    """June solstice, JDE"""
    return _approximate(year, _JC0, _JC2)

def september(year):
    """September equinox, JDE"""
    return _approximate(year, _SC0, _SC2)

def december(year):
    """December solstice, JDE"""
    return _approximate(year, _DC0, _DC2)

def _iterate(year, q, c0, c2, apparent_longitude, max_iterations):
    J0 = _mean(year, c0, c2)
    for i in range(max_iterations):
        lam = apparent_longitude(J0)
        c = 58 * np.sin(q - lam) # (27.1) p. 180
        J0 += c
        if abs(c) < CORRECTION_TOLERANCE:
            logger.debug('season of %d at solar longitude %.0f° after %d iterations', year, np.rad2deg(q), i+1)
            return JDE(J0)
    raise NoConvergenceError(f'Maximum iterations ({max_iterations}) reached', max_iterations)

def march2(year, apparent_longitude=solar.apparent_longitude, max_iterations=MAX_ITERATIONS):
    """March equinox by iterating to apparent solar longitude 0.

    Parameters
    ----------
    year : int
    apparent_longitude : callable, optional
        function of JDE returning the Sun's apparent longitude in radians
    max_iterations : int, optional

    Returns
    -------
    jde : JDE

    Raises
    ------
    NoConvergenceError
        if the correction doesn't drop below CORRECTION_TOLERANCE in max_iterations
    """
    return _iterate(year, 0, _MC0, _MC2, apparent_longitude, max_iterations)

def june2(year, apparent_longitude=solar.apparent_longitude, max_iterations=MAX_ITERATIONS):
    """June solstice, solar longitude π/2. See :func:`march2`"""
    return _iterate(year, np.pi/2, _JC0, _JC2, apparent_longitude, max_iterations)

def september2(year, apparent_longitude=solar.apparent_longitude, max_iterations=MAX_ITERATIONS):
    """September equinox, solar longitude π. See :func:`march2`"""
    return _iterate(year, np.pi, _SC0, _SC2, apparent_longitude, max_iterations)

def december2(year, apparent_longitude=solar.apparent_longitude, max_iterations=MAX_ITERATIONS):
    """December solstice, solar longitude 3π/2. See :func:`march2`"""
    return _iterate(year, np.pi*3/2, _DC0, _DC2, apparent_longitude, max_iterations)
