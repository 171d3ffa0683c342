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

"""Constants and small numeric helpers shared by the whole package."""

import numpy as np

from ._jit import register_jitable

#Julian date of the modified Julian date epoch
JMOD = 2400000.5
#standard epoch J2000.0, JDE
J2000 = 2451545.0
#older epochs
J1900 = 2415020.0
B1900 = 2415020.3135
B1950 = 2433282.4235

JULIAN_YEAR = 365.25 #days
JULIAN_CENTURY = 36525 #days
BESSELIAN_YEAR = 365.2421988 #days

#Gaussian gravitational constant
K = .01720209895

#sine and cosine of the obliquity of the ecliptic at J2000.0
S_OBL_J2000 = .397777156
C_OBL_J2000 = .917482062

#angles below this (10 arc minutes) need special handling in separation formulas
SMALL_ANGLE = np.deg2rad(10/60)
COS_SMALL_ANGLE = np.cos(SMALL_ANGLE)

def light_time(delta):
    """Light time in days for distance delta in AU."""
    return .0057755183 * delta

@register_jitable
def horner(x, c):
    """Evaluate a polynomial by Horner's method.

    Parameters
    ----------
    x : float
    c : sequence of float
        coefficients, constant term first: c[0] + c[1]*x + c[2]*x**2 + ...

    Returns
    -------
    y : float
    """
    i = len(c) - 1
    if i < 0:
        raise ValueError('horner requires at least one coefficient')
    y = c[i]
    while i > 0:
        i -= 1
        y = y*x + c[i]
    return y

@register_jitable
def pmod(x, y):
    """Positive modulus, 0 <= result < y for y > 0"""
    r = x % y
    # tiny negative x rounds up to exactly y
    if r >= y:
        r = 0.0
    return r

def hav(a):
    """Haversine, (17.5) p. 115"""
    return .5 * (1 - np.cos(a))

def j2000_century(jde):
    """Julian centuries since J2000.0"""
    return (jde - J2000) / JULIAN_CENTURY

def julian_year_to_jde(jy):
    return J2000 + JULIAN_YEAR*(jy - 2000)

def jde_to_julian_year(jde):
    return 2000 + (jde - J2000)/JULIAN_YEAR

def besselian_year_to_jde(by):
    return B1900 + BESSELIAN_YEAR*(by - 1900)

def jde_to_besselian_year(jde):
    return 1900 + (jde - B1900)/BESSELIAN_YEAR
