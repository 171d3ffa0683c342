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

"""Planetary conjunctions (chapter 18).

Conjunction in right ascension of two bodies, or of a body and a fixed
star, from five equally spaced rows of ephemeris. The same functions work
with ecliptic longitudes and latitudes in place of right ascension and
declination.
"""

from .interp import Len5, columns
from .units import Angle

def planetary(t1, t5, r1, d1, r2, d2):
    """Time of conjunction of two moving bodies, p. 117

    Parameters
    ----------
    t1, t5 : float
        times of the first and last rows. Any time scale, for example the
        day of the month.
    r1, d1 : sequence of float
        five rows of right ascension and declination of the first body, radians
    r2, d2 : sequence of float
        five rows for the second body

    Returns
    -------
    t : float
        time of conjunction, same scale as t1 and t5
    dd : Angle
        declination of body 2 minus declination of body 1 at that time

    Raises
    ------
    InvalidLengthError
        if any column doesn't have exactly five rows
    ZeroOutsideError, NoConvergenceError
        if no conjunction is found within the table
    """
    r1, d1, r2, d2 = columns(5, r1=r1, d1=d1, r2=r2, d2=d2)
    return _conj(t1, t5, r2 - r1, d2 - d1)

def stellar(t1, t5, r1, d1, r2, d2):
    """Time of conjunction of a moving body with a fixed star, p. 119

    Parameters
    ----------
    t1, t5 : float
        times of the first and last rows
    r1, d1 : float
        coordinates of the star, radians
    r2, d2 : sequence of float
        five rows of coordinates of the moving body

    Returns
    -------
    t : float
    dd : Angle
        declination of the body minus declination of the star
    """
    r2, d2 = columns(5, r2=r2, d2=d2)
    return _conj(t1, t5, r2 - r1, d2 - d1)

def _conj(t1, t5, dr, dd):
    t = Len5(t1, t5, dr).zero(strong=True)
    return t, Angle(Len5(t1, t5, dd).interpolate_x(t, allow_extrapolation=False))
