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

"""Smallest circle containing three celestial bodies (chapter 20)."""

import numpy as np

from .base import hav
from .units import Angle

def smallest(r1, d1, r2, d2, r3, d3):
    """Diameter of the smallest circle containing three bodies, p. 128

    Parameters
    ----------
    r1, d1, r2, d2, r3, d3 : float
        right ascension and declination of each body, radians

    Returns
    -------
    diameter : Angle
    type_i : bool
        True when the circle has the two most distant bodies on its
        diameter (type I), False when all three lie on the circumference
        (type II)
    """
    cd1, cd2, cd3 = np.cos(d1), np.cos(d2), np.cos(d3)
    a = 2 * np.arcsin(np.sqrt(hav(d2 - d1) + cd1*cd2*hav(r2 - r1)))
    b = 2 * np.arcsin(np.sqrt(hav(d3 - d2) + cd2*cd3*hav(r3 - r2)))
    c = 2 * np.arcsin(np.sqrt(hav(d1 - d3) + cd3*cd1*hav(r1 - r3)))
    # a is the longest side
    if b > a:
        a, b = b, a
    if c > a:
        a, c = c, a
    if a*a >= b*b + c*c:
        return Angle(a), True
    # (20.1) p. 128
    return Angle(2*a*b*c / np.sqrt((a+b+c)*(a+b-c)*(b+c-a)*(a+c-b))), False
