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

"""Bodies in a straight line (chapter 19)."""

import numpy as np

from .interp import Len5, columns
from .units import Angle

def time(r1, d1, r2, d2, r3, d3, t1, t5):
    """Time when a moving body is in a straight line with two fixed stars, p. 121

    Parameters
    ----------
    r1, d1, r2, d2 : float
        coordinates of the two stars, radians
    r3, d3 : sequence of float
        five rows of coordinates of the moving body
    t1, t5 : float
        times of the first and last rows

    Returns
    -------
    t : float
        time the three bodies are in line, same scale as t1 and t5

    Raises
    ------
    InvalidLengthError
    ZeroOutsideError, NoConvergenceError
    """
    r3, d3 = columns(5, r3=r3, d3=d3)
    # (19.1) p. 121
    y = np.tan(d1)*np.sin(r2 - r3) + np.tan(d2)*np.sin(r3 - r1) + np.tan(d3)*np.sin(r1 - r2)
    return Len5(t1, t5, y).zero(strong=False)

def angle(r1, d1, r2, d2, r3, d3):
    """Angle at body 2 between the arcs to bodies 1 and 3, p. 123

    180° when the three bodies are in line.
    """
    sd2, cd2 = np.sin(d2), np.cos(d2)
    sr21, cr21 = np.sin(r2 - r1), np.cos(r2 - r1)
    sr32, cr32 = np.sin(r3 - r2), np.cos(r3 - r2)
    C1 = np.arctan2(sr21, cd2*np.tan(d1) - sd2*cr21)
    C2 = np.arctan2(sr32, cd2*np.tan(d3) - sd2*cr32)
    return Angle(C1 + C2)

def error(r1, d1, r2, d2, r0, d0):
    """Angular distance of body 0 from the great circle through bodies 1 and 2, p. 124"""
    sr1, cr1 = np.sin(r1), np.cos(r1)
    sd1, cd1 = np.sin(d1), np.cos(d1)
    sr2, cr2 = np.sin(r2), np.cos(r2)
    sd2, cd2 = np.sin(d2), np.cos(d2)
    X1, Y1, Z1 = cd1*cr1, cd1*sr1, sd1
    X2, Y2, Z2 = cd2*cr2, cd2*sr2, sd2
    A = Y1*Z2 - Z1*Y2
    B = Z1*X2 - X1*Z2
    C = X1*Y2 - Y1*X2
    m = np.tan(r0)
    n = np.tan(d0) / np.cos(r0)
    return Angle(np.arcsin((A + B*m + C*n) / (np.sqrt(A*A + B*B + C*C) * np.sqrt(1 + m*m + n*n))))

def angle_error(r1, d1, r2, d2, r3, d3):
    """Both the angle at body 2 and the distance of body 2 from the great circle through bodies 1 and 3, p. 125

    Returns
    -------
    psi : Angle
        angle between the great circles 1-2 and 2-3, 0 when in line
    omega : Angle
        distance of body 2 from the great circle 1-3
    """
    a1, b1, c1 = np.cos(d1)*np.cos(r1), np.cos(d1)*np.sin(r1), np.sin(d1)
    a2, b2, c2 = np.cos(d2)*np.cos(r2), np.cos(d2)*np.sin(r2), np.sin(d2)
    a3, b3, c3 = np.cos(d3)*np.cos(r3), np.cos(d3)*np.sin(r3), np.sin(d3)
    l1 = b1*c2 - b2*c1
    l2 = b2*c3 - b3*c2
    l3 = b1*c3 - b3*c1
    m1 = c1*a2 - c2*a1
    m2 = c2*a3 - c3*a2
    m3 = c1*a3 - c3*a1
    n1 = a1*b2 - a2*b1
    n2 = a2*b3 - a3*b2
    n3 = a1*b3 - a3*b1
    psi = np.arccos((l1*l2 + m1*m2 + n1*n2) /
                    (np.sqrt(l1*l1 + m1*m1 + n1*n1) * np.sqrt(l2*l2 + m2*m2 + n2*n2)))
    omega = np.arcsin((a2*l3 + b2*m3 + c2*n3) /
                      (np.sqrt(a2*a2 + b2*b2 + c2*c2) * np.sqrt(l3*l3 + m3*m3 + n3*n3)))
    return Angle(psi), Angle(omega)
