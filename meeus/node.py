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

"""Passages of a body through the nodes of its orbit (chapter 39).

Each function returns the time of passage as a JDE and the distance from the
Sun at that time in AU.
"""

import numpy as np

from .base import K
from .julian import JDE

def elliptic_ascending(axis, ecc, arg_p, time_p):
    """Passage through the ascending node of an elliptic orbit

    Parameters
    ----------
    axis : float
        semimajor axis, AU
    ecc : float
        eccentricity
    arg_p : float
        argument of perihelion, radians
    time_p : float
        time of perihelion, JDE

    Returns
    -------
    jde : JDE
    r : float
    """
    return _elliptic(-arg_p, axis, ecc, time_p)

def elliptic_descending(axis, ecc, arg_p, time_p):
    """Passage through the descending node of an elliptic orbit. See :func:`elliptic_ascending`"""
    return _elliptic(np.pi - arg_p, axis, ecc, time_p)

def _elliptic(nu, axis, ecc, time_p):
    # (39.1) p. 273
    E = 2 * np.arctan(np.sqrt((1-ecc)/(1+ecc)) * np.tan(nu*.5))
    M = E - ecc*np.sin(E)
    n = K / axis / np.sqrt(axis)
    return JDE(time_p + M/n), axis * (1 - ecc*np.cos(E))

def parabolic_ascending(q, arg_p, time_p):
    """Passage through the ascending node of a parabolic orbit

    Parameters
    ----------
    q : float
        perihelion distance, AU
    arg_p : float
        argument of perihelion, radians
    time_p : float
        time of perihelion, JDE
    """
    return _parabolic(-arg_p, q, time_p)

def parabolic_descending(q, arg_p, time_p):
    """Passage through the descending node of a parabolic orbit"""
    return _parabolic(np.pi - arg_p, q, time_p)

def _parabolic(nu, q, time_p):
    # (39.2) p. 274
    s = np.tan(nu*.5)
    return JDE(time_p + 27.403895*s*(s*s + 3)*q*np.sqrt(q)), q * (1 + s*s)
