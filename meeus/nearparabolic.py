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

"""Near-parabolic motion (chapter 35).

Orbits with eccentricity close to 1, on either side, where neither Kepler's
equation nor the parabolic solution is accurate. The method is the one of
p. 246: a series in s = tan(ν/2) summed inside a fixed point iteration. It
works for a limited range of times from perihelion and raises
NoConvergenceError outside that range.
"""

import dataclasses
import logging
import numpy as np

from .base import K
from .errors import NoConvergenceError, PreconditionError
from .units import Angle

logger = logging.getLogger(__name__)

#a series term smaller than this ends the series, and a change in s smaller than this ends an iteration
TOLERANCE = 1e-9
#a series term larger than this means the series is diverging
DIVERGENCE = 1e4
MAX_TERMS = 50
MAX_ITERATIONS = 50

@dataclasses.dataclass(frozen=True)
class Elements:
    """Near-parabolic orbit

    Attributes
    ----------
    time_p : float
        time of perihelion T, JDE
    p_dis : float
        perihelion distance q, AU
    ecc : float
        eccentricity e
    """
    time_p : float
    p_dis : float
    ecc : float

    def __post_init__(self):
        if self.p_dis <= 0:
            raise PreconditionError(f'perihelion distance must be positive, got {self.p_dis}')
        if self.ecc <= 0:
            raise PreconditionError(f'eccentricity must be positive, got {self.ecc}')

    def anomaly_distance(self, jde):
        """True anomaly and distance from the Sun at time jde

        Returns
        -------
        nu : Angle
            true anomaly in [0, 2π)
        r : float
            radius vector, AU

        Raises
        ------
        NoConvergenceError
            when the series diverges or the iteration doesn't settle
        """
        q, e = self.p_dis, self.ecc
        t = jde - self.time_p
        if t == 0:
            return Angle(0.), q
        q1 = K * np.sqrt((1 + e)/q) / (2*q)
        g = (1 - e) / (1 + e)
        q2 = q1 * t
        s = 2. / (3*abs(q2))
        s = 2 / np.tan(2*np.arctan(np.cbrt(np.tan(np.arctan(s)/2))))
        if t < 0:
            s = -s
        if e != 1:
            for l in range(MAX_ITERATIONS):
                s0 = s
                s = _refine(s, _series(s, g, q2))
                if abs(s - s0) <= TOLERANCE:
                    logger.debug('near-parabolic solution after %d iterations', l+1)
                    break
            else:
                raise NoConvergenceError(f'No convergence in {MAX_ITERATIONS} iterations', MAX_ITERATIONS)
        nu = 2 * np.arctan(s)
        r = q * (1 + e) / (1 + e*np.cos(nu))
        if nu < 0:
            nu += 2*np.pi
        return Angle(nu), r

def _series(s, g, q2):
    """Right hand side for s, summed until a term drops below TOLERANCE"""
    z = 1.
    y = s * s
    g1 = -y * s
    q3 = q2 + 2*g*s*y/3
    while True:
        z += 1
        g1 = -g1 * g * y
        z1 = (z - (z+1)*g) / (2*z + 1)
        f = z1 * g1
        q3 += f
        if z > MAX_TERMS or abs(f) > DIVERGENCE:
            raise NoConvergenceError('Series for s does not converge')
        if abs(f) <= TOLERANCE:
            return q3

def _refine(s, q3):
    """Solve s³/3 + s = q3 for s by Newton's method, starting from s"""
    for i in range(MAX_ITERATIONS):
        s1 = s
        s = (2*s*s*s/3 + q3) / (s*s + 1)
        if abs(s - s1) <= TOLERANCE:
            return s
    raise NoConvergenceError(f'No convergence in {MAX_ITERATIONS} iterations', MAX_ITERATIONS)
