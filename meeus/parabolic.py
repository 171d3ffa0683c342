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

"""Parabolic motion (chapter 34)."""

import dataclasses
import numpy as np

from .base import K
from .errors import PreconditionError
from .units import Angle

@dataclasses.dataclass(frozen=True)
class Elements:
    """Parabolic orbit

    Attributes
    ----------
    time_p : float
        time of perihelion T, JDE
    p_dis : float
        perihelion distance q, AU
    """
    time_p : float
    p_dis : float

    def __post_init__(self):
        if self.p_dis <= 0:
            raise PreconditionError(f'perihelion distance must be positive, got {self.p_dis}')

    def anomaly_distance(self, jde):
        """True anomaly and distance from the Sun at time jde, p. 241-242

        The cubic (Barker's equation) is solved in closed form, so there is
        no iteration. Works on arrays of jde.

        Returns
        -------
        nu : Angle or ndarray
            true anomaly, radians in (-π, π)
        r : float or ndarray
            radius vector, AU
        """
        q = self.p_dis
        W = 3 * K / np.sqrt(2) * (np.asarray(jde) - self.time_p) / q / np.sqrt(q)
        G = W * .5
        Y = np.cbrt(G + np.sqrt(G*G + 1))
        s = Y - 1/Y
        nu = 2 * np.arctan(s)
        r = q * (1 + s*s)
        if np.ndim(nu) == 0:
            return Angle(nu), float(r)
        return nu, r
