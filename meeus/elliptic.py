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

"""Elliptic motion (chapter 33).

Positions of a body on an elliptic orbit given its Keplerian elements, and
closed forms for velocities and the length of an ellipse.
"""

import dataclasses
import logging
import numpy as np

from .base import S_OBL_J2000, C_OBL_J2000, light_time, pmod
from .errors import PreconditionError
from .units import Angle, RA
from . import kepler

logger = logging.getLogger(__name__)

_TWO_PI = 2*np.pi

@dataclasses.dataclass(frozen=True)
class Elements:
    """Keplerian elements, referred to the ecliptic and equinox of J2000.0

    Attributes
    ----------
    axis : float
        semimajor axis a, AU
    ecc : float
        eccentricity e, 0 <= e < 1
    inc : float
        inclination i, radians
    arg_p : float
        argument of perihelion ω, radians
    node : float
        longitude of the ascending node Ω, radians
    time_p : float
        time of perihelion T, JDE
    """
    axis : float
    ecc : float
    inc : float
    arg_p : float
    node : float
    time_p : float

    def __post_init__(self):
        if not 0 <= self.ecc < 1:
            raise PreconditionError(f'eccentricity must be in the range 0 <= e < 1, got {self.ecc}')
        if self.axis <= 0:
            raise PreconditionError(f'semimajor axis must be positive, got {self.axis}')

    def mean_motion(self):
        """Mean daily motion n in radians per day (33.6) p. 227"""
        return np.deg2rad(.9856076686) / self.axis / np.sqrt(self.axis)

    def anomaly_distance(self, jde):
        """True anomaly ν and radius vector r at time jde

        Kepler's equation is solved by the primary method, falling back to
        the binary search when the primary method doesn't converge.

        Returns
        -------
        nu : Angle
        r : float
            AU
        """
        M = pmod(self.mean_motion() * (jde - self.time_p), _TWO_PI)
        result = kepler.attempt_kepler2b(self.ecc, M, 15)
        if isinstance(result, kepler.Converged):
            E = result.E
        else:
            logger.debug('kepler2b failed at jde %r (%s); falling back to kepler3', jde, result.reason)
            E = kepler.kepler3(self.ecc, M)
        return Angle(kepler.true_anomaly(E, self.ecc)), kepler.radius(E, self.ecc, self.axis)

    def _equatorial_constants(self):
        # (33.7) and (33.8) p. 228-229
        sn, cn = np.sin(self.node), np.cos(self.node)
        si, ci = np.sin(self.inc), np.cos(self.inc)
        F = cn
        G = sn * C_OBL_J2000
        H = sn * S_OBL_J2000
        P = -sn * ci
        Q = cn*ci*C_OBL_J2000 - si*S_OBL_J2000
        R = cn*ci*S_OBL_J2000 + si*C_OBL_J2000
        A = np.arctan2(F, P)
        B = np.arctan2(G, Q)
        C = np.arctan2(H, R)
        a = np.hypot(F, P)
        b = np.hypot(G, Q)
        c = np.hypot(H, R)
        return A, B, C, a, b, c

    def heliocentric_equatorial(self, jde):
        """Heliocentric rectangular equatorial coordinates, J2000.0 (33.9) p. 229

        Returns
        -------
        x, y, z : float
            AU
        """
        A, B, C, a, b, c = self._equatorial_constants()
        nu, r = self.anomaly_distance(jde)
        u = self.arg_p + nu
        return r*a*np.sin(A + u), r*b*np.sin(B + u), r*c*np.sin(C + u)

    def position(self, jde, sun_xyz):
        """Geocentric position of the body, corrected for light time.

        Parameters
        ----------
        jde : float
            Julian ephemeris day
        sun_xyz : callable
            function of jde returning the geocentric rectangular equatorial
            coordinates (X, Y, Z) of the Sun in AU, referred to J2000.0

        Returns
        -------
        alpha : RA
            right ascension
        delta : Angle
            declination
        psi : Angle
            elongation from the Sun
        """
        X, Y, Z = sun_xyz(jde)
        x, y, z = self.heliocentric_equatorial(jde)
        # (33.10) p. 229
        xi, eta, zeta = X + x, Y + y, Z + z
        delta = np.sqrt(xi*xi + eta*eta + zeta*zeta)
        # repeat once at the time the light left the body
        x, y, z = self.heliocentric_equatorial(jde - light_time(delta))
        xi, eta, zeta = X + x, Y + y, Z + z
        delta = np.sqrt(xi*xi + eta*eta + zeta*zeta)
        R0 = np.sqrt(X*X + Y*Y + Z*Z)
        alpha = np.arctan2(eta, xi)
        dec = np.arcsin(zeta / delta)
        psi = np.arccos((xi*X + eta*Y + zeta*Z) / R0 / delta)
        return RA(alpha), Angle(dec), Angle(psi)

def velocity(a, r):
    """Instantaneous velocity in km/s of a body at distance r on an orbit of semimajor axis a, p. 238"""
    return 42.1219 * np.sqrt(1/r - .5/a)

def v_perihelion(a, e):
    """Velocity at perihelion, km/s, p. 238"""
    return 29.7847 * np.sqrt((1+e)/(1-e)/a)

def v_aphelion(a, e):
    """Velocity at aphelion, km/s, p. 238"""
    return 29.7847 * np.sqrt((1-e)/(1+e)/a)

def length1(a, e):
    """Length of an ellipse by Ramanujan's first formula, p. 239

    Same units as a. Good for small eccentricities; an error of about 0.4%
    at e = .97.
    """
    b = a * np.sqrt(1 - e*e)
    return np.pi * (3*(a+b) - np.sqrt((a+3*b)*(3*a+b)))

def length2(a, e):
    """Length of an ellipse by the mean formula, p. 239

    Less accurate than :func:`length1`.
    """
    b = a * np.sqrt(1 - e*e)
    s = a + b
    p = a * b
    A = s * .5
    G = np.sqrt(p)
    H = 2 * p / s
    return np.pi * (21*A - 2*G - 3*H) * .125

def length4(a, e):
    """Length of an ellipse by the series on p. 240, exact to double precision.

    The series is summed until it stops changing.
    """
    b = a * np.sqrt(1 - e*e)
    m = (a - b) / (a + b)
    m2 = m * m
    sum0 = 1.
    term = m2 * .25
    sum1 = 1. + term
    nf = -1.
    df = 2.
    while sum1 != sum0:
        nf += 2
        df += 2
        term *= nf * nf * m2 / (df * df)
        sum0 = sum1
        sum1 += term
    return 2 * np.pi * a * sum0 / (1 + m)
