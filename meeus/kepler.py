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

"""Kepler's equation (chapter 30).

Solve ``M = E - e·sin(E)`` for the eccentric anomaly E given the mean
anomaly M and eccentricity e (0 <= e < 1).

Several methods from the chapter are provided. :func:`kepler2b`, Newton's
method with Steele's step limit, is the primary method: it is fast but can
run out of iterations at high eccentricity. :func:`kepler3`, a binary search,
always succeeds and is the fallback. :func:`eccentric_anomaly` combines the
two: it tries kepler2b, inspects the tagged result and only falls back to
kepler3 on failure.
"""

import logging
import typing
import numpy as np

from ._jit import register_jitable, njit, resolve
from .base import pmod
from .errors import NoConvergenceError, PreconditionError
from . import iterate

logger = logging.getLogger(__name__)

_TWO_PI = 2*np.pi

class Converged(typing.NamedTuple):
    """kepler2b met its tolerance"""
    E : float
    iterations : int

class Failed(typing.NamedTuple):
    """kepler2b used up its iterations; E is the last iterate"""
    reason : str
    E : float

def true_anomaly(E, e):
    """True anomaly from eccentric anomaly E and eccentricity e, p. 195

    Works for any E, including E near ±π.
    """
    return 2*np.arctan2(np.sqrt(1 + e)*np.sin(E*.5), np.sqrt(1 - e)*np.cos(E*.5))

def radius(E, e, a):
    """Radius vector from eccentric anomaly E, eccentricity e and semimajor axis a (30.2)"""
    return a*(1 - e*np.cos(E))

def kepler1(e, M, places):
    """Solve by simple fixed point iteration (30.5) p. 195, for small e

    At most 5*places iterations.
    """
    def better(E0):
        return M + e*np.sin(E0)
    return iterate.decimal_places(better, M, places, places*5)

def kepler2(e, M, places):
    """Newton's method (30.7) p. 199; at most `places` iterations"""
    def better(E0):
        se, ce = np.sin(E0), np.cos(E0)
        return E0 + (M + e*se - E0)/(1 - e*ce)
    return iterate.decimal_places(better, M, places, places)

def kepler2a(e, M, places):
    """Newton's method with Leingärtner's limiter, p. 205; at most 5*places iterations"""
    def better(E0):
        se, ce = np.sin(E0), np.cos(E0)
        return E0 + np.arcsin(np.sin((M + e*se - E0)/(1 - e*ce)))
    return iterate.decimal_places(better, M, places, places*5)

@register_jitable
def _kepler2b(e, M, tolerance, max_iterations):
    """Newton steps clamped to ±0.5 (Steele). Returns (E, iterations, converged)"""
    E0 = M
    for i in range(max_iterations):
        d = (M + e*np.sin(E0) - E0)/(1 - e*np.cos(E0))
        if d > .5:
            d = .5
        elif d < -.5:
            d = -.5
        E1 = E0 + d
        if abs(E1 - E0) < tolerance:
            return E1, i + 1, True
        E0 = E1
    return E0, max_iterations, False

def attempt_kepler2b(e, M, places=15, max_iterations=None):
    """One run of the primary method, reporting the outcome as a value.

    Parameters
    ----------
    e : float
        eccentricity
    M : float
        mean anomaly, radians
    places : int
        stop when successive iterates differ by less than 10**-places radians
    max_iterations : int, optional
        iteration cap, default `places`

    Returns
    -------
    Converged(E, iterations) or Failed(reason, E)
    """
    if max_iterations is None:
        max_iterations = places
    E, n, ok = _kepler2b(e, M, 10.0**-places, max_iterations)
    if ok:
        return Converged(E, n)
    return Failed(f'no convergence to {places} places in {max_iterations} iterations', E)

def kepler2b(e, M, places, max_iterations=None):
    """Newton's method with Steele's step limit, p. 205

    Raises NoConvergenceError after `max_iterations` (default `places`) steps.
    """
    result = attempt_kepler2b(e, M, places, max_iterations)
    if isinstance(result, Failed):
        raise NoConvergenceError(result.reason, max_iterations or places)
    return result.E

@register_jitable
def _kepler3(e, M):
    M = pmod(M, 2*np.pi)
    f = 1
    if M > np.pi:
        f = -1
        M = 2*np.pi - M
    E0 = np.pi*.5
    d = np.pi*.25
    for i in range(53):
        M1 = E0 - e*np.sin(E0)
        if M - M1 < 0:
            E0 -= d
        else:
            E0 += d
        d *= .5
    if f < 0:
        return -E0
    return E0

def kepler3(e, M):
    """Binary search, p. 206. Always converges for 0 <= e < 1.

    The result is in (-π, π].
    """
    return _kepler3(e, M)

def kepler4(e, M):
    """Closed form approximation for small e (30.8) p. 206"""
    sm, cm = np.sin(M), np.cos(M)
    return np.arctan2(sm, cm - e)

def _solve(e, M, places, max_iterations):
    """Scalar eccentric anomaly, with fallback"""
    M0 = pmod(M, _TWO_PI)
    result = attempt_kepler2b(e, M0, places, max_iterations)
    if isinstance(result, Converged):
        E = result.E
    else:
        logger.debug('kepler2b failed for e=%r, M=%r (%s); falling back to kepler3', e, M, result.reason)
        E = pmod(_kepler3(e, M0), _TWO_PI)
    return E + (M - M0)

_solve_vec = np.vectorize(_solve, otypes=[float])

@register_jitable
def _solve_jit(e, M, tolerance, max_iterations):
    M0 = pmod(M, 2*np.pi)
    E, n, ok = _kepler2b(e, M0, tolerance, max_iterations)
    if not ok:
        E = pmod(_kepler3(e, M0), 2*np.pi)
    return E + (M - M0)

@njit
def _solve_vec_jit(e, M, tolerance, max_iterations):
    '''Eccentric anomaly, vectorized for use with Numba
    Arguments must be broadcast before calling: Numba's broadcast does not match Numpy's with scalar arguments
    '''
    out_shape = e.shape
    args_flat = e.flat, M.flat
    n = len(args_flat[0])
    E = np.empty(n)
    for i, arg in enumerate(zip(*args_flat)):
        ei, Mi = arg
        E[i] = _solve_jit(ei, Mi, tolerance, max_iterations)
    return E.reshape(out_shape)

def eccentric_anomaly(e, M, places=15, max_iterations=None, jit=None):
    """Solve Kepler's equation, falling back to the robust method when needed.

    Parameters
    ----------
    e : array_like of float
        eccentricity, 0 <= e < 1
    M : array_like of float
        mean anomaly, radians. Any value; the result satisfies
        E - e*sin(E) = M without reduction.
    places : int, optional
        decimal places for the primary method, default 15
    max_iterations : int, optional
        iteration cap for the primary method, default `places`
    jit : bool, optional
        override module jit settings. True to enable Numba acceleration, False to disable.

    Returns
    -------
    E : float or ndarray
        eccentric anomaly, radians
    """
    if max_iterations is None:
        max_iterations = places
    if np.any(np.asarray(e) < 0) or np.any(np.asarray(e) >= 1):
        raise PreconditionError('eccentricity must be in the range 0 <= e < 1')
    if resolve(jit):
        args = np.broadcast_arrays(np.asarray(e, dtype=float), np.asarray(M, dtype=float))
        return _solve_vec_jit(*args, 10.0**-places, max_iterations)[()]
    if np.ndim(e) == 0 and np.ndim(M) == 0:
        return _solve(float(e), float(M), places, max_iterations)
    return _solve_vec(e, M, places, max_iterations)
