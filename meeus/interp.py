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

"""Interpolation from tables of equally spaced values (chapter 3).

:class:`Len3` fits a parabola through three rows of a table and
:class:`Len5` a quartic through five rows. Only the first and last abscissa
are given; the interior ones are implied by equal spacing. Both classes
interpolate at an arbitrary interpolating factor ``n`` (the offset from the
central row in units of the tabular interval), locate an extremum and locate
a zero.

The book recommends picking the rows of a larger table that keep ``n``
small; :meth:`Len3.for_interpolate_x` and :meth:`Len5.for_interpolate_x` do
that selection.

For unequally spaced abscissae use :func:`lagrange` or
:func:`lagrange_poly`.
"""

import logging
import numpy as np

from .base import horner
from .errors import (InvalidLengthError, NoXRangeError, OutOfRangeError,
                     NoExtremumError, ExtremumOutsideError, ZeroOutsideError,
                     NoConvergenceError)

logger = logging.getLogger(__name__)

#iteration limit for zeros and Len5 extrema
MAX_ITERATIONS = 50
#convergence is reached when a step is below TOLERANCE*max(1,|n|)
TOLERANCE = 1e-15
#a strong zero must interpolate to within this fraction of the largest |y|
STRONG_RESIDUAL = 1e-9

def _iterate(n0, better, max_iterations, tolerance):
    """Fixed point iteration on the interpolating factor"""
    for i in range(max_iterations):
        n1 = better(n0)
        if not np.isfinite(n1):
            raise NoConvergenceError(f'Failure to converge: non-finite iterate after {i+1} iterations', i+1)
        if n1 == n0 or abs(n1 - n0) <= tolerance * max(1.0, abs(n1)):
            logger.debug('converged to n = %r in %d iterations', n1, i+1)
            return n1
        n0 = n1
    raise NoConvergenceError(f'Failure to converge in {max_iterations} iterations', max_iterations)

def _window(x, x1, xn, y, size):
    """Select the `size` consecutive rows of y whose center row is nearest x.

    Near either end of the table the first or last full window is used.
    """
    interval = (xn - x1) / (len(y) - 1)
    half = size // 2
    nearest = int(np.floor((x - x1)/interval + .5))
    nearest = min(max(nearest, half), len(y) - 1 - half)
    logger.debug('x = %r: using rows %d to %d of %d', x, nearest - half, nearest + half, len(y))
    return (x1 + (nearest - half)*interval,
            x1 + (nearest + half)*interval,
            y[nearest - half:nearest + half + 1])

def columns(size, **series):
    """Check that every named ephemeris column has exactly `size` rows.

    Returns the columns as float arrays, in argument order. Raises
    InvalidLengthError naming the first column of the wrong length.
    """
    out = []
    for name, s in series.items():
        a = np.asarray(s, dtype=float)
        if a.ndim != 1 or len(a) != size:
            raise InvalidLengthError(size, len(a) if a.ndim == 1 else a.size, name)
        out.append(a)
    return out

class _Table:
    size = None

    def __init__(self, x1, xn, y):
        y = np.array(y, dtype=float)
        if y.ndim != 1 or len(y) != self.size:
            raise InvalidLengthError(self.size, len(y) if y.ndim == 1 else y.size)
        if x1 == xn:
            raise NoXRangeError(f'Argument x{self.size} cannot equal x1')
        y.setflags(write=False)
        self.x1 = x1
        self.xn = xn
        self.y = y
        self._x_sum = xn + x1
        self._x_diff = xn - x1

    @property
    def n_max(self):
        """Largest |n| inside the table"""
        return (self.size - 1) / 2

    def n_for_x(self, x):
        return (self.size - 1) * (2*x - self._x_sum) / (2*self._x_diff)

    def x_for_n(self, n):
        return .5*self._x_sum + self._x_diff*n/(self.size - 1)

    def interpolate_n(self, n, allow_extrapolation=True):
        """Interpolate for interpolating factor n.

        Parameters
        ----------
        n : float
            offset from the central row, in units of the tabular interval
        allow_extrapolation : bool
            if False, raise OutOfRangeError when n falls outside the table

        Returns
        -------
        y : float
        """
        if not allow_extrapolation and abs(n) > self.n_max:
            raise OutOfRangeError(f'Interpolating factor n = {n} must be in range {-self.n_max} to {self.n_max}')
        return self._evaluate(n)

    def interpolate_x(self, x, allow_extrapolation=True):
        """Interpolate for abscissa x"""
        n = self.n_for_x(x)
        if not allow_extrapolation and abs(n) > self.n_max:
            raise OutOfRangeError(f'Argument x = {x} outside of range {self.x1} to {self.xn}')
        return self._evaluate(n)

    def zero(self, strong=False, max_iterations=None, tolerance=None):
        """Find x where the interpolated curve crosses zero.

        Parameters
        ----------
        strong : bool
            False iterates the book's quick estimate, which works well on
            gentle curves. True uses Newton's method with the exact derivative
            of the interpolating polynomial, which copes with sharper curves,
            and verifies the curve really is zero at the result.
        max_iterations : int, optional
            defaults to MAX_ITERATIONS
        tolerance : float, optional
            defaults to TOLERANCE

        Returns
        -------
        x : float

        Raises
        ------
        NoConvergenceError
            iteration budget used up, a non-finite step, or (strong) a
            spurious root
        ZeroOutsideError
            the zero lies outside the table
        """
        if max_iterations is None:
            max_iterations = MAX_ITERATIONS
        if tolerance is None:
            tolerance = TOLERANCE
        better = self._newton_step() if strong else self._quick_step()
        n = _iterate(0.0, better, max_iterations, tolerance)
        if strong:
            scale = np.max(np.abs(self.y))
            residual = abs(self._evaluate(n))
            if residual > STRONG_RESIDUAL * (scale if scale > 0 else 1.0):
                raise NoConvergenceError(f'Spurious zero at n = {n}: curve value {residual}')
        if abs(n) > self.n_max:
            raise ZeroOutsideError(f'Zero falls outside of table (n = {n})')
        return self.x_for_n(n)

    @classmethod
    def for_interpolate_x(cls, x, x1, xn, y, allow_extrapolation=False):
        """Build a table from the rows of a larger table nearest x.

        Parameters
        ----------
        x : float
            the interpolation target
        x1, xn : float
            abscissae of the first and last rows of the full table
        y : sequence of float
            all ordinates of the full table, at least `size` of them
        allow_extrapolation : bool
            if False (default), x outside x1..xn raises OutOfRangeError

        Returns
        -------
        table : same class, built on the selected window
        """
        y = np.asarray(y, dtype=float)
        if y.ndim != 1 or len(y) < cls.size:
            raise InvalidLengthError(f'at least {cls.size}', len(y) if y.ndim == 1 else y.size)
        if xn == x1:
            raise NoXRangeError('Argument xn cannot equal x1')
        if not allow_extrapolation and not min(x1, xn) <= x <= max(x1, xn):
            raise OutOfRangeError(f'Argument x = {x} outside of table range {x1} to {xn}')
        if len(y) == cls.size:
            return cls(x1, xn, y)
        return cls(*_window(x, x1, xn, y, cls.size))

class Len3(_Table):
    """Second difference interpolation on three rows.

    Parameters
    ----------
    x1, x3 : float
        abscissae of the first and last rows; must differ
    y : sequence of float
        exactly three ordinates
    """
    size = 3

    def __init__(self, x1, x3, y):
        super().__init__(x1, x3, y)
        y = self.y
        # differences, (3.1) p. 23
        self.a = y[1] - y[0]
        self.b = y[2] - y[1]
        self.c = self.b - self.a
        self._ab_sum = self.a + self.b

    @property
    def x3(self):
        return self.xn

    def _evaluate(self, n):
        # (3.3) p. 24
        return self.y[1] + n*.5*(self._ab_sum + n*self.c)

    def extremum(self):
        """Location and value of the extremum, (3.4) and (3.5) p. 25

        Returns
        -------
        x, y : float

        Raises
        ------
        NoExtremumError
            the three rows are colinear
        ExtremumOutsideError
            the extremum lies outside the table
        """
        if self.c == 0:
            raise NoExtremumError('No extremum in table')
        n = self._ab_sum / (-2*self.c)
        if abs(n) > 1:
            raise ExtremumOutsideError(f'Extremum falls outside of table (n = {n})')
        x = self.x_for_n(n)
        y = self.y[1] - (self._ab_sum*self._ab_sum)/(8*self.c)
        return x, y

    def _quick_step(self):
        y2, ab, c = self.y[1], self._ab_sum, self.c
        def better(n0):
            # (3.6) p. 26
            return -2*y2 / (ab + c*n0)
        return better

    def _newton_step(self):
        y2, ab, c = self.y[1], self._ab_sum, self.c
        def better(n0):
            # (3.7) p. 27
            return n0 - (2*y2 + n0*(ab + c*n0)) / (ab + 2*c*n0)
        return better

class Len5(_Table):
    """Fourth difference interpolation on five rows.

    Parameters
    ----------
    x1, x5 : float
        abscissae of the first and last rows; must differ
    y : sequence of float
        exactly five ordinates
    """
    size = 5

    def __init__(self, x1, x5, y):
        super().__init__(x1, x5, y)
        y = self.y
        # differences
        self.a = y[1] - y[0]
        self.b = y[2] - y[1]
        self.c = y[3] - y[2]
        self.d = y[4] - y[3]
        self.e = self.b - self.a
        self.f = self.c - self.b
        self.g = self.d - self.c
        self.h = self.f - self.e
        self.j = self.g - self.f
        self.k = self.j - self.h
        # (3.8) p. 28
        self.coeff = np.array([
            y[2],
            (self.b + self.c)/2 - (self.h + self.j)/12,
            self.f/2 - self.k/24,
            (self.h + self.j)/12,
            self.k/24,
        ])

    @property
    def x5(self):
        return self.xn

    def _evaluate(self, n):
        return horner(n, self.coeff)

    def extremum(self, max_iterations=None, tolerance=None):
        """Location and value of the extremum, iterating (3.9) p. 29

        Returns
        -------
        x, y : float
        """
        if max_iterations is None:
            max_iterations = MAX_ITERATIONS
        if tolerance is None:
            tolerance = TOLERANCE
        b, c, f, h, j, k = self.b, self.c, self.f, self.h, self.j, self.k
        n_coeff = np.array([6*(b + c) - h - j, 0, 3*(h + j), 2*k])
        den = k - 12*f
        if den == 0:
            raise NoExtremumError('No extremum in table')
        n = _iterate(0.0, lambda n0: horner(n0, n_coeff) / den, max_iterations, tolerance)
        if abs(n) > self.n_max:
            raise ExtremumOutsideError(f'Extremum falls outside of table (n = {n})')
        return self.x_for_n(n), self._evaluate(n)

    def _quick_step(self):
        # (3.10) p. 29
        num = np.array([-24*self.y[2], 0, self.k - 12*self.f,
                        -2*(self.h + self.j), -self.k])
        den = 12*(self.b + self.c) - 2*(self.h + self.j)
        def better(n0):
            return horner(n0, num) / den
        return better

    def _newton_step(self):
        # (3.11) p. 29
        M = self.k/24
        N = (self.h + self.j)/12
        P = self.f/2 - M
        Q = (self.b + self.c)/2 - N
        num = np.array([self.y[2], Q, P, N, M])
        den = np.array([Q, 2*P, 3*N, 4*M])
        def better(n0):
            return n0 - horner(n0, num)/horner(n0, den)
        return better

def len4_half(y):
    """Interpolate the value midway between the central rows of four, (3.12) p. 32"""
    if len(y) != 4:
        raise InvalidLengthError(4, len(y))
    return (9*(y[1] + y[2]) - y[0] - y[3]) / 16

def _check_distinct(xs):
    if len(set(xs)) != len(xs):
        raise NoXRangeError('Table abscissae must be distinct')

def lagrange(x, table):
    """Interpolate with unequally spaced abscissae, Lagrange's formula p. 32

    Parameters
    ----------
    x : float
    table : sequence of (x, y) pairs
        abscissae must be distinct but need not be equally spaced or sorted
    """
    xs = [float(p[0]) for p in table]
    _check_distinct(xs)
    total = 0.0
    for i, (xi, yi) in enumerate(table):
        prod = 1.0
        for j, xj in enumerate(xs):
            if i != j:
                prod *= (x - xj) / (xi - xj)
        total += yi * prod
    return total

def lagrange_poly(table):
    """Coefficients of the Lagrange interpolating polynomial.

    The polynomial has degree len(table)-1. Coefficients are returned constant
    term first, ready for :func:`meeus.base.horner`.
    """
    xs = np.array([p[0] for p in table], dtype=float)
    ys = np.array([p[1] for p in table], dtype=float)
    _check_distinct(list(xs))
    total = np.zeros(len(xs))
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        others = np.delete(xs, i)
        #np.poly gives the monic polynomial with these roots, highest order first
        basis = np.poly(others)[::-1] if len(others) else np.ones(1)
        total += yi * basis / np.prod(xi - others)
    return total
