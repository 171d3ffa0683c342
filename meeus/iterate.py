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

"""Generic iteration (chapter 5).

These are the plain iteration schemes of the chapter; every loop is bounded
and raises NoConvergenceError when its budget runs out.
"""

import logging
import numpy as np

from .errors import NoConvergenceError

logger = logging.getLogger(__name__)

def decimal_places(better, start, places, max_iterations):
    """Iterate to a fixed number of decimal places.

    Parameters
    ----------
    better : callable
        improvement function, x_{n+1} = better(x_n)
    start : float
        first guess
    places : int
        iteration stops when successive values differ by less than 10**-places
    max_iterations : int

    Returns
    -------
    x : float
    """
    d = 10.0 ** -places
    for i in range(max_iterations):
        n = better(start)
        if abs(n - start) < d:
            logger.debug('%d places after %d iterations', places, i+1)
            return n
        start = n
    raise NoConvergenceError(f'Maximum iterations ({max_iterations}) reached', max_iterations)

def full_precision(better, start, max_iterations):
    """Iterate to (nearly) the full precision of a float.

    Iteration stops at 15 significant figures, a couple of bits shy of full
    double precision, to allow for floating point jitter.
    """
    for i in range(max_iterations):
        n = better(start)
        if n == start or abs((n - start)/n) < 1e-15:
            return n
        start = n
    raise NoConvergenceError(f'Maximum iterations ({max_iterations}) reached', max_iterations)

def binary_root(f, lower, upper):
    """Find a root of f between lower and upper by bisection.

    A root must lie between the bounds, otherwise the result is meaningless.
    """
    y_lower = f(lower)
    mid = lower
    for j in range(52):
        mid = (lower + upper) / 2
        y_mid = f(mid)
        if y_mid == 0:
            break
        if np.signbit(y_lower) == np.signbit(y_mid):
            lower = mid
            y_lower = y_mid
        else:
            upper = mid
    return mid
