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

"""Exceptions raised by meeus.

Every failure is local to the call that raised it. Nothing is retried and no
partial result is returned; callers that want a fallback (as
:func:`meeus.kepler.eccentric_anomaly` does) catch the specific class.
"""

class MeeusError(Exception):
    """Base class for all errors raised by this package."""

class PreconditionError(MeeusError, ValueError):
    """Arguments violate a documented precondition."""

class InvalidLengthError(PreconditionError):
    """A sample table or ephemeris has the wrong number of rows."""
    def __init__(self, expected, got, what='y'):
        self.expected = expected
        self.got = got
        super().__init__(f'Argument {what} must be length {expected}, got {got}')

class NoXRangeError(PreconditionError):
    """First and last abscissa are equal, so the table has no spacing."""

class OutOfRangeError(PreconditionError):
    """Interpolating factor or abscissa outside the table, extrapolation disallowed."""

class DegenerateError(MeeusError, ArithmeticError):
    """The geometry of the problem admits no answer."""

class NoExtremumError(DegenerateError):
    """Samples are colinear: there is no interior extremum."""

class ExtremumOutsideError(DegenerateError):
    """The extremum of the fitted curve falls outside the table."""

class ZeroOutsideError(DegenerateError):
    """The zero of the fitted curve falls outside the table."""

class NoConvergenceError(MeeusError, RuntimeError):
    """An iterative method used up its iteration budget."""
    def __init__(self, message='Failure to converge', iterations=None):
        self.iterations = iterations
        super().__init__(message)
