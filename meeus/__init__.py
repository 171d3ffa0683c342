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

"""Astronomical algorithms after Jean Meeus, *Astronomical Algorithms* (2nd ed.)

Angles are in radians, times in days (Julian days) unless a function says
otherwise. Optional Numba acceleration is controlled with :func:`enable_jit`
and :func:`disable_jit`, or per call with ``jit=``.
"""

import logging

from ._jit import enable_jit, disable_jit, jit_enabled
from .errors import (MeeusError, PreconditionError, InvalidLengthError, NoXRangeError,
                     OutOfRangeError, DegenerateError, NoExtremumError,
                     ExtremumOutsideError, ZeroOutsideError, NoConvergenceError)
from .units import Angle, HourAngle, RA, Time
from .julian import JD, JDE

VERSION = '0.1.0'
__version__ = VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())
