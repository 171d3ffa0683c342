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

"""Optional Numba acceleration.

Numba (and scipy, which numba needs for its linear algebra routines) are
optional. When they are missing the decorators below do nothing and every
function runs as plain numpy code.
"""

import os
import logging
import numpy as np

logger = logging.getLogger(__name__)

try:
    #scipy is required for numba's linear algebra routines to work
    import numba, scipy
except ImportError:
    numba = None

def empty_decorator(f = None, *args, **kw):
    if callable(f):
        return f
    return empty_decorator

if numba is not None:
    # register_jitable informs numba that a function may be compiled when
    # called from jit'ed code, but doesn't jit it by default
    register_jitable = numba.extending.register_jitable

    # overload informs numba of an *alternate implementation* of a function to
    # use within jit'ed code
    overload = numba.extending.overload

    #njit compiles code -- we use this for our top-level vectorized loops
    njit = numba.njit

    _ENABLE_JIT = not numba.config.DISABLE_JIT and not os.environ.get('NUMBA_DISABLE_JIT',False)
else:
    #if numba is not available, use empty_decorator instead
    njit = empty_decorator
    overload = lambda *a,**k: empty_decorator
    register_jitable = empty_decorator
    _ENABLE_JIT = False

def enable_jit(en = True):
    """Turn Numba acceleration on or off for the whole package.

    Parameters
    ----------
    en : bool
        True to enable (the default when Numba is installed), False to disable.
    """
    global _ENABLE_JIT
    if en and numba is None:
        logger.warning('JIT unavailable (requires numba and scipy)')
    #We set the flag regardless of whether numba is available, just to test that code path!
    _ENABLE_JIT = bool(en)

def disable_jit():
    enable_jit(False)

def jit_enabled():
    return _ENABLE_JIT

def resolve(jit):
    """Per-call override: None means use the package setting."""
    if jit is None:
        return _ENABLE_JIT
    return bool(jit)

#implement np.polyval for numba using overload
@overload(np.polyval)
def _polyval_jit(p, x):
    def _polyval_impl(p, x):
        y = 0.0
        for v in p:
            y = y*x + v
        return y
    return _polyval_impl
