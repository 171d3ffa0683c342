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

"""Angle and time value types.

Each type is an immutable float subclass storing a single canonical unit
(radians for angles, seconds for time). Arithmetic returns plain floats;
the methods below return new values and never modify the receiver.
"""

import numpy as np

from .base import pmod

_TWO_PI = 2*np.pi

def from_sexa(neg, d, m, s):
    """Combine sexagesimal components into a decimal value.

    Parameters
    ----------
    neg : bool or str
        True or '-' for a negative value. Any sign on d, m, s is ignored.
    d, m : int
        degrees (or hours) and minutes
    s : float
        seconds

    Returns
    -------
    float : decimal degrees (or hours)
    """
    v = ((abs(d)*60 + abs(m))*60 + abs(s)) / 3600
    if neg is True or neg == '-':
        return -v
    return v

class Angle(float):
    """Angle in radians"""
    __slots__ = ()

    @classmethod
    def from_deg(cls, d):
        return cls(d / 180 * np.pi)

    @classmethod
    def from_min(cls, m):
        return cls(m / 60 / 180 * np.pi)

    @classmethod
    def from_sec(cls, s):
        return cls(s / 3600 / 180 * np.pi)

    @classmethod
    def from_sexa(cls, neg, d, m, s):
        return cls.from_deg(from_sexa(neg, d, m, s))

    def __repr__(self):
        return f'{type(self).__name__}({float(self)!r})'

    def rad(self):
        return float(self)

    def deg(self):
        return float(self) * 180 / np.pi

    def min(self):
        return float(self) * 60 * 180 / np.pi

    def sec(self):
        return float(self) * 3600 * 180 / np.pi

    def mod1(self):
        """The equivalent angle in [0, 2π)"""
        return type(self)(pmod(float(self), _TWO_PI))

    def sin(self):
        return np.sin(float(self))

    def cos(self):
        return np.cos(float(self))

    def tan(self):
        return np.tan(float(self))

    def sincos(self):
        a = float(self)
        return np.sin(a), np.cos(a)

    def mul(self, f):
        return type(self)(float(self) * f)

    def div(self, d):
        return type(self)(float(self) / d)

    def hour_angle(self):
        return HourAngle(self)

    def time(self):
        """Convert to Time, 2π = one day"""
        return Time.from_rad(float(self))

class HourAngle(float):
    """Hour angle in radians"""
    __slots__ = ()

    @classmethod
    def from_hour(cls, h):
        return cls(h / 12 * np.pi)

    @classmethod
    def from_min(cls, m):
        return cls(m / 60 / 12 * np.pi)

    @classmethod
    def from_sec(cls, s):
        return cls(s / 3600 / 12 * np.pi)

    @classmethod
    def from_sexa(cls, neg, h, m, s):
        return cls.from_hour(from_sexa(neg, h, m, s))

    def __repr__(self):
        return f'{type(self).__name__}({float(self)!r})'

    def rad(self):
        return float(self)

    def hour(self):
        return float(self) * 12 / np.pi

    def min(self):
        return float(self) * 60 * 12 / np.pi

    def sec(self):
        return float(self) * 3600 * 12 / np.pi

    def mod1(self):
        return type(self)(pmod(float(self), _TWO_PI))

    def angle(self):
        return Angle(self)

    def time(self):
        return Time.from_rad(float(self))

class RA(float):
    """Right ascension in radians, always in [0, 2π)"""
    __slots__ = ()

    def __new__(cls, rad=0.0):
        return super().__new__(cls, pmod(float(rad), _TWO_PI))

    @classmethod
    def from_deg(cls, d):
        return cls(d / 180 * np.pi)

    @classmethod
    def from_hour(cls, h):
        return cls(h / 12 * np.pi)

    @classmethod
    def from_min(cls, m):
        return cls(m / 60 / 12 * np.pi)

    @classmethod
    def from_sec(cls, s):
        return cls(s / 3600 / 12 * np.pi)

    @classmethod
    def from_hms(cls, h, m, s):
        return cls.from_hour(from_sexa(False, h, m, s))

    def __repr__(self):
        return f'{type(self).__name__}({float(self)!r})'

    def add(self, h):
        """Add an hour angle, wrapping into [0, 2π)"""
        return type(self)(float(self) + float(h))

    def rad(self):
        return float(self)

    def deg(self):
        return float(self) * 180 / np.pi

    def hour(self):
        return float(self) * 12 / np.pi

    def min(self):
        return float(self) * 60 * 12 / np.pi

    def sec(self):
        return float(self) * 3600 * 12 / np.pi

    def time(self):
        return Time.from_rad(float(self))

class Time(float):
    """Duration or time of day in seconds"""
    __slots__ = ()

    @classmethod
    def from_day(cls, d):
        return cls(d * 86400)

    @classmethod
    def from_hour(cls, h):
        return cls(h * 3600)

    @classmethod
    def from_min(cls, m):
        return cls(m * 60)

    @classmethod
    def from_rad(cls, rad):
        return cls(rad * 3600 * 12 / np.pi)

    @classmethod
    def from_sexa(cls, neg, h, m, s):
        return cls.from_hour(from_sexa(neg, h, m, s))

    def __repr__(self):
        return f'{type(self).__name__}({float(self)!r})'

    def sec(self):
        return float(self)

    def min(self):
        return float(self) / 60

    def hour(self):
        return float(self) / 3600

    def day(self):
        return float(self) / 86400

    def rad(self):
        return float(self) / 3600 / 12 * np.pi

    def mod1(self):
        """The equivalent time of day in [0, 86400) seconds"""
        return type(self)(pmod(float(self), 86400.0))

    def hour_angle(self):
        return HourAngle(self.rad())

    def ra(self):
        return RA(self.rad())
