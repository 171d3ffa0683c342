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

"""Sexagesimal conversion, parsing, and formatting.

Formatting follows the book's typography: the unit symbol precedes the
decimal point of the last component, e.g. ``-9°22′58″.47`` or
``5ʰ42ᵐ41ˢ.30``.
"""

import re
import numpy as np

from .units import from_sexa

__all__ = ['from_sexa', 'to_sexa', 'parse_sexa', 'parse_angle', 'parse_hour_angle',
           'fmt_sexa', 'fmt_angle', 'fmt_hour_angle', 'fmt_ra', 'fmt_time']

DEG_SYMBOLS = ('°', '′', '″')
HOUR_SYMBOLS = ('ʰ', 'ᵐ', 'ˢ')

def to_sexa(value, places=0):
    """Split a decimal value into rounded sexagesimal components.

    Parameters
    ----------
    value : float
        decimal degrees or hours
    places : int
        decimal places to keep on the seconds

    Returns
    -------
    neg : bool
    d, m, s : int
        whole degrees (hours), minutes and seconds
    frac : int
        seconds fraction, as an integer with `places` digits
    """
    neg = value < 0
    power = 10 ** places
    #round once, in units of the last place, so carries propagate
    n = int(round(abs(value) * 3600 * power))
    n, frac = divmod(n, power)
    n, s = divmod(n, 60)
    d, m = divmod(n, 60)
    if d == m == s == frac == 0:
        neg = False
    return neg, d, m, s, frac

def fmt_sexa(value, symbols, places=0):
    neg, d, m, s, frac = to_sexa(value, places)
    sign = '-' if neg else ''
    out = f'{sign}{d}{symbols[0]}{m}{symbols[1]}{s}{symbols[2]}'
    if places > 0:
        out += f'.{frac:0{places}d}'
    return out

def fmt_angle(a, places=0):
    """Format an angle in radians as degrees, minutes and seconds, e.g. 2°8′22″"""
    return fmt_sexa(np.rad2deg(float(a)), DEG_SYMBOLS, places)

def fmt_hour_angle(h, places=0):
    """Format an hour angle in radians as hours, minutes and seconds, e.g. -1ʰ2ᵐ3ˢ"""
    return fmt_sexa(float(h) * 12 / np.pi, HOUR_SYMBOLS, places)

def fmt_ra(ra, places=0):
    """Format a right ascension in radians, e.g. 5ʰ42ᵐ41ˢ"""
    return fmt_sexa((float(ra) % (2*np.pi)) * 12 / np.pi, HOUR_SYMBOLS, places)

def fmt_time(t, places=0):
    """Format a time in seconds as hours, minutes and seconds"""
    return fmt_sexa(float(t) / 3600, HOUR_SYMBOLS, places)

_sexa_re = re.compile(r'''^\s*(?P<sign>[+-])?\s*
    (?P<d>\d+(?:\.\d*)?)\s*(?:[°dhʰ:]|\s)\s*
    (?:(?P<m>\d+(?:\.\d*)?)\s*(?:[′'mᵐ:]|\s)\s*)?
    (?:(?P<s>\d+(?:\.\d*)?)\s*(?:[″"sˢ])?(?P<frac>\.\d+)?)?\s*$''', re.VERBOSE)

def parse_sexa(s):
    """Parse a sexagesimal string into decimal degrees or hours.

    Accepts unit symbols (``2°8′22″``, ``5ʰ42ᵐ41ˢ.3``, ``2d8m22s``), colons
    (``-9:22:58.47``), whitespace (``12 30 45``), or a plain decimal number.
    A leading sign applies to the whole value.

    Raises
    ------
    ValueError
        if the string can't be parsed, or minutes or seconds are 60 or more
    """
    try:
        return float(s)
    except ValueError:
        pass
    m = _sexa_re.match(s)
    if not m:
        raise ValueError(f'Could not parse sexagesimal value: {s!r}')
    d = float(m['d'])
    mins = float(m['m']) if m['m'] else 0.0
    secs = float(m['s']) if m['s'] else 0.0
    if m['frac']:
        if m['s'] is None or '.' in m['s']:
            raise ValueError(f'Could not parse sexagesimal value: {s!r}')
        secs += float(m['frac'])
    if mins >= 60 or secs >= 60:
        raise ValueError(f'Minutes and seconds must be less than 60: {s!r}')
    return from_sexa(m['sign'] == '-', d, mins, secs)

def parse_angle(s):
    """Parse a sexagesimal angle in degrees, returning radians"""
    return np.deg2rad(parse_sexa(s))

def parse_hour_angle(s):
    """Parse a sexagesimal value in hours, returning radians"""
    return parse_sexa(s) / 12 * np.pi
