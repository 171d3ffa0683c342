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

"""Julian days, calendars, and the UT/TT time scales.

Julian days come in two flavors which the book writes as JD (universal time)
and JDE (dynamical time). They differ by ΔT, about a minute in the present
era. :class:`JD` and :class:`JDE` are float subclasses that refuse to be
mixed: subtracting a JD from a JDE is a TypeError. Convert explicitly with
:meth:`JD.to_jde` or :meth:`JDE.to_jd`. Every function in the package also
accepts plain floats.
"""

import re
import time
import datetime
import numpy as np

#Julian day of the POSIX epoch, 1970-01-01T00:00:00Z
UNIX_EPOCH = 2440587.5

#first day of the Gregorian calendar, 1582 October 15
GREGORIAN_START = 2299161

class _Instant(float):
    __slots__ = ()

    def __repr__(self):
        return f'{type(self).__name__}({float(self)!r})'

    def _check(self, other):
        if isinstance(other, _Instant) and type(other) is not type(self):
            raise TypeError(f'cannot mix {type(self).__name__} and {type(other).__name__}; '
                            'convert with to_jde() or to_jd()')

    def __add__(self, days):
        if isinstance(days, _Instant):
            self._check(days)
            raise TypeError(f'cannot add two {type(self).__name__} values')
        r = float.__add__(self, days)
        if r is NotImplemented:
            return r
        return type(self)(r)

    __radd__ = __add__

    def __sub__(self, other):
        """instant - instant is a plain number of days, instant - days is an instant"""
        if isinstance(other, _Instant):
            self._check(other)
            return float(self) - float(other)
        r = float.__sub__(self, other)
        if r is NotImplemented:
            return r
        return type(self)(r)

    def __lt__(self, other):
        self._check(other)
        return float(self) < other

    def __le__(self, other):
        self._check(other)
        return float(self) <= other

    def __gt__(self, other):
        self._check(other)
        return float(self) > other

    def __ge__(self, other):
        self._check(other)
        return float(self) >= other

    def __eq__(self, other):
        self._check(other)
        return float.__eq__(self, other)

    def __ne__(self, other):
        self._check(other)
        return float.__ne__(self, other)

    __hash__ = float.__hash__

    def calendar(self):
        """(year, month, fractional day)"""
        return jd_to_calendar(float(self))

class JD(_Instant):
    """Julian day in universal time"""
    __slots__ = ()

    def to_jde(self, delta_t):
        """Convert to dynamical time. delta_t = TT - UT in seconds"""
        return JDE(float(self) + delta_t / 86400.0)

class JDE(_Instant):
    """Julian ephemeris day, in dynamical time"""
    __slots__ = ()

    def to_jd(self, delta_t):
        """Convert to universal time. delta_t = TT - UT in seconds"""
        return JD(float(self) - delta_t / 86400.0)

## Calendars

def calendar_gregorian_to_jd(y, m, d):
    """Julian day from a date in the (proleptic) Gregorian calendar.

    Parameters
    ----------
    y, m : int
        year (astronomical numbering, 0 = 1 BC) and month
    d : float
        day of month, with fraction

    Returns
    -------
    jd : float
    """
    if m <= 2:
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    # (7.1) p. 61
    return (36525*(y + 4716)) // 100 + (306*(m + 1)) // 10 + b + d - 1524.5

def calendar_julian_to_jd(y, m, d):
    """Julian day from a date in the Julian calendar"""
    if m <= 2:
        y -= 1
        m += 12
    return (36525*(y + 4716)) // 100 + (306*(m + 1)) // 10 + d - 1524.5

def leap_year_julian(y):
    return y % 4 == 0

def leap_year_gregorian(y):
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0

def jd_to_calendar(jd, gregorian=None):
    """Calendar date from a Julian day, p. 63

    Parameters
    ----------
    jd : float
    gregorian : bool or None
        None (default) uses the Julian calendar before 1582 October 15 and
        the Gregorian after. True or False forces one calendar.

    Returns
    -------
    year, month : int
    day : float
    """
    jd = float(jd)
    z = int(np.floor(jd + .5))
    f = jd + .5 - z
    if gregorian is None:
        gregorian = z >= GREGORIAN_START
    a = z
    if gregorian:
        alpha = (z*100 - 186721625) // 3652425
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = (b*100 - 12210) // 36525
    d = (36525*c) // 100
    e = ((b - d)*10000) // 306001
    day = (b - d) - (306001*e) // 10000 + f
    month = e - 13 if e >= 14 else e - 1
    year = c - 4715 if month <= 2 else c - 4716
    return year, month, day

def day_of_week(jd):
    """0 = Sunday ... 6 = Saturday"""
    return int(np.floor(jd + 1.5)) % 7

def _whole_months(m, k):
    return 275*m // 9 - k*((m + 9) // 12) - 30

def day_of_year(y, m, d, leap=None):
    """Day number within the year, p. 65

    If leap is None the Gregorian leap year rule is used.
    """
    if leap is None:
        leap = leap_year_gregorian(y)
    k = 1 if leap else 2
    return _whole_months(m, k) + d

def day_of_year_to_calendar(n, leap):
    """(month, day) from day number within a year, p. 66"""
    k = 1 if leap else 2
    if n < 32:
        m = 1
    else:
        m = (900*(k + n) + 98*275) // 27500
    return m, n - _whole_months(m, k)

def _days_in_month(y, m):
    if m == 2:
        return 29 if leap_year_gregorian(y) else 28
    return 30 if m in (4, 6, 9, 11) else 31

## Timestamps

_iso8601_re = re.compile(r'([+-]?\d{1,4})-?([01]\d)-?([0-3]\d)[T ]([012]\d):?([0-5]\d):?([0-6]\d(?:\.\d+)?)?(?:Z|(?:([+-]\d{2})(?::?(\d{2}))?))?$')
_date_re = re.compile(r'([+-]?\d{1,4})[-/](\d{1,2})[-/](\d{1,2})(?:[T ](\d{1,2}):(\d{2})(?::(\d{2}(?:\.\d+)?))?)?(?:Z|(?:([+-]\d{2})(?::?(\d{2}))?))?$')

def _string_to_jd(s):
    '''parse timestamp string to a Julian day, assumes UTC if timezone is not specified
    strings may be:
     - "now" -- which gets the current time
     - POSIX timestamp string
     - ISO 8601 formatted string (including negative years)
     - year/month/day [hh:mm[:ss]] (including negative years)
    '''
    if s == 'now':
        return time.time()/86400 + UNIX_EPOCH
    try:
        return float(s)/86400 + UNIX_EPOCH
    except ValueError:
        pass
    m = _iso8601_re.match(s) or _date_re.match(s)
    if not m:
        raise ValueError(f'Could not parse timestamp string {s!r} (must be "now" or float or ISO8601)')
    year,month,day,hour,minute,second,tz_hour,tz_minute = m.groups()
    year, month, day = int(year), int(month), int(day)
    hour = int(hour) if hour else 0
    minute = int(minute) if minute else 0
    second = float(second) if second else 0.0
    tz_hour = int(tz_hour) if tz_hour else 0
    tz_minute = int(tz_minute) if tz_minute else 0
    if month < 1 or month > 12 or day < 1 or day > _days_in_month(year, month):
        raise ValueError(f'Invalid date {s!r}')
    if hour > 23 or minute > 59 or second >= 60:
        raise ValueError(f'Invalid time {s!r}')
    if tz_minute > 59:
        raise ValueError(f'Invalid timezone {s!r}')
    tod = (hour + (minute + second/60)/60)/24 # time of day, in days
    if tz_hour < 0 or m.group(7) and m.group(7).startswith('-'):
        tz = tz_hour - tz_minute/60
    else:
        tz = tz_hour + tz_minute/60
    # UTC offsets vary from -12:00 (US Minor Outlying Islands) to +14:00 (Kiribati)
    if tz < -12 or tz > 14:
        raise ValueError(f'Invalid timezone {s!r}')
    return calendar_gregorian_to_jd(year, month, day + tod) - tz/24

_string_to_jd_v = np.vectorize(_string_to_jd, otypes=[float])

@np.vectorize
def _datetime_to_jd(dt):
    '''Julian day from a datetime.datetime object (naive datetimes are local time)'''
    return dt.timestamp()/86400 + UNIX_EPOCH

def time_to_jd(dt):
    """Convert date/times in various formats to Julian days (UT)

    Parameters
    ----------
    dt : array_like
        datetime.datetime, numpy.datetime64, ISO8601 strings, or POSIX
        timestamps (float or int)

    Returns
    -------
    jd : JD or ndarray
        a JD for scalar input, otherwise an array of Julian days
    """
    dt = np.asarray(dt)
    if np.issubdtype(dt.dtype, np.str_):
        jd = _string_to_jd_v(dt)
    elif dt.dtype == object:
        jd = _datetime_to_jd(dt)
    elif np.issubdtype(dt.dtype, np.datetime64):
        jd = dt.astype('datetime64[us]').astype(np.int64)/86400e6 + UNIX_EPOCH
    else:
        jd = dt/86400 + UNIX_EPOCH
    jd = np.asarray(jd, dtype=float)
    if jd.ndim == 0:
        return JD(jd)
    return jd

def jd_to_iso8601(jd):
    '''Format a Julian day as ISO8601 (proleptic Gregorian, UTC) with millisecond precision'''
    z = np.floor(float(jd) + .5) #day number, starting at midnight
    ms = round((float(jd) + .5 - z)*86400000) #milliseconds into the day
    if ms == 86400000:
        z, ms = z + 1, 0
    year, month, fday = jd_to_calendar(z - .5, gregorian=True)
    day = int(round(fday))
    hour, ms = divmod(ms, 3600000) #hour, ms into the hour
    minute, ms = divmod(ms, 60000) #minute, ms into the minute
    sec, ms = divmod(ms, 1000) #second, millisecond
    sign = '-' if year < 0 else ''
    return f'{sign}{abs(year):04}-{month:02}-{day:02}T{hour:02}:{minute:02}:{sec:02}.{ms:03}Z'
