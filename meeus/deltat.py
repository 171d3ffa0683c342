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

"""ΔT = TD - UT (chapter 10).

All functions return :class:`meeus.units.Time`, seconds.
"""

import logging
import numpy as np

from .base import horner, J1900, JULIAN_CENTURY
from .interp import Len3
from .julian import jd_to_calendar, leap_year_gregorian, day_of_year
from .units import Time

logger = logging.getLogger(__name__)

#Table 10.A p. 79, every other year from 1620 to 2010
TABLE_YEAR_1 = 1620.
TABLE_YEAR_N = 2010.
TABLE_10A = np.array([
    121.0, 112.0, 103.0, 95.0, 88.0, 82.0, 77.0, 72.0, 68.0, 63.0,
    60.0, 56.0, 53.0, 51.0, 48.0, 46.0, 44.0, 42.0, 40.0, 38.0,
    35.0, 33.0, 31.0, 29.0, 26.0, 24.0, 22.0, 20.0, 18.0, 16.0,
    14.0, 12.0, 11.0, 10.0, 9.0, 8.0, 7.0, 7.0, 7.0, 7.0,

    7.0, 7.0, 8.0, 8.0, 9.0, 9.0, 9.0, 9.0, 9.0, 10.0,
    10.0, 10.0, 10.0, 10.0, 10.0, 10.0, 10.0, 11.0, 11.0, 11.0,
    11.0, 11.0, 12.0, 12.0, 12.0, 12.0, 13.0, 13.0, 13.0, 14.0,
    14.0, 14.0, 14.0, 15.0, 15.0, 15.0, 15.0, 15.0, 16.0, 16.0,

    16.0, 16.0, 16.0, 16.0, 16.0, 16.0, 15.0, 15.0, 14.0, 13.0,
    13.1, 12.5, 12.2, 12.0, 12.0, 12.0, 12.0, 12.0, 12.0, 11.9,
    11.6, 11.0, 10.2, 9.2, 8.2, 7.1, 6.2, 5.6, 5.4, 5.3,
    5.4, 5.6, 5.9, 6.2, 6.5, 6.8, 7.1, 7.3, 7.5, 7.6,

    7.7, 7.3, 6.2, 5.2, 2.7, 1.4, -1.2, -2.8, -3.8, -4.8,
    -5.5, -5.3, -5.6, -5.7, -5.9, -6.0, -6.3, -6.5, -6.2, -4.7,
    -2.8, -0.1, 2.6, 5.3, 7.7, 10.4, 13.3, 16.0, 18.2, 20.2,
    21.1, 22.4, 23.5, 23.8, 24.3, 24.0, 23.9, 23.9, 23.7, 24.0,

    24.3, 25.3, 26.2, 27.3, 28.2, 29.1, 30.0, 30.7, 31.4, 32.2,
    33.1, 34.0, 35.0, 36.5, 38.3, 40.2, 42.2, 44.5, 46.5, 48.5,
    50.5, 52.2, 53.8, 54.9, 55.8, 56.9, 58.3, 60.0, 61.6, 63.0,
    63.8, 64.3, 64.6, 64.8, 65.5, 66.1])
TABLE_10A.setflags(write=False)

def _fractional_year(jd):
    y, m, d = jd_to_calendar(jd)
    leap = leap_year_gregorian(y)
    return y + day_of_year(y, m, int(d + .5), leap) / (366. if leap else 365.)

def interp10a(jde):
    """ΔT by interpolating table 10.A, 1620 to 2010

    Raises OutOfRangeError outside the table.
    """
    return _interp10a(_fractional_year(jde))

def _interp10a(yf):
    d3 = Len3.for_interpolate_x(yf, TABLE_YEAR_1, TABLE_YEAR_N, TABLE_10A)
    return Time(d3.interpolate_x(yf))

def _c2000(y):
    return (y - 2000) * .01

def poly_before_948(year):
    """Polynomial ΔT for years before 948 (10.1) p. 78"""
    return Time(horner(_c2000(year), (2177, 497, 44.1)))

def poly_948_to_1600(year):
    """Polynomial ΔT from 948 to 1600 (10.2) p. 78"""
    return Time(horner(_c2000(year), (102, 102, 25.3)))

def poly_after_2000(year):
    """Polynomial ΔT after 2000, (10.2) with the correction p. 78"""
    dt = horner(_c2000(year), (102, 102, 25.3))
    if year < 2100:
        dt += .37 * (year - 2100)
    return Time(dt)

def _jc1900(jde):
    return (jde - J1900) / JULIAN_CENTURY

def poly_1800_to_1997(jde):
    """Polynomial approximation of table 10.A, 1800 to 1997, max error 2.3 s"""
    return Time(horner(_jc1900(jde), (
        -1.02, 91.02, 265.90, -839.16, -1545.20,
        3603.62, 4385.98, -6993.23, -6090.04,
        6298.12, 4102.86, -2137.64, -1081.51)))

def poly_1800_to_1899(jde):
    """Polynomial approximation of table 10.A, 1800 to 1899, max error .9 s"""
    return Time(horner(_jc1900(jde), (
        -2.50, 228.95, 5218.61, 56282.84, 324011.78,
        1061660.75, 2087298.89, 2513807.78,
        1818961.41, 727058.63, 123563.95)))

def poly_1900_to_1997(jde):
    """Polynomial approximation of table 10.A, 1900 to 1997, max error .9 s"""
    return Time(horner(_jc1900(jde), (
        -2.44, 87.24, 815.20, -2637.80, -18756.33,
        124906.15, -303191.19, 372919.88,
        -232424.66, 58353.42)))

def delta_t(jd):
    """Best available ΔT estimate for a Julian day, picking the method by year.

    Before 948 (10.1), 948 to 1620 (10.2), 1620 to 2010 table 10.A,
    after 2010 (10.2) with the correction for years before 2100.
    """
    year = _fractional_year(float(jd))
    if year < 948:
        method = poly_before_948
        dt = poly_before_948(year)
    elif year < TABLE_YEAR_1:
        method = poly_948_to_1600
        dt = poly_948_to_1600(year)
    elif year <= TABLE_YEAR_N:
        method = interp10a
        dt = _interp10a(year)
    else:
        method = poly_after_2000
        dt = poly_after_2000(year)
    logger.debug('ΔT for year %.2f from %s: %.1f s', year, method.__name__, dt)
    return dt
