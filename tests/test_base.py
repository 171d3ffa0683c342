import pytest
import numpy as np

from meeus import base, iterate
from meeus.errors import NoConvergenceError

def test_horner():
    # 3 + 2x + x²
    assert base.horner(2., (3, 2, 1)) == 11
    assert base.horner(-1.5, [5.]) == 5
    with pytest.raises(ValueError):
        base.horner(1., [])

@pytest.mark.parametrize('x,y,expected', [
    (370., 360., 10.),
    (-10., 360., 350.),
    (720., 360., 0.),
    (-7., 2*np.pi, -7 + 4*np.pi),
    (-1e-20, 2*np.pi, 0.),
])
def test_pmod(x, y, expected):
    r = base.pmod(x, y)
    assert 0 <= r < y
    assert r == pytest.approx(expected, abs=1e-12)

def test_hav():
    assert base.hav(0.) == 0
    assert base.hav(np.pi) == pytest.approx(1.)
    assert base.hav(np.pi/2) == pytest.approx(.5)

def test_epochs():
    assert base.julian_year_to_jde(2000) == base.J2000
    assert base.jde_to_julian_year(base.J2000 + base.JULIAN_YEAR) == pytest.approx(2001)
    assert base.besselian_year_to_jde(1950) == pytest.approx(base.B1950, abs=1e-4)
    assert base.jde_to_besselian_year(base.B1900) == pytest.approx(1900)
    assert base.j2000_century(base.J2000 + base.JULIAN_CENTURY) == pytest.approx(1)

def test_light_time():
    # one AU is about 499 seconds
    assert base.light_time(1.)*86400 == pytest.approx(499.0, abs=.1)

def test_obliquity_j2000():
    eps = np.arctan2(base.S_OBL_J2000, base.C_OBL_J2000)
    assert np.rad2deg(eps) == pytest.approx(23.4392911, abs=1e-5)

## iterate

def test_decimal_places():
    x = iterate.decimal_places(np.cos, 1., 8, 100)
    assert x == pytest.approx(.7390851332, abs=1e-7)

def test_decimal_places_no_convergence():
    with pytest.raises(NoConvergenceError) as info:
        iterate.decimal_places(lambda x: x + 1, 0., 5, 10)
    assert info.value.iterations == 10

def test_full_precision():
    x = iterate.full_precision(lambda x: (x + 2/x)/2, 1., 20)
    assert x == pytest.approx(np.sqrt(2), rel=1e-15)
    with pytest.raises(NoConvergenceError):
        iterate.full_precision(lambda x: -x + 1e-3, 1., 20)

def test_binary_root():
    assert iterate.binary_root(lambda x: x*x - 2, 0., 2.) == pytest.approx(np.sqrt(2), abs=1e-14)
    # exact root at a midpoint
    assert iterate.binary_root(lambda x: x - 1, 0., 2.) == 1
