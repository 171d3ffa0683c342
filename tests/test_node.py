import pytest
import numpy as np

from meeus import julian, node
from meeus.julian import JDE

@pytest.fixture
def halley():
    # Example 39.a, p. 273
    return 17.9400782, .96727426, np.deg2rad(111.84644), julian.calendar_gregorian_to_jd(1986, 2, 9.45891)

def test_elliptic_ascending(halley):
    jde, r = node.elliptic_ascending(*halley)
    assert isinstance(jde, JDE)
    y, m, d = julian.jd_to_calendar(jde)
    assert (y, m) == (1985, 11)
    assert d == pytest.approx(9.16, abs=.005)
    assert r == pytest.approx(1.8045, abs=5e-5)

def test_elliptic_descending(halley):
    jde, r = node.elliptic_descending(*halley)
    y, m, d = julian.jd_to_calendar(jde)
    assert (y, m) == (1986, 3)
    assert d == pytest.approx(10.37, abs=.005)
    assert r == pytest.approx(.8493, abs=5e-5)

@pytest.fixture
def comet():
    # Example 39.b, p. 275
    return 1.324502, np.deg2rad(154.9103), julian.calendar_gregorian_to_jd(1989, 8, 20.291)

def test_parabolic_ascending(comet):
    jde, r = node.parabolic_ascending(*comet)
    y, m, d = julian.jd_to_calendar(jde)
    assert (y, m, int(d)) == (1977, 9, 17)
    assert r == pytest.approx(28.07, abs=.005)

def test_parabolic_descending(comet):
    jde, r = node.parabolic_descending(*comet)
    y, m, d = julian.jd_to_calendar(jde)
    assert (y, m) == (1989, 9)
    assert d == pytest.approx(17.636, abs=5e-4)
    assert r == pytest.approx(1.3901, abs=5e-5)

def test_circular_nodes():
    # on a circular orbit with perihelion at the ascending node the nodes are half a period apart
    a = 1.
    asc, r1 = node.elliptic_ascending(a, 0., 0., 2451545.)
    desc, r2 = node.elliptic_descending(a, 0., 0., 2451545.)
    assert asc == pytest.approx(2451545.)
    assert desc - asc == pytest.approx(365.2568983/2, rel=1e-6)
    assert r1 == r2 == pytest.approx(a)
