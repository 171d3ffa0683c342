import pytest

from meeus import nutation
from meeus.units import Angle

JDE = 2446895.5 # 1987 April 10, 0h TD

def test_nutation():
    # Example 22.a, p. 148
    dpsi, deps = nutation.nutation(JDE)
    assert isinstance(dpsi, Angle)
    assert dpsi.sec() == pytest.approx(-3.788, abs=.01)
    assert deps.sec() == pytest.approx(9.443, abs=.01)

def test_mean_obliquity():
    expected = Angle.from_sexa(False, 23, 26, 27.407).sec()
    assert nutation.mean_obliquity(JDE).sec() == pytest.approx(expected, abs=.001)
    # the two formulas agree closely near J2000
    assert nutation.mean_obliquity_laskar(JDE).sec() == pytest.approx(expected, abs=.01)

def test_true_obliquity():
    expected = Angle.from_sexa(False, 23, 26, 36.850).sec()
    assert nutation.true_obliquity(JDE).sec() == pytest.approx(expected, abs=.02)

def test_obliquity_j2000():
    assert nutation.mean_obliquity(2451545.).sec() == pytest.approx(84381.448)
    assert nutation.mean_obliquity_laskar(2451545.).sec() == pytest.approx(84381.448)
