import pytest
import numpy as np

from meeus import julian, parabolic
from meeus.errors import PreconditionError
from meeus.units import Angle

@pytest.fixture
def encke():
    # Example 34.a, p. 243
    return parabolic.Elements(time_p=julian.calendar_gregorian_to_jd(1998, 4, 14.4358), p_dis=1.487469)

def test_anomaly_distance(encke):
    nu, r = encke.anomaly_distance(julian.calendar_gregorian_to_jd(1998, 8, 5))
    assert isinstance(nu, Angle)
    assert nu.deg() == pytest.approx(66.78862, abs=5e-6)
    assert r == pytest.approx(2.133911, abs=5e-7)

def test_perihelion(encke):
    nu, r = encke.anomaly_distance(encke.time_p)
    assert nu == 0
    assert r == pytest.approx(encke.p_dis)

def test_symmetry(encke):
    nu, r = encke.anomaly_distance(encke.time_p + np.array([-100., 100.]))
    assert nu[0] == pytest.approx(-nu[1])
    assert r[0] == pytest.approx(r[1])

def test_barker(encke):
    # the result satisfies Barker's equation
    t = np.linspace(-1000, 1000, 41)
    nu, r = encke.anomaly_distance(encke.time_p + t)
    s = np.tan(nu/2)
    W = 3 * .01720209895 / np.sqrt(2) * t / encke.p_dis**1.5
    assert np.allclose(s**3 + 3*s, W, rtol=1e-12, atol=1e-12)

def test_invalid():
    with pytest.raises(PreconditionError):
        parabolic.Elements(time_p=2451545., p_dis=0.)

def test_frozen(encke):
    with pytest.raises(AttributeError):
        encke.p_dis = 2.
