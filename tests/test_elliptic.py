import pytest
import numpy as np
import logging

from meeus import elliptic, kepler
from meeus.base import S_OBL_J2000, C_OBL_J2000
from meeus.errors import PreconditionError
from meeus.units import Angle, RA

A, E = 17.9400782, .96727426

def test_velocity():
    # Example 33.c, p. 238
    assert round(elliptic.velocity(A, 1), 2) == 41.53
    assert round(elliptic.v_perihelion(A, E), 2) == 54.52
    assert round(elliptic.v_aphelion(A, E), 2) == .91

@pytest.mark.parametrize('method,expected', [
    # Example 33.d, p. 239
    (elliptic.length1, 77.06),
    (elliptic.length2, 77.09),
    (elliptic.length4, 77.07),
])
def test_length(method, expected):
    assert round(method(A, E), 2) == expected

def test_length_circle():
    for method in (elliptic.length1, elliptic.length2, elliptic.length4):
        assert method(2., 0.) == pytest.approx(4*np.pi)

@pytest.fixture
def encke():
    # elements of Example 33.b, p. 232
    return elliptic.Elements(axis=2.2091404, ecc=.8502196, inc=np.deg2rad(11.94524),
                             arg_p=np.deg2rad(186.23352), node=np.deg2rad(334.75006),
                             time_p=2448192.5 + .54502)

def test_mean_motion(encke):
    # Kepler's third law, (33.6) p. 227
    assert np.rad2deg(encke.mean_motion()) * encke.axis**1.5 == pytest.approx(.9856076686, rel=1e-12)

def test_anomaly_distance(encke):
    jde = 2448170.5
    nu, r = encke.anomaly_distance(jde)
    assert isinstance(nu, Angle)
    M = encke.mean_motion() * (jde - encke.time_p)
    # ν and r are consistent with the solution of Kepler's equation
    Ek = 2*np.arctan(np.sqrt((1 - encke.ecc)/(1 + encke.ecc)) * np.tan(nu/2))
    assert Ek - encke.ecc*np.sin(Ek) == pytest.approx(M, abs=1e-12)
    assert r == pytest.approx(encke.axis*(1 - encke.ecc*np.cos(Ek)), rel=1e-12)

def test_anomaly_distance_fallback(encke, monkeypatch, caplog):
    def failed(e, M, places, max_iterations=None):
        return kepler.Failed('forced', 0)
    expected = encke.anomaly_distance(2448170.5)
    monkeypatch.setattr(kepler, 'attempt_kepler2b', failed)
    with caplog.at_level(logging.DEBUG, logger='meeus.elliptic'):
        nu, r = encke.anomaly_distance(2448170.5)
    assert 'kepler3' in caplog.text
    assert nu == pytest.approx(expected[0], abs=1e-12)
    assert r == pytest.approx(expected[1], rel=1e-12)

def test_heliocentric_equatorial_in_ecliptic():
    el = elliptic.Elements(axis=1.5, ecc=.2, inc=0., arg_p=0., node=0., time_p=2451545.)
    jde = 2451600.
    nu, r = el.anomaly_distance(jde)
    x, y, z = el.heliocentric_equatorial(jde)
    assert x == pytest.approx(r*np.cos(nu), abs=1e-12)
    assert y == pytest.approx(r*np.sin(nu)*C_OBL_J2000, abs=1e-12)
    assert z == pytest.approx(r*np.sin(nu)*S_OBL_J2000, abs=1e-12)

def test_heliocentric_equatorial_distance(encke):
    for jde in (2448000.5, 2448170.5, 2448192.5, 2448500.5):
        _, r = encke.anomaly_distance(jde)
        assert np.linalg.norm(encke.heliocentric_equatorial(jde)) == pytest.approx(r, rel=1e-9)

def test_position():
    # circular orbit at perihelion, Earth a quarter turn ahead
    jde = 2451545.
    el = elliptic.Elements(axis=1., ecc=0., inc=0., arg_p=0., node=0., time_p=jde)
    alpha, delta, psi = el.position(jde, lambda t: (0., -1., 0.))
    assert isinstance(alpha, RA)
    assert alpha.deg() == pytest.approx(315, abs=.02)
    assert delta.deg() == pytest.approx(0, abs=.02)
    assert psi.deg() == pytest.approx(45, abs=.02)

@pytest.mark.parametrize('axis,ecc', [(1., 1.), (1., -.1), (0., .5), (-2., .5)])
def test_invalid(axis, ecc):
    with pytest.raises(PreconditionError):
        elliptic.Elements(axis=axis, ecc=ecc, inc=0., arg_p=0., node=0., time_p=2451545.)
