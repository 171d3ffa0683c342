import pytest
import numpy as np

from meeus import solar, _jit
from meeus.units import Angle, RA

try:
    import numba, scipy
except ImportError:
    numba = None

JDE = 2448908.5 # 1992 October 13, 0h TD

def test_earth_heliocentric():
    # Example 25.b, p. 169
    L, B, R = solar.earth_heliocentric(JDE)
    assert isinstance(L, Angle)
    assert L.deg() == pytest.approx(19.907372, abs=1e-5)
    assert B.deg() == pytest.approx(-.000179, abs=1e-5)
    assert R == pytest.approx(.99760775, abs=1e-5)

def test_true_longitude():
    theta, beta, R = solar.true_longitude(JDE)
    assert theta.deg() == pytest.approx(199.907347, abs=1e-5)
    assert abs(beta.sec()) < 1

def test_apparent_longitude():
    lam = solar.apparent_longitude(JDE)
    assert isinstance(lam, Angle)
    assert lam.deg() == pytest.approx(199.906061, abs=5e-4)

def test_apparent_equatorial():
    alpha, delta, R = solar.apparent_equatorial(JDE)
    assert isinstance(alpha, RA)
    assert alpha.deg() == pytest.approx(RA.from_hms(13, 13, 30.75).deg(), abs=1e-3)
    assert delta.deg() == pytest.approx(Angle.from_sexa(True, 7, 47, 1.8).deg(), abs=1e-3)
    assert R == pytest.approx(.99760775, abs=1e-5)

def test_apparent_longitude_range():
    # a year of longitudes, all in [0, 2π) and advancing about a degree a day
    jde = JDE + np.arange(366.)
    lam = solar.apparent_longitude(jde, jit=False)
    assert lam.shape == jde.shape
    assert np.all((lam >= 0) & (lam < 2*np.pi))
    step = np.diff(np.unwrap(lam))
    assert np.all((np.rad2deg(step) > .95) & (np.rad2deg(step) < 1.02))

def test_apparent_longitude_array_matches_scalar():
    jde = JDE + np.array([[0., 10.], [100., 200.]])
    lam = solar.apparent_longitude(jde, jit=False)
    assert lam.shape == (2, 2)
    for t, l in zip(jde.flat, lam.flat):
        assert l == pytest.approx(solar.apparent_longitude(t), abs=1e-14)

def test_apparent_longitude_jit_path():
    # exercises the vectorized loop even when numba is missing
    jde = JDE + np.arange(5.)
    assert np.allclose(solar.apparent_longitude(jde, jit=True), solar.apparent_longitude(jde, jit=False),
                       rtol=0, atol=1e-12)

@pytest.mark.skipif(numba is None, reason='Requires numba')
def test_apparent_longitude_jit():
    jde = JDE + np.linspace(-36525, 36525, 101)
    enabled = _jit.jit_enabled()
    _jit.enable_jit()
    try:
        lam = solar.apparent_longitude(jde)
    finally:
        _jit.enable_jit(enabled)
    assert np.allclose(lam, solar.apparent_longitude(jde, jit=False), rtol=0, atol=1e-10)
