import pytest
import numpy as np
import logging

from meeus import nearparabolic, parabolic
from meeus.errors import NoConvergenceError, PreconditionError

rng = np.random.default_rng(2013)

@pytest.mark.parametrize('q,e,t,nu,r', [
    # test data p. 247
    (.921326, 1, 138.4783, 102.74426, 2.364192),
    (.1, .987, 254.9, 164.50029, 4.063777),
    (.123456, .99997, -30.47, 221.91190, .965053),
    (3.363943, 1.05731, 1237.1, 109.40598, 10.668551),
    (.5871018, .9672746, 20, 52.85331, .729116),
    (.5871018, .9672746, 0, 0, .5871018),
])
def test_anomaly_distance(q, e, t, nu, r):
    time_p = 2451545. + rng.random()*36525
    elements = nearparabolic.Elements(time_p=time_p, p_dis=q, ecc=e)
    v, d = elements.anomaly_distance(time_p + t)
    assert v.deg() == pytest.approx(nu, abs=1e-5)
    assert d == pytest.approx(r, abs=1e-6)

@pytest.mark.parametrize('q,e,t,nu,places', [
    # table p. 248
    (.1, .9, 10, 126, 0),
    (.1, .9, 20, 142, 0),
    (.1, .987, 10, 123, 0),
    (.1, .987, 20, 137, 0),
    (.1, .987, 30, 143, 0),
    (.1, .987, 60, 152, 0),
    (.1, .987, 100, 157, 0),
    (.1, .987, 200, 163, 0),
    (.1, .987, 400, 167, 0),
    (.1, .999, 100, 156, 0),
    (.1, .999, 200, 161, 0),
    (.1, .999, 500, 166, 0),
    (.1, .999, 1000, 169, 0),
    (.1, .999, 5000, 174, 0),
    (1, .99999, 100000, 172.5, 1),
    (1, .99999, 10000000, 178.41, 2),
    (1, .99999, 14000000, 178.58, 2),
    (1, .99999, 17000000, 178.68, 2),
])
def test_convergence_limits(q, e, t, nu, places):
    time_p = 2451545. + rng.random()*36525
    v, _ = nearparabolic.Elements(time_p=time_p, p_dis=q, ecc=e).anomaly_distance(time_p + t)
    assert v.deg() == pytest.approx(nu, abs=10.**-places)

@pytest.mark.parametrize('q,e,t', [
    (.1, .9, 30),
    (.1, .987, 500),
    (1, .99999, 18000000),
])
def test_no_convergence(q, e, t):
    time_p = 2451545.
    with pytest.raises(NoConvergenceError):
        nearparabolic.Elements(time_p=time_p, p_dis=q, ecc=e).anomaly_distance(time_p + t)

def test_parabolic_agreement():
    # with e = 1 the result matches the closed form solution
    q, time_p = .921326, 2451545.
    near = nearparabolic.Elements(time_p=time_p, p_dis=q, ecc=1.)
    para = parabolic.Elements(time_p=time_p, p_dis=q)
    for t in (-200., -3., 5., 138.4783, 1000.):
        v, r = near.anomaly_distance(time_p + t)
        v0, r0 = para.anomaly_distance(time_p + t)
        assert v == pytest.approx(v0 % (2*np.pi), abs=1e-9)
        assert r == pytest.approx(r0, rel=1e-9)

def test_logging(caplog):
    time_p = 2451545.
    with caplog.at_level(logging.DEBUG, logger='meeus.nearparabolic'):
        nearparabolic.Elements(time_p=time_p, p_dis=.1, ecc=.987).anomaly_distance(time_p + 20)
    assert 'iterations' in caplog.text

@pytest.mark.parametrize('q,e', [(0., .99), (-1., .99), (1., 0.), (1., -.5)])
def test_invalid(q, e):
    with pytest.raises(PreconditionError):
        nearparabolic.Elements(time_p=2451545., p_dis=q, ecc=e)
