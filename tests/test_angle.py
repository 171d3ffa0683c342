import pytest
import numpy as np

from meeus import angle, julian, sexagesimal
from meeus.units import Angle, RA
from meeus.errors import InvalidLengthError, NoConvergenceError, OutOfRangeError

# Example 17.a, p. 110
ARCTURUS = RA.from_hms(14, 15, 39.7), Angle.from_sexa(False, 19, 10, 57)
SPICA = RA.from_hms(13, 25, 11.6), Angle.from_sexa(True, 11, 9, 41)

@pytest.mark.parametrize('method', [angle.sep, angle.sep_hav, angle.sep_pauwels])
def test_sep(method):
    d = method(*ARCTURUS, *SPICA)
    assert isinstance(d, Angle)
    assert sexagesimal.fmt_angle(d) == '32°47′35″'

@pytest.mark.parametrize('method', [angle.sep, angle.sep_hav, angle.sep_pauwels])
def test_sep_wide(method):
    # exercise, p. 110
    d = method(RA.from_hms(4, 35, 55.2), Angle.from_sexa(False, 16, 30, 33),
               RA.from_hms(16, 29, 24), Angle.from_sexa(True, 26, 25, 55))
    assert d == pytest.approx(Angle.from_sexa(False, 169, 58, 0), abs=1e-4)

def test_sep_small():
    # below 10′ the approximation is used, and agrees with the exact formulas
    r1, d1 = 1., .5
    r2, d2 = r1 + 1e-6, d1 - 2e-6
    d = angle.sep(r1, d1, r2, d2)
    assert d == pytest.approx(angle.sep_pauwels(r1, d1, r2, d2), rel=1e-6)
    assert d == pytest.approx(angle.sep_hav(r1, d1, r2, d2), rel=1e-6)
    assert angle.sep(r1, d1, r1, d1) == 0

def test_relative_position():
    assert angle.relative_position(0., .1, 0., 0.) == pytest.approx(0.)
    assert angle.relative_position(.01, 0., 0., 0.) == pytest.approx(np.pi/2)
    assert angle.relative_position(-.01, 0., 0., 0.) == pytest.approx(-np.pi/2)

@pytest.fixture
def ephemeris():
    # Mercury and Saturn, p. 111
    r1 = [RA.from_hms(10, 29, 44.27), RA.from_hms(10, 36, 19.63), RA.from_hms(10, 43, 1.75)]
    d1 = [Angle.from_sexa(False, 11, 2, 5.9), Angle.from_sexa(False, 10, 29, 51.7),
          Angle.from_sexa(False, 9, 55, 16.7)]
    r2 = [RA.from_hms(10, 33, 29.64), RA.from_hms(10, 33, 57.97), RA.from_hms(10, 34, 26.22)]
    d2 = [Angle.from_sexa(False, 10, 40, 13.2), Angle.from_sexa(False, 10, 37, 33.4),
          Angle.from_sexa(False, 10, 34, 53.9)]
    jd1 = julian.calendar_gregorian_to_jd(1978, 9, 13)
    jd3 = julian.calendar_gregorian_to_jd(1978, 9, 15)
    return jd1, jd3, r1, d1, r2, d2

def test_min_sep(ephemeris):
    d = angle.min_sep(*ephemeris)
    assert isinstance(d, Angle)
    assert d.deg() == pytest.approx(.5017, rel=1e-3)

def test_min_sep_rect(ephemeris):
    d = angle.min_sep_rect(*ephemeris)
    assert d.sec() == pytest.approx(224, rel=1e-2)

def test_min_sep_rect_no_convergence(ephemeris):
    with pytest.raises(NoConvergenceError):
        angle.min_sep_rect(*ephemeris, max_iterations=1, tolerance=1e-300)

def test_min_sep_rect_receding():
    # body 2 moves straight away from body 1; closest approach is two rows before the first
    r2 = [.001, .002, .003]
    d2 = [.0001, .0002, .0003]
    with pytest.raises(OutOfRangeError):
        angle.min_sep_rect(0., 2., [0., 0., 0.], [0., 0., 0.], r2, d2)

def test_min_sep_wrong_length(ephemeris):
    jd1, jd3, r1, d1, r2, d2 = ephemeris
    with pytest.raises(InvalidLengthError):
        angle.min_sep(jd1, jd3, r1[:2], d1, r2, d2)
    with pytest.raises(InvalidLengthError):
        angle.min_sep_rect(jd1, jd3, r1, d1, r2, d2 + [0.])
