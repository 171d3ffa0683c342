import pytest
import numpy as np
import typing

from meeus import interp
from meeus.units import Angle, RA, from_sexa
from meeus.errors import (InvalidLengthError, NoXRangeError, OutOfRangeError,
                          NoExtremumError, ExtremumOutsideError, ZeroOutsideError,
                          NoConvergenceError, PreconditionError)

## Len3

def test_len3_interpolate_n():
    # Example 3.a, p. 25
    d3 = interp.Len3(7, 9, [.884226, .877366, .870531])
    assert d3.interpolate_n(4.35/24) == pytest.approx(.876125, abs=5e-7)

def test_len3_interpolate_x():
    d3 = interp.Len3(7, 9, [.884226, .877366, .870531])
    x = 8 + (4 + 21/60)/24 # 8th day at 4:21
    assert d3.interpolate_x(x) == pytest.approx(.876125, abs=5e-7)

def test_len3_quadratic_exact():
    # y = x**2 sampled at 1, 2, 3
    d3 = interp.Len3(1, 3, [1, 4, 9])
    assert d3.interpolate_x(2.5) == pytest.approx(6.25, abs=1e-14)
    assert d3.interpolate_n(.5) == pytest.approx(6.25, abs=1e-14)
    for x in np.linspace(-3, 7, 21):
        assert d3.interpolate_x(x) == pytest.approx(x*x, abs=1e-12)

def test_len3_extrapolation():
    d3 = interp.Len3(1, 3, [1, 4, 9])
    assert d3.interpolate_n(1.5) == pytest.approx(12.25)
    assert d3.interpolate_n(1.0, allow_extrapolation=False) == pytest.approx(9)
    with pytest.raises(OutOfRangeError):
        d3.interpolate_n(1.5, allow_extrapolation=False)
    with pytest.raises(OutOfRangeError):
        d3.interpolate_x(0.5, allow_extrapolation=False)

def test_len3_extremum():
    # Example 3.b, p. 26
    d3 = interp.Len3(12, 20, [1.3814294, 1.3812213, 1.3812453])
    x, y = d3.extremum()
    assert y == pytest.approx(1.3812030, abs=5e-8)
    assert x == pytest.approx(17.5864, abs=5e-5)

def test_len3_extremum_colinear():
    with pytest.raises(NoExtremumError):
        interp.Len3(0, 2, [1, 2, 3]).extremum()

def test_len3_extremum_outside():
    with pytest.raises(ExtremumOutsideError):
        interp.Len3(1, 3, [4, 9, 16]).extremum()

def test_len3_zero():
    # Example 3.c, p. 26
    y = [from_sexa('-', 0, 28, 13.4), from_sexa(False, 0, 6, 46.3), from_sexa(False, 0, 38, 23.2)]
    d3 = interp.Len3(26, 28, y)
    assert d3.zero(False) == pytest.approx(26.79873, abs=5e-6)

def test_len3_zero_strong():
    # Example 3.d, p. 27
    d3 = interp.Len3(-1, 1, [-2, 3, 2])
    assert d3.zero(True) == pytest.approx(-0.720759220056, abs=1e-12)

def test_len3_zero_outside():
    with pytest.raises(ZeroOutsideError):
        interp.Len3(0, 2, [1, 2, 3]).zero(True)

def test_len3_zero_iteration_cap():
    d3 = interp.Len3(26, 28, [-.47, .11, .64])
    with pytest.raises(NoConvergenceError) as e:
        d3.zero(False, max_iterations=1)
    assert e.value.iterations == 1

@pytest.mark.parametrize('y', [[1, 2], [1, 2, 3, 4], []])
def test_len3_invalid_length(y):
    with pytest.raises(InvalidLengthError):
        interp.Len3(0, 1, y)

def test_len3_no_x_range():
    with pytest.raises(NoXRangeError):
        interp.Len3(1, 1, [1, 2, 3])
    # both are precondition violations and ValueErrors
    with pytest.raises(ValueError):
        interp.Len3(1, 1, [1, 2, 3])

def test_len3_immutable_samples():
    y = [1., 4., 9.]
    d3 = interp.Len3(1, 3, y)
    y[1] = 100
    assert d3.interpolate_n(0) == 4
    with pytest.raises(ValueError):
        d3.y[1] = 100

## Table windowing

_table_x1, _table_xn = 0., 10.
_table_y = [x*x for x in range(11)]

@pytest.fixture(params=[0., .2, 2.6, 5., 7.49, 9.5, 10.])
def table_x(request : pytest.FixtureRequest) -> float:
    return request.param

def test_len3_for_interpolate_x(table_x : float):
    d3 = interp.Len3.for_interpolate_x(table_x, _table_x1, _table_xn, _table_y)
    assert d3.xn - d3.x1 == 2
    assert d3.interpolate_x(table_x) == pytest.approx(table_x**2)

def test_len3_for_interpolate_x_window():
    d3 = interp.Len3.for_interpolate_x(2.6, _table_x1, _table_xn, _table_y)
    assert (d3.x1, d3.x3) == (2., 4.)
    #clamped to the first and last full windows
    d3 = interp.Len3.for_interpolate_x(0., _table_x1, _table_xn, _table_y)
    assert (d3.x1, d3.x3) == (0., 2.)
    d3 = interp.Len3.for_interpolate_x(10., _table_x1, _table_xn, _table_y)
    assert (d3.x1, d3.x3) == (8., 10.)

def test_len5_for_interpolate_x(table_x : float):
    d5 = interp.Len5.for_interpolate_x(table_x, _table_x1, _table_xn, _table_y)
    assert d5.xn - d5.x1 == 4
    assert d5.interpolate_x(table_x) == pytest.approx(table_x**2)

def test_for_interpolate_x_outside():
    with pytest.raises(OutOfRangeError):
        interp.Len3.for_interpolate_x(10.5, _table_x1, _table_xn, _table_y)
    d3 = interp.Len3.for_interpolate_x(10.5, _table_x1, _table_xn, _table_y, allow_extrapolation=True)
    assert (d3.x1, d3.x3) == (8., 10.)
    assert d3.interpolate_x(10.5) == pytest.approx(110.25)

def test_for_interpolate_x_short_table():
    with pytest.raises(InvalidLengthError):
        interp.Len3.for_interpolate_x(1, 0, 1, [1, 2])
    with pytest.raises(InvalidLengthError):
        interp.Len5.for_interpolate_x(1, 0, 3, [1, 2, 3, 4])

## Len5

def _len5_moon():
    # Example 3.e, p. 28, in radians
    y = [Angle.from_sexa(False, 0, 54, s) for s in (36.125, 24.606, 15.486, 8.694, 4.133)]
    return interp.Len5(27, 29, y)

def test_len5_interpolate_x():
    d5 = _len5_moon()
    y = d5.interpolate_x(28 + (3 + 20/60)/24)
    assert Angle(y).sec() == pytest.approx(54*60 + 13.369, abs=5e-4)

def test_len5_extrapolation():
    d5 = _len5_moon()
    d5.interpolate_n(2, allow_extrapolation=False)
    with pytest.raises(OutOfRangeError):
        d5.interpolate_n(2.1, allow_extrapolation=False)
    with pytest.raises(OutOfRangeError):
        d5.interpolate_x(26.9, allow_extrapolation=False)

def test_len5_quartic_exact():
    f = lambda x: 3 - x + .5*x**2 - .25*x**3 + .125*x**4
    d5 = interp.Len5(-1, 3, [f(x) for x in (-1, 0, 1, 2, 3)])
    for x in np.linspace(-1, 3, 9):
        assert d5.interpolate_x(x) == pytest.approx(f(x), abs=1e-12)

_len5_exercise_y = [from_sexa('-', 1, 11, 21.23), from_sexa('-', 0, 28, 12.31), from_sexa(False, 0, 16, 7.02),
                    from_sexa(False, 1, 1, 0.13), from_sexa(False, 1, 45, 46.33)]

@pytest.mark.parametrize('strong', [False, True])
def test_len5_zero(strong):
    # Exercise, p. 30
    d5 = interp.Len5(25, 29, _len5_exercise_y)
    z = d5.zero(strong)
    assert z == pytest.approx(26.638587, abs=5e-7)
    # three central rows give a slightly different answer
    z3 = interp.Len3(26, 28, _len5_exercise_y[1:4]).zero(False)
    assert z - z3 == pytest.approx(.000753, abs=5e-7)

@pytest.mark.parametrize('strong', [False, True])
def test_len5_zero_at_center(strong):
    d5 = interp.Len5(-2, 2, [-2, -1, 0, 1, 2])
    assert d5.zero(strong) == pytest.approx(0, abs=1e-5)

def test_len5_extremum():
    f = lambda x: (x - .3)**2 + 1
    d5 = interp.Len5(-2, 2, [f(x) for x in (-2, -1, 0, 1, 2)])
    x, y = d5.extremum()
    assert x == pytest.approx(.3, abs=1e-12)
    assert y == pytest.approx(1, abs=1e-12)

def test_len5_zero_outside():
    d5 = interp.Len5(0, 4, [1, 2, 3, 4, 5])
    with pytest.raises(ZeroOutsideError):
        d5.zero(True)

def test_len5_zero_spurious():
    d5 = interp.Len5(-2, 2, [x**3 + x - 1 for x in (-2, -1, 0, 1, 2)])
    assert d5.zero(True) == pytest.approx(.6823278, abs=1e-7)
    # a loose tolerance stops after one Newton step, at n = 1 where the curve is 1
    with pytest.raises(NoConvergenceError, match="Spurious"):
        d5.zero(True, tolerance=10)

@pytest.mark.parametrize('y', [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], [1, 2, 3]])
def test_len5_invalid_length(y):
    with pytest.raises(InvalidLengthError):
        interp.Len5(0, 1, y)
    with pytest.raises(PreconditionError):
        interp.Len5(0, 1, y)

## Other tables

def test_len4_half():
    # Example 3.f, p. 32
    y = [RA.from_hms(10, 18, 48.732), RA.from_hms(10, 23, 22.835),
         RA.from_hms(10, 27, 57.247), RA.from_hms(10, 32, 31.983)]
    half = RA(interp.len4_half(y))
    assert half.sec() == pytest.approx((10*60 + 25)*60 + 40.001, abs=5e-4)
    with pytest.raises(InvalidLengthError):
        interp.len4_half(y[:3])

class LagrangeCase(typing.NamedTuple):
    x : float
    y : float

_lagrange_table = [(29.43, .4913598528), (30.97, .5145891926), (27.69, .4646875083),
                   (28.11, .4711658342), (31.58, .5236885653), (33.05, .5453707057)]

@pytest.fixture(params=[LagrangeCase(30, .5), LagrangeCase(0, .0000512249), LagrangeCase(90, .9999648100)])
def lagrange_case(request : pytest.FixtureRequest) -> LagrangeCase:
    return request.param

def test_lagrange(lagrange_case : LagrangeCase):
    # exercise, p. 34: the table is sin(x) in degrees
    assert interp.lagrange(lagrange_case.x, _lagrange_table) == pytest.approx(lagrange_case.y, abs=5e-11)

def test_lagrange_poly():
    # Example 3.g, p. 34
    p = interp.lagrange_poly([(1, -6), (3, 6), (4, 9), (6, 15)])
    assert np.allclose(np.asarray(p)*5, [-87, 69, -13, 1])

def test_lagrange_duplicate_x():
    with pytest.raises(NoXRangeError):
        interp.lagrange(1, [(1, 1), (1, 2)])
