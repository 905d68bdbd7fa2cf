import numpy as np
import mpmath as mp
import pytest
from numpy.testing import assert_allclose, assert_

from polylogpy import Cl2, Cl3, DOUBLE, EXTENDED
from polylogpy.clausen import reduce_angle

mp.mp.dps = 40

ZETA3 = 1.2020569031595943

theta = np.array([1e-6, 1e-3, 0.1, 0.5, 1., 1.5, np.nextafter(np.pi / 2, 0),
                  np.pi / 2, 2., 2.5, 3., 3.1, 3.14, 4., 5.5, 6.2, 10.])

theta_ld = [np.longdouble(t) for t in
            ('1e-6', '0.001', '0.1', '0.5', '1', '1.5', '1.5707963267948966',
             '2', '2.5', '3', '3.1', '3.14159', '4', '5.5', '6.2', '10')]

needs_extended = pytest.mark.skipif(
    np.finfo(np.longdouble).eps >= np.finfo(np.float64).eps,
    reason='numpy.longdouble is binary64 on this platform')


def reference(func, x):
    """func evaluated with mpmath at the exact value of x, rounded to x's type."""
    num, den = x.as_integer_ratio()
    value = func(mp.mpf(num) / den)
    return type(x)(mp.nstr(value, 30))


def assert_close_ld(value, expected, ulp=64):
    tol = ulp * np.finfo(np.longdouble).eps * max(1, abs(expected))
    assert_(abs(value - expected) <= tol,
            '{!s} != {!s}'.format(value, expected))


def cl2_mp(t):
    return mp.clsin(2, t)


def cl3_mp(t):
    return mp.clcos(3, t)


def test_cl2_special_points():
    for x in (0., np.pi, -np.pi, 2 * np.pi, -4 * np.pi):
        assert_(Cl2(x) == 0)
    assert_allclose(Cl2(np.pi / 2), float(mp.catalan), rtol=2e-15)
    assert_allclose(Cl2(np.pi / 3), 1.0149416064096536, rtol=2e-15)


def test_cl3_special_points():
    assert_(Cl3(0.) == ZETA3)
    assert_(Cl3(2 * np.pi) == ZETA3)
    assert_allclose(Cl3(np.pi), -0.75 * ZETA3, rtol=1e-15)
    assert_allclose(Cl3(np.pi / 2), -3 * ZETA3 / 32, rtol=1e-14)


def test_cl2_against_mpmath():
    expected = [float(cl2_mp(mp.mpf(t))) for t in theta]
    assert_allclose(Cl2(theta), expected, rtol=1e-14, atol=1e-15)


def test_cl3_against_mpmath():
    expected = [float(cl3_mp(mp.mpf(t))) for t in theta]
    assert_allclose(Cl3(theta), expected, rtol=1e-14, atol=1e-15)


def test_parity():
    x = np.linspace(0.01, 12, 57)
    assert_(np.all(Cl2(-x) == -Cl2(x)))
    assert_(np.all(Cl3(-x) == Cl3(x)))


def test_periodicity():
    x = np.linspace(0.5, 3., 11)
    for shift in (2 * np.pi, -2 * np.pi, 20 * np.pi):
        assert_allclose(Cl2(x + shift), Cl2(x), atol=1e-13)
        assert_allclose(Cl3(x + shift), Cl3(x), atol=1e-13)


def test_reflection_about_pi():
    x = np.linspace(3.2, 6.2, 13)
    assert_allclose(Cl2(x), -Cl2(2 * np.pi - x), atol=1e-14)
    assert_allclose(Cl3(x), Cl3(2 * np.pi - x), atol=1e-14)


def test_reduce_angle():
    x, sign = reduce_angle(np.float64(-1.), DOUBLE)
    assert_(x == 1 and sign == -1)
    x, sign = reduce_angle(np.float64(4.), DOUBLE)
    assert_allclose(x, 2 * np.pi - 4, rtol=1e-15)
    assert_(sign == -1)
    x, sign = reduce_angle(np.float64(-4.), DOUBLE)
    assert_(sign == 1)
    x, sign = reduce_angle(np.float64(2 * np.pi + 1), DOUBLE)
    assert_allclose(x, 1, rtol=1e-14)
    assert_(sign == 1)


def test_dtypes():
    assert_(isinstance(Cl2(1.), np.float64))
    assert_(isinstance(Cl3(1), np.float64))
    assert_(isinstance(Cl2(np.float32(1)), np.float64))
    assert_(isinstance(Cl2(np.longdouble(1)), np.longdouble))
    assert_(isinstance(Cl3(np.longdouble(1)), np.longdouble))
    assert_(Cl2([1., 2.]).dtype == np.float64)
    assert_(Cl3(np.ones((2, 3), dtype=np.longdouble)).dtype == np.longdouble)
    assert_(Cl3(np.ones((2, 3), dtype=np.longdouble)).shape == (2, 3))


def test_complex_argument():
    with pytest.raises(TypeError):
        Cl2(1 + 1j)
    with pytest.raises(TypeError):
        Cl3(np.array([1j, 2j]))
    with pytest.raises(TypeError):
        Cl2('1.0')


def test_nan():
    assert_(np.isnan(Cl2(np.nan)))
    assert_(np.isnan(Cl3(np.nan)))


def test_extended_special_points():
    assert_(Cl2(np.longdouble(0)) == 0)
    assert_(Cl2(EXTENDED.pi) == 0)
    assert_(Cl2(-EXTENDED.pi) == 0)
    assert_(Cl3(np.longdouble(0)) == EXTENDED.zeta3)
    assert_close_ld(Cl2(EXTENDED.pih), reference(cl2_mp, EXTENDED.pih))
    assert_close_ld(Cl3(EXTENDED.pi), reference(cl3_mp, EXTENDED.pi))


@pytest.mark.parametrize('x', theta_ld)
def test_extended_cl2_against_mpmath(x):
    assert_close_ld(Cl2(x), reference(cl2_mp, x))


@pytest.mark.parametrize('x', theta_ld)
def test_extended_cl3_against_mpmath(x):
    assert_close_ld(Cl3(x), reference(cl3_mp, x))


def test_extended_parity():
    x = np.linspace(np.longdouble('0.01'), np.longdouble(12), 31)
    assert_(np.all(Cl2(-x) == -Cl2(x)))
    assert_(np.all(Cl3(-x) == Cl3(x)))


def test_extended_agrees_with_double():
    x = np.linspace(0.01, 6.2, 40)
    assert_allclose(Cl2(x.astype(np.longdouble)).astype(np.float64), Cl2(x),
                    rtol=1e-14, atol=1e-15)
    assert_allclose(Cl3(x.astype(np.longdouble)).astype(np.float64), Cl3(x),
                    rtol=1e-14, atol=1e-15)


@needs_extended
def test_extended_beats_double():
    catalan = np.longdouble(mp.nstr(mp.catalan, 30))
    x = EXTENDED.pih
    assert_(abs(Cl2(x) - catalan) < 1e-17)
