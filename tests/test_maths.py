import math

import pytest

from motoracer import maths


def test_half_turn_in_radians_is_pi():
    assert maths.to_radians(180.0) == pytest.approx(maths.PI)


def test_pi_in_degrees_is_half_turn():
    assert maths.to_degrees(maths.PI) == pytest.approx(180.0)


@pytest.mark.parametrize("degrees", [-720.0, -45.0, 0.0, 12.5, 90.0, 359.0])
def test_degree_radian_round_trip(degrees):
    assert maths.to_degrees(maths.to_radians(degrees)) == pytest.approx(degrees)


def test_derived_constants_match_conversions():
    assert maths.to_radians(360.0) == pytest.approx(maths.TWO_PI)
    assert maths.to_radians(90.0) == pytest.approx(maths.PI_OVER_2)
    assert maths.clamp(1e308, maths.NEG_INFINITY, maths.INFINITY) == 1e308
    assert maths.clamp(maths.INFINITY, 0.0, 1.0) == 1.0


def test_near_zero_default_epsilon():
    assert maths.near_zero(0.0)
    assert maths.near_zero(0.001)
    assert maths.near_zero(-0.0005)
    assert not maths.near_zero(0.002)
    assert not maths.near_zero(-0.5)


def test_near_zero_custom_epsilon():
    assert maths.near_zero(0.4, 0.5)
    assert not maths.near_zero(0.6, 0.5)


@pytest.mark.parametrize(
    "value, lower, upper, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (42, 0, 10, 10), (2.5, 2.5, 3.0, 2.5)],
)
def test_clamp(value, lower, upper, expected):
    assert maths.clamp(value, lower, upper) == expected


def test_lerp_endpoints_and_midpoint():
    assert maths.lerp(3.0, 11.0, 0.0) == 3.0
    assert maths.lerp(3.0, 11.0, 1.0) == 11.0
    assert maths.lerp(3.0, 11.0, 0.5) == pytest.approx((3.0 + 11.0) / 2)


def test_cot_is_reciprocal_of_tan():
    for angle in (0.3, 1.0, 2.0):
        assert maths.cot(angle) * math.tan(angle) == pytest.approx(1.0)


def test_cot_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        maths.cot(0.0)