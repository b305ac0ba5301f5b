import math

import pytest

from termsweeper.canvas import Vector2D
from termsweeper.math_helper import deg_to_rad, digits, rad_to_deg, rotate_around


@pytest.mark.parametrize("value", [0, 1, 9, 10, 99, 100, 12345, 10**9])
def test_digits_matches_decimal_length(value):
    assert digits(value) == len(str(value))


def test_digits_negative_is_one():
    assert digits(-42) == 1


def test_degree_radian_conversion():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90)


@pytest.mark.parametrize("degrees", [-3.0, 0.0, 45.0, 361.5])
def test_degree_radian_round_trip(degrees):
    assert rad_to_deg(deg_to_rad(degrees)) == pytest.approx(degrees)


def test_rotate_by_zero_is_identity():
    v = Vector2D(3, -4)
    assert rotate_around(v, 0.0) == v


def test_rotate_quarter_turn():
    assert rotate_around(Vector2D(1, 0), math.pi / 2) == Vector2D(0, 1)


def test_rotate_half_turn_negates():
    v = Vector2D(5, -2)
    assert rotate_around(v, math.pi) == Vector2D(-v.x, -v.y)


def test_rotate_full_turn_returns():
    v = Vector2D(7, 3)
    assert rotate_around(v, 2 * math.pi) == v