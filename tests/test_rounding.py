import math

import pytest

from labfit.rounding import approximate, round_value, truncate


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (8.7, 0, 9.0),
        (3.2, 0, 3.0),
        (-1.2, 0, -1.0),
        (-1.49, 0, -1.0),
        (1.51, 0, 2.0),
        (1.9256, 1, 1.9),
        (1.9256, 2, 1.93),
        (1.9256, 3, 1.926),
        (1.9256, 4, 1.9256),
    ],
)
def test_round_value(value, decimals, expected):
    assert round_value(value, decimals) == pytest.approx(expected)


def test_round_value_ties_go_down():
    assert round_value(-1.5, 0) == -2.0
    assert round_value(0.5, 0) == 0.0
    assert round_value(2.5, 0) == 2.0


def test_round_value_negative_decimals():
    assert round_value(1234.0, -2) == pytest.approx(1200.0)


def test_truncate():
    assert truncate(0.229, 1) == pytest.approx(0.2)
    assert truncate(-0.229, 1) == pytest.approx(-0.2)


@pytest.mark.parametrize(
    "value, error, expected",
    [
        (10.05, 0.1, (10.05, 0.1)),
        (10.14, 0.22, (10.1, 0.2)),
        (10.14, 0.15, (10.14, 0.15)),
        (10.14, 0.151, (10.1, 0.2)),
        (123.456, 3.0, (123.0, 3.0)),
    ],
)
def test_approximate(value, error, expected):
    assert approximate(value, error) == pytest.approx(expected)


def test_approximate_zero_error_leaves_value():
    assert approximate(1.23456, 0.0) == (1.23456, 0.0)


def test_approximate_non_finite():
    value, error = approximate(float("nan"), 0.22)
    assert math.isnan(value)
    assert error == pytest.approx(0.2)

    value, error = approximate(1.5, float("nan"))
    assert value == 1.5
    assert math.isnan(error)

    assert approximate(1.5, float("inf")) == (0.0, float("inf"))

    value, error = approximate(float("inf"), 0.22)
    assert value == float("inf")
    assert error == pytest.approx(0.2)
