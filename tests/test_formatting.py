"""Tests for number parsing and display formatting."""

import math

import pytest

from session import CalculatorSession
from utils import parse_number, format_number, is_finite


@pytest.mark.parametrize("value, text", [
    (14.0, "14"),
    (-5.0, "-5"),
    (0.25, "0.25"),
    (1e-05, "0.00001"),
    (1e21, "1e+21"),
    (1.5e-08, "1.5e-8"),
    (1e-07, "1e-7"),
    (5e-07, "5e-7"),
    (1e-06, "0.000001"),
    (2.0 ** 53, "9007199254740992"),
    (123456789012345678901.0, "123456789012345680000"),
    (float("inf"), "Infinity"),
    (float("-inf"), "-Infinity"),
    (float("nan"), "NaN"),
])
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize("text, value", [
    ("3.", 3.0),
    ("12abc", 12.0),
    ("-7.5", -7.5),
    ("1e+21", 1e21),
    ("Infinity", float("inf")),
    ("-Infinity", float("-inf")),
])
def test_parse_number(text, value):
    assert parse_number(text) == value


@pytest.mark.parametrize("text", [".", "-", "NaN", "Infinit", ""])
def test_parse_number_not_a_number(text):
    assert math.isnan(parse_number(text))


def test_is_finite():
    assert is_finite(1.0)
    assert not is_finite(float("inf"))
    assert not is_finite(float("nan"))


def test_small_reciprocal_uses_exponent_form():
    assert CalculatorSession().press("5000000 r") == "2e-7"
