"""Tests for report/formatting.py — German number conventions."""

from __future__ import annotations

import math

import pytest

from wallbox_roi.report.formatting import (
    NBSP,
    NO_BREAK_EVEN,
    format_currency,
    format_km,
    format_number,
    format_percentage,
    format_price_per_kwh,
    format_years,
)


@pytest.mark.parametrize("value, expected", [
    (1_234.5, f"1.234,50{NBSP}€"),
    (900, f"900,00{NBSP}€"),
    (75, f"75,00{NBSP}€"),
    (-1_300, f"-1.300,00{NBSP}€"),
    (1_234_567.891, f"1.234.567,89{NBSP}€"),
    (-0.001, f"0,00{NBSP}€"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_currency_non_finite():
    assert format_currency(math.inf) == f"∞{NBSP}€"
    assert format_currency(-math.inf) == f"-∞{NBSP}€"
    assert format_currency(math.nan) == f"NaN{NBSP}€"


@pytest.mark.parametrize("value, expected", [
    (15_000, "15.000"),
    (0.3, "0,3"),
    (0.2, "0,2"),
    (2_200, "2.200"),
    (0, "0"),
    (-0.0001, "0"),
    (1.23456, "1,235"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_without_decimals():
    assert format_number(3_000.4, 0) == "3.000"


def test_format_percentage():
    assert format_percentage(1.236) == f"123,6{NBSP}%"
    assert format_percentage(12.5) == f"1.250,0{NBSP}%"


class TestFormatYears:

    def test_finite(self):
        assert format_years(2_200 / 900) == "2,4 Jahre"

    def test_zero(self):
        assert format_years(0) == "0,0 Jahre"

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, -3.67])
    def test_no_break_even(self, value):
        assert format_years(value) == NO_BREAK_EVEN


def test_format_km():
    assert format_km(15_000) == "15.000 km"


def test_format_price_per_kwh():
    assert format_price_per_kwh(0.6) == f"0,60{NBSP}€/kWh"
