"""Display formatting — German (de-DE) number conventions.

Thousands separator ``.``, decimal comma, non-breaking space before the unit:
``1.234,56 €`` · ``12,5 %`` · ``15.000``.
"""

from __future__ import annotations

import math

NBSP = "\u00a0"
NO_BREAK_EVEN = "keine Amortisation"


def _de(text: str) -> str:
    """Swap en-US separators produced by ``format`` for German ones."""
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "∞" if value > 0 else "-∞"


def format_number(value: float, max_decimals: int = 3) -> str:
    """``15000`` → ``15.000``, ``0.3`` → ``0,3``.  Trailing zeros are dropped."""
    if not math.isfinite(value):
        return _non_finite(value)
    text = f"{value:,.{max_decimals}f}"
    if max_decimals > 0:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return _de(text)


def format_currency(value: float, symbol: str = "€") -> str:
    """``1234.5`` → ``1.234,50 €``."""
    if not math.isfinite(value):
        return f"{_non_finite(value)}{NBSP}{symbol}"
    text = f"{value:,.2f}"
    if text == "-0.00":
        text = "0.00"
    return f"{_de(text)}{NBSP}{symbol}"


def format_percentage(fraction: float) -> str:
    """``1.236`` → ``123,6 %``."""
    if not math.isfinite(fraction):
        return f"{_non_finite(fraction)}{NBSP}%"
    return f"{_de(f'{fraction * 100:,.1f}')}{NBSP}%"


def format_years(value: float) -> str:
    """Payback time for display; guards the non-finite and negative cases."""
    if not math.isfinite(value) or value < 0:
        return NO_BREAK_EVEN
    return f"{_de(f'{value:,.1f}')} Jahre"


def format_km(value: float) -> str:
    return f"{format_number(value, 0)} km"


def format_price_per_kwh(value: float) -> str:
    return f"{format_currency(value)}/kWh"
