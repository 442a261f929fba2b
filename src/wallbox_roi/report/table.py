"""Yearly table — one row per projected year, shared by dashboard, PDF and CSV."""

from __future__ import annotations

import pandas as pd

from wallbox_roi.models.results import CalculatorResult

COL_YEAR = "Jahr"
COL_HOME_CUMULATIVE = "Kosten Heimladen"
COL_PUBLIC_CUMULATIVE = "Kosten öffentliches Laden"
COL_HOME_YEARLY = "Kosten Heimladen p.a."
COL_PUBLIC_YEARLY = "Kosten öffentliches Laden p.a."
COL_SAVINGS_YEARLY = "Jährliche Ersparnis"
COL_SAVINGS_CUMULATIVE = "Kumulative Ersparnis"

COLUMNS = [
    COL_YEAR,
    COL_HOME_CUMULATIVE,
    COL_PUBLIC_CUMULATIVE,
    COL_HOME_YEARLY,
    COL_PUBLIC_YEARLY,
    COL_SAVINGS_YEARLY,
    COL_SAVINGS_CUMULATIVE,
]


def build_yearly_table(result: CalculatorResult) -> pd.DataFrame:
    """Cumulative and per-year costs plus the running net position.

    Per-year costs are the cumulative value divided by the year label, so the
    table stays derived from the series alone.
    """
    rows = []
    for i, year in enumerate(result.years_data):
        rows.append({
            COL_YEAR: year,
            COL_HOME_CUMULATIVE: result.home_costs[i],
            COL_PUBLIC_CUMULATIVE: result.public_costs[i],
            COL_HOME_YEARLY: result.home_costs[i] / year,
            COL_PUBLIC_YEARLY: result.public_costs[i] / year,
            COL_SAVINGS_YEARLY: result.savings_per_year,
            COL_SAVINGS_CUMULATIVE: result.cumulative_savings[i],
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def yearly_table_csv(result: CalculatorResult) -> str:
    """German-locale CSV (``;`` separator, decimal comma, two decimals)."""
    df = build_yearly_table(result)
    return df.to_csv(index=False, sep=";", decimal=",", float_format="%.2f")
