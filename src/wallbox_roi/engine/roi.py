"""ROI projection — home charging vs. public charging.

Pure arithmetic: CalculatorInput + ModelConstants → CalculatorResult.

Key formulas:
  annual_consumption = km_per_year × consumption_kwh_per_km
  savings_per_year   = annual_consumption × (public_price − electricity_cost)
  break_even_year    = wallbox_cost / savings_per_year
  cumulative[i]      = −wallbox_cost + savings_per_year × (i + 1)

Prices are constant over the horizon (no inflation, no discounting).
"""

from __future__ import annotations

import math

from wallbox_roi.config.calculator import CalculatorInput
from wallbox_roi.config.constants import ModelConstants
from wallbox_roi.models.results import CalculatorResult


def _payback_years(capital: float, savings_per_year: float) -> float:
    """capital / savings with IEEE semantics for a zero divisor.

    Float division by zero raises in Python; the payback time instead becomes
    ±inf (or nan for 0 / 0), which callers treat as "never breaks even".
    """
    if savings_per_year == 0:
        if capital == 0 or math.isnan(capital):
            return math.nan
        return math.copysign(math.inf, capital) * math.copysign(1.0, savings_per_year)
    return capital / savings_per_year


def calculate_roi(
    inputs: CalculatorInput,
    constants: ModelConstants | None = None,
) -> CalculatorResult:
    """Project home vs. public charging costs over ``inputs.years_to_project`` years.

    No rounding, no range checks: out-of-range input yields mathematically
    consistent output rather than an exception.
    """
    c = constants or ModelConstants()

    # ── Yearly figures ─────────────────────────────────────────────────
    annual_consumption = inputs.km_per_year * c.consumption_kwh_per_km
    home_cost_per_year = annual_consumption * inputs.electricity_cost
    public_cost_per_year = annual_consumption * c.public_charging_price_per_kwh

    savings_per_year = public_cost_per_year - home_cost_per_year
    savings_per_month = savings_per_year / 12

    break_even_year = _payback_years(inputs.wallbox_cost, savings_per_year)

    # ── Per-year series ────────────────────────────────────────────────
    years_data: list[int] = []
    home_costs: list[float] = []
    public_costs: list[float] = []
    cumulative_savings: list[float] = []

    # Net position starts below zero by the invested capital
    cumulative = -inputs.wallbox_cost

    for year in range(1, inputs.years_to_project + 1):
        years_data.append(year)
        home_costs.append(home_cost_per_year * year)
        public_costs.append(public_cost_per_year * year)

        cumulative += savings_per_year
        cumulative_savings.append(cumulative)

    return CalculatorResult(
        savings_per_year=savings_per_year,
        savings_per_month=savings_per_month,
        break_even_year=break_even_year,
        total_savings=cumulative_savings[-1],
        home_costs=tuple(home_costs),
        public_costs=tuple(public_costs),
        cumulative_savings=tuple(cumulative_savings),
        years_data=tuple(years_data),
        annual_consumption_kwh=annual_consumption,
        home_cost_per_year=home_cost_per_year,
        public_cost_per_year=public_cost_per_year,
        wallbox_cost=inputs.wallbox_cost,
    )
