"""Result types — the contract between engine, report and dashboard.

The engine builds one :class:`CalculatorResult` per call.  It is frozen and
its series are tuples, so a result can be shared freely until the next input
change triggers a new computation.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict


class CalculatorResult(BaseModel):
    """Scalar metrics plus aligned per-year series.

    All values are full-precision floats.  Rounding is a display concern.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    # --- Scalars ---
    savings_per_year: float
    """public_cost_per_year − home_cost_per_year (€)."""

    savings_per_month: float
    """savings_per_year / 12 (€)."""

    break_even_year: float
    """wallbox_cost / savings_per_year — simple payback in years.
    ``inf`` when savings are zero, negative when home charging is more
    expensive.  Use :attr:`reaches_break_even` before displaying it.
    JSON keeps non-finite values as ``Infinity`` / ``NaN``."""

    total_savings: float
    """Net position at the end of the horizon = cumulative_savings[-1] (€)."""

    # --- Series (index i = through year i + 1) ---
    home_costs: tuple[float, ...]
    """Cumulative home-charging cost."""

    public_costs: tuple[float, ...]
    """Cumulative public-charging cost."""

    cumulative_savings: tuple[float, ...]
    """Savings so far minus the initial investment."""

    years_data: tuple[int, ...]
    """Year labels 1..years_to_project."""

    # --- Intermediate values (for tables and reports) ---
    annual_consumption_kwh: float
    home_cost_per_year: float
    public_cost_per_year: float
    wallbox_cost: float

    @property
    def years_to_project(self) -> int:
        return len(self.years_data)

    @property
    def reaches_break_even(self) -> bool:
        """True when the payback time is a finite, non-negative number of years."""
        return math.isfinite(self.break_even_year) and self.break_even_year >= 0
