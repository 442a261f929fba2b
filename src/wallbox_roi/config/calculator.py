"""Engine input — one projection request."""

from pydantic import BaseModel, ConfigDict, Field


class CalculatorInput(BaseModel):
    """Pre-validated numeric input for the ROI engine.

    Range checks live in :class:`~wallbox_roi.config.form.CalculatorForm`.
    The engine accepts any number here and still returns a consistent result.
    """

    model_config = ConfigDict(frozen=True)

    km_per_year: float = Field(description="Annual distance driven (km)")
    electricity_cost: float = Field(description="Home electricity price (€/kWh)")
    wallbox_cost: float = Field(description="One-time wallbox cost, device + installation (€)")
    years_to_project: int = Field(default=10, ge=1, description="Projection horizon (years)")
