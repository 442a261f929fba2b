"""Model constants — fixed assumptions of the cost comparison."""

from pydantic import BaseModel, ConfigDict, Field


class ModelConstants(BaseModel):
    """Reference values the projection is built on.

    Not part of the user's input.  Passed explicitly into the engine so a
    caller can vary them per call.
    """

    model_config = ConfigDict(frozen=True)

    consumption_kwh_per_km: float = Field(
        default=0.2, gt=0,
        description="Average EV energy consumption (kWh/km)",
    )
    public_charging_price_per_kwh: float = Field(
        default=0.60, gt=0,
        description="Reference price at public charging stations (€/kWh) — "
                    "the alternative home charging is compared against.",
    )
