"""Input collection — the calculator form and its validation rules.

Range checks happen here, before anything reaches the engine.  Messages are
the ones shown next to the form sliders.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from wallbox_roi.config.calculator import CalculatorInput


WallboxTier = Literal["basic", "smart", "premium", "complete"]

# Typical total cost (device + installation) per wallbox type (€)
WALLBOX_INSTALLATION_COSTS: dict[str, float] = {
    "basic": 800.0,
    "smart": 1_200.0,
    "premium": 1_800.0,
    "complete": 2_200.0,
}

DEFAULT_WALLBOX_TIER: WallboxTier = "complete"

# field → (min, max, below-min message, above-max message)
_BOUNDS: dict[str, tuple[float, float, str, str]] = {
    "km_per_year": (
        1_000, 100_000,
        "Mindestens 1.000 km pro Jahr.",
        "Maximal 100.000 km pro Jahr.",
    ),
    "electricity_cost": (
        0.10, 1.00,
        "Mindestens 0,10 € pro kWh.",
        "Maximal 1,00 € pro kWh.",
    ),
    "wallbox_device_cost": (
        500, 5_000,
        "Mindestens 500 € für die Wallbox.",
        "Maximal 5.000 € für die Wallbox.",
    ),
    "wallbox_installation_cost": (
        500, 5_000,
        "Mindestens 500 € für die Installation.",
        "Maximal 5.000 € für die Installation.",
    ),
    "years_to_project": (
        1, 30,
        "Mindestens 1 Jahr.",
        "Maximal 30 Jahre.",
    ),
}


def _range(name: str) -> dict[str, float]:
    low, high, _, _ = _BOUNDS[name]
    return {"minimum": low, "maximum": high}


class CalculatorForm(BaseModel):
    """Values collected from the user, bounded to the slider ranges."""

    model_config = ConfigDict(frozen=True)

    km_per_year: float = Field(
        default=15_000.0,
        description="Annual distance driven (km)",
        json_schema_extra=_range("km_per_year"),
    )
    electricity_cost: float = Field(
        default=0.30,
        description="Home electricity price (€/kWh). Public charging costs 0,60 €/kWh on average.",
        json_schema_extra=_range("electricity_cost"),
    )
    wallbox_device_cost: float = Field(
        default=WALLBOX_INSTALLATION_COSTS[DEFAULT_WALLBOX_TIER] / 2,
        description="Wallbox hardware cost (€)",
        json_schema_extra=_range("wallbox_device_cost"),
    )
    wallbox_installation_cost: float = Field(
        default=WALLBOX_INSTALLATION_COSTS[DEFAULT_WALLBOX_TIER] / 2,
        description="Installation labour cost (€)",
        json_schema_extra=_range("wallbox_installation_cost"),
    )
    years_to_project: int = Field(
        default=10,
        description="Projection horizon (years)",
        json_schema_extra=_range("years_to_project"),
    )

    @field_validator(
        "km_per_year",
        "electricity_cost",
        "wallbox_device_cost",
        "wallbox_installation_cost",
        "years_to_project",
    )
    @classmethod
    def _check_range(cls, value: float, info: ValidationInfo) -> float:
        low, high, too_low, too_high = _BOUNDS[info.field_name]
        if value < low:
            raise ValueError(too_low)
        if value > high:
            raise ValueError(too_high)
        return value

    @property
    def wallbox_cost(self) -> float:
        """Total invested capital = device + installation."""
        return self.wallbox_device_cost + self.wallbox_installation_cost

    @classmethod
    def from_preset(cls, tier: WallboxTier, **overrides) -> CalculatorForm:
        """Form pre-filled with a wallbox preset, split evenly between device and installation.

        Each half is raised to its field minimum, so presets below 1.000 €
        (``basic``) come out slightly above their nominal total.
        """
        half = WALLBOX_INSTALLATION_COSTS[tier] / 2
        values = {
            "wallbox_device_cost": max(half, _BOUNDS["wallbox_device_cost"][0]),
            "wallbox_installation_cost": max(half, _BOUNDS["wallbox_installation_cost"][0]),
        }
        values.update(overrides)
        return cls(**values)

    def to_calculator_input(self) -> CalculatorInput:
        return CalculatorInput(
            km_per_year=self.km_per_year,
            electricity_cost=self.electricity_cost,
            wallbox_cost=self.wallbox_cost,
            years_to_project=self.years_to_project,
        )


class ContactDetails(BaseModel):
    """Contact metadata printed on the report and used for delivery."""

    email: EmailStr = Field(description="Recipient of the ROI report")
