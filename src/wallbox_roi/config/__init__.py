"""Configuration models — engine input, form, constants and settings."""

from wallbox_roi.config.calculator import CalculatorInput
from wallbox_roi.config.constants import ModelConstants
from wallbox_roi.config.form import (
    WALLBOX_INSTALLATION_COSTS,
    CalculatorForm,
    ContactDetails,
    WallboxTier,
)
from wallbox_roi.config.settings import AppSettings
from wallbox_roi.config.scenario import Scenario, load_scenario

__all__ = [
    "CalculatorInput",
    "ModelConstants",
    "CalculatorForm",
    "ContactDetails",
    "WallboxTier",
    "WALLBOX_INSTALLATION_COSTS",
    "AppSettings",
    "Scenario",
    "load_scenario",
]
