"""Top-level scenario — bundles form, constants and settings."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from wallbox_roi.config.constants import ModelConstants
from wallbox_roi.config.form import CalculatorForm
from wallbox_roi.config.settings import AppSettings


class Scenario(BaseModel):
    """Complete input bundle for one calculator session."""

    form: CalculatorForm = Field(default_factory=CalculatorForm)
    constants: ModelConstants = Field(default_factory=ModelConstants)
    settings: AppSettings = Field(default_factory=AppSettings)


def load_scenario(path: str | Path) -> Scenario:
    """Load a YAML scenario file.  Missing sections fall back to defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)
