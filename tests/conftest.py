"""Shared test fixtures — inputs matching scenarios/base_case.yaml."""

from __future__ import annotations

from pathlib import Path

import pytest

from wallbox_roi.config import CalculatorForm, CalculatorInput, ContactDetails, ModelConstants
from wallbox_roi.engine.roi import calculate_roi
from wallbox_roi.models.results import CalculatorResult

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def constants() -> ModelConstants:
    return ModelConstants(consumption_kwh_per_km=0.2, public_charging_price_per_kwh=0.60)


@pytest.fixture
def form() -> CalculatorForm:
    return CalculatorForm(
        km_per_year=15_000,
        electricity_cost=0.30,
        wallbox_device_cost=1_100,
        wallbox_installation_cost=1_100,
        years_to_project=10,
    )


@pytest.fixture
def default_input(form: CalculatorForm) -> CalculatorInput:
    return form.to_calculator_input()


@pytest.fixture
def result(default_input: CalculatorInput, constants: ModelConstants) -> CalculatorResult:
    return calculate_roi(default_input, constants)


@pytest.fixture
def no_savings_result(constants: ModelConstants) -> CalculatorResult:
    """Home price equals the public price — the wallbox never pays back."""
    inputs = CalculatorInput(km_per_year=15_000, electricity_cost=0.60, wallbox_cost=2_200, years_to_project=10)
    return calculate_roi(inputs, constants)


@pytest.fixture
def contact() -> ContactDetails:
    return ContactDetails(email="max.mustermann@beispiel.de")


@pytest.fixture
def base_case_path() -> Path:
    return SCENARIOS_DIR / "base_case.yaml"
