"""Tests for config/ — form validation, presets, settings and YAML scenarios."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wallbox_roi.config import (
    WALLBOX_INSTALLATION_COSTS,
    AppSettings,
    CalculatorForm,
    ContactDetails,
    ModelConstants,
    Scenario,
    load_scenario,
)
from wallbox_roi.engine.roi import calculate_roi


# ═══════════════════════════════════════════════════════════════════════════
# Calculator form
# ═══════════════════════════════════════════════════════════════════════════

class TestCalculatorForm:

    def test_defaults(self):
        f = CalculatorForm()
        assert f.km_per_year == 15_000
        assert f.electricity_cost == 0.30
        assert f.wallbox_device_cost == 1_100
        assert f.wallbox_installation_cost == 1_100
        assert f.years_to_project == 10

    def test_wallbox_cost_is_device_plus_installation(self):
        f = CalculatorForm(wallbox_device_cost=900, wallbox_installation_cost=1_400)
        assert f.wallbox_cost == 2_300

    def test_to_calculator_input(self, form):
        inputs = form.to_calculator_input()
        assert inputs.km_per_year == 15_000
        assert inputs.electricity_cost == 0.30
        assert inputs.wallbox_cost == 2_200
        assert inputs.years_to_project == 10

    @pytest.mark.parametrize("field, value", [
        ("km_per_year", 1_000),
        ("km_per_year", 100_000),
        ("electricity_cost", 0.10),
        ("electricity_cost", 1.00),
        ("wallbox_device_cost", 5_000),
        ("wallbox_installation_cost", 500),
        ("years_to_project", 1),
        ("years_to_project", 30),
    ])
    def test_bounds_are_inclusive(self, field, value):
        f = CalculatorForm(**{field: value})
        assert getattr(f, field) == value

    @pytest.mark.parametrize("field, value, message", [
        ("km_per_year", 999, "Mindestens 1.000 km pro Jahr."),
        ("km_per_year", 100_001, "Maximal 100.000 km pro Jahr."),
        ("electricity_cost", 0.05, "Mindestens 0,10 € pro kWh."),
        ("electricity_cost", 1.5, "Maximal 1,00 € pro kWh."),
        ("wallbox_device_cost", 499, "Mindestens 500 € für die Wallbox."),
        ("wallbox_installation_cost", 5_001, "Maximal 5.000 € für die Installation."),
        ("years_to_project", 0, "Mindestens 1 Jahr."),
        ("years_to_project", 31, "Maximal 30 Jahre."),
    ])
    def test_out_of_range_message(self, field, value, message):
        with pytest.raises(ValidationError) as exc_info:
            CalculatorForm(**{field: value})
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == (field,)
        assert message in errors[0]["msg"]

    def test_form_is_frozen(self, form):
        with pytest.raises(ValidationError):
            form.km_per_year = 20_000

    def test_schema_carries_slider_ranges(self):
        props = CalculatorForm.model_json_schema()["properties"]
        assert props["km_per_year"]["minimum"] == 1_000
        assert props["km_per_year"]["maximum"] == 100_000
        assert props["years_to_project"]["maximum"] == 30


class TestPresets:

    def test_preset_table(self):
        assert WALLBOX_INSTALLATION_COSTS == {
            "basic": 800.0,
            "smart": 1_200.0,
            "premium": 1_800.0,
            "complete": 2_200.0,
        }

    def test_complete_preset_matches_default_form(self):
        assert CalculatorForm.from_preset("complete") == CalculatorForm()

    def test_preset_split_evenly(self):
        f = CalculatorForm.from_preset("premium")
        assert f.wallbox_device_cost == 900
        assert f.wallbox_installation_cost == 900
        assert f.wallbox_cost == WALLBOX_INSTALLATION_COSTS["premium"]

    def test_basic_preset_raised_to_minimum(self):
        f = CalculatorForm.from_preset("basic")
        assert f.wallbox_device_cost == 500
        assert f.wallbox_installation_cost == 500

    def test_preset_with_overrides(self):
        f = CalculatorForm.from_preset("smart", km_per_year=25_000, wallbox_installation_cost=1_000)
        assert f.km_per_year == 25_000
        assert f.wallbox_device_cost == 600
        assert f.wallbox_installation_cost == 1_000


class TestContactDetails:

    def test_valid_email(self):
        c = ContactDetails(email="erika.musterfrau@beispiel.de")
        assert str(c.email) == "erika.musterfrau@beispiel.de"

    @pytest.mark.parametrize("email", ["", "keine-adresse", "a@", "@beispiel.de"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError):
            ContactDetails(email=email)


# ═══════════════════════════════════════════════════════════════════════════
# Constants and settings
# ═══════════════════════════════════════════════════════════════════════════

def test_model_constant_defaults():
    c = ModelConstants()
    assert c.consumption_kwh_per_km == 0.2
    assert c.public_charging_price_per_kwh == 0.60


def test_model_constants_must_be_positive():
    with pytest.raises(ValidationError):
        ModelConstants(consumption_kwh_per_km=0)
    with pytest.raises(ValidationError):
        ModelConstants(public_charging_price_per_kwh=-0.1)


def test_app_settings_defaults():
    s = AppSettings()
    assert s.calculation_delay_seconds == 0.8
    assert s.email_delay_seconds == 1.5
    assert s.report_file_name == "wallbox-roi-analyse.pdf"


def test_app_settings_reject_negative_delay():
    with pytest.raises(ValidationError):
        AppSettings(email_delay_seconds=-1)


# ═══════════════════════════════════════════════════════════════════════════
# YAML scenarios
# ═══════════════════════════════════════════════════════════════════════════

class TestScenarioLoading:

    def test_base_case_matches_fixtures(self, base_case_path, form, constants):
        scenario = load_scenario(base_case_path)
        assert scenario.form == form
        assert scenario.constants == constants
        assert scenario.settings.email_delay_seconds == 1.5

    def test_base_case_result(self, base_case_path):
        scenario = load_scenario(base_case_path)
        r = calculate_roi(scenario.form.to_calculator_input(), scenario.constants)
        assert r.savings_per_year == pytest.approx(900)
        assert r.total_savings == pytest.approx(6_800)

    def test_missing_sections_fall_back_to_defaults(self, base_case_path):
        scenario = load_scenario(base_case_path.parent / "expensive_power.yaml")
        assert scenario.constants == ModelConstants()
        assert scenario.settings.report_file_name == "wallbox-roi-analyse.pdf"
        assert scenario.settings.calculation_delay_seconds == 0

    def test_expensive_power_never_breaks_even(self, base_case_path):
        scenario = load_scenario(base_case_path.parent / "expensive_power.yaml")
        r = calculate_roi(scenario.form.to_calculator_input(), scenario.constants)
        assert not r.reaches_break_even
        assert r.years_to_project == 15

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_scenario(path) == Scenario()

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("form:\n  years_to_project: 50\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Maximal 30 Jahre"):
            load_scenario(path)
