"""FastAPI server — HTTP access to the wallbox ROI calculator.

Run with:
    uvicorn wallbox_roi.api.server:app --reload --port 8000

Or:
    python -m wallbox_roi.api.server

Set ``WALLBOX_ROI_SCENARIO=scenarios/base_case.yaml`` to load the app
settings (simulated delays, file names) from a scenario file.

Endpoints:
    GET  /health         — liveness probe
    GET  /defaults       — default form, model constants, wallbox presets
    GET  /schema         — JSON Schema of the calculator form
    POST /calculate      — run the projection (+ table, narrative, notification)
    POST /report/pdf     — download the PDF report
    POST /report/csv     — download the yearly table as CSV
    POST /report/email   — "send" the PDF report by e-mail (stub)
"""

from __future__ import annotations

import asyncio
import logging
import math
import os
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field

from wallbox_roi import __version__
from wallbox_roi.api.narrative import Notification, build_notification, generate_narrative
from wallbox_roi.config import (
    WALLBOX_INSTALLATION_COSTS,
    AppSettings,
    CalculatorForm,
    CalculatorInput,
    ContactDetails,
    ModelConstants,
    load_scenario,
)
from wallbox_roi.engine.roi import calculate_roi
from wallbox_roi.models.results import CalculatorResult
from wallbox_roi.report.delivery import send_report_via_email
from wallbox_roi.report.pdf import build_pdf_report
from wallbox_roi.report.table import build_yearly_table, yearly_table_csv

logger = logging.getLogger(__name__)

SCENARIO_ENV_VAR = "WALLBOX_ROI_SCENARIO"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Wallbox ROI Calculator API",
    version=__version__,
    description=(
        "Compare home charging with a wallbox against public charging: "
        "yearly and monthly savings, payback time, cumulative cost projection "
        "and a downloadable PDF report."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_settings() -> AppSettings:
    """App settings from the scenario file named in the environment, else defaults."""
    path = os.environ.get(SCENARIO_ENV_VAR)
    if path:
        logger.info("Loading settings from %s", path)
        return load_scenario(path).settings
    return AppSettings()


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    form: CalculatorForm = Field(default_factory=CalculatorForm)
    constants: ModelConstants = Field(
        default_factory=ModelConstants,
        description="Model assumptions. Example: {'public_charging_price_per_kwh': 0.79}",
    )


class ReportRequest(CalculateRequest):
    """Request body for the /report endpoints."""
    contact: ContactDetails


class CalculateResponse(BaseModel):
    """Response from /calculate.

    Non-finite numbers (payback time without savings) are returned as ``null``.
    """
    result: dict[str, Any]
    reaches_break_even: bool
    table: list[dict[str, Any]]
    narrative: str
    notification: Notification


class EmailResponse(BaseModel):
    """Response from /report/email."""
    sent: bool
    email: str
    notification: Notification


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _json_safe(data: dict[str, Any]) -> dict[str, Any]:
    """Replace inf/nan (top level and inside sequences) with None."""
    out: dict[str, Any] = {}
    for key, val in data.items():
        if isinstance(val, (list, tuple)):
            out[key] = [_finite_or_none(v) for v in val]
        else:
            out[key] = _finite_or_none(val)
    return out


def _calculate(req: CalculateRequest) -> tuple[CalculatorInput, CalculatorResult]:
    inputs = req.form.to_calculator_input()
    return inputs, calculate_roi(inputs, req.constants)


def _render_pdf(req: ReportRequest) -> bytes:
    inputs, result = _calculate(req)
    try:
        return build_pdf_report(result, inputs, req.contact)
    except Exception as exc:
        logger.exception("PDF generation failed")
        raise HTTPException(
            status_code=500,
            detail=build_notification("pdf_error").model_dump(),
        ) from exc


def _attachment(file_name: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{file_name}"'}


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to start."""
    return {
        "name": "Wallbox ROI Calculator API",
        "version": __version__,
        "start_here": "GET /defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/defaults")
def get_defaults():
    """Default form values, model constants and wallbox cost presets."""
    return {
        "form": CalculatorForm().model_dump(),
        "constants": ModelConstants().model_dump(),
        "wallbox_presets": dict(WALLBOX_INSTALLATION_COSTS),
    }


@app.get("/schema")
def get_schema():
    """JSON Schema of the calculator form, including slider ranges."""
    return CalculatorForm.model_json_schema()


@app.post("/calculate", response_model=CalculateResponse)
async def calculate(req: CalculateRequest, settings: AppSettings = Depends(get_settings)):
    """Run the ROI projection.

    Example minimal request:
    ```json
    {"form": {"km_per_year": 20000, "electricity_cost": 0.25}}
    ```
    """
    if settings.calculation_delay_seconds > 0:
        await asyncio.sleep(settings.calculation_delay_seconds)

    _, result = _calculate(req)
    table = [_json_safe(row) for row in build_yearly_table(result).to_dict(orient="records")]
    logger.info(
        "Calculated ROI: %.0f km/yr, %.2f €/kWh, %.0f € → %.2f €/yr",
        req.form.km_per_year, req.form.electricity_cost, req.form.wallbox_cost,
        result.savings_per_year,
    )
    return CalculateResponse(
        result=_json_safe(result.model_dump()),
        reaches_break_even=result.reaches_break_even,
        table=table,
        narrative=generate_narrative(result, req.constants),
        notification=build_notification("calculation_success"),
    )


@app.post("/report/pdf")
def report_pdf(req: ReportRequest, settings: AppSettings = Depends(get_settings)):
    """The PDF report as an ``application/pdf`` attachment."""
    pdf_bytes = _render_pdf(req)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers=_attachment(settings.report_file_name),
    )


@app.post("/report/csv")
def report_csv(req: CalculateRequest, settings: AppSettings = Depends(get_settings)):
    """The yearly table as a German-locale CSV attachment."""
    _, result = _calculate(req)
    return Response(
        content=yearly_table_csv(result),
        media_type="text/csv; charset=utf-8",
        headers=_attachment(settings.csv_file_name),
    )


@app.post("/report/email", response_model=EmailResponse)
async def report_email(req: ReportRequest, settings: AppSettings = Depends(get_settings)):
    """Build the PDF and hand it to the e-mail stub."""
    pdf_bytes = _render_pdf(req)
    email = str(req.contact.email)
    try:
        sent = await send_report_via_email(email, pdf_bytes, delay_seconds=settings.email_delay_seconds)
    except ValueError as exc:
        logger.exception("E-mail delivery failed")
        raise HTTPException(
            status_code=502,
            detail=build_notification("email_error").model_dump(),
        ) from exc
    return EmailResponse(
        sent=sent,
        email=email,
        notification=build_notification("email_success" if sent else "email_error"),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "wallbox_roi.api.server:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8000)),
        reload=True,
    )


if __name__ == "__main__":
    main()
