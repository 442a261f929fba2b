"""Narrative generator — plain-language interpretation of a calculator result.

Turns a ``CalculatorResult`` into the German texts shown next to the chart:
key insight, total savings, calculation basis and recommendation.  Also
holds the short notification texts the UI shows after an action.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from wallbox_roi.config.constants import ModelConstants
from wallbox_roi.models.results import CalculatorResult
from wallbox_roi.report.formatting import (
    format_currency,
    format_number,
    format_percentage,
)


# ═══════════════════════════════════════════════════════════════════════════
# Notifications
# ═══════════════════════════════════════════════════════════════════════════

class Notification(BaseModel):
    """A short success / error message for the UI."""
    level: Literal["success", "error"]
    title: str
    description: str


NotificationKind = Literal[
    "calculation_success",
    "calculation_error",
    "pdf_success",
    "pdf_error",
    "email_success",
    "email_error",
]

_NOTIFICATIONS: dict[str, tuple[str, str, str]] = {
    "calculation_success": (
        "success", "Berechnung erfolgreich",
        "Ihre persönliche ROI-Analyse ist jetzt verfügbar.",
    ),
    "calculation_error": (
        "error", "Fehler bei der Berechnung",
        "Bitte versuchen Sie es erneut.",
    ),
    "pdf_success": (
        "success", "PDF-Download erfolgreich",
        "Ihre ROI-Analyse wurde heruntergeladen.",
    ),
    "pdf_error": (
        "error", "Fehler beim Generieren des PDFs",
        "Bitte versuchen Sie es erneut.",
    ),
    "email_success": (
        "success", "PDF wurde per E-Mail verschickt",
        "Überprüfen Sie Ihren Posteingang.",
    ),
    "email_error": (
        "error", "Fehler beim Versenden der E-Mail",
        "Bitte versuchen Sie es später erneut.",
    ),
}


def build_notification(kind: NotificationKind) -> Notification:
    level, title, description = _NOTIFICATIONS[kind]
    return Notification(level=level, title=title, description=description)


# ═══════════════════════════════════════════════════════════════════════════
# Result texts
# ═══════════════════════════════════════════════════════════════════════════

def key_insight(result: CalculatorResult) -> str:
    """One-sentence payback statement."""
    if not result.reaches_break_even:
        return (
            "Bei Ihrem Strompreis ist Heimladen nicht günstiger als öffentliches Laden "
            f"(Differenz {format_currency(result.savings_per_year)} pro Jahr). "
            "Die Wallbox amortisiert sich nicht über die Ladekosten."
        )
    return (
        f"Nach {format_number(result.break_even_year, 1)} Jahren haben Sie die Kosten Ihrer "
        "Wallbox-Installation wieder eingespielt und sparen danach "
        f"{format_currency(result.savings_per_year)} jährlich "
        f"({format_currency(result.savings_per_month)} monatlich)."
    )


def total_savings_statement(result: CalculatorResult) -> str:
    """Net savings at the horizon, also as a share of the investment."""
    text = (
        f"Nach {result.years_to_project} Jahren haben Sie insgesamt "
        f"{format_currency(result.total_savings)} gespart"
    )
    if result.wallbox_cost != 0:
        share = abs(result.total_savings / result.wallbox_cost)
        text += f" - das entspricht {format_percentage(share)} Ihrer ursprünglichen Investition"
    return text + "."


def assumptions(constants: ModelConstants | None = None) -> list[str]:
    c = constants or ModelConstants()
    return [
        f"Verbrauch von {format_number(c.consumption_kwh_per_km)} kWh/km "
        "(durchschnittlicher EV-Verbrauch)",
        f"Öffentliches Laden kostet {format_currency(c.public_charging_price_per_kwh)}/kWh",
        "Lebensdauer der Wallbox: 10+ Jahre",
        "Keine Berücksichtigung von Inflation oder Strompreissteigerungen",
    ]


def generate_narrative(result: CalculatorResult, constants: ModelConstants | None = None) -> str:
    """Full plain-text interpretation of one result.

    Sections:
      1. Key insight
      2. Total savings
      3. Recommendation
      4. Calculation basis
    """
    sections: list[str] = []

    sections.append("=" * 60)
    sections.append("WICHTIGE ERKENNTNIS")
    sections.append("=" * 60)
    sections.append(key_insight(result))

    sections.append("")
    sections.append("=" * 60)
    sections.append("GESAMTERSPARNIS")
    sections.append("=" * 60)
    sections.append(total_savings_statement(result))

    sections.append("")
    sections.append("=" * 60)
    sections.append("HANDLUNGSEMPFEHLUNG")
    sections.append("=" * 60)
    if result.reaches_break_even:
        sections.append(
            "Basierend auf Ihrer Analyse empfehlen wir die Installation einer Wallbox. "
            f"Sie sparen nicht nur {format_currency(result.savings_per_year)} jährlich "
            f"({format_currency(result.savings_per_month)} monatlich), sondern profitieren auch von:\n"
            "  • Bequemem Laden zu Hause ohne Suche nach öffentlichen Ladestationen\n"
            "  • Schutz Ihres Fahrzeugs vor möglichen Beschädigungen an öffentlichen Ladesäulen\n"
            "  • Staatlichen Förderungen, die die Amortisationszeit weiter verkürzen können\n"
            "  • Wertsteigerung Ihrer Immobilie durch zukunftsfähige Ladeinfrastruktur"
        )
    else:
        sections.append(
            "Prüfen Sie zunächst Ihren Stromtarif. Erst wenn Ihr Strompreis unter dem "
            "Preis für öffentliches Laden liegt, spart eine eigene Wallbox Ladekosten."
        )

    sections.append("")
    sections.append("=" * 60)
    sections.append("BERECHNUNGSGRUNDLAGE")
    sections.append("=" * 60)
    sections.append("\n".join(f"  • {line}" for line in assumptions(constants)))

    return "\n".join(sections)
