"""PDF report — the downloadable "Wallbox ROI Analyse".

Layout (A4 portrait):
  1. Title, subtitle, creation date
  2. User inputs (e-mail, mileage, electricity price, wallbox cost)
  3. Key results (yearly savings, total savings, payback time)
  4. Year-by-year table (header repeats on every page)
  5. Conclusion
Footer with product name and year on every page.
"""

from __future__ import annotations

import io
import logging
from datetime import date
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table

from wallbox_roi.config.calculator import CalculatorInput
from wallbox_roi.config.form import ContactDetails
from wallbox_roi.models.results import CalculatorResult
from wallbox_roi.report.formatting import (
    format_currency,
    format_km,
    format_number,
    format_years,
)
from wallbox_roi.report.styles import pdf_palette, pdf_styles, yearly_table_style

logger = logging.getLogger(__name__)

REPORT_TITLE = "Wallbox ROI Analyse"
REPORT_SUBTITLE = "Persönliche Wirtschaftlichkeitsberechnung"
FOOTER_TEXT = "Wallbox ROI Kalkulator"

TABLE_HEADER = ["Jahr", "Kosten Heimladen", "Kosten öffentliches Laden", "Kumulative Ersparnis"]


def _inputs_block(inputs: CalculatorInput, contact: ContactDetails, styles) -> list[Any]:
    items = [
        f"E-Mail: {escape(str(contact.email))}",
        f"Jährliche Fahrleistung: {format_km(inputs.km_per_year)}",
        f"Stromkosten zu Hause: {format_number(inputs.electricity_cost)} €/kWh",
        f"Wallbox-Installationskosten: {format_number(inputs.wallbox_cost)} €",
    ]
    story: list[Any] = [Paragraph("Ihre Eingaben:", styles["ReportSection"])]
    story += [Paragraph(text, styles["ReportItem"]) for text in items]
    return story


def _key_results_block(result: CalculatorResult, styles) -> list[Any]:
    items = [
        f"Jährliche Ersparnis: {format_currency(result.savings_per_year)}",
        f"Monatliche Ersparnis: {format_currency(result.savings_per_month)}",
        f"Gesamtersparnis über {result.years_to_project} Jahre: "
        f"{format_currency(result.total_savings)}",
        f"Amortisationszeit: {format_years(result.break_even_year)}",
    ]
    story: list[Any] = [Paragraph("Wichtigste Ergebnisse:", styles["ReportSection"])]
    story += [Paragraph(text, styles["ReportKeyResult"]) for text in items]
    return story


def _table_block(result: CalculatorResult, pal: dict[str, Any], styles, content_w: float) -> list[Any]:
    data: list[list[str]] = [TABLE_HEADER]
    for i, year in enumerate(result.years_data):
        data.append([
            str(year),
            format_currency(result.home_costs[i]),
            format_currency(result.public_costs[i]),
            format_currency(result.cumulative_savings[i]),
        ])

    ratios = [0.6, 1.3, 1.6, 1.5]
    total = sum(ratios)
    t = Table(data, colWidths=[content_w * r / total for r in ratios], repeatRows=1)
    t.setStyle(yearly_table_style(pal, result.cumulative_savings))
    return [Paragraph("Detaillierte Kosteneinsparungen:", styles["ReportSection"]), t]


def _conclusion_block(result: CalculatorResult, styles) -> list[Any]:
    if result.reaches_break_even:
        text = (
            "Mit Ihrer eigenen Wallbox sparen Sie nicht nur Geld, sondern genießen auch "
            "den Komfort des Heimladens und schützen Ihr Fahrzeug vor den Risiken "
            "öffentlicher Ladestationen. Die Investition zahlt sich bereits nach "
            f"{format_number(result.break_even_year, 1)} Jahren aus und bringt Ihnen langfristig "
            "erhebliche Einsparungen."
        )
    else:
        text = (
            "Bei Ihrem aktuellen Strompreis ist das Laden zu Hause nicht günstiger als "
            "öffentliches Laden. Die Investition in eine Wallbox amortisiert sich daher "
            "nicht über die Stromkosten. Ein günstigerer Stromtarif oder eine eigene "
            "PV-Anlage kann das ändern."
        )
    return [KeepTogether([Paragraph("Fazit:", styles["ReportSection"]), Paragraph(text, styles["ReportItem"])])]


def build_pdf_report(
    result: CalculatorResult,
    inputs: CalculatorInput,
    contact: ContactDetails,
    *,
    created_on: date | None = None,
) -> bytes:
    """Render the report for ``result`` and return the PDF document as bytes."""
    pal = pdf_palette()
    styles = pdf_styles(pal)
    created_on = created_on or date.today()

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=15 * mm,
        bottomMargin=20 * mm,
        title=REPORT_TITLE,
        author=FOOTER_TEXT,
    )
    content_w = doc.width

    def _footer(canvas, _doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(pal["FOOTER"])
        canvas.drawCentredString(A4[0] / 2, 10 * mm, f"{FOOTER_TEXT} | © {created_on.year}")
        canvas.restoreState()

    story: list[Any] = [
        Paragraph(REPORT_TITLE, styles["ReportTitle"]),
        Paragraph(REPORT_SUBTITLE, styles["ReportSubtitle"]),
        Paragraph(f"Erstellt am: {created_on.strftime('%d.%m.%Y')}", styles["ReportSmall"]),
        Spacer(1, 4 * mm),
    ]
    story += _inputs_block(inputs, contact, styles)
    story += _key_results_block(result, styles)
    story += _table_block(result, pal, styles, content_w)
    story.append(Spacer(1, 6 * mm))
    story += _conclusion_block(result, styles)

    doc.build(story, onFirstPage=_footer, onLaterPages=_footer)

    pdf_bytes = buffer.getvalue()
    logger.info("Built ROI report: %d years, %d bytes", result.years_to_project, len(pdf_bytes))
    return pdf_bytes
