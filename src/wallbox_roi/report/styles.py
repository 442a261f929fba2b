"""PDF palette, paragraph styles and table styles."""

from __future__ import annotations

from typing import Any, Sequence

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, StyleSheet1, getSampleStyleSheet
from reportlab.platypus import TableStyle


def pdf_palette() -> dict[str, Any]:
    return {
        "PRIMARY": colors.Color(139 / 255, 92 / 255, 246 / 255),
        "TEXT": colors.Color(60 / 255, 60 / 255, 60 / 255),
        "MUTED": colors.Color(100 / 255, 100 / 255, 100 / 255),
        "FOOTER": colors.Color(150 / 255, 150 / 255, 150 / 255),
        "BORDER": colors.HexColor("#D7DCE3"),
        "ALT_ROW": colors.Color(240 / 255, 240 / 255, 250 / 255),
        "BAD": colors.HexColor("#C62828"),
    }


def pdf_styles(pal: dict[str, Any]) -> StyleSheet1:
    styles = getSampleStyleSheet()

    body = styles["BodyText"]
    body.fontName = "Helvetica"
    body.fontSize = 11
    body.leading = 15
    body.textColor = pal["TEXT"]

    styles.add(ParagraphStyle(
        name="ReportTitle",
        parent=styles["Title"],
        fontName="Helvetica-Bold",
        fontSize=22,
        leading=26,
        textColor=pal["PRIMARY"],
        alignment=TA_CENTER,
        spaceAfter=4,
    ))
    styles.add(ParagraphStyle(
        name="ReportSubtitle",
        parent=body,
        fontSize=14,
        leading=18,
        textColor=pal["MUTED"],
        alignment=TA_CENTER,
        spaceAfter=10,
    ))
    styles.add(ParagraphStyle(
        name="ReportSection",
        parent=body,
        fontName="Helvetica-Bold",
        fontSize=14,
        leading=18,
        textColor=pal["PRIMARY"],
        spaceBefore=10,
        spaceAfter=6,
    ))
    styles.add(ParagraphStyle(
        name="ReportSmall",
        parent=body,
        fontSize=10,
        leading=12,
        textColor=pal["MUTED"],
    ))
    styles.add(ParagraphStyle(
        name="ReportItem",
        parent=body,
        leftIndent=14,
    ))
    styles.add(ParagraphStyle(
        name="ReportKeyResult",
        parent=body,
        fontSize=12,
        leading=16,
        leftIndent=14,
    ))
    return styles


def yearly_table_style(pal: dict[str, Any], cumulative_savings: Sequence[float]) -> TableStyle:
    """Grid table, coloured bold header, alternating body rows.

    Net-position cells are printed in red while the investment is not yet recovered.
    """
    commands: list[tuple] = [
        ("BACKGROUND", (0, 0), (-1, 0), pal["PRIMARY"]),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("GRID", (0, 0), (-1, -1), 0.5, pal["BORDER"]),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    for r in range(2, len(cumulative_savings) + 1, 2):
        commands.append(("BACKGROUND", (0, r), (-1, r), pal["ALT_ROW"]))
    for r, value in enumerate(cumulative_savings, start=1):
        if value < 0:
            commands.append(("TEXTCOLOR", (-1, r), (-1, r), pal["BAD"]))
    return TableStyle(commands)
