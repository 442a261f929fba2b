"""Wallbox ROI Calculator — Streamlit dashboard.

Layout: sidebar inputs → headline metric cards → tabs (Chart | Table) →
report download and e-mail delivery.

Run with:
    streamlit run src/wallbox_roi/dashboard/app.py
"""

from __future__ import annotations

import asyncio

import plotly.graph_objects as go
import streamlit as st

from wallbox_roi.api.narrative import (
    assumptions,
    build_notification,
    key_insight,
    total_savings_statement,
)
from wallbox_roi.config import (
    WALLBOX_INSTALLATION_COSTS,
    AppSettings,
    CalculatorForm,
    ContactDetails,
    ModelConstants,
)
from wallbox_roi.engine.roi import calculate_roi
from wallbox_roi.report.delivery import send_report_via_email
from wallbox_roi.report.formatting import (
    format_currency,
    format_number,
    format_price_per_kwh,
    format_years,
)
from wallbox_roi.report.pdf import build_pdf_report
from wallbox_roi.report.table import (
    COL_HOME_YEARLY,
    COL_PUBLIC_YEARLY,
    COL_SAVINGS_CUMULATIVE,
    COL_SAVINGS_YEARLY,
    COL_YEAR,
    build_yearly_table,
    yearly_table_csv,
)


# ---------------------------------------------------------------------------
# Default instances — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF_F = CalculatorForm()
_DEF_C = ModelConstants()
_SETTINGS = AppSettings()

_COLOR_HOME = "#0c585e"
_COLOR_PUBLIC = "#084245"
_COLOR_SAVINGS = "#15989f"

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Wallbox ROI-Rechner", page_icon="⚡", layout="wide")


def _notify(kind: str) -> None:
    n = build_notification(kind)
    st.toast(f"**{n.title}** — {n.description}", icon="✅" if n.level == "success" else "⚠️")


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Ihre Eingaben")

_TIERS = list(WALLBOX_INSTALLATION_COSTS)
with st.sidebar.expander("Wallbox-Paket", expanded=True):
    tier = st.selectbox(
        "Vorlage", _TIERS, index=_TIERS.index("complete"),
        format_func=lambda t: f"{t} ({format_currency(WALLBOX_INSTALLATION_COSTS[t])})",
        help="Füllt Geräte- und Installationskosten je zur Hälfte vor",
    )
    preset = CalculatorForm.from_preset(tier)

with st.sidebar.expander("Fahrprofil & Kosten", expanded=True):
    km = st.slider("Kilometer pro Jahr", 1_000, 100_000, int(_DEF_F.km_per_year), 1_000)
    price = st.slider(
        "Stromkosten zu Hause (€/kWh)", 0.10, 1.00, _DEF_F.electricity_cost, 0.01,
        help=f"Öffentliches Laden kostet durchschnittlich {format_price_per_kwh(_DEF_C.public_charging_price_per_kwh)}.",
    )
    device = st.slider("Kosten der Wallbox (€)", 500, 3_000, int(preset.wallbox_device_cost), 100, key=f"dev_{tier}")
    install = st.slider(
        "Kosten der Installation (€)", 500, 3_000, int(preset.wallbox_installation_cost), 100, key=f"inst_{tier}",
    )
    years = st.slider("Betrachtungszeitraum (Jahre)", 1, 30, _DEF_F.years_to_project)

with st.sidebar.expander("Annahmen"):
    consumption = st.number_input(
        "Verbrauch (kWh/km)", 0.05, 0.50, _DEF_C.consumption_kwh_per_km, 0.01, format="%.2f",
    )
    public_price = st.number_input(
        "Preis öffentliches Laden (€/kWh)", 0.10, 2.00, _DEF_C.public_charging_price_per_kwh, 0.01, format="%.2f",
    )

form = CalculatorForm(
    km_per_year=float(km),
    electricity_cost=float(price),
    wallbox_device_cost=float(device),
    wallbox_installation_cost=float(install),
    years_to_project=int(years),
)
constants = ModelConstants(consumption_kwh_per_km=consumption, public_charging_price_per_kwh=public_price)
inputs = form.to_calculator_input()
result = calculate_roi(inputs, constants)

# ---------------------------------------------------------------------------
# MAIN — Headline metrics
# ---------------------------------------------------------------------------
st.title("Wallbox ROI-Rechner")
st.caption(
    "Berechnen Sie, wie viel Sie mit Ihrer eigenen Wallbox sparen können "
    "im Vergleich zum öffentlichen Laden."
)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Jährliche Ersparnis", format_currency(result.savings_per_year))
m2.metric("Monatliche Ersparnis", format_currency(result.savings_per_month))
m3.metric("Amortisationszeit", format_years(result.break_even_year))
m4.metric(f"Einsparung in {result.years_to_project} Jahren", format_currency(result.total_savings))

tab_chart, tab_table = st.tabs(["Grafische Darstellung", "Detaillierte Tabelle"])

with tab_chart:
    labels = [f"Jahr {y}" for y in result.years_data]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=list(result.home_costs), name="Heimladen (kumulativ)",
        mode="lines", fill="tozeroy", line=dict(color=_COLOR_HOME),
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=list(result.public_costs), name="Öffentliches Laden (kumulativ)",
        mode="lines", fill="tozeroy", line=dict(color=_COLOR_PUBLIC),
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=list(result.cumulative_savings), name="Ersparnis (kumulativ)",
        mode="lines", fill="tozeroy", line=dict(color=_COLOR_SAVINGS),
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="#000")
    fig.update_layout(
        height=380,
        margin=dict(t=10, r=30, l=0, b=0),
        yaxis=dict(ticksuffix=" €", separatethousands=True),
        separators=",.",
        legend=dict(orientation="h", y=-0.15),
        hovermode="x unified",
    )
    st.plotly_chart(fig, use_container_width=True)

    c1, c2 = st.columns(2)
    c1.info(f"**Wichtige Erkenntnis**  \n{key_insight(result)}")
    c2.success(f"**Gesamtersparnis**  \n{total_savings_statement(result)}")

with tab_table:
    df = build_yearly_table(result)
    view = df[[COL_YEAR, COL_HOME_YEARLY, COL_PUBLIC_YEARLY, COL_SAVINGS_YEARLY, COL_SAVINGS_CUMULATIVE]].copy()
    view[COL_YEAR] = [f"Jahr {y}" for y in view[COL_YEAR]]
    for col in (COL_HOME_YEARLY, COL_PUBLIC_YEARLY, COL_SAVINGS_YEARLY, COL_SAVINGS_CUMULATIVE):
        view[col] = [format_currency(v) for v in view[col]]
    st.dataframe(view, use_container_width=True, hide_index=True, height=min(400, 35 * len(view) + 38))
    st.caption(
        f"Die Tabelle zeigt Ihre Einsparungen über {result.years_to_project} Jahre, wobei die "
        "anfänglichen Kosten der Wallbox-Installation berücksichtigt werden."
    )
    st.download_button(
        "Tabelle als CSV",
        data=yearly_table_csv(result).encode("utf-8"),
        file_name=_SETTINGS.csv_file_name,
        mime="text/csv",
    )

with st.expander("Berechnungsgrundlage"):
    st.markdown("\n".join(f"- {line}" for line in assumptions(constants)))
    st.markdown(
        f"Jahresverbrauch: **{format_number(result.annual_consumption_kwh, 0)} kWh** · "
        f"Heimladen: **{format_currency(result.home_cost_per_year)}/Jahr** · "
        f"Öffentlich: **{format_currency(result.public_cost_per_year)}/Jahr**"
    )

# ---------------------------------------------------------------------------
# Report — download & e-mail
# ---------------------------------------------------------------------------
st.divider()
st.header("Erhalten Sie Ihre Analyse")

# A generated PDF belongs to one set of inputs
_pdf_key = form.model_dump_json() + constants.model_dump_json()
if st.session_state.get("pdf_key") != _pdf_key:
    st.session_state.pop("pdf_bytes", None)
    st.session_state["pdf_key"] = _pdf_key

with st.form("email_form"):
    email = st.text_input("E-Mail", placeholder="ihre.email@beispiel.de")
    submitted = st.form_submit_button("PDF erstellen")

if submitted:
    try:
        contact = ContactDetails(email=email)
    except ValueError:
        st.error("Bitte geben Sie eine gültige E-Mail-Adresse ein.")
    else:
        with st.spinner("PDF wird generiert..."):
            st.session_state["pdf_bytes"] = build_pdf_report(result, inputs, contact)
            st.session_state["pdf_email"] = str(contact.email)

pdf_bytes = st.session_state.get("pdf_bytes")
if pdf_bytes:
    c1, c2 = st.columns(2)
    if c1.download_button(
        "PDF herunterladen",
        data=pdf_bytes,
        file_name=_SETTINGS.report_file_name,
        mime="application/pdf",
    ):
        _notify("pdf_success")
    if c2.button("PDF per E-Mail senden"):
        with st.spinner("Wird gesendet..."):
            sent = asyncio.run(send_report_via_email(
                st.session_state["pdf_email"], pdf_bytes, delay_seconds=_SETTINGS.email_delay_seconds,
            ))
        _notify("email_success" if sent else "email_error")

st.caption(
    "Wir respektieren Ihre Privatsphäre und verwenden Ihre E-Mail nur zum Versand "
    "der angeforderten Informationen."
)
