"""
Investment Calculator — Projection Dashboard
============================================

Browser front end for the same engine the console session uses:
  1. Scenario inputs in the sidebar (principal, rates, years)
  2. Headline closed-form future value
  3. Year-by-year table and nominal / real / after-tax chart
  4. Aggregate summary

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import EngineConfig, ProjectionInput
from core.schema import LEDGER_DISPLAY_LABELS
from data_prep.validators import validate_inputs
from engine.ledger import ledger_to_frame
from engine.runner import run_projection

VALUE_SERIES = [
    "future_value",
    "inflation_adjusted_future_value",
    "after_tax_future_value",
]


# ---------------------------------------------------------------------------
# Formatting / chart helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format money with commas, or N/A."""
    return "N/A" if val is None else f"${val:,.2f}"


def _fmt_pct(val):
    return "N/A" if val is None else f"{val:.2f}%"


def _plot_multi_line(df, *, x, ys, title, y_title, height=320):
    if not isinstance(df, pd.DataFrame) or len(df) == 0 or x not in df.columns:
        st.info("No data to plot.")
        return
    d = df[[x] + ys].rename(columns=LEDGER_DISPLAY_LABELS)
    x_label = LEDGER_DISPLAY_LABELS[x]
    long = d.melt(
        id_vars=[x_label],
        value_vars=[LEDGER_DISPLAY_LABELS[y] for y in ys],
        var_name="series",
        value_name="value",
    )
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X(f"{x_label}:O", title=x_label),
            y=alt.Y("value:Q", title=y_title, axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Investment Calculator", layout="wide")
st.title("Investment Calculator")
st.caption("Compound growth with cumulative inflation and flat tax adjustments")

try:
    CONFIG = EngineConfig.from_env()
except ValueError as exc:
    st.error(f"Invalid configuration: {exc}")
    st.stop()

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Scenario
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Scenario")
    principal = st.number_input("Principal ($)", value=1000.0, step=100.0)
    interest_rate = st.number_input("Annual interest rate (%)", value=5.0, step=0.25)
    inflation_rate = st.number_input("Inflation rate (%)", value=2.0, step=0.25)
    tax_rate = st.number_input("Tax rate (%)", value=10.0, step=1.0)
    time_period = st.number_input(
        "Time period (years)",
        min_value=0,
        max_value=CONFIG.max_time_period,
        value=min(10, CONFIG.max_time_period),
        step=1,
    )

inputs = ProjectionInput(
    principal=float(principal),
    interest_rate=float(interest_rate),
    time_period=int(time_period),
    inflation_rate=float(inflation_rate),
    tax_rate=float(tax_rate),
)

vr = validate_inputs(inputs, CONFIG)
for warning in vr.warnings:
    st.warning(warning)
if not vr.is_valid:
    st.error("Scenario validation failed:\n" + vr.summary())
    st.stop()

result = run_projection(inputs, CONFIG)

# ═══════════════════════════════════════════════════════════════════════════
# HEADLINE
# ═══════════════════════════════════════════════════════════════════════════
c1, c2, c3 = st.columns(3)
c1.metric(f"Future Value after {inputs.time_period} years", _fmt_money(result.future_value))
c2.metric("Total Interest Earned", _fmt_money(result.summary.total_interest))
c3.metric("Average Annual Return Rate", _fmt_pct(result.summary.avg_annual_return_rate))

# ═══════════════════════════════════════════════════════════════════════════
# LEDGER
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Investment Table")
ledger_df = ledger_to_frame(result.ledger)

_plot_multi_line(
    ledger_df,
    x="year",
    ys=VALUE_SERIES,
    title="Nominal vs Inflation-Adjusted vs After-Tax",
    y_title="Value ($)",
)
st.dataframe(
    ledger_df.rename(columns=LEDGER_DISPLAY_LABELS).style.format(precision=CONFIG.display_decimals),
    use_container_width=True,
    hide_index=True,
)

# ═══════════════════════════════════════════════════════════════════════════
# SUMMARY
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Investment Summary")
summary = result.summary
s1, s2, s3 = st.columns(3)
s1.metric("Principal Invested", _fmt_money(summary.principal_invested))
s2.metric("Average Annual Return", _fmt_money(summary.avg_annual_return))
s3.metric("Final Future Value", _fmt_money(summary.final_future_value))
s4, s5, s6 = st.columns(3)
s4.metric("Total Principal (all years)", _fmt_money(summary.total_principal))
s5.metric("Total Inflation-Adjusted Future Value", _fmt_money(summary.total_inflation_adjusted))
s6.metric("Total After-Tax Future Value", _fmt_money(summary.total_after_tax))
