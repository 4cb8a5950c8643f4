"""Financial Plan Wizard — Streamlit front end.

Layout: six input steps (one at a time, Previous / Next) above a results
area that is recomputed from scratch on every rerun.

Run with:
    streamlit run src/finplan/dashboard/app.py
"""

from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go
import streamlit as st
from pydantic import ValidationError

from finplan.config import (
    Assumptions,
    CapexItem,
    DebtItem,
    OpexItem,
    PayrollItem,
    RevenueDriver,
    VariableCost,
)
from finplan.engine.projection import build_projection
from finplan.export.csv_export import (
    CASHFLOW_FILENAME,
    PNL_FILENAME,
    SNAPSHOTS_FILENAME,
    cashflow_rows,
    loan_frame,
    monthly_frame,
    pnl_rows,
    snapshot_frame,
    snapshot_rows,
    to_csv,
    yearly_frame,
)
from finplan.logging_setup import configure_logging
from finplan.validation import validate_assumptions

configure_logging("WARNING")

# ---------------------------------------------------------------------------
# Defaults & step definitions
# ---------------------------------------------------------------------------
_DEF = Assumptions()

STEPS = [
    "Company",
    "Revenue",
    "Variable costs",
    "Payroll & opex",
    "Capex & debt",
    "Taxes & working capital",
]

# session key → record model, for every list section edited in a table
LIST_SECTIONS: dict[str, type] = {
    "revenue_drivers": RevenueDriver,
    "variable_costs": VariableCost,
    "payroll": PayrollItem,
    "opex": OpexItem,
    "capex": CapexItem,
    "debts": DebtItem,
}

PCT = st.column_config.NumberColumn(format="%.3f", help="Fraction: 0.25 = 25%")
MONTH = st.column_config.NumberColumn(min_value=1, max_value=36, step=1)


def fmt_eur(value: float) -> str:
    """Whole euros with Belgian grouping: ``€ 12.345``."""
    if not math.isfinite(value):
        return str(value)
    return "€ " + f"{value:,.0f}".replace(",", ".")


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

def _init_state() -> None:
    if "step" not in st.session_state:
        st.session_state.step = 1
    if "plan" not in st.session_state:
        st.session_state.plan = _DEF.model_dump()
    for key in LIST_SECTIONS:
        base_key = f"base_{key}"
        if base_key not in st.session_state:
            st.session_state[base_key] = list(st.session_state.plan[key])


def _go(delta: int) -> None:
    """Move between steps, freezing the edited tables as new editor bases."""
    for key in LIST_SECTIONS:
        st.session_state[f"base_{key}"] = list(st.session_state.plan[key])
        st.session_state.pop(f"editor_{key}", None)
    st.session_state.step = min(max(st.session_state.step + delta, 1), len(STEPS))


def _clean_record(record: dict) -> dict:
    """Drop empty cells so the model defaults apply to half-filled rows."""
    cleaned = {}
    for k, v in record.items():
        if v is None or (isinstance(v, float) and math.isnan(v)):
            continue
        cleaned[k] = v
    return cleaned


def _records_editor(key: str, column_config: dict | None = None) -> None:
    """Editable table for one list section; writes back into the plan."""
    model = LIST_SECTIONS[key]
    base = pd.DataFrame(st.session_state[f"base_{key}"], columns=list(model.model_fields))
    edited = st.data_editor(
        base,
        key=f"editor_{key}",
        num_rows="dynamic",
        use_container_width=True,
        column_config=column_config or {},
    )
    records = [_clean_record(r) for r in edited.to_dict("records")]
    st.session_state.plan[key] = [r for r in records if r]


# ---------------------------------------------------------------------------
# Step renderers
# ---------------------------------------------------------------------------

def _step_company(plan: dict) -> None:
    meta = plan["meta"]
    c1, c2, c3 = st.columns(3)
    meta["company"] = c1.text_input("Company name", meta["company"])
    meta["opening_cash"] = c2.number_input("Opening cash (€)", value=float(meta["opening_cash"]), step=1_000.0)
    meta["equity"] = c3.number_input("Equity at start (€)", value=float(meta["equity"]), step=1_000.0)


def _step_revenue(plan: dict) -> None:
    st.caption("Monthly revenue = units × price, growing by the monthly growth rate from the start month.")
    _records_editor("revenue_drivers", {"start_month": MONTH, "monthly_growth_pct": PCT})


def _step_variable_costs(plan: dict) -> None:
    st.caption("All rates are added up and applied to total revenue.")
    _records_editor("variable_costs", {"pct_of_sales": PCT})


def _step_payroll_opex(plan: dict) -> None:
    st.markdown("**Payroll**")
    _records_editor("payroll", {"start_month": MONTH, "on_cost_pct": PCT})
    st.markdown("**Operating expenses** — year-1 amount, indexed yearly")
    _records_editor("opex", {"start_month": MONTH, "index_pct_per_year": PCT})


def _step_capex_debt(plan: dict) -> None:
    st.markdown("**Investments** — paid in the start month, depreciated straight-line")
    _records_editor("capex", {"start_month": MONTH})
    st.markdown("**Loans**")
    _records_editor("debts", {
        "start_month": MONTH,
        "rate": PCT,
        "method": st.column_config.SelectboxColumn(options=["annuity", "linear"], required=True),
    })


def _step_taxes_wc(plan: dict) -> None:
    taxes, wc = plan["taxes"], plan["working_capital"]
    c1, c2 = st.columns(2)
    taxes["cit_rate_pct"] = c1.number_input(
        "CIT rate", 0.0, 1.0, float(taxes["cit_rate_pct"]), 0.01, format="%.2f",
    )
    _PAY_MONTHS = [3, 6, 11, 12]
    taxes["cit_payment_month"] = c2.selectbox(
        "Tax paid in month (of the next year)", _PAY_MONTHS,
        index=_PAY_MONTHS.index(taxes["cit_payment_month"]),
    )
    c1, c2, c3 = st.columns(3)
    wc["dso_days"] = c1.number_input("DSO (days)", value=float(wc["dso_days"]), step=5.0)
    wc["dpo_days"] = c2.number_input("DPO (days)", value=float(wc["dpo_days"]), step=5.0)
    wc["dio_days"] = c3.number_input("DIO (days, informative)", value=float(wc["dio_days"]), step=5.0)


_RENDERERS = [
    _step_company,
    _step_revenue,
    _step_variable_costs,
    _step_payroll_opex,
    _step_capex_debt,
    _step_taxes_wc,
]


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Financial Plan Wizard", page_icon="📊", layout="wide")
_init_state()

st.title("Financial Plan Wizard — 3 years")

step = st.session_state.step
with st.container(border=True):
    st.subheader(f"Step {step} of {len(STEPS)} — {STEPS[step - 1]}")
    _RENDERERS[step - 1](st.session_state.plan)
    c1, c2, _ = st.columns([1, 1, 6])
    c1.button("← Previous", on_click=_go, args=(-1,), disabled=step == 1)
    c2.button("Next →", on_click=_go, args=(1,), disabled=step == len(STEPS))

try:
    assumptions = Assumptions(**st.session_state.plan)
except ValidationError as exc:
    st.error("Some inputs could not be read:")
    for err in exc.errors():
        st.write(f"- `{'.'.join(str(p) for p in err['loc'])}`: {err['msg']}")
    st.stop()

result = build_projection(assumptions)
issues = validate_assumptions(assumptions)

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
s = result.summary
m1, m2, m3, m4 = st.columns(4)
m1.metric("Revenue (3 yrs)", fmt_eur(s.total_revenue))
m2.metric("Net result (3 yrs)", fmt_eur(s.total_net_result))
m3.metric("Cash month 36", fmt_eur(s.ending_cash))
m4.metric("Lowest cash", fmt_eur(s.min_cash), f"month {s.min_cash_month}", delta_color="off")

if s.first_negative_cash_month is not None:
    st.warning(f"Cash goes negative in month {s.first_negative_cash_month}.")

for issue in issues:
    show = st.error if issue.severity == "error" else st.info
    show(f"`{issue.field}` — {issue.message}")

tab_pnl, tab_cash, tab_bal, tab_debt, tab_month = st.tabs(
    ["Profit & loss", "Cashflow", "Balance snapshots", "Loans", "Monthly detail"]
)

with tab_pnl:
    st.dataframe(yearly_frame(result).map(fmt_eur), use_container_width=True)

with tab_cash:
    fig = go.Figure()
    fig.add_bar(x=result.months, y=result.cashflow, name="Cashflow", marker_color="#8ab4f8")
    fig.add_scatter(x=result.months, y=result.cash, name="Cash balance", mode="lines+markers",
                    line=dict(color="#1a73e8", width=2))
    fig.add_hline(y=0, line_dash="dot", line_color="grey")
    fig.update_layout(height=380, margin=dict(l=10, r=10, t=30, b=10),
                      xaxis_title="Month", yaxis_title="€", legend=dict(orientation="h"))
    st.plotly_chart(fig, use_container_width=True)
    st.caption(
        "Tax liability per year: "
        + " · ".join(f"Y{i + 1} {fmt_eur(t)}" for i, t in enumerate(result.tax_by_year))
        + " (year 3 is paid after the horizon)."
    )

with tab_bal:
    st.dataframe(snapshot_frame(result).map(fmt_eur), use_container_width=True)
    st.caption("Simplified net-asset view; equity taxes cumulative EBT to date.")

with tab_debt:
    if not result.loans:
        st.info("No loans.")
    for loan in result.loans:
        st.markdown(f"**{loan.name}** — {loan.method}, {loan.monthly_rate * 12:.2%} p.a.")
        if not loan.rows:
            st.caption("No repayments inside the horizon.")
            continue
        st.dataframe(loan_frame(loan), use_container_width=True, height=240)

with tab_month:
    st.dataframe(monthly_frame(result).round(0), use_container_width=True)

st.markdown("#### Export")
d1, d2, d3 = st.columns(3)
d1.download_button("Profit & loss CSV", to_csv(pnl_rows(result)), PNL_FILENAME, "text/csv")
d2.download_button("Cashflow CSV", to_csv(cashflow_rows(result)), CASHFLOW_FILENAME, "text/csv")
d3.download_button("Balance snapshots CSV", to_csv(snapshot_rows(result)), SNAPSHOTS_FILENAME, "text/csv")
