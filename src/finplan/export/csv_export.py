"""CSV export — profit & loss, monthly cashflow and balance snapshots.

Each table is a list of rows; ``to_csv`` renders them with RFC-4180 quoting
(fields holding a comma, quote or newline are wrapped in double quotes and
inner quotes are doubled).  Amounts are rounded to whole euros, halves up.

The "Cumulative cash" column is the cash balance itself (opening cash plus
every cashflow to date).  Earlier exports of this table added opening cash
a second time; that column is not reproduced.
"""

from __future__ import annotations

import csv
import io
import math

import pandas as pd

from finplan.config.horizon import SNAPSHOT_MONTHS
from finplan.models.results import DebtScheduleRow, LoanSchedule, ProjectionResult

Cell = str | int | float
Row = list[Cell]

PNL_FILENAME = "profit_and_loss.csv"
CASHFLOW_FILENAME = "cashflow.csv"
SNAPSHOTS_FILENAME = "balance_snapshots.csv"

# (label, YearlyPnL attribute)
PNL_LINES: list[tuple[str, str]] = [
    ("Revenue", "sales"),
    ("Variable costs", "variable_cost"),
    ("Gross margin", "gross_margin"),
    ("Payroll", "payroll"),
    ("Operating expenses", "opex"),
    ("Depreciation", "depreciation"),
    ("Interest", "interest"),
    ("EBIT", "ebit"),
    ("EBT", "ebt"),
    ("Tax expense", "tax_expense"),
    ("Net result", "result"),
]

SNAPSHOT_LINES: list[tuple[str, str]] = [
    ("Fixed assets (net)", "fixed_assets_net"),
    ("Cash", "cash"),
    ("Debt", "debt_outstanding"),
    ("Equity", "equity"),
]


def round_amount(value: float) -> int | float:
    """Round half up to an integer; ``inf`` / ``nan`` pass through unchanged."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def pnl_rows(result: ProjectionResult) -> list[Row]:
    rows: list[Row] = [["", *(f"Year {y.year}" for y in result.yearly)]]
    for label, attr in PNL_LINES:
        rows.append([label, *(round_amount(getattr(y, attr)) for y in result.yearly)])
    return rows


def cashflow_rows(result: ProjectionResult) -> list[Row]:
    rows: list[Row] = [["Month", "Cashflow", "Cumulative cash"]]
    for month, flow, balance in zip(result.months, result.cashflow, result.cash):
        rows.append([month, round_amount(flow), round_amount(balance)])
    return rows


def snapshot_rows(result: ProjectionResult) -> list[Row]:
    rows: list[Row] = [["Snapshot (month)", *SNAPSHOT_MONTHS]]
    for label, attr in SNAPSHOT_LINES:
        rows.append([label, *(round_amount(getattr(s, attr)) for s in result.snapshots)])
    return rows


def to_csv(rows: list[Row]) -> str:
    """Render rows as CSV text, rows separated by ``\\n``, no trailing newline."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerows(rows)
    return buf.getvalue().removesuffix("\n")


TABLES = {
    "pnl": (PNL_FILENAME, pnl_rows),
    "cashflow": (CASHFLOW_FILENAME, cashflow_rows),
    "snapshots": (SNAPSHOTS_FILENAME, snapshot_rows),
}


def export_tables(result: ProjectionResult) -> dict[str, str]:
    """All three tables as ``{filename: csv_text}``."""
    return {filename: to_csv(build(result)) for filename, build in TABLES.values()}


# ═══════════════════════════════════════════════════════════════════════════
# DataFrames for on-screen tables
# ═══════════════════════════════════════════════════════════════════════════

def monthly_frame(result: ProjectionResult) -> pd.DataFrame:
    """One row per month with every monthly series."""
    return pd.DataFrame({
        "Month": result.months,
        "Revenue": result.revenue,
        "Variable costs": result.variable_cost,
        "Payroll": result.payroll,
        "Opex": result.opex,
        "Depreciation": result.depreciation,
        "EBIT": result.ebit,
        "Interest": result.interest,
        "EBT": result.ebt,
        "Principal": result.principal,
        "Capex": result.capex,
        "Tax paid": result.tax_paid,
        "WC delta": result.wc_delta,
        "Cashflow": result.cashflow,
        "Cash": result.cash,
        "Debt outstanding": result.outstanding_debt,
    }).set_index("Month")


def yearly_frame(result: ProjectionResult) -> pd.DataFrame:
    """P&L lines as rows, years as columns."""
    data = {
        f"Year {y.year}": [getattr(y, attr) for _, attr in PNL_LINES]
        for y in result.yearly
    }
    return pd.DataFrame(data, index=[label for label, _ in PNL_LINES])


def snapshot_frame(result: ProjectionResult) -> pd.DataFrame:
    data = {
        f"Month {s.month}": [getattr(s, attr) for _, attr in SNAPSHOT_LINES]
        for s in result.snapshots
    }
    return pd.DataFrame(data, index=[label for label, _ in SNAPSHOT_LINES])


def loan_frame(loan: LoanSchedule) -> pd.DataFrame:
    """Repayment schedule of one loan, indexed by month (empty outside the horizon)."""
    columns = list(DebtScheduleRow.model_fields)
    return pd.DataFrame([r.model_dump() for r in loan.rows], columns=columns).set_index("month")
