"""Export — CSV tables and DataFrame views of a projection."""

from finplan.export.csv_export import (
    cashflow_rows,
    export_tables,
    loan_frame,
    monthly_frame,
    pnl_rows,
    snapshot_frame,
    snapshot_rows,
    to_csv,
    yearly_frame,
)

__all__ = [
    "cashflow_rows",
    "export_tables",
    "loan_frame",
    "monthly_frame",
    "pnl_rows",
    "snapshot_frame",
    "snapshot_rows",
    "to_csv",
    "yearly_frame",
]
