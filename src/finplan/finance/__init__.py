"""Finance — debt, statements, working capital, cash and period aggregation."""

from finplan.finance.debt import annuity_payment, build_debt_service, build_loan_schedule
from finplan.finance.statements import accrue_tax, compute_operating_result, schedule_tax_payments
from finplan.finance.working_capital import compute_wc_delta
from finplan.finance.cashflow import accumulate_cash, compute_cashflow
from finplan.finance.periods import build_snapshots, build_yearly_pnl

__all__ = [
    "annuity_payment",
    "build_debt_service",
    "build_loan_schedule",
    "accrue_tax",
    "compute_operating_result",
    "schedule_tax_payments",
    "compute_wc_delta",
    "accumulate_cash",
    "compute_cashflow",
    "build_snapshots",
    "build_yearly_pnl",
]
