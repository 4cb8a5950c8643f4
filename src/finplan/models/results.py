"""Result types — the contract between engine, export, API and dashboard.

Every monthly series has exactly 36 elements; month ``m`` lives at index
``m - 1``.  Degenerate inputs (zero depreciation period, zero loan term)
surface here as ``inf`` / ``nan`` rather than as exceptions.
"""

from __future__ import annotations

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Debt
# ═══════════════════════════════════════════════════════════════════════════

class DebtScheduleRow(BaseModel):
    """One month of a single loan's amortization."""

    month: int
    opening_balance: float
    interest: float
    principal: float
    payment: float
    """interest + principal actually due this month."""
    closing_balance: float


class LoanSchedule(BaseModel):
    """Full schedule for one loan, limited to the projection horizon."""

    name: str
    method: str
    amount: float
    monthly_rate: float
    annuity_payment: float
    """Payment sized once on the opening balance and full term.
    Only meaningful for ``method='annuity'``."""
    rows: list[DebtScheduleRow]
    total_interest_paid: float
    total_principal_paid: float


class DebtService(BaseModel):
    """Debt series summed across all loans."""

    interest: list[float]
    principal: list[float]
    outstanding: list[float]
    """Sum of balances of loans active in each month (0 outside a loan's term)."""
    loans: list[LoanSchedule]


# ═══════════════════════════════════════════════════════════════════════════
# Statements
# ═══════════════════════════════════════════════════════════════════════════

class YearlyPnL(BaseModel):
    """Profit & loss for one 12-month bucket (statement basis)."""

    year: int
    sales: float
    variable_cost: float
    gross_margin: float
    payroll: float
    opex: float
    depreciation: float
    interest: float
    ebit: float
    ebt: float
    tax_expense: float
    """max(0, ebt) × CIT rate — independent of when tax is paid."""
    result: float


class BalanceSnapshot(BaseModel):
    """Simplified net-asset position at the end of a month (12, 24 or 36)."""

    month: int
    fixed_assets_net: float
    cash: float
    debt_outstanding: float
    equity: float
    """Opening equity + cumulative EBT − tax on cumulative EBT."""


# ═══════════════════════════════════════════════════════════════════════════
# Summary & top-level result
# ═══════════════════════════════════════════════════════════════════════════

class PlanSummary(BaseModel):
    """Headline KPIs for one projection."""

    company: str
    total_revenue: float
    total_net_result: float
    ending_cash: float
    min_cash: float
    min_cash_month: int
    first_negative_cash_month: int | None  # None if cash never dips below zero
    peak_debt_outstanding: float


class ProjectionResult(BaseModel):
    """Complete output of one projection run."""

    months: list[int]

    # --- Operating series ---
    revenue: list[float]
    variable_cost: list[float]
    gross_margin: list[float]
    payroll: list[float]
    opex: list[float]
    capex: list[float]
    depreciation: list[float]

    # --- Financing ---
    interest: list[float]
    principal: list[float]
    outstanding_debt: list[float]

    # --- Result & tax ---
    ebit: list[float]
    ebt: list[float]
    tax_by_year: list[float]
    """Tax liability per year bucket (3 elements)."""
    tax_paid: list[float]

    # --- Cash ---
    wc_delta: list[float]
    cashflow: list[float]
    cash: list[float]

    # --- Aggregates ---
    yearly: list[YearlyPnL]
    snapshots: list[BalanceSnapshot]
    loans: list[LoanSchedule]
    summary: PlanSummary
