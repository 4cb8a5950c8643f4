"""Projection orchestrator — one full 36-month run.

Entry point: ``build_projection(assumptions)``

Computed in dependency order:
  revenue → variable cost → payroll / opex / capex / depreciation
  → debt service → EBIT / EBT → tax → working capital → cashflow
  → cash balance → yearly P&L → snapshots → summary

The function is pure: no module state, no I/O, identical input gives
identical output.  It is cheap enough to rerun on every form edit.
"""

from __future__ import annotations

import logging

import numpy as np

from finplan.config.assumptions import Assumptions
from finplan.engine.capex import project_capex
from finplan.engine.costs import project_opex, project_payroll
from finplan.engine.revenue import month_index, project_revenue, project_variable_costs
from finplan.finance.cashflow import accumulate_cash, compute_cashflow
from finplan.finance.debt import build_debt_service
from finplan.finance.periods import build_snapshots, build_yearly_pnl
from finplan.finance.statements import (
    accrue_tax,
    compute_operating_result,
    schedule_tax_payments,
)
from finplan.finance.working_capital import compute_wc_delta
from finplan.models.results import PlanSummary, ProjectionResult, YearlyPnL

logger = logging.getLogger(__name__)


def build_projection(assumptions: Assumptions) -> ProjectionResult:
    """Run the projection and return every statement series."""
    a = assumptions

    # ── Operating lines ─────────────────────────────────────────────────
    revenue = project_revenue(a.revenue_drivers)
    variable_cost = project_variable_costs(revenue, a.variable_costs)
    payroll = project_payroll(a.payroll)
    opex = project_opex(a.opex)
    capex, depreciation = project_capex(a.capex)

    # ── Financing ───────────────────────────────────────────────────────
    debt = build_debt_service(a.debts)
    interest = np.asarray(debt.interest)
    principal = np.asarray(debt.principal)
    outstanding = np.asarray(debt.outstanding)

    # ── Result & tax ────────────────────────────────────────────────────
    result = compute_operating_result(revenue, variable_cost, payroll, opex, depreciation, interest)
    tax_by_year = accrue_tax(result.ebt, a.taxes)
    tax_paid = schedule_tax_payments(tax_by_year, a.taxes)

    # ── Cash ────────────────────────────────────────────────────────────
    wc_delta = compute_wc_delta(revenue, variable_cost, a.working_capital)
    cashflow = compute_cashflow(result.ebit, depreciation, principal, capex, tax_paid, wc_delta)
    cash = accumulate_cash(cashflow, a.meta.opening_cash)

    # ── Aggregates ──────────────────────────────────────────────────────
    rate = a.taxes.cit_rate_pct
    yearly = build_yearly_pnl(revenue, variable_cost, payroll, opex, depreciation, interest, rate)
    snapshots = build_snapshots(capex, depreciation, cash, outstanding, result.ebt, a.meta.equity, rate)
    summary = _summarize(a.meta.company, revenue, cash, outstanding, yearly)

    logger.debug(
        "Projection for %r: revenue=%.0f ending_cash=%.0f min_cash=%.0f (month %d)",
        a.meta.company, summary.total_revenue, summary.ending_cash,
        summary.min_cash, summary.min_cash_month,
    )

    return ProjectionResult(
        months=month_index().tolist(),
        revenue=revenue.tolist(),
        variable_cost=variable_cost.tolist(),
        gross_margin=result.gross_margin.tolist(),
        payroll=payroll.tolist(),
        opex=opex.tolist(),
        capex=capex.tolist(),
        depreciation=depreciation.tolist(),
        interest=debt.interest,
        principal=debt.principal,
        outstanding_debt=debt.outstanding,
        ebit=result.ebit.tolist(),
        ebt=result.ebt.tolist(),
        tax_by_year=tax_by_year.tolist(),
        tax_paid=tax_paid.tolist(),
        wc_delta=wc_delta.tolist(),
        cashflow=cashflow.tolist(),
        cash=cash.tolist(),
        yearly=yearly,
        snapshots=snapshots,
        loans=debt.loans,
        summary=summary,
    )


def _summarize(
    company: str,
    revenue: np.ndarray,
    cash: np.ndarray,
    outstanding: np.ndarray,
    yearly: list[YearlyPnL],
) -> PlanSummary:
    """Headline KPIs: totals, cash low point and first overdraft month."""
    min_idx = int(np.argmin(cash))
    negative = np.flatnonzero(cash < 0)
    return PlanSummary(
        company=company,
        total_revenue=float(revenue.sum()),
        total_net_result=float(sum(y.result for y in yearly)),
        ending_cash=float(cash[-1]),
        min_cash=float(cash[min_idx]),
        min_cash_month=min_idx + 1,
        first_negative_cash_month=int(negative[0]) + 1 if negative.size else None,
        peak_debt_outstanding=float(outstanding.max()),
    )
