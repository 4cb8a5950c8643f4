"""Boundary checks on assumptions.

The engine itself is permissive: a zero loan term or a variable-cost rate
above 100% still produces a projection (with ``inf`` / ``nan`` or negative
margins).  ``validate_assumptions`` reports such inputs per field so the
wizard and the API can flag them next to the projection.  It never raises.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from finplan.config.assumptions import Assumptions
from finplan.config.debt import DebtItem
from finplan.config.horizon import HORIZON_MONTHS
from finplan.engine.revenue import aggregate_variable_rate
from finplan.finance.debt import annuity_payment


class ValidationIssue(BaseModel):
    """One problem with one input field."""

    field: str
    """Dotted path, e.g. ``debts.0.term_months``."""
    message: str
    severity: Literal["error", "warning"]


def _check_start_month(issues: list[ValidationIssue], path: str, start_month: int) -> None:
    if not 1 <= start_month <= HORIZON_MONTHS:
        issues.append(ValidationIssue(
            field=f"{path}.start_month",
            message=f"Start month {start_month} is outside 1–{HORIZON_MONTHS}; "
                    "the item has no effect inside the projection.",
            severity="warning",
        ))


def _check_non_negative(issues: list[ValidationIssue], path: str, name: str, value: float) -> None:
    if value < 0:
        issues.append(ValidationIssue(
            field=f"{path}.{name}",
            message=f"{name} must not be negative (got {value}).",
            severity="error",
        ))


def validate_assumptions(assumptions: Assumptions) -> list[ValidationIssue]:
    """Return every issue found; an empty list means the plan is clean."""
    a = assumptions
    issues: list[ValidationIssue] = []

    for i, d in enumerate(a.revenue_drivers):
        path = f"revenue_drivers.{i}"
        _check_start_month(issues, path, d.start_month)
        _check_non_negative(issues, path, "units", d.units)
        _check_non_negative(issues, path, "price", d.price)

    for i, v in enumerate(a.variable_costs):
        _check_non_negative(issues, f"variable_costs.{i}", "pct_of_sales", v.pct_of_sales)
    var_rate = aggregate_variable_rate(a.variable_costs)
    if var_rate > 1:
        issues.append(ValidationIssue(
            field="variable_costs",
            message=f"Variable costs add up to {var_rate:.0%} of sales; "
                    "every sale loses money before fixed costs.",
            severity="warning",
        ))

    for i, p in enumerate(a.payroll):
        path = f"payroll.{i}"
        _check_start_month(issues, path, p.start_month)
        _check_non_negative(issues, path, "gross_per_month", p.gross_per_month)
        _check_non_negative(issues, path, "on_cost_pct", p.on_cost_pct)

    for i, o in enumerate(a.opex):
        path = f"opex.{i}"
        _check_start_month(issues, path, o.start_month)
        _check_non_negative(issues, path, "amount_year1", o.amount_year1)

    for i, c in enumerate(a.capex):
        path = f"capex.{i}"
        _check_start_month(issues, path, c.start_month)
        _check_non_negative(issues, path, "amount", c.amount)
        if c.depr_months <= 0:
            issues.append(ValidationIssue(
                field=f"{path}.depr_months",
                message="Depreciation period must be at least 1 month.",
                severity="error",
            ))

    for i, d in enumerate(a.debts):
        path = f"debts.{i}"
        _check_start_month(issues, path, d.start_month)
        _check_non_negative(issues, path, "amount", d.amount)
        _check_non_negative(issues, path, "rate", d.rate)
        _check_non_negative(issues, path, "grace_months", d.grace_months)
        if d.term_months <= 0:
            issues.append(ValidationIssue(
                field=f"{path}.term_months",
                message="Loan term must be at least 1 month.",
                severity="error",
            ))
            continue
        if d.grace_months >= d.term_months:
            issues.append(ValidationIssue(
                field=f"{path}.grace_months",
                message="Grace period covers the whole term; no principal is ever repaid.",
                severity="warning",
            ))
        elif d.method == "annuity" and d.grace_months > 0 and d.amount > 0:
            residual = _residual_after_term(d)
            if residual > 0.005:
                issues.append(ValidationIssue(
                    field=f"{path}.grace_months",
                    message=f"Annuity sized on the full term: about {residual:,.0f} remains "
                            "unpaid after the last term month because grace months are not added.",
                    severity="warning",
                ))

    wc = a.working_capital
    _check_non_negative(issues, "working_capital", "dso_days", wc.dso_days)
    _check_non_negative(issues, "working_capital", "dpo_days", wc.dpo_days)
    _check_non_negative(issues, "meta", "equity", a.meta.equity)

    return issues


def _residual_after_term(debt: DebtItem) -> float:
    """Balance left after the nominal term, following the schedule past the horizon."""
    r = debt.rate / 12
    payment = annuity_payment(debt.amount, r, debt.term_months)
    balance = debt.amount
    for k in range(1, debt.term_months + 1):
        interest = balance * r
        principal = 0.0 if k <= debt.grace_months else payment - interest
        balance = max(0.0, balance - principal)
    return balance
