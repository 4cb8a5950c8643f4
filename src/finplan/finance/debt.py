"""Debt amortization.

Each loan is simulated month by month from ``start_month`` for at most
``term_months`` periods, truncated at the horizon.

Key formulas:
  r        = rate / 12
  payment  = B0 × r / (1 − (1 + r)^−n)     (annuity, r > 0)
           = B0 / n                        (annuity, r = 0)
  interest = balance × r
  principal:
    0                    during grace (k ≤ grace_months)
    payment − interest   annuity
    amount / term        linear

The annuity payment is sized once on the opening balance and the *full* term.
Grace months use up term slots and the payment is not re-sized after grace,
so an annuity loan with grace keeps a residual balance at nominal term end.
"""

from __future__ import annotations

import numpy as np

from finplan.config.debt import DebtItem
from finplan.config.horizon import HORIZON_MONTHS
from finplan.models.results import DebtScheduleRow, DebtService, LoanSchedule


def annuity_payment(balance: float, monthly_rate: float, term_months: int) -> float:
    """Constant payment for ``term_months`` periods at ``monthly_rate``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        if monthly_rate > 0:
            factor = 1.0 - np.power(1.0 + monthly_rate, -float(term_months))
            return float(np.float64(balance) * monthly_rate / factor)
        return float(np.float64(balance) / term_months)


def build_loan_schedule(debt: DebtItem) -> LoanSchedule:
    """Generate the month-by-month schedule of one loan.

    Parameters
    ----------
    debt : DebtItem
        Loan terms.

    Returns
    -------
    LoanSchedule
        Rows for every active month inside the horizon.
    """
    monthly_rate = debt.rate / 12
    payment = annuity_payment(debt.amount, monthly_rate, debt.term_months)
    with np.errstate(divide="ignore", invalid="ignore"):
        linear_principal = float(np.float64(debt.amount) / debt.term_months)

    rows: list[DebtScheduleRow] = []
    balance = debt.amount
    total_interest = 0.0
    total_principal = 0.0

    for month in range(max(1, debt.start_month), HORIZON_MONTHS + 1):
        k = month - debt.start_month + 1
        if k > debt.term_months:
            break

        interest = balance * monthly_rate
        if debt.grace_months > 0 and k <= debt.grace_months:
            principal = 0.0  # interest-only
        elif debt.method == "annuity":
            principal = payment - interest
        else:
            principal = linear_principal

        closing = float(np.maximum(0.0, balance - principal))

        rows.append(DebtScheduleRow(
            month=month,
            opening_balance=balance,
            interest=interest,
            principal=principal,
            payment=interest + principal,
            closing_balance=closing,
        ))

        total_interest += interest
        total_principal += principal
        balance = closing

    return LoanSchedule(
        name=debt.name,
        method=debt.method,
        amount=debt.amount,
        monthly_rate=monthly_rate,
        annuity_payment=payment,
        rows=rows,
        total_interest_paid=total_interest,
        total_principal_paid=total_principal,
    )


def build_debt_service(debts: list[DebtItem]) -> DebtService:
    """Schedule every loan and sum interest, principal and balance per month."""
    interest = np.zeros(HORIZON_MONTHS)
    principal = np.zeros(HORIZON_MONTHS)
    outstanding = np.zeros(HORIZON_MONTHS)
    loans: list[LoanSchedule] = []

    for debt in debts:
        schedule = build_loan_schedule(debt)
        for row in schedule.rows:
            interest[row.month - 1] += row.interest
            principal[row.month - 1] += row.principal
            outstanding[row.month - 1] += row.closing_balance
        loans.append(schedule)

    return DebtService(
        interest=interest.tolist(),
        principal=principal.tolist(),
        outstanding=outstanding.tolist(),
        loans=loans,
    )
