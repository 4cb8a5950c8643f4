"""Debt financing."""

from typing import Literal

from pydantic import BaseModel, Field


class DebtItem(BaseModel):
    """One loan with annuity or linear amortization and optional grace period."""

    name: str = Field(default="Loan", description="Label shown in tables")
    amount: float = Field(default=0.0, description="Principal borrowed (€)")
    rate: float = Field(default=0.0, description="Annual interest rate (0.055 = 5.5%)")
    term_months: int = Field(default=60, description="Repayment term in months, grace included")
    grace_months: int = Field(
        default=0,
        description="Interest-only months at the start of the term. They use "
                    "up term slots; the term is not extended.",
    )
    method: Literal["annuity", "linear"] = Field(
        default="annuity",
        description="annuity = constant payment; linear = constant principal.",
    )
    start_month: int = Field(default=1, description="First month of repayment (1–36)")
