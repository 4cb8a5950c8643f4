"""Payroll."""

from pydantic import BaseModel, Field


class PayrollItem(BaseModel):
    """One position. Active from ``start_month`` until the end of the horizon."""

    role: str = Field(default="Employee", description="Job title")
    gross_per_month: float = Field(default=0.0, description="Gross monthly salary (€)")
    on_cost_pct: float = Field(
        default=0.0,
        description="Employer on-costs on top of gross (0.30 = 30%).",
    )
    start_month: int = Field(default=1, description="First month on payroll (1–36)")
