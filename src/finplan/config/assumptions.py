"""Top-level assumptions — bundles every projection input.

The defaults reproduce the seed plan the wizard opens with, so an empty
payload is already a complete, meaningful plan.
"""

from pydantic import BaseModel, Field

from finplan.config.revenue import RevenueDriver, VariableCost
from finplan.config.payroll import PayrollItem
from finplan.config.opex import OpexItem
from finplan.config.capex import CapexItem
from finplan.config.debt import DebtItem
from finplan.config.taxes import TaxConfig
from finplan.config.working_capital import WorkingCapitalConfig


class PlanMeta(BaseModel):
    """Company name and the opening balance-sheet position at month 0."""

    company: str = Field(default="My Company", description="Company name (display only)")
    opening_cash: float = Field(default=25_000.0, description="Cash at month 0 (€)")
    equity: float = Field(default=25_000.0, description="Equity at month 0 (€)")


def _default_revenue_drivers() -> list[RevenueDriver]:
    return [RevenueDriver(name="Retainers", start_month=2, units=10, price=2_000, monthly_growth_pct=0.03)]


def _default_variable_costs() -> list[VariableCost]:
    return [VariableCost(name="Subcontracting", pct_of_sales=0.25)]


def _default_payroll() -> list[PayrollItem]:
    return [PayrollItem(role="Director", gross_per_month=3_500, on_cost_pct=0.30, start_month=1)]


def _default_opex() -> list[OpexItem]:
    return [
        OpexItem(name="Rent", amount_year1=14_400, index_pct_per_year=0.02, start_month=1),
        OpexItem(name="Software", amount_year1=4_800, index_pct_per_year=0.02, start_month=1),
    ]


def _default_capex() -> list[CapexItem]:
    return [CapexItem(name="IT", amount=30_000, start_month=1, depr_months=36)]


def _default_debts() -> list[DebtItem]:
    return [
        DebtItem(
            name="Bank loan", amount=75_000, rate=0.055, term_months=60,
            grace_months=6, method="annuity", start_month=1,
        )
    ]


class Assumptions(BaseModel):
    """Complete input bundle for one projection run."""

    meta: PlanMeta = Field(default_factory=PlanMeta)
    revenue_drivers: list[RevenueDriver] = Field(default_factory=_default_revenue_drivers)
    variable_costs: list[VariableCost] = Field(default_factory=_default_variable_costs)
    payroll: list[PayrollItem] = Field(default_factory=_default_payroll)
    opex: list[OpexItem] = Field(default_factory=_default_opex)
    capex: list[CapexItem] = Field(default_factory=_default_capex)
    debts: list[DebtItem] = Field(default_factory=_default_debts)
    taxes: TaxConfig = Field(default_factory=TaxConfig)
    working_capital: WorkingCapitalConfig = Field(
        default_factory=lambda: WorkingCapitalConfig(dso_days=45, dpo_days=30, dio_days=0)
    )
