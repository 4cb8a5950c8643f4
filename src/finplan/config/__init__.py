"""Configuration models — all projection input types."""

from finplan.config.horizon import HORIZON_MONTHS, SNAPSHOT_MONTHS, YEAR_BUCKETS
from finplan.config.revenue import RevenueDriver, VariableCost
from finplan.config.payroll import PayrollItem
from finplan.config.opex import OpexItem
from finplan.config.capex import CapexItem
from finplan.config.debt import DebtItem
from finplan.config.taxes import TaxConfig
from finplan.config.working_capital import WorkingCapitalConfig
from finplan.config.assumptions import Assumptions, PlanMeta

__all__ = [
    "HORIZON_MONTHS",
    "SNAPSHOT_MONTHS",
    "YEAR_BUCKETS",
    "RevenueDriver",
    "VariableCost",
    "PayrollItem",
    "OpexItem",
    "CapexItem",
    "DebtItem",
    "TaxConfig",
    "WorkingCapitalConfig",
    "PlanMeta",
    "Assumptions",
]
