"""Engine — monthly projectors and the projection orchestrator."""

from finplan.engine.revenue import aggregate_variable_rate, project_revenue, project_variable_costs
from finplan.engine.costs import project_opex, project_payroll
from finplan.engine.capex import project_capex
from finplan.engine.projection import build_projection

__all__ = [
    "aggregate_variable_rate",
    "project_revenue",
    "project_variable_costs",
    "project_opex",
    "project_payroll",
    "project_capex",
    "build_projection",
]
