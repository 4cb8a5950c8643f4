"""Revenue & variable-cost projector.

Revenue per driver:
  0                                                     if month < start_month
  units × price × (1 + monthly_growth_pct)^(month − start_month)   otherwise

Variable costs are not tracked per revenue line: every ``pct_of_sales`` is
summed into one aggregate rate and applied to total revenue.  The rate is
not capped, so variable cost can exceed revenue.
"""

from __future__ import annotations

import numpy as np

from finplan.config.horizon import HORIZON_MONTHS
from finplan.config.revenue import RevenueDriver, VariableCost


def month_index() -> np.ndarray:
    """Month numbers 1..36 as an int array."""
    return np.arange(1, HORIZON_MONTHS + 1)


def project_revenue(drivers: list[RevenueDriver]) -> np.ndarray:
    """Total monthly revenue over the horizon."""
    months = month_index()
    revenue = np.zeros(HORIZON_MONTHS)
    for d in drivers:
        active = months >= d.start_month
        # Exponent clamped to 0 before start so no negative powers are evaluated
        elapsed = np.where(active, months - d.start_month, 0)
        growth = np.power(1.0 + d.monthly_growth_pct, elapsed)
        revenue += np.where(active, d.units * d.price * growth, 0.0)
    return revenue


def aggregate_variable_rate(costs: list[VariableCost]) -> float:
    """Sum of all variable-cost rates."""
    return float(sum(c.pct_of_sales for c in costs))


def project_variable_costs(revenue: np.ndarray, costs: list[VariableCost]) -> np.ndarray:
    """Monthly variable cost = total revenue × aggregate rate."""
    return revenue * aggregate_variable_rate(costs)
