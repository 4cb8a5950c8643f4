"""Payroll & opex projector."""

from __future__ import annotations

import numpy as np

from finplan.config.horizon import HORIZON_MONTHS, YEAR_BUCKETS
from finplan.config.opex import OpexItem
from finplan.config.payroll import PayrollItem
from finplan.engine.revenue import month_index


def project_payroll(items: list[PayrollItem]) -> np.ndarray:
    """Loaded payroll cost per month.

    An item contributes ``gross_per_month × (1 + on_cost_pct)`` every month
    from its start month on; there is no end date.
    """
    months = month_index()
    payroll = np.zeros(HORIZON_MONTHS)
    for item in items:
        loaded = item.gross_per_month * (1 + item.on_cost_pct)
        payroll += np.where(months >= item.start_month, loaded, 0.0)
    return payroll


def project_opex(items: list[OpexItem]) -> np.ndarray:
    """Operating expenses per month.

    For year bucket ``y`` the annual amount is
    ``amount_year1 × (1 + index_pct_per_year)^(y − 1)``, spread as 1/12 per
    month.  Months of the bucket before ``start_month`` are skipped and not
    caught up later, so a mid-year start books only the active months.
    """
    months = month_index()
    opex = np.zeros(HORIZON_MONTHS)
    for item in items:
        for year, first, last in YEAR_BUCKETS:
            amount_year = item.amount_year1 * (1 + item.index_pct_per_year) ** (year - 1)
            in_bucket = (months >= first) & (months <= last) & (months >= item.start_month)
            opex += np.where(in_bucket, amount_year / 12, 0.0)
    return opex
