"""Capex & depreciation projector.

Cash-out: the full amount lands in ``start_month`` (dropped if outside 1..36).
Depreciation: ``amount / depr_months`` for each of ``depr_months`` months from
``start_month``.  Months past the horizon are dropped without redistribution,
so total depreciation booked can be less than the amount.
"""

from __future__ import annotations

import numpy as np

from finplan.config.capex import CapexItem
from finplan.config.horizon import HORIZON_MONTHS


def project_capex(items: list[CapexItem]) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(capex, depreciation)`` monthly series."""
    capex = np.zeros(HORIZON_MONTHS)
    depreciation = np.zeros(HORIZON_MONTHS)

    for item in items:
        if 1 <= item.start_month <= HORIZON_MONTHS:
            capex[item.start_month - 1] += item.amount

        # numpy scalar division: a zero period yields inf, not ZeroDivisionError
        with np.errstate(divide="ignore", invalid="ignore"):
            per_month = np.float64(item.amount) / item.depr_months

        for offset in range(item.depr_months):
            m = item.start_month + offset
            if 1 <= m <= HORIZON_MONTHS:
                depreciation[m - 1] += per_month

    return capex, depreciation
