"""Working-capital approximation.

Not an AR/AP ledger.  Each month the running receivable balance grows by the
month's revenue and shrinks by ``30 / dso_days`` of the opening balance
(the whole balance when DSO is 0).  Payables mirror this with variable cost
and DPO.

  wc_delta = ΔAR − ΔAP

A growing receivable consumes cash and a growing payable frees it, so the
cashflow subtracts ``wc_delta``.
"""

from __future__ import annotations

import numpy as np

from finplan.config.working_capital import WorkingCapitalConfig


def _balance_deltas(inflow: np.ndarray, days: float) -> np.ndarray:
    """Monthly change of a running balance fed by ``inflow`` and settled at ``days``."""
    deltas = np.zeros(len(inflow))
    balance = 0.0
    for i, new in enumerate(inflow):
        settled = (30 / days) * balance if days > 0 else balance
        delta = new - settled
        balance = float(np.maximum(0.0, balance + delta))
        deltas[i] = delta
    return deltas


def compute_wc_delta(
    revenue: np.ndarray,
    variable_cost: np.ndarray,
    wc: WorkingCapitalConfig,
) -> np.ndarray:
    """Working-capital cash absorption per month."""
    delta_ar = _balance_deltas(revenue, wc.dso_days)
    delta_ap = _balance_deltas(variable_cost, wc.dpo_days)
    return delta_ar - delta_ap
