"""Cashflow & cash balance.

  cashflow = EBIT + depreciation − principal − capex − tax_paid − wc_delta
  cash[0]  = opening_cash + cashflow[0]
  cash[i]  = cash[i − 1] + cashflow[i]

Loan proceeds and the opening equity are not cash events of the projection;
they are assumed to be part of ``opening_cash``.
"""

from __future__ import annotations

import numpy as np


def compute_cashflow(
    ebit: np.ndarray,
    depreciation: np.ndarray,
    principal: np.ndarray,
    capex: np.ndarray,
    tax_paid: np.ndarray,
    wc_delta: np.ndarray,
) -> np.ndarray:
    return ebit + depreciation - principal - capex - tax_paid - wc_delta


def accumulate_cash(cashflow: np.ndarray, opening_cash: float) -> np.ndarray:
    """Running cash balance at each month end."""
    cash = np.zeros(len(cashflow))
    running = opening_cash
    for i, flow in enumerate(cashflow):
        running = running + flow
        cash[i] = running
    return cash
