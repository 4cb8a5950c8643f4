"""Income statement & tax accrual.

Monthly:
  gross = revenue − variable_cost
  EBIT  = gross − payroll − opex − depreciation
  EBT   = EBIT − interest

Tax per year bucket = max(0, Σ EBT) × CIT rate.  Losses give no relief and
are not carried forward.  The liability of year y is paid as one lump sum in
month ``cit_payment_month`` of year y + 1; year 3's liability falls outside
the horizon and never reaches cash.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from finplan.config.horizon import HORIZON_MONTHS, YEAR_BUCKETS
from finplan.config.taxes import TaxConfig


@dataclass
class OperatingResult:
    """Monthly result lines, each a 36-element array."""

    gross_margin: np.ndarray
    ebit: np.ndarray
    ebt: np.ndarray


def compute_operating_result(
    revenue: np.ndarray,
    variable_cost: np.ndarray,
    payroll: np.ndarray,
    opex: np.ndarray,
    depreciation: np.ndarray,
    interest: np.ndarray,
) -> OperatingResult:
    gross = revenue - variable_cost
    ebit = gross - payroll - opex - depreciation
    ebt = ebit - interest
    return OperatingResult(gross_margin=gross, ebit=ebit, ebt=ebt)


def accrue_tax(ebt: np.ndarray, taxes: TaxConfig) -> np.ndarray:
    """Tax liability per year bucket (3 elements, never negative)."""
    tax_by_year = np.zeros(len(YEAR_BUCKETS))
    for year, first, last in YEAR_BUCKETS:
        profit = float(ebt[first - 1:last].sum())
        # nan profit stays nan
        tax_by_year[year - 1] = np.maximum(0.0, profit) * taxes.cit_rate_pct
    return tax_by_year


def schedule_tax_payments(tax_by_year: np.ndarray, taxes: TaxConfig) -> np.ndarray:
    """Cash tax per month.

    Year 1 is paid at index ``12 + (cit_payment_month − 1)`` and year 2 at
    ``24 + (cit_payment_month − 1)``; with payment month 12 the year-1 tax
    lands in month 24.
    """
    tax_paid = np.zeros(HORIZON_MONTHS)
    for year, year_end in ((1, 12), (2, 24)):
        liability = tax_by_year[year - 1]
        if liability > 0:
            tax_paid[year_end + (taxes.cit_payment_month - 1)] = liability
    return tax_paid
