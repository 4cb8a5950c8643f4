"""Yearly P&L and balance snapshots.

The yearly P&L is on a statement basis: tax expense is re-derived from each
year's EBT and is independent of when tax is actually paid.

Snapshots at months 12 / 24 / 36 are a simplified net-asset view, not a
double-entry balance sheet:
  fixed_assets_net = max(0, Σ capex − Σ depreciation)
  equity           = opening equity + Σ EBT − max(0, Σ EBT) × CIT rate

Snapshot equity taxes the *cumulative* EBT to date instead of summing the
yearly tax figures, so the two disagree when profit changes sign between
years.
"""

from __future__ import annotations

import numpy as np

from finplan.config.horizon import SNAPSHOT_MONTHS, YEAR_BUCKETS
from finplan.models.results import BalanceSnapshot, YearlyPnL


def build_yearly_pnl(
    revenue: np.ndarray,
    variable_cost: np.ndarray,
    payroll: np.ndarray,
    opex: np.ndarray,
    depreciation: np.ndarray,
    interest: np.ndarray,
    cit_rate: float,
) -> list[YearlyPnL]:
    """Aggregate monthly lines into three yearly P&L statements."""
    yearly: list[YearlyPnL] = []
    for year, first, last in YEAR_BUCKETS:
        window = slice(first - 1, last)
        sales = float(revenue[window].sum())
        vc = float(variable_cost[window].sum())
        pay = float(payroll[window].sum())
        op = float(opex[window].sum())
        dep = float(depreciation[window].sum())
        intr = float(interest[window].sum())

        gm = sales - vc
        ebit = gm - pay - op - dep
        ebt = ebit - intr
        tax = float(np.maximum(0.0, ebt)) * cit_rate

        yearly.append(YearlyPnL(
            year=year,
            sales=sales,
            variable_cost=vc,
            gross_margin=gm,
            payroll=pay,
            opex=op,
            depreciation=dep,
            interest=intr,
            ebit=ebit,
            ebt=ebt,
            tax_expense=tax,
            result=ebt - tax,
        ))
    return yearly


def build_snapshots(
    capex: np.ndarray,
    depreciation: np.ndarray,
    cash: np.ndarray,
    outstanding: np.ndarray,
    ebt: np.ndarray,
    opening_equity: float,
    cit_rate: float,
) -> list[BalanceSnapshot]:
    """Net-asset snapshots at the end of each projection year."""
    snapshots: list[BalanceSnapshot] = []
    for m in SNAPSHOT_MONTHS:
        total_capex = float(capex[:m].sum())
        total_depr = float(depreciation[:m].sum())
        cumulative_ebt = float(ebt[:m].sum())
        profit_to_date = cumulative_ebt - float(np.maximum(0.0, cumulative_ebt)) * cit_rate

        snapshots.append(BalanceSnapshot(
            month=m,
            fixed_assets_net=float(np.maximum(0.0, total_capex - total_depr)),
            cash=float(cash[m - 1]),
            debt_outstanding=float(outstanding[m - 1]),
            equity=opening_equity + profit_to_date,
        ))
    return snapshots
