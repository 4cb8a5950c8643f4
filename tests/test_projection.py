"""Tests for engine/projection.py — full projection runs."""

from __future__ import annotations

import math

import pytest

from finplan.config import (
    Assumptions,
    CapexItem,
    DebtItem,
    RevenueDriver,
    TaxConfig,
    VariableCost,
)
from finplan.engine.projection import build_projection

MONTHLY_SERIES = [
    "revenue", "variable_cost", "gross_margin", "payroll", "opex", "capex",
    "depreciation", "interest", "principal", "outstanding_debt", "ebit", "ebt",
    "tax_paid", "wc_delta", "cashflow", "cash",
]


class TestShape:
    def test_all_monthly_series_have_36_months(self, seed: Assumptions):
        result = build_projection(seed)
        assert result.months == list(range(1, 37))
        for name in MONTHLY_SERIES:
            assert len(getattr(result, name)) == 36, name

    def test_yearly_and_snapshots(self, seed: Assumptions):
        result = build_projection(seed)
        assert len(result.yearly) == 3
        assert len(result.snapshots) == 3
        assert len(result.tax_by_year) == 3
        assert [s.month for s in result.snapshots] == [12, 24, 36]


class TestFlatRevenue:
    """1 000/month, no costs, 25% CIT paid in month 3, zero DSO/DPO."""

    def test_cashflow_and_tax_timing(self, flat_revenue: Assumptions):
        result = build_projection(flat_revenue)
        # zero DSO still collects last month's balance: one month of lag
        assert result.cashflow[0] == 0
        assert result.cashflow[1] == 1000
        assert result.tax_by_year == pytest.approx([3000, 3000, 3000])
        assert result.tax_paid[14] == 3000
        assert result.tax_paid[26] == 3000
        assert sum(result.tax_paid) == 6000
        assert result.cash[-1] == pytest.approx(35 * 1000 - 6000)

    def test_snapshots(self, flat_revenue: Assumptions):
        result = build_projection(flat_revenue)
        snap = result.snapshots[0]
        assert snap.cash == pytest.approx(11_000)
        assert snap.equity == pytest.approx(9000)
        assert snap.debt_outstanding == 0
        assert snap.fixed_assets_net == 0

    def test_summary(self, flat_revenue: Assumptions):
        s = build_projection(flat_revenue).summary
        assert s.company == "Empty"
        assert s.total_revenue == pytest.approx(36_000)
        assert s.total_net_result == pytest.approx(27_000)
        assert s.min_cash == 0
        assert s.min_cash_month == 1
        assert s.first_negative_cash_month is None


class TestScenarios:
    def test_payment_month_12(self, flat_revenue: Assumptions):
        plan = flat_revenue.model_copy(update={"taxes": TaxConfig(cit_rate_pct=0.25, cit_payment_month=12)})
        result = build_projection(plan)
        assert result.tax_paid[23] == pytest.approx(3000)
        assert result.tax_paid[11] == 0

    def test_linear_loan(self, empty: Assumptions):
        plan = empty.model_copy(update={"debts": [DebtItem(
            amount=1200, rate=0, term_months=12, grace_months=0, method="linear", start_month=1,
        )]})
        result = build_projection(plan)
        assert result.principal[:12] == [100.0] * 12
        assert result.outstanding_debt[11] == 0
        assert result.cashflow[0] == -100  # principal is a cash outflow, proceeds are not modelled

    def test_overdraft_detected(self, empty: Assumptions):
        plan = empty.model_copy(update={"capex": [CapexItem(amount=5000, start_month=3, depr_months=60)]})
        s = build_projection(plan).summary
        assert s.first_negative_cash_month == 3
        assert s.min_cash == pytest.approx(-5000)

    def test_zero_before_driver_start(self, empty: Assumptions):
        plan = empty.model_copy(update={
            "revenue_drivers": [RevenueDriver(start_month=7, units=1, price=500)],
        })
        result = build_projection(plan)
        assert result.revenue[:6] == [0.0] * 6
        assert result.revenue[6] == 500


class TestProperties:
    def test_deterministic(self, seed: Assumptions):
        assert build_projection(seed) == build_projection(seed)

    def test_input_not_mutated(self, seed: Assumptions):
        before = seed.model_dump()
        build_projection(seed)
        assert seed.model_dump() == before

    def test_cash_recurrence(self, seed: Assumptions):
        result = build_projection(seed)
        assert result.cash[0] == seed.meta.opening_cash + result.cashflow[0]
        for i in range(1, 36):
            assert result.cash[i] == result.cash[i - 1] + result.cashflow[i]

    def test_tax_never_negative(self, seed: Assumptions):
        result = build_projection(seed)
        assert all(t >= 0 for t in result.tax_by_year)
        assert all(y.tax_expense >= 0 for y in result.yearly)

    def test_loan_balance_monotone(self, seed: Assumptions):
        for loan in build_projection(seed).loans:
            closings = [r.closing_balance for r in loan.rows]
            assert all(b >= 0 for b in closings)
            assert all(b2 <= b1 for b1, b2 in zip(closings, closings[1:]))

    def test_depreciation_not_above_capex(self, seed: Assumptions):
        result = build_projection(seed)
        assert sum(result.depreciation) <= sum(result.capex) + 1e-9

    def test_seed_plan_values(self, seed: Assumptions):
        result = build_projection(seed)
        assert result.revenue[0] == 0  # Retainers start in month 2
        assert result.revenue[1] == pytest.approx(20_000)
        assert result.variable_cost[1] == pytest.approx(5000)
        assert result.payroll[0] == pytest.approx(4550)
        assert result.opex[0] == pytest.approx(1600)
        assert result.capex[0] == 30_000
        assert result.principal[:6] == [0.0] * 6
        assert result.interest[0] == pytest.approx(75_000 * 0.055 / 12)

    def test_degenerate_margin_surfaces_as_nan(self, empty: Assumptions):
        plan = empty.model_copy(update={
            "revenue_drivers": [RevenueDriver(units=float("inf"), price=1)],
            "variable_costs": [VariableCost(pct_of_sales=1.0)],
        })
        result = build_projection(plan)
        assert math.isnan(result.ebt[0])
        assert math.isnan(result.yearly[0].tax_expense)
        assert math.isnan(result.tax_by_year[0])
        assert math.isnan(result.cash[-1])

    def test_loan_starting_after_horizon(self, empty: Assumptions):
        plan = empty.model_copy(update={"debts": [
            DebtItem(amount=1000, rate=0.05, term_months=12, start_month=40),
        ]})
        result = build_projection(plan)
        assert result.loans[0].rows == []
        assert result.outstanding_debt == [0.0] * 36
