"""Tests for engine/revenue.py — revenue drivers and variable costs."""

import numpy as np
import pytest

from finplan.config import RevenueDriver, VariableCost
from finplan.engine.revenue import (
    aggregate_variable_rate,
    project_revenue,
    project_variable_costs,
)


class TestProjectRevenue:
    def test_flat_driver(self):
        rev = project_revenue([RevenueDriver(start_month=1, units=10, price=100, monthly_growth_pct=0)])
        assert len(rev) == 36
        assert rev[0] == 1000
        assert rev[11] == 1000
        assert rev[35] == 1000

    def test_growth_compounds_monthly(self):
        rev = project_revenue([RevenueDriver(start_month=1, units=1, price=100, monthly_growth_pct=0.10)])
        assert rev[0] == pytest.approx(100)
        assert rev[1] == pytest.approx(110)
        assert rev[2] == pytest.approx(121)

    def test_zero_before_start(self):
        rev = project_revenue([RevenueDriver(start_month=5, units=2, price=50, monthly_growth_pct=0.05)])
        assert np.all(rev[:4] == 0)
        assert rev[4] == pytest.approx(100)  # growth counts from the start month
        assert rev[5] == pytest.approx(105)

    def test_drivers_are_summed(self):
        rev = project_revenue([
            RevenueDriver(start_month=1, units=1, price=100),
            RevenueDriver(start_month=13, units=1, price=50),
        ])
        assert rev[11] == 100
        assert rev[12] == 150

    def test_start_after_horizon_contributes_nothing(self):
        rev = project_revenue([RevenueDriver(start_month=40, units=1, price=100)])
        assert rev.sum() == 0

    def test_no_drivers(self):
        assert project_revenue([]).sum() == 0


class TestVariableCosts:
    def test_rates_are_aggregated(self):
        costs = [VariableCost(pct_of_sales=0.25), VariableCost(pct_of_sales=0.10)]
        assert aggregate_variable_rate(costs) == pytest.approx(0.35)

    def test_applied_to_total_revenue(self):
        rev = np.full(36, 1000.0)
        vc = project_variable_costs(rev, [VariableCost(pct_of_sales=0.25)])
        assert np.allclose(vc, 250)

    def test_rate_above_one_not_capped(self):
        rev = np.full(36, 1000.0)
        vc = project_variable_costs(rev, [VariableCost(pct_of_sales=0.8), VariableCost(pct_of_sales=0.5)])
        assert vc[0] == pytest.approx(1300)
        assert vc[0] > rev[0]
