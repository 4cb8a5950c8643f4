"""Shared test fixtures — the seed plan and an empty plan to build on."""

from __future__ import annotations

import pytest

from finplan.config import (
    Assumptions,
    PlanMeta,
    RevenueDriver,
    TaxConfig,
    WorkingCapitalConfig,
)


@pytest.fixture
def seed() -> Assumptions:
    """The plan the wizard opens with."""
    return Assumptions()


@pytest.fixture
def empty() -> Assumptions:
    """No revenue, no costs, no debt, zero opening position."""
    return Assumptions(
        meta=PlanMeta(company="Empty", opening_cash=0, equity=0),
        revenue_drivers=[],
        variable_costs=[],
        payroll=[],
        opex=[],
        capex=[],
        debts=[],
        taxes=TaxConfig(cit_rate_pct=0.25, cit_payment_month=3),
        working_capital=WorkingCapitalConfig(dso_days=0, dpo_days=0),
    )


@pytest.fixture
def flat_revenue(empty: Assumptions) -> Assumptions:
    """1 000 revenue every month and nothing else."""
    return empty.model_copy(update={
        "revenue_drivers": [RevenueDriver(name="Flat", start_month=1, units=10, price=100)],
    })
