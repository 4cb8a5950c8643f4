"""Tests for export/csv_export.py — CSV tables and DataFrame views."""

from __future__ import annotations

import math

import pytest

from finplan.config import Assumptions, DebtItem, PlanMeta
from finplan.engine.projection import build_projection
from finplan.export.csv_export import (
    cashflow_rows,
    export_tables,
    loan_frame,
    monthly_frame,
    pnl_rows,
    round_amount,
    snapshot_frame,
    snapshot_rows,
    to_csv,
    yearly_frame,
)


@pytest.fixture
def result(seed: Assumptions):
    return build_projection(seed)


class TestToCsv:
    def test_plain_fields(self):
        assert to_csv([["a", 1, 2], ["b", 3, 4]]) == "a,1,2\nb,3,4"

    def test_escaping(self):
        text = to_csv([["a,b", 'say "hi"', "line\nbreak", "plain"]])
        assert text == '"a,b","say ""hi""","line\nbreak",plain'

    def test_empty_leading_cell(self):
        assert to_csv([["", "Year 1", "Year 2"]]) == ",Year 1,Year 2"


class TestRounding:
    def test_half_up(self):
        assert round_amount(2.5) == 3
        assert round_amount(-2.5) == -2
        assert round_amount(1234.4) == 1234

    def test_non_finite_passthrough(self):
        assert math.isinf(round_amount(float("inf")))


class TestTables:
    def test_pnl_rows(self, result):
        rows = pnl_rows(result)
        assert rows[0] == ["", "Year 1", "Year 2", "Year 3"]
        assert len(rows) == 12
        labels = [r[0] for r in rows[1:]]
        assert labels[0] == "Revenue"
        assert labels[-1] == "Net result"
        assert rows[1][1] == round_amount(result.yearly[0].sales)
        assert all(isinstance(v, int) for r in rows[1:] for v in r[1:])

    def test_cashflow_rows(self, result):
        rows = cashflow_rows(result)
        assert rows[0] == ["Month", "Cashflow", "Cumulative cash"]
        assert len(rows) == 37
        assert rows[1][0] == 1
        assert rows[-1][2] == round_amount(result.cash[-1])

    def test_cumulative_cash_counts_opening_cash_once(self, flat_revenue: Assumptions):
        plan = flat_revenue.model_copy(update={"meta": PlanMeta(company="Flat", opening_cash=10_000, equity=0)})
        res = build_projection(plan)
        rows = cashflow_rows(res)
        assert rows[1] == [1, 0, 10_000]
        assert rows[-1][2] == round_amount(10_000 + sum(res.cashflow))

    def test_snapshot_rows(self, result):
        rows = snapshot_rows(result)
        assert rows[0] == ["Snapshot (month)", 12, 24, 36]
        assert [r[0] for r in rows[1:]] == ["Fixed assets (net)", "Cash", "Debt", "Equity"]
        assert rows[2][3] == round_amount(result.snapshots[2].cash)

    def test_export_tables(self, result):
        files = export_tables(result)
        assert set(files) == {"profit_and_loss.csv", "cashflow.csv", "balance_snapshots.csv"}
        assert files["cashflow.csv"].startswith("Month,Cashflow,Cumulative cash\n1,")
        assert files["cashflow.csv"].count("\n") == 36


class TestFrames:
    def test_monthly_frame(self, result):
        df = monthly_frame(result)
        assert len(df) == 36
        assert df.index[0] == 1
        assert df["Cash"].iloc[-1] == pytest.approx(result.cash[-1])

    def test_yearly_frame(self, result):
        df = yearly_frame(result)
        assert list(df.columns) == ["Year 1", "Year 2", "Year 3"]
        assert df.loc["EBT", "Year 2"] == pytest.approx(result.yearly[1].ebt)

    def test_snapshot_frame(self, result):
        df = snapshot_frame(result)
        assert list(df.columns) == ["Month 12", "Month 24", "Month 36"]
        assert df.loc["Equity", "Month 36"] == pytest.approx(result.snapshots[2].equity)

    def test_loan_frame(self, result):
        df = loan_frame(result.loans[0])
        assert df.index.name == "month"
        assert df.index[0] == 1
        assert len(df) == 36
        assert list(df.columns) == [
            "opening_balance", "interest", "principal", "payment", "closing_balance",
        ]

    def test_loan_frame_outside_horizon(self, empty: Assumptions):
        plan = empty.model_copy(update={"debts": [
            DebtItem(amount=1000, rate=0.05, term_months=12, start_month=40),
        ]})
        loan = build_projection(plan).loans[0]
        assert loan.rows == []
        df = loan_frame(loan)
        assert df.empty
        assert df.index.name == "month"
        assert "closing_balance" in df.columns
