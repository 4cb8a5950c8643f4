"""Result models — projection output contracts."""

from finplan.models.results import (
    BalanceSnapshot,
    DebtScheduleRow,
    DebtService,
    LoanSchedule,
    PlanSummary,
    ProjectionResult,
    YearlyPnL,
)

__all__ = [
    "BalanceSnapshot",
    "DebtScheduleRow",
    "DebtService",
    "LoanSchedule",
    "PlanSummary",
    "ProjectionResult",
    "YearlyPnL",
]
