"""Tests for the logging entry-point helper."""

from __future__ import annotations

import logging

from finplan.config import Assumptions
from finplan.engine.projection import build_projection
from finplan.logging_setup import configure_logging


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger("finplan").handlers if getattr(h, "_finplan", False)]


def test_repeated_configuration_keeps_one_handler():
    configure_logging("INFO")
    configure_logging("DEBUG")
    assert len(_own_handlers()) == 1
    assert logging.getLogger("finplan").level == logging.DEBUG


def test_projection_logs_debug_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="finplan"):
        build_projection(Assumptions())
    assert any("ending_cash" in r.getMessage() for r in caplog.records)
