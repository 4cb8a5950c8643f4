"""Logging configuration for the API and dashboard entry points."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install one stream handler on the ``finplan`` logger.

    Safe to call more than once (Streamlit reruns the script on every edit).
    """
    logger = logging.getLogger("finplan")
    logger.setLevel(level)
    if not any(getattr(h, "_finplan", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._finplan = True
        logger.addHandler(handler)
