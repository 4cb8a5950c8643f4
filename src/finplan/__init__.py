"""finplan — 36-month financial plan projector."""

__version__ = "1.0.0"
