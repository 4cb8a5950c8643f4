"""Revenue drivers and variable costs."""

from pydantic import BaseModel, Field


class RevenueDriver(BaseModel):
    """One revenue line: units × price, growing monthly from its start month."""

    name: str = Field(default="Revenue line", description="Label shown in tables")
    start_month: int = Field(default=1, description="First month with revenue (1–36)")
    units: float = Field(default=1.0, description="Units sold per month at start")
    price: float = Field(default=100.0, description="Price per unit (€)")
    monthly_growth_pct: float = Field(
        default=0.0,
        description="Compounding growth per elapsed month (0.03 = 3%/month).",
    )


class VariableCost(BaseModel):
    """Cost proportional to total sales.

    All items are collapsed into one aggregate rate applied to total revenue,
    not matched to individual revenue lines.
    """

    name: str = Field(default="Variable cost", description="Label shown in tables")
    pct_of_sales: float = Field(default=0.0, description="Share of revenue (0.25 = 25%)")
