"""Capital expenditure."""

from pydantic import BaseModel, Field


class CapexItem(BaseModel):
    """One investment, paid in full in ``start_month`` and depreciated straight-line."""

    name: str = Field(default="Investment", description="Label shown in tables")
    amount: float = Field(default=0.0, description="Purchase amount (€)")
    start_month: int = Field(default=1, description="Month of purchase (1–36)")
    depr_months: int = Field(
        default=36,
        description="Straight-line depreciation period in months. Months past "
                    "the horizon are dropped.",
    )
