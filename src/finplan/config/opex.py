"""Operating expenses."""

from pydantic import BaseModel, Field


class OpexItem(BaseModel):
    """Fixed overhead expressed as a year-1 amount, indexed yearly."""

    name: str = Field(default="Operating expense", description="Label shown in tables")
    amount_year1: float = Field(default=0.0, description="Full-year amount in year 1 (€)")
    index_pct_per_year: float = Field(
        default=0.0,
        description="Yearly indexation, compounded per year bucket (0.02 = 2%).",
    )
    start_month: int = Field(
        default=1,
        description="First month the cost is incurred. Earlier months of the "
                    "bucket are skipped, not caught up.",
    )
