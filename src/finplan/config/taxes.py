"""Corporate income tax."""

from typing import Literal

from pydantic import BaseModel, Field


class TaxConfig(BaseModel):
    """CIT rate and the month-of-year the prior year's liability is paid."""

    cit_rate_pct: float = Field(default=0.25, description="Corporate income tax rate (0.25 = 25%)")
    cit_payment_month: Literal[3, 6, 11, 12] = Field(
        default=11,
        description="Month of the following year in which last year's tax is paid.",
    )
