"""Working-capital timing."""

from pydantic import BaseModel, Field


class WorkingCapitalConfig(BaseModel):
    """Receivable / payable days used by the working-capital approximation."""

    dso_days: float = Field(default=0.0, description="Days sales outstanding")
    dpo_days: float = Field(default=0.0, description="Days payables outstanding")
    dio_days: float = Field(default=0.0, description="Days inventory outstanding (not used by the engine)")
