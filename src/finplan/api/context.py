"""Self-describing helpers — schema, defaults and per-section parameter lists."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from finplan.config import (
    Assumptions,
    CapexItem,
    DebtItem,
    OpexItem,
    PayrollItem,
    PlanMeta,
    RevenueDriver,
    TaxConfig,
    VariableCost,
    WorkingCapitalConfig,
)


class ParameterInfo(BaseModel):
    """One configurable field, machine-readable."""
    name: str
    type: str
    default: Any
    description: str


class SectionInfo(BaseModel):
    """One input section: a single record or a list of records."""
    section: str
    is_list: bool
    parameters: list[ParameterInfo] = Field(default_factory=list)


# (section key in Assumptions, record model, holds a list of records)
SECTIONS: list[tuple[str, type[BaseModel], bool]] = [
    ("meta", PlanMeta, False),
    ("revenue_drivers", RevenueDriver, True),
    ("variable_costs", VariableCost, True),
    ("payroll", PayrollItem, True),
    ("opex", OpexItem, True),
    ("capex", CapexItem, True),
    ("debts", DebtItem, True),
    ("taxes", TaxConfig, False),
    ("working_capital", WorkingCapitalConfig, False),
]


def get_assumptions_schema() -> dict[str, Any]:
    """Full JSON Schema for ``Assumptions``."""
    return Assumptions.model_json_schema()


def get_default_assumptions() -> dict[str, Any]:
    """The seed plan as a plain JSON-able dict."""
    return Assumptions().model_dump()


def extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Fields of one record model with their defaults and descriptions."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        annotation = field_info.annotation
        type_name = getattr(annotation, "__name__", None) or str(annotation)
        params.append(ParameterInfo(
            name=name,
            type=type_name,
            default=field_info.get_default(call_default_factory=True),
            description=field_info.description or "",
        ))
    return params


def describe_inputs() -> list[SectionInfo]:
    """Parameter lists for every input section, in wizard order."""
    return [
        SectionInfo(section=key, is_list=is_list, parameters=extract_params(model))
        for key, model, is_list in SECTIONS
    ]
