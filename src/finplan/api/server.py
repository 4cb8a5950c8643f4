"""FastAPI server — HTTP access to the plan projector.

Run with:
    uvicorn finplan.api.server:app --reload --port 8000

Or:
    python -m finplan.api.server

Endpoints:
    GET  /health                 — liveness probe
    GET  /schema                 — JSON Schema for Assumptions
    GET  /parameters             — per-section parameter descriptions
    GET  /plan/defaults          — the seed plan as JSON
    POST /plan                   — project a (partial) plan
    POST /plan/validate          — per-field issues only
    POST /plan/export/{table}    — one CSV table (pnl | cashflow | snapshots)
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from finplan import __version__
from finplan.api.context import describe_inputs, get_assumptions_schema, get_default_assumptions
from finplan.config import Assumptions
from finplan.engine.projection import build_projection
from finplan.export.csv_export import TABLES, to_csv
from finplan.logging_setup import configure_logging
from finplan.validation import ValidationIssue, validate_assumptions

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Financial Plan Projector API",
    version=__version__,
    description=(
        "36-month financial plan: P&L, cashflow and balance snapshots from "
        "revenue drivers, costs, capex, debt, tax and working-capital "
        "assumptions. Start with GET /plan/defaults and POST a modified copy "
        "to /plan."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class PlanRequest(BaseModel):
    """Request body for /plan. All fields optional — defaults used for missing."""
    assumptions: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Assumptions JSON. Sections present replace "
                    "the default section; nested records are merged key by key. "
                    "Example: {'taxes': {'cit_payment_month': 6}}",
    )


class PlanResponse(BaseModel):
    """Response from /plan."""
    result: dict[str, Any]
    issues: list[ValidationIssue]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict. Lists are replaced, not merged."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_assumptions(overrides: dict[str, Any]) -> Assumptions:
    """Build Assumptions from partial overrides merged onto the seed plan.

    Raises HTTP 422 with pydantic's error list for malformed payloads.
    """
    merged = _deep_merge(get_default_assumptions(), overrides)
    try:
        return Assumptions(**merged)
    except ValidationError as exc:
        logger.info("Rejected assumptions payload: %d error(s)", exc.error_count())
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to start."""
    return {
        "name": "Financial Plan Projector API",
        "version": __version__,
        "start_here": "GET /plan/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Assumptions — types, defaults, descriptions."""
    return get_assumptions_schema()


@app.get("/parameters")
def get_parameters():
    """Input sections in wizard order with their parameters."""
    return [section.model_dump() for section in describe_inputs()]


@app.get("/plan/defaults")
def get_defaults():
    """The seed plan. Use it as a starting point for modifications."""
    return get_default_assumptions()


@app.post("/plan", response_model=PlanResponse)
def project_plan(req: PlanRequest):
    """Run the 36-month projection.

    Validation issues are returned next to the result; they never block it.
    """
    assumptions = _build_assumptions(req.assumptions)
    result = build_projection(assumptions)
    issues = validate_assumptions(assumptions)
    logger.info(
        "Projected plan for %r (%d issue(s))", assumptions.meta.company, len(issues),
    )
    # inf / nan from degenerate inputs are emitted as null
    return PlanResponse(result=json.loads(result.model_dump_json()), issues=issues)


@app.post("/plan/validate")
def validate_plan(req: PlanRequest):
    """Per-field issues without running the projection."""
    assumptions = _build_assumptions(req.assumptions)
    return {"issues": [i.model_dump() for i in validate_assumptions(assumptions)]}


@app.post("/plan/export/{table}", response_class=PlainTextResponse)
def export_table(table: str, req: PlanRequest):
    """One CSV table of the projection, as a download."""
    if table not in TABLES:
        raise HTTPException(status_code=404, detail=f"Unknown table '{table}'")
    filename, build_rows = TABLES[table]
    result = build_projection(_build_assumptions(req.assumptions))
    return PlainTextResponse(
        to_csv(build_rows(result)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server (FINPLAN_HOST / FINPLAN_PORT / FINPLAN_LOG_LEVEL)."""
    import uvicorn

    configure_logging(os.environ.get("FINPLAN_LOG_LEVEL", "INFO"))
    uvicorn.run(
        "finplan.api.server:app",
        host=os.environ.get("FINPLAN_HOST", "0.0.0.0"),
        port=int(os.environ.get("FINPLAN_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
