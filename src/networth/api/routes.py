"""JSON API endpoints: currency directory, dashboard, FIRE plan, table sorting."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from networth.api.schemas import DashboardRequest, FireRequest, SortRequest
from networth.currencies import SUPPORTED_CURRENCIES, currency_decimals
from networth.fire import FireAssumptions
from networth.sorting import SortConfig, sort_records
from networth.valuation import format_currency

log = structlog.get_logger(__name__)

router = APIRouter()


def _jsonable(obj: Any) -> Any:
    """Recursively convert Decimals, dates, enums and dataclasses for JSON."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return _jsonable(asdict(obj))
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(item) for item in obj]
    return obj


def _base_currency(request: Request, requested: str | None) -> str:
    return requested or request.app.state.settings.currency.base_currency


@router.get("/currencies")
async def get_currencies() -> JSONResponse:
    """Supported currencies with symbol, name and display precision."""
    result = [
        {
            "code": c.code,
            "name": c.name,
            "symbol": c.symbol,
            "decimals": currency_decimals(c.code),
        }
        for c in SUPPORTED_CURRENCIES
    ]
    return JSONResponse(content=result)


@router.post("/dashboard")
async def post_dashboard(request: Request, body: DashboardRequest) -> JSONResponse:
    """Portfolio summary, allocation, expense breakdown and history series."""
    service = request.app.state.service
    base_currency = _base_currency(request, body.base_currency)

    view = service.build_dashboard(
        accounts=[a.to_model() for a in body.accounts],
        snapshots=[s.to_model() for s in body.snapshots],
        expenses=[e.to_model() for e in body.expenses],
        base_currency=base_currency,
        as_of=body.as_of,
    )

    summary = view.summary
    content = _jsonable(asdict(view))
    content["summary"].update({
        "retirement": str(summary.retirement),
        "liquid_net_worth": str(summary.liquid_net_worth),
        "total_net_worth": str(summary.total_net_worth),
        "display": {
            "total_net_worth": format_currency(summary.total_net_worth, base_currency),
            "cash": format_currency(summary.cash, base_currency),
            "investments": format_currency(summary.investments, base_currency),
        },
    })
    return JSONResponse(content=content)


@router.post("/fire")
async def post_fire(request: Request, body: FireRequest) -> JSONResponse:
    """FIRE metrics and multi-year projection for the submitted portfolio."""
    service = request.app.state.service
    settings = request.app.state.settings
    base_currency = _base_currency(request, body.base_currency)
    assumptions = body.assumptions.to_model(FireAssumptions.from_settings(settings.fire))

    plan = service.build_fire_plan(
        accounts=[a.to_model() for a in body.accounts],
        expenses=[e.to_model() for e in body.expenses],
        base_currency=base_currency,
        assumptions=assumptions,
        as_of=body.as_of,
    )

    return JSONResponse(content={
        "base_currency": base_currency,
        "average_monthly_expenses": str(plan.average_monthly_expenses),
        "inputs": _jsonable(plan.inputs),
        "results": _jsonable(plan.results),
        "projection": _jsonable(plan.projection),
    })


@router.post("/sort")
async def post_sort(body: SortRequest) -> JSONResponse:
    """Order arbitrary table rows by one column."""
    config = SortConfig(key=body.key, direction=body.direction)
    log.debug("sort_requested", key=body.key, direction=body.direction.value, rows=len(body.records))
    return JSONResponse(content=_jsonable(sort_records(body.records, config)))
