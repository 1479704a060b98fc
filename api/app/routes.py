"""REST routes under /api/v1 (one per decision pipeline)."""

from typing import Any

from fastapi import APIRouter

from app import services
from app.models import (
    CompletePayload,
    FlowchartPayload,
    ScreenerPayload,
    ScreenerProPayload,
    SmartEvaluatorPayload,
    ValuationPayload,
)

router = APIRouter(prefix="/api/v1")


@router.post("/calculate/screener")
def screener(payload: ScreenerPayload) -> dict[str, Any]:
    """All-or-nothing screen; YTM and duration are solved from the price."""
    return services.run_screener(payload)


@router.post("/calculate/screener-pro")
def screener_pro(payload: ScreenerProPayload) -> dict[str, Any]:
    return services.run_screener_pro(payload)


@router.post("/calculate/valuation")
def valuation(payload: ValuationPayload) -> dict[str, Any]:
    return services.run_valuation(payload)


@router.post("/calculate/complete")
def complete(payload: CompletePayload) -> dict[str, Any]:
    return services.run_complete(payload)


@router.post("/calculate/flowchart")
def flowchart(payload: FlowchartPayload) -> dict[str, Any]:
    return services.run_flowchart(payload)


@router.post("/tools/smart-evaluator")
def smart_evaluator(payload: SmartEvaluatorPayload) -> dict[str, Any]:
    """Six-step weighted evaluation; rates are decimals on this route."""
    return services.run_smart_evaluator(payload)
