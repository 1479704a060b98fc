"""Requests: validated, data-only inputs for each decision pipeline."""

from bondlab.requests.complete import CompleteRequest
from bondlab.requests.flowchart import FlowchartRequest
from bondlab.requests.screener import ScreenerRequest
from bondlab.requests.screener_pro import ScreenerProRequest
from bondlab.requests.smart_evaluator import SmartEvaluatorRequest
from bondlab.requests.valuation import ValuationRequest

__all__ = [
    "CompleteRequest",
    "FlowchartRequest",
    "ScreenerProRequest",
    "ScreenerRequest",
    "SmartEvaluatorRequest",
    "ValuationRequest",
]
