"""
Evaluation entrypoints.

Most callers only need `evaluate(request)`, which dispatches to the default
EvaluationEngine, or the per-pipeline helpers below when they want to pass a
non-default policy (or, for the smart evaluator, a fixed "today").
"""

from __future__ import annotations

from datetime import date
from typing import Callable, TypeAlias

from bondlab.engine import create_default_engine, run_pipeline
from bondlab.pipelines import (
    CompleteEvaluationPipeline,
    FlowchartPipeline,
    ScreenerPipeline,
    ScreenerProPipeline,
    SmartEvaluatorPipeline,
    ValuationPipeline,
)
from bondlab.policies import (
    CompletePolicy,
    FlowchartPolicy,
    ScreenerPolicy,
    ScreenerProPolicy,
    SmartEvaluatorPolicy,
    ValuationPolicy,
)
from bondlab.requests import (
    CompleteRequest,
    FlowchartRequest,
    ScreenerProRequest,
    ScreenerRequest,
    SmartEvaluatorRequest,
    ValuationRequest,
)
from bondlab.results import (
    CompleteResult,
    FlowchartResult,
    ScreenerProResult,
    ScreenerResult,
    SmartEvaluatorResult,
    ValuationResult,
)

Request: TypeAlias = (
    ScreenerRequest
    | ScreenerProRequest
    | ValuationRequest
    | CompleteRequest
    | FlowchartRequest
    | SmartEvaluatorRequest
)

Result: TypeAlias = (
    ScreenerResult
    | ScreenerProResult
    | ValuationResult
    | CompleteResult
    | FlowchartResult
    | SmartEvaluatorResult
)

_default_engine = create_default_engine()


def evaluate(request: Request) -> Result:
    """Run the pipeline registered for the request's type."""
    return _default_engine.evaluate(request)


def screen(request: ScreenerRequest, policy: ScreenerPolicy | None = None) -> ScreenerResult:
    return run_pipeline(ScreenerPipeline(policy), request)


def screen_pro(
    request: ScreenerProRequest, policy: ScreenerProPolicy | None = None
) -> ScreenerProResult:
    return run_pipeline(ScreenerProPipeline(policy), request)


def value(request: ValuationRequest, policy: ValuationPolicy | None = None) -> ValuationResult:
    return run_pipeline(ValuationPipeline(policy), request)


def evaluate_complete(
    request: CompleteRequest, policy: CompletePolicy | None = None
) -> CompleteResult:
    return run_pipeline(CompleteEvaluationPipeline(policy), request)


def run_flowchart(
    request: FlowchartRequest, policy: FlowchartPolicy | None = None
) -> FlowchartResult:
    return run_pipeline(FlowchartPipeline(policy), request)


def smart_evaluate(
    request: SmartEvaluatorRequest,
    policy: SmartEvaluatorPolicy | None = None,
    today: Callable[[], date] = date.today,
) -> SmartEvaluatorResult:
    return run_pipeline(SmartEvaluatorPipeline(policy, today=today), request)
