"""
Evaluation engine: runs decision pipelines on validated requests.

Design intent:
- Requests are **data only** (validated on construction, no decision logic).
- This engine keeps a **registry of pipelines** for dispatch, so a new
  pipeline is added by registering it, not by editing the engine.
- The engine is the **error boundary**: invalid input propagates unchanged,
  anything else a pipeline raises becomes a ComputationError.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from bondlab.errors import BondAnalysisError, ComputationError
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines import BasePipeline

logger = logging.getLogger(__name__)


@contextmanager
def computation_boundary(name: str) -> Iterator[None]:
    """Re-raise anything but a BondAnalysisError as ComputationError, chained."""
    try:
        yield
    except BondAnalysisError:
        raise
    except Exception as exc:
        logger.error("%s failed: %s: %s", name, type(exc).__name__, exc)
        raise ComputationError(f"{name} computation failed: {exc}") from exc


def run_pipeline(pipeline: BasePipeline, request: EvaluationRequest) -> Any:
    """Evaluate `request` with `pipeline`, converting numeric failures."""
    with computation_boundary(pipeline.name):
        return pipeline.evaluate(request)


class EvaluationEngine:
    """
    Registry-based evaluation engine.

    Pipelines are registered at initialization and dispatched based on
    can_evaluate() checks. First matching pipeline wins.
    """

    def __init__(self) -> None:
        self._pipelines: list[BasePipeline] = []

    def register(self, pipeline: BasePipeline) -> None:
        """Register a pipeline for dispatch.

        Order matters: first matching pipeline wins.
        """
        self._pipelines.append(pipeline)

    def pipeline_for(self, request: EvaluationRequest) -> BasePipeline:
        for pipeline in self._pipelines:
            if pipeline.can_evaluate(request):
                return pipeline
        raise ValueError(
            f"No pipeline registered for {type(request).__name__}. "
            "Register a pipeline with engine.register(pipeline)."
        )

    def evaluate(self, request: EvaluationRequest) -> Any:
        """Dispatch to the matching pipeline inside the error boundary."""
        return run_pipeline(self.pipeline_for(request), request)


def create_default_engine() -> EvaluationEngine:
    """Factory for the default engine with all built-in pipelines registered."""
    from bondlab.pipelines import (
        CompleteEvaluationPipeline,
        FlowchartPipeline,
        ScreenerPipeline,
        ScreenerProPipeline,
        SmartEvaluatorPipeline,
        ValuationPipeline,
    )

    engine = EvaluationEngine()
    engine.register(ScreenerPipeline())
    engine.register(ScreenerProPipeline())
    engine.register(ValuationPipeline())
    engine.register(CompleteEvaluationPipeline())
    engine.register(FlowchartPipeline())
    engine.register(SmartEvaluatorPipeline())
    return engine
