"""Decision pipeline implementations for the registry-based evaluation engine."""

from bondlab.pipelines.base import BasePipeline
from bondlab.pipelines.complete import CompleteEvaluationPipeline
from bondlab.pipelines.flowchart import FlowchartPipeline
from bondlab.pipelines.screener import ScreenerPipeline
from bondlab.pipelines.screener_pro import ScreenerProPipeline
from bondlab.pipelines.smart_evaluator import SmartEvaluatorPipeline
from bondlab.pipelines.valuation import ValuationPipeline

__all__ = [
    "BasePipeline",
    "CompleteEvaluationPipeline",
    "FlowchartPipeline",
    "ScreenerPipeline",
    "ScreenerProPipeline",
    "SmartEvaluatorPipeline",
    "ValuationPipeline",
]
