"""Bond analysis library: bond math, decision pipelines and evaluation engine."""

from bondlab.bond_math import (
    YieldSolution,
    calculate_duration,
    calculate_fair_price,
    calculate_modified_duration,
    solve_ytm,
    solve_ytm_detailed,
)
from bondlab.engine import EvaluationEngine, create_default_engine
from bondlab.enums import (
    CouponType,
    CreditRating,
    CurrencyRisk,
    DurationMatch,
    EvaluationMode,
    HoldingPlan,
    Liquidity,
    PercentileBasis,
)
from bondlab.errors import (
    BondAnalysisError,
    ComputationError,
    ConvergenceError,
    InvalidInputError,
)
from bondlab.evaluation import (
    Request,
    Result,
    evaluate,
    evaluate_complete,
    run_flowchart,
    screen,
    screen_pro,
    smart_evaluate,
    value,
)
from bondlab.interfaces import EvaluationRequest, Pipeline
from bondlab.pipelines import BasePipeline
from bondlab.requests import (
    CompleteRequest,
    FlowchartRequest,
    ScreenerProRequest,
    ScreenerRequest,
    SmartEvaluatorRequest,
    ValuationRequest,
)

__all__ = [
    "BasePipeline",
    "BondAnalysisError",
    "CompleteRequest",
    "ComputationError",
    "ConvergenceError",
    "CouponType",
    "CreditRating",
    "CurrencyRisk",
    "DurationMatch",
    "EvaluationEngine",
    "EvaluationMode",
    "EvaluationRequest",
    "FlowchartRequest",
    "HoldingPlan",
    "InvalidInputError",
    "Liquidity",
    "PercentileBasis",
    "Pipeline",
    "Request",
    "Result",
    "ScreenerProRequest",
    "ScreenerRequest",
    "SmartEvaluatorRequest",
    "ValuationRequest",
    "YieldSolution",
    "calculate_duration",
    "calculate_fair_price",
    "calculate_modified_duration",
    "create_default_engine",
    "evaluate",
    "evaluate_complete",
    "run_flowchart",
    "screen",
    "screen_pro",
    "smart_evaluate",
    "solve_ytm",
    "solve_ytm_detailed",
    "value",
]
