"""Tests for the registry-based evaluation engine and its error boundary."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Any

import pytest

from bondlab import (
    BasePipeline,
    CompleteRequest,
    ComputationError,
    EvaluationEngine,
    FlowchartRequest,
    InvalidInputError,
    ScreenerProRequest,
    ScreenerRequest,
    SmartEvaluatorRequest,
    ValuationRequest,
    create_default_engine,
    evaluate,
)
from bondlab.engine import computation_boundary
from bondlab.results import (
    CompleteResult,
    FlowchartResult,
    ScreenerProResult,
    ScreenerResult,
    SmartEvaluatorResult,
    ValuationResult,
)

SCREENER = ScreenerRequest(
    face_value=100,
    market_price=95,
    coupon_rate=0.05,
    years_to_maturity=10,
    inflation=0.02,
    risk_free_ytm=0.03,
    bond_rating="AAA",
    holding_period=10,
    trading_volume=5,
)
SCREENER_PRO = ScreenerProRequest(
    bond_price=98,
    face_value=100,
    coupon_rate=0.05,
    years_to_maturity=5,
    ytm=0.055,
    current_yield=0.051,
    treasury_ytm=0.03,
    inflation=0.02,
    duration=4.5,
    holding_period=5,
    trading_volume=3,
    credit_rating="AAA",
)
VALUATION = ValuationRequest(
    bond_price=100,
    face_value=100,
    coupon_rate=0.06,
    years_to_maturity=5,
    ytm=0.06,
    required_yield=0.05,
    credit_rating="AAA",
)
COMPLETE = CompleteRequest(
    bond_price=98,
    face_value=100,
    coupon_rate=0.065,
    years_to_maturity=10,
    ytm=0.07,
    inflation=0.02,
    risk_free_ytm=0.03,
    bond_rating="AAA",
    duration=3,
    holding_period=5,
    trading_volume=2,
)
FLOWCHART = FlowchartRequest(
    bond_price=100,
    face_value=100,
    coupon_rate=0.06,
    years_to_maturity=5,
    required_yield=0.05,
    credit_spread=0.02,
)
SMART = SmartEvaluatorRequest(
    mode="buy",
    dirty_price=95,
    ytm=0.07,
    coupon_type="fixed",
    maturity_date="2029-01-01",
    fitch_rating="AAA",
    modified_duration=3,
    year_price_high=105,
    year_price_low=94,
    as_of=date(2026, 1, 1),
)


@pytest.mark.parametrize(
    "request_,result_type",
    [
        (SCREENER, ScreenerResult),
        (SCREENER_PRO, ScreenerProResult),
        (VALUATION, ValuationResult),
        (COMPLETE, CompleteResult),
        (FLOWCHART, FlowchartResult),
        (SMART, SmartEvaluatorResult),
    ],
)
def test_dispatch_by_request_type(request_: Any, result_type: type) -> None:
    assert isinstance(evaluate(request_), result_type)


def test_default_engine_pipeline_names() -> None:
    engine = create_default_engine()
    names = [engine.pipeline_for(r).name for r in (SCREENER, SCREENER_PRO, VALUATION, COMPLETE, FLOWCHART, SMART)]
    assert names == ["screener", "screener-pro", "valuation", "complete", "flowchart", "smart-evaluator"]


def test_unknown_request_type() -> None:
    engine = EvaluationEngine()
    with pytest.raises(ValueError, match="No pipeline registered for ScreenerRequest"):
        engine.evaluate(SCREENER)


@dataclass(frozen=True)
class ParRequest:
    face_value: float


class ParPipeline(BasePipeline):
    name = "par"

    def can_evaluate(self, request: Any) -> bool:
        return isinstance(request, ParRequest)

    def evaluate(self, request: Any) -> float:
        return request.face_value


def test_register_custom_pipeline() -> None:
    engine = create_default_engine()
    engine.register(ParPipeline())
    assert engine.evaluate(ParRequest(face_value=100.0)) == 100.0
    assert isinstance(engine.evaluate(SCREENER), ScreenerResult)


def test_first_registered_pipeline_wins() -> None:
    class Shadow(ParPipeline):
        name = "shadow"

        def evaluate(self, request: Any) -> float:
            return -1.0

    engine = EvaluationEngine()
    engine.register(Shadow())
    engine.register(ParPipeline())
    assert engine.evaluate(ParRequest(face_value=100.0)) == -1.0


def test_arithmetic_failure_becomes_computation_error() -> None:
    with pytest.raises(ComputationError, match="complete computation failed") as excinfo:
        evaluate(replace(COMPLETE, inflation=-1.0))
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)


def test_invalid_input_passes_through() -> None:
    class Rejecting(ParPipeline):
        def evaluate(self, request: Any) -> float:
            raise InvalidInputError("face_value must be positive")

    engine = EvaluationEngine()
    engine.register(Rejecting())
    with pytest.raises(InvalidInputError):
        engine.evaluate(ParRequest(face_value=-1.0))


def test_evaluation_is_repeatable() -> None:
    assert evaluate(SCREENER) == evaluate(SCREENER)
    assert evaluate(SMART) == evaluate(SMART)


def test_computation_boundary_wraps_arithmetic_errors() -> None:
    with pytest.raises(ComputationError, match="fairPrice computation failed") as excinfo:
        with computation_boundary("fairPrice"):
            1.0 / 0.0
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)


def test_computation_boundary_keeps_library_errors() -> None:
    with pytest.raises(InvalidInputError, match="years must be positive"):
        with computation_boundary("fairPrice"):
            raise InvalidInputError("years must be positive")
