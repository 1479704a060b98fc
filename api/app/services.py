"""Service layer: convert REST payloads to bondlab requests, run them, and shape the JSON."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from bondlab.bond_math import (
    calculate_duration,
    calculate_fair_price,
    calculate_modified_duration,
    solve_ytm_detailed,
)
from bondlab.engine import computation_boundary
from bondlab.enums import PercentileBasis, parse_enum
from bondlab.evaluation import evaluate, smart_evaluate
from bondlab.policies import SmartEvaluatorPolicy
from bondlab.requests import (
    CompleteRequest,
    FlowchartRequest,
    ScreenerProRequest,
    ScreenerRequest,
    SmartEvaluatorRequest,
    ValuationRequest,
)
from bondlab.requests.base import require_number, require_positive

from app.models import (
    CompletePayload,
    FlowchartPayload,
    ScreenerPayload,
    ScreenerProPayload,
    SmartEvaluatorPayload,
    ValuationPayload,
)
from app.types import DurationResult, YtmResult


def _pct(value: float) -> float:
    """Percent on the wire -> decimal in the library."""
    return value / 100


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_json(value: Any) -> Any:
    """Result dataclasses -> JSON-ready dicts with camelCase keys."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {_camel(f.name): to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {_camel(str(k)): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


# --- REST: calculate/* (percent inputs) ---


def run_screener(p: ScreenerPayload) -> dict[str, Any]:
    result = evaluate(
        ScreenerRequest(
            face_value=p.face_value,
            market_price=p.market_price,
            coupon_rate=_pct(p.coupon_rate),
            years_to_maturity=p.years_to_maturity,
            inflation=_pct(p.inflation),
            risk_free_ytm=_pct(p.risk_free_ytm),
            bond_rating=p.bond_rating,
            holding_period=p.holding_period,
            trading_volume=p.trading_volume,
            currency_depreciation=_pct(p.currency_depreciation),
            home_inflation=_pct(p.home_inflation),
            is_callable=p.is_callable,
        )
    )
    if result.immediate_reject:
        return {
            "immediateReject": True,
            "ytm": result.metrics.ytm,
            "reason": result.rejection_reason,
            "decision": result.decision.value,
        }
    return {
        "metrics": to_json(result.metrics),
        "checkpoints": to_json(result.checkpoints),
        "decision": result.decision.value,
    }


def run_screener_pro(p: ScreenerProPayload) -> dict[str, Any]:
    result = evaluate(
        ScreenerProRequest(
            bond_price=p.bond_price,
            face_value=p.face_value,
            coupon_rate=_pct(p.coupon_rate),
            years_to_maturity=p.years_to_maturity,
            ytm=_pct(p.ytm),
            current_yield=_pct(p.current_yield),
            treasury_ytm=_pct(p.treasury_ytm),
            inflation=_pct(p.inflation),
            duration=p.duration,
            holding_period=p.holding_period,
            trading_volume=p.trading_volume,
            credit_rating=p.credit_rating,
            coupon_type=p.coupon_type,
            is_callable=p.is_callable,
        )
    )
    return to_json(result)


def run_valuation(p: ValuationPayload) -> dict[str, Any]:
    result = evaluate(
        ValuationRequest(
            bond_price=p.bond_price,
            face_value=p.face_value,
            coupon_rate=_pct(p.coupon_rate),
            years_to_maturity=p.years_to_maturity,
            ytm=_pct(p.ytm),
            required_yield=_pct(p.required_yield),
            credit_rating=p.credit_rating,
            frequency=p.frequency,
            coupon_type=p.coupon_type,
            is_callable=p.is_callable,
            liquidity=p.liquidity,
            currency_risk=p.currency_risk,
            holding_plan=p.holding_plan,
        )
    )
    return to_json(result)


def run_complete(p: CompletePayload) -> dict[str, Any]:
    result = evaluate(
        CompleteRequest(
            bond_price=p.bond_price,
            face_value=p.face_value,
            coupon_rate=_pct(p.coupon_rate),
            years_to_maturity=p.years_to_maturity,
            ytm=_pct(p.ytm),
            inflation=_pct(p.inflation),
            risk_free_ytm=_pct(p.risk_free_ytm),
            bond_rating=p.bond_rating,
            duration=p.duration,
            holding_period=p.holding_period,
            trading_volume=p.trading_volume,
            currency_depreciation=_pct(p.currency_depreciation),
            home_inflation=_pct(p.home_inflation),
            is_callable=p.is_callable,
        )
    )
    return to_json(result)


def run_flowchart(p: FlowchartPayload) -> dict[str, Any]:
    result = evaluate(
        FlowchartRequest(
            bond_price=p.bond_price,
            face_value=p.face_value,
            coupon_rate=_pct(p.coupon_rate),
            years_to_maturity=p.years_to_maturity,
            required_yield=_pct(p.required_yield),
            credit_spread=_pct(p.credit_spread),
            coupon_type=p.coupon_type,
            duration_match=p.duration_match,
            is_callable=p.is_callable,
        )
    )
    gates = {
        (f"{name}Status" if name.startswith("gate") else name): value
        for name, value in to_json(result.gates).items()
    }
    return {
        "metrics": to_json(result.metrics),
        "gates": gates,
        "decision": result.decision.value,
        "riskFlags": result.risk_flags,
    }


# --- REST: tools/smart-evaluator (decimal inputs) ---


def run_smart_evaluator(p: SmartEvaluatorPayload) -> dict[str, Any]:
    request = SmartEvaluatorRequest(
        mode=p.mode,
        dirty_price=p.dirty_price,
        ytm=p.ytm,
        coupon_type=p.coupon_type,
        maturity_date=p.maturity_date,
        fitch_rating=p.fitch_rating,
        modified_duration=p.modified_duration,
        coupon_rate=p.coupon_rate,
        inflation_rate=p.inflation_rate,
        currency_dev=p.currency_dev,
        risk_free_rate=p.risk_free_rate,
        face_value=p.face_value,
        accrued_interest=p.accrued_interest,
        day_high=p.day_high,
        day_low=p.day_low,
        year_price_high=p.year_price_high,
        year_price_low=p.year_price_low,
        year_yield_high=p.year_yield_high,
        year_yield_low=p.year_yield_low,
        purchase_price=p.purchase_price,
        current_investment=p.current_investment,
        as_of=p.as_of,
    )
    policy = None
    if p.percentile_basis is not None:
        basis = parse_enum(PercentileBasis, p.percentile_basis, "percentileBasis")
        policy = SmartEvaluatorPolicy(percentile_basis=basis)
    return to_json(smart_evaluate(request, policy))


# --- GraphQL: bond math primitives (decimal inputs) ---


def solve_ytm(price: float, face_value: float, coupon_rate: float, years: float) -> YtmResult:
    """Solve the annual-compounding YTM; non-convergence is reported, not raised."""
    args = (
        require_positive("price", price),
        require_positive("faceValue", face_value),
        require_number("couponRate", coupon_rate),
        require_positive("years", years),
    )
    with computation_boundary("solveYtm"):
        solution = solve_ytm_detailed(*args)
    return YtmResult(
        ytm=solution.ytm, iterations=solution.iterations, converged=solution.converged
    )


def macaulay_duration(
    face_value: float, coupon_rate: float, ytm: float, years: float, price: float
) -> DurationResult:
    """Macaulay and modified duration for a consistent (yield, price) pair."""
    ytm = require_number("ytm", ytm)
    args = (
        require_positive("faceValue", face_value),
        require_number("couponRate", coupon_rate),
        ytm,
        require_positive("years", years),
        require_positive("price", price),
    )
    with computation_boundary("macaulayDuration"):
        macaulay = calculate_duration(*args)
        modified = calculate_modified_duration(macaulay, ytm)
    return DurationResult(macaulay=macaulay, modified=modified)


def fair_price(
    face_value: float, coupon_rate: float, required_yield: float, years: float, frequency: int
) -> float:
    """Present value at the required yield with `frequency` coupons per year."""
    args = (
        require_positive("faceValue", face_value),
        require_number("couponRate", coupon_rate),
        require_number("requiredYield", required_yield),
        require_positive("years", years),
        require_positive("frequency", frequency),
    )
    with computation_boundary("fairPrice"):
        return calculate_fair_price(*args)
