"""Bond analysis flowchart: two blocking phases, then non-blocking risk flags."""

from __future__ import annotations

from bondlab.bond_math import calculate_fair_price, price_vs_fair_pct
from bondlab.enums import CouponType, DurationMatch
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import FlowchartPolicy
from bondlab.requests.flowchart import FlowchartRequest
from bondlab.results import (
    FlowchartDecision,
    FlowchartGates,
    FlowchartMetrics,
    FlowchartResult,
    Status,
)

_COUPON_GATE = {
    CouponType.FIXED: Status.PASS,
    CouponType.FLOATING: Status.CAUTION,
    CouponType.ZERO: Status.FAIL,
}
_DURATION_GATE = {
    DurationMatch.GOOD: Status.PASS,
    DurationMatch.MODERATE: Status.CAUTION,
    DurationMatch.POOR: Status.FAIL,
}


def _gate(ok: bool, otherwise: Status = Status.FAIL) -> Status:
    return Status.PASS if ok else otherwise


class FlowchartPipeline(BasePipeline):
    """
    Phase 1 (value): price below fair, credit spread at least the minimum.
    Phase 2 (return): real yield non-negative, current yield vs required
    (a shortfall is only a caution). Phase 3 counts risk flags.
    """

    name = "flowchart"

    def __init__(self, policy: FlowchartPolicy | None = None) -> None:
        self.policy = policy or FlowchartPolicy()

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, FlowchartRequest)

    def evaluate(self, request: EvaluationRequest) -> FlowchartResult:
        assert isinstance(request, FlowchartRequest)
        r = request
        p = self.policy

        fair_price = calculate_fair_price(
            r.face_value, r.coupon_rate, r.required_yield, r.years_to_maturity, p.frequency
        )
        is_cheap = r.bond_price < fair_price
        current_yield_pct = r.face_value * r.coupon_rate / r.bond_price * 100
        real_yield = r.required_yield - p.assumed_inflation

        gate1a = _gate(is_cheap)
        gate1b = _gate(r.credit_spread >= p.min_credit_spread)
        phase1_pass = gate1a is Status.PASS and gate1b is Status.PASS

        gate2a = _gate(real_yield >= 0)
        gate2b = _gate(current_yield_pct >= r.required_yield * 100, otherwise=Status.CAUTION)
        phase2_pass = gate2a is Status.PASS and gate2b is not Status.FAIL

        gate3a = _COUPON_GATE[r.coupon_type]
        gate3b = _DURATION_GATE[r.duration_match]
        gate3c = _gate(not r.is_callable, otherwise=Status.CAUTION)
        risk_flags = sum(1 for g in (gate3a, gate3b, gate3c) if g is not Status.PASS)

        if not (phase1_pass and phase2_pass):
            decision = FlowchartDecision.STOP
        elif risk_flags == 0:
            decision = FlowchartDecision.EXECUTE
        else:
            decision = FlowchartDecision.EXECUTE_WITH_CAUTION

        return FlowchartResult(
            metrics=FlowchartMetrics(
                fair_price=fair_price,
                price_vs_fair=price_vs_fair_pct(r.bond_price, fair_price),
                is_cheap=is_cheap,
                current_yield=current_yield_pct,
                real_yield=real_yield,
            ),
            gates=FlowchartGates(
                gate1a=gate1a,
                gate1b=gate1b,
                phase1_pass=phase1_pass,
                gate2a=gate2a,
                gate2b=gate2b,
                phase2_pass=phase2_pass,
                gate3a=gate3a,
                gate3b=gate3b,
                gate3c=gate3c,
            ),
            risk_flags=risk_flags,
            decision=decision,
        )
