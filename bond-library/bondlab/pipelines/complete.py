"""Complete bond evaluation: six gates on quoted analytics, BUY only if all pass."""

from __future__ import annotations

from bondlab.bond_math import home_real_return, real_yield
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import CompletePolicy
from bondlab.requests.complete import CompleteRequest
from bondlab.results import Checkpoint, CompleteDecision, CompleteResult


class CompleteEvaluationPipeline(BasePipeline):
    name = "complete"

    def __init__(self, policy: CompletePolicy | None = None) -> None:
        self.policy = policy or CompletePolicy()

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, CompleteRequest)

    def evaluate(self, request: EvaluationRequest) -> CompleteResult:
        assert isinstance(request, CompleteRequest)
        r = request
        p = self.policy

        ry = real_yield(r.ytm, r.inflation)
        spread = r.ytm - r.risk_free_ytm
        min_spread = p.credit_spreads.minimum_spread(r.bond_rating)
        duration_ok = (
            r.duration < r.years_to_maturity * p.max_duration_fraction
            and r.duration <= r.holding_period
        )
        home_return = home_real_return(r.ytm, r.currency_depreciation, r.home_inflation)

        results = {
            "real_yield": Checkpoint(ry > p.min_real_yield, ry, f"RY = {ry * 100:.2f}%"),
            "spread": Checkpoint(
                spread > min_spread,
                spread,
                f"Spread = {spread * 100:.2f}% "
                f"(Target for {r.bond_rating.value}: {min_spread * 100:.1f}%)",
            ),
            "duration": Checkpoint(
                duration_ok,
                r.duration,
                f"Duration = {r.duration:.2f} yrs vs HP = {r.holding_period:g} yrs",
            ),
            "home_return": Checkpoint(
                home_return > 0,
                home_return,
                f"Real Home Return = {home_return * 100:.2f}%",
            ),
            "callability": Checkpoint(
                p.callability.passes(r.is_callable, r.ytm),
                r.is_callable,
                "Callable" if r.is_callable else "Non-Callable",
            ),
            "liquidity": Checkpoint(
                r.trading_volume >= p.min_trading_volume,
                r.trading_volume,
                f"Volume = ${r.trading_volume:.1f}M",
            ),
        }

        all_pass = all(cp.passed for cp in results.values())
        return CompleteResult(
            results=results,
            decision=CompleteDecision.BUY if all_pass else CompleteDecision.AVOID,
        )
