"""Tests for threshold policies in isolation."""

from dataclasses import replace

import pytest

from bondlab.enums import CreditRating
from bondlab.policies import (
    CallabilityPolicy,
    CreditSpreadPolicy,
    ScoreTiers,
    ScreenerProPolicy,
    SmartEvaluatorPolicy,
)
from bondlab.results import ScreenerProRecommendation, SmartRecommendation


@pytest.mark.parametrize(
    "rating,expected",
    [
        (CreditRating.AAA, 0.008),
        (CreditRating.AA, 0.008),
        (CreditRating.A, 0.008),
        (CreditRating.BBB, 0.015),
        (CreditRating.BB, 0.04),
        (CreditRating.B, 0.008),
        (CreditRating.UNRATED, 0.008),
    ],
)
def test_default_credit_spread_table(rating: CreditRating, expected: float) -> None:
    assert CreditSpreadPolicy().minimum_spread(rating) == expected


def test_bb_notches_share_bb_threshold() -> None:
    policy = CreditSpreadPolicy()
    for raw in ("BB+", "BB", "bb-"):
        assert policy.minimum_spread(CreditRating.parse(raw)) == 0.04
    assert policy.minimum_spread(CreditRating.parse("BBB-")) == 0.015


def test_custom_credit_spread_table() -> None:
    policy = CreditSpreadPolicy(
        minimum_by_rating={CreditRating.B: 0.06}, default_minimum=0.01
    )
    assert policy.minimum_spread(CreditRating.B) == 0.06
    assert policy.minimum_spread(CreditRating.BBB) == 0.01


def test_callability_policy() -> None:
    policy = CallabilityPolicy()
    assert policy.passes(False, 0.01)
    assert policy.passes(True, 0.051)
    assert not policy.passes(True, 0.05)
    assert not policy.passes(True, 0.03)


def test_screener_pro_tiers() -> None:
    tiers = ScreenerProPolicy().tiers
    assert tiers.classify(16) is ScreenerProRecommendation.GOOD_BUY
    assert tiers.classify(12) is ScreenerProRecommendation.GOOD_BUY
    assert tiers.classify(11.5) is ScreenerProRecommendation.HOLD_WATCH
    assert tiers.classify(8) is ScreenerProRecommendation.HOLD_WATCH
    assert tiers.classify(7) is ScreenerProRecommendation.REJECT_AVOID


def test_smart_evaluator_tiers_and_weights() -> None:
    policy = SmartEvaluatorPolicy()
    assert abs(sum(policy.weights.values()) - 1.0) < 1e-12
    assert policy.tiers.classify(1.6) is SmartRecommendation.STRONG_BUY
    assert policy.tiers.classify(1.59) is SmartRecommendation.HOLD_WATCH
    assert policy.tiers.classify(1.2) is SmartRecommendation.HOLD_WATCH
    assert policy.tiers.classify(1.19) is SmartRecommendation.AVOID_SELL


def test_score_tiers_generic() -> None:
    tiers = ScoreTiers(tiers=((10.0, "high"), (5.0, "mid")), floor="low")
    assert [tiers.classify(s) for s in (11, 10, 7, 5, 0)] == ["high", "high", "mid", "mid", "low"]


def test_policies_are_immutable_and_replaceable() -> None:
    policy = SmartEvaluatorPolicy()
    with pytest.raises(AttributeError):
        policy.min_spread = 0.0  # type: ignore[misc]
    looser = replace(policy, min_spread=0.0)
    assert looser.min_spread == 0.0
    assert policy.min_spread == 0.015
