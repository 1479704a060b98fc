"""Tests for the complete (all gates must pass) evaluation."""

from dataclasses import replace

import pytest

from bondlab.evaluation import evaluate
from bondlab.requests import CompleteRequest
from bondlab.results import CompleteDecision


@pytest.fixture
def bond() -> CompleteRequest:
    return CompleteRequest(
        bond_price=98.0,
        face_value=100.0,
        coupon_rate=0.065,
        years_to_maturity=10,
        ytm=0.07,
        inflation=0.02,
        risk_free_ytm=0.03,
        bond_rating="AAA",
        duration=3.0,
        holding_period=5,
        trading_volume=2,
        currency_depreciation=0.0,
        home_inflation=0.02,
        is_callable=False,
    )


def test_all_gates_pass(bond: CompleteRequest) -> None:
    result = evaluate(bond)
    assert list(result.results) == [
        "real_yield",
        "spread",
        "duration",
        "home_return",
        "callability",
        "liquidity",
    ]
    assert all(cp.passed for cp in result.results.values())
    assert result.decision is CompleteDecision.BUY
    assert abs(result.results["real_yield"].value - (1.07 / 1.02 - 1)) < 1e-12
    assert abs(result.results["spread"].value - 0.04) < 1e-12


def test_single_failure_avoids(bond: CompleteRequest) -> None:
    result = evaluate(replace(bond, bond_rating="BB+", ytm=0.065))
    # spread 3.5% < 4% for BB
    assert not result.results["spread"].passed
    assert "Target for BB: 4.0%" in result.results["spread"].detail
    assert result.decision is CompleteDecision.AVOID


def test_bbb_spread_threshold(bond: CompleteRequest) -> None:
    assert evaluate(replace(bond, bond_rating="BBB", risk_free_ytm=0.05)).results["spread"].passed
    assert not evaluate(replace(bond, bond_rating="BBB", risk_free_ytm=0.06)).results["spread"].passed


@pytest.mark.parametrize(
    "duration,holding_period,passed",
    [(3.0, 5, True), (5.0, 6, False), (4.0, 3, False), (4.9, 4.9, True)],
)
def test_duration_gate(bond: CompleteRequest, duration: float, holding_period: float, passed: bool) -> None:
    result = evaluate(replace(bond, duration=duration, holding_period=holding_period))
    assert result.results["duration"].passed is passed


def test_real_yield_below_threshold(bond: CompleteRequest) -> None:
    result = evaluate(replace(bond, inflation=0.06))
    assert not result.results["real_yield"].passed
    assert result.decision is CompleteDecision.AVOID


def test_callable_low_yield(bond: CompleteRequest) -> None:
    result = evaluate(replace(bond, is_callable=True, ytm=0.045, risk_free_ytm=0.02))
    assert not result.results["callability"].passed
    assert result.results["callability"].detail == "Callable"


def test_home_return_and_liquidity(bond: CompleteRequest) -> None:
    result = evaluate(replace(bond, currency_depreciation=-0.15, trading_volume=0.2))
    assert not result.results["home_return"].passed
    assert not result.results["liquidity"].passed
