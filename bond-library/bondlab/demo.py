"""Demo: run every decision pipeline on a sample 10Y 5% corporate bond."""

from datetime import date

from bondlab.bond_math import calculate_duration, calculate_fair_price, solve_ytm
from bondlab.evaluation import evaluate, smart_evaluate
from bondlab.requests import (
    CompleteRequest,
    FlowchartRequest,
    ScreenerProRequest,
    ScreenerRequest,
    SmartEvaluatorRequest,
    ValuationRequest,
)


def main() -> None:
    # Sample bond: 10Y annual 5% coupon, quoted at 95, rated BBB
    face, price, coupon, years = 100.0, 95.0, 0.05, 10.0
    ytm = solve_ytm(price, face, coupon, years)
    duration = calculate_duration(face, coupon, ytm, years, price)
    fair = calculate_fair_price(face, coupon, 0.055, years, 2)

    # 1) Screener (solves YTM itself)
    screener = evaluate(
        ScreenerRequest(
            face_value=face,
            market_price=price,
            coupon_rate=coupon,
            years_to_maturity=years,
            inflation=0.02,
            risk_free_ytm=0.035,
            bond_rating="BBB",
            holding_period=10,
            trading_volume=5,
            home_inflation=0.02,
        )
    )

    # 2) Screener Pro (quoted analytics)
    pro = evaluate(
        ScreenerProRequest(
            bond_price=price,
            face_value=face,
            coupon_rate=coupon,
            years_to_maturity=years,
            ytm=ytm,
            current_yield=face * coupon / price,
            treasury_ytm=0.035,
            inflation=0.02,
            duration=duration,
            holding_period=10,
            trading_volume=5,
            credit_rating="BBB",
        )
    )

    # 3) Valuation vs 5.5% required yield, semi-annual coupons
    valuation = evaluate(
        ValuationRequest(
            bond_price=price,
            face_value=face,
            coupon_rate=coupon,
            years_to_maturity=years,
            ytm=ytm,
            required_yield=0.055,
            credit_rating="BBB",
        )
    )

    # 4) Complete evaluation
    complete = evaluate(
        CompleteRequest(
            bond_price=price,
            face_value=face,
            coupon_rate=coupon,
            years_to_maturity=years,
            ytm=ytm,
            inflation=0.02,
            risk_free_ytm=0.035,
            bond_rating="BBB",
            duration=duration,
            holding_period=10,
            trading_volume=5,
            home_inflation=0.02,
        )
    )

    # 5) Flowchart
    flowchart = evaluate(
        FlowchartRequest(
            bond_price=price,
            face_value=face,
            coupon_rate=coupon,
            years_to_maturity=years,
            required_yield=0.055,
            credit_spread=0.02,
        )
    )

    # 6) Smart evaluator, buy mode, pinned to a fixed date
    smart = smart_evaluate(
        SmartEvaluatorRequest(
            mode="buy",
            dirty_price=price,
            ytm=ytm,
            coupon_type="fixed",
            maturity_date=date(2036, 6, 15),
            fitch_rating="BBB",
            modified_duration=duration / (1 + ytm),
            coupon_rate=coupon,
            inflation_rate=0.02,
            risk_free_rate=0.035,
            year_price_high=101.0,
            year_price_low=93.0,
        ),
        today=lambda: date(2026, 6, 15),
    )

    print("=== Bond math (10Y 5% @ 95) ===")
    print(f"  YTM:                {ytm:.4%}")
    print(f"  Macaulay duration:  {duration:,.4f} yrs")
    print(f"  Fair @ 5.5% s.a.:   {fair:,.4f}")
    print()
    print("=== Decisions ===")
    print(f"  Screener:           {screener.decision.value}")
    for name, cp in screener.checkpoints.items():
        print(f"    {'PASS' if cp.passed else 'FAIL'} {name:<15} {cp.detail}")
    print(f"  Screener Pro:       {pro.recommendation.value} ({pro.total_score:g}/16)")
    print(f"  Valuation:          {valuation.recommendation.value}")
    print(f"  Complete:           {complete.decision.value}")
    print(f"  Flowchart:          {flowchart.decision.value} ({flowchart.risk_flags} flags)")
    print(f"  Smart evaluator:    {smart.recommendation.value} ({smart.total_score:.2f}/2.00)")


if __name__ == "__main__":
    main()
