"""Valuation screener request (inputs only; logic in ValuationPipeline)."""

from __future__ import annotations

from dataclasses import dataclass

from bondlab.enums import CouponType, CreditRating, CurrencyRisk, HoldingPlan, Liquidity
from bondlab.errors import InvalidInputError
from bondlab.requests.base import RequestFields


@dataclass(frozen=True)
class ValuationRequest(RequestFields):
    """Compares the market price with the PV at the investor's required yield."""

    bond_price: float
    face_value: float
    coupon_rate: float
    years_to_maturity: float
    ytm: float
    required_yield: float
    credit_rating: CreditRating | str
    frequency: int = 2
    coupon_type: CouponType | str = CouponType.FIXED
    is_callable: bool = False
    liquidity: Liquidity | str = Liquidity.TIGHT
    currency_risk: CurrencyRisk | str = CurrencyRisk.NONE
    holding_plan: HoldingPlan | str = HoldingPlan.MATURITY

    def __post_init__(self) -> None:
        self._positive("bond_price", "face_value", "years_to_maturity", "frequency")
        if self.frequency != int(self.frequency):
            raise InvalidInputError(
                f"frequency must be a whole number of coupons per year (got {self.frequency})"
            )
        self._set("frequency", int(self.frequency))
        self._number("coupon_rate", "ytm", "required_yield")
        self._rating("credit_rating")
        self._enum("coupon_type", CouponType)
        self._enum("liquidity", Liquidity)
        self._enum("currency_risk", CurrencyRisk)
        self._enum("holding_plan", HoldingPlan)
        self._flag("is_callable")
