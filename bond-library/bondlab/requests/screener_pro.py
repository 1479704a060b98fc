"""Screener Pro request (inputs only; logic in ScreenerProPipeline)."""

from __future__ import annotations

from dataclasses import dataclass

from bondlab.enums import CouponType, CreditRating
from bondlab.requests.base import RequestFields


@dataclass(frozen=True)
class ScreenerProRequest(RequestFields):
    """Quoted YTM, current yield and duration are taken as given."""

    bond_price: float
    face_value: float
    coupon_rate: float
    years_to_maturity: float
    ytm: float
    current_yield: float
    treasury_ytm: float
    inflation: float
    duration: float
    holding_period: float
    trading_volume: float
    credit_rating: CreditRating | str
    coupon_type: CouponType | str = CouponType.FIXED
    is_callable: bool = False

    def __post_init__(self) -> None:
        self._positive("bond_price", "face_value", "years_to_maturity")
        self._number("coupon_rate", "ytm", "current_yield", "treasury_ytm", "inflation")
        self._non_negative("duration", "holding_period", "trading_volume")
        self._rating("credit_rating")
        self._enum("coupon_type", CouponType)
        self._flag("is_callable")
