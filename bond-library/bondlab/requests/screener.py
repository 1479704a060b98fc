"""Screener request (inputs only; logic in ScreenerPipeline)."""

from __future__ import annotations

from dataclasses import dataclass

from bondlab.enums import CreditRating
from bondlab.requests.base import RequestFields


@dataclass(frozen=True)
class ScreenerRequest(RequestFields):
    """
    Plain-vanilla screen of an annual coupon bond.

    The YTM is solved from the market price; every rate is a decimal.
    `trading_volume` is average daily volume in millions.
    """

    face_value: float
    market_price: float
    coupon_rate: float
    years_to_maturity: float
    inflation: float
    risk_free_ytm: float
    bond_rating: CreditRating | str
    holding_period: float
    trading_volume: float
    currency_depreciation: float = 0.0
    home_inflation: float = 0.0
    is_callable: bool = False

    def __post_init__(self) -> None:
        self._positive("face_value", "market_price", "years_to_maturity")
        self._number(
            "coupon_rate",
            "inflation",
            "risk_free_ytm",
            "currency_depreciation",
            "home_inflation",
        )
        self._non_negative("holding_period", "trading_volume")
        self._rating("bond_rating")
        self._flag("is_callable")
