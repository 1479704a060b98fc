"""Complete evaluation request (inputs only; logic in CompleteEvaluationPipeline)."""

from __future__ import annotations

from dataclasses import dataclass

from bondlab.enums import CreditRating
from bondlab.requests.base import RequestFields


@dataclass(frozen=True)
class CompleteRequest(RequestFields):
    bond_price: float
    face_value: float
    coupon_rate: float
    years_to_maturity: float
    ytm: float
    inflation: float
    risk_free_ytm: float
    bond_rating: CreditRating | str
    duration: float
    holding_period: float
    trading_volume: float
    currency_depreciation: float = 0.0
    home_inflation: float = 0.0
    is_callable: bool = False

    def __post_init__(self) -> None:
        self._positive("bond_price", "face_value", "years_to_maturity")
        self._number(
            "coupon_rate",
            "ytm",
            "inflation",
            "risk_free_ytm",
            "currency_depreciation",
            "home_inflation",
        )
        self._non_negative("duration", "holding_period", "trading_volume")
        self._rating("bond_rating")
        self._flag("is_callable")
