"""Smart evaluator request (inputs only; logic in SmartEvaluatorPipeline)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from bondlab.enums import CouponType, CreditRating, EvaluationMode
from bondlab.errors import InvalidInputError
from bondlab.requests.base import RequestFields, require_date, require_number

_BUY_ONLY = (
    "day_high",
    "day_low",
    "year_price_high",
    "year_price_low",
    "year_yield_high",
    "year_yield_low",
)


@dataclass(frozen=True)
class SmartEvaluatorRequest(RequestFields):
    """
    Inputs of the six-step weighted evaluation.

    `mode` selects between a prospective purchase (`buy`, which reads the
    intraday and 52-week ranges) and an existing position (`hold`, which reads
    `purchase_price` and `current_investment`). Fields of the other mode are
    accepted but ignored. `as_of` pins "today" for the time-to-maturity step.
    """

    mode: EvaluationMode | str
    dirty_price: float
    ytm: float
    coupon_type: CouponType | str
    maturity_date: date | str
    fitch_rating: CreditRating | str
    modified_duration: float
    coupon_rate: float = 0.0
    inflation_rate: float = 0.0
    currency_dev: float = 0.0
    risk_free_rate: float = 0.0
    face_value: float = 100.0
    accrued_interest: float = 0.0
    day_high: Optional[float] = None
    day_low: Optional[float] = None
    year_price_high: Optional[float] = None
    year_price_low: Optional[float] = None
    year_yield_high: Optional[float] = None
    year_yield_low: Optional[float] = None
    purchase_price: Optional[float] = None
    current_investment: Optional[float] = None
    as_of: Optional[date] = None

    def __post_init__(self) -> None:
        self._enum("mode", EvaluationMode)
        self._positive("dirty_price", "face_value")
        if self.ytm is None:
            raise InvalidInputError("ytm is required")
        self._number(
            "ytm",
            "modified_duration",
            "coupon_rate",
            "inflation_rate",
            "currency_dev",
            "risk_free_rate",
            "accrued_interest",
        )
        self._set("maturity_date", require_date("maturity_date", self.maturity_date))
        if self.as_of is not None:
            self._set("as_of", require_date("as_of", self.as_of))
        self._rating("fitch_rating")
        self._enum("coupon_type", CouponType)

        if self.mode is EvaluationMode.BUY:
            for name in _BUY_ONLY:
                value = getattr(self, name)
                if value is not None:
                    self._set(name, require_number(name, value))
        else:
            if self.purchase_price is None:
                raise InvalidInputError("purchase_price is required in hold mode")
            self._positive("purchase_price")
            if self.current_investment is not None:
                self._non_negative("current_investment")
