"""Flowchart request (inputs only; logic in FlowchartPipeline)."""

from __future__ import annotations

from dataclasses import dataclass

from bondlab.enums import CouponType, DurationMatch
from bondlab.requests.base import RequestFields


@dataclass(frozen=True)
class FlowchartRequest(RequestFields):
    """`credit_spread` is the quoted spread over the benchmark (decimal)."""

    bond_price: float
    face_value: float
    coupon_rate: float
    years_to_maturity: float
    required_yield: float
    credit_spread: float
    coupon_type: CouponType | str = CouponType.FIXED
    duration_match: DurationMatch | str = DurationMatch.GOOD
    is_callable: bool = False

    def __post_init__(self) -> None:
        self._positive("bond_price", "face_value", "years_to_maturity")
        self._number("coupon_rate", "required_yield", "credit_spread")
        self._enum("coupon_type", CouponType)
        self._enum("duration_match", DurationMatch)
        self._flag("is_callable")
