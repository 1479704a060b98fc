"""Enumerations shared by requests, policies and results."""

from __future__ import annotations

from enum import Enum

from bondlab.errors import InvalidInputError


class CreditRating(str, Enum):
    """Agency rating tier. Notches (+/-) are folded into the base tier."""

    AAA = "AAA"
    AA = "AA"
    A = "A"
    BBB = "BBB"
    BB = "BB"
    B = "B"
    CCC = "CCC"
    UNRATED = "UNRATED"

    @classmethod
    def parse(cls, value: "CreditRating | str | None") -> "CreditRating":
        """Parse 'bbb-', 'BB+', 'NR', ... into a tier."""
        if isinstance(value, CreditRating):
            return value
        text = (value or "").strip().upper().rstrip("+-")
        if text in ("", "NR", "N/A", "UNRATED"):
            return cls.UNRATED
        try:
            return cls(text)
        except ValueError:
            raise InvalidInputError(f"unknown credit rating '{value}'") from None

    @property
    def is_investment_grade(self) -> bool:
        return self in _INVESTMENT_GRADE

    @property
    def is_high_yield(self) -> bool:
        return self in _HIGH_YIELD


_INVESTMENT_GRADE = frozenset(
    {CreditRating.AAA, CreditRating.AA, CreditRating.A, CreditRating.BBB}
)
_HIGH_YIELD = frozenset({CreditRating.BB, CreditRating.B, CreditRating.CCC})


class CouponType(str, Enum):
    FIXED = "fixed"
    FLOATING = "floating"
    ZERO = "zero"


class Liquidity(str, Enum):
    """Bid-ask liquidity bucket used by the valuation screener."""

    TIGHT = "tight"
    MODERATE = "moderate"
    WIDE = "wide"


class CurrencyRisk(str, Enum):
    NONE = "none"
    LOW = "low"
    HIGH = "high"


class HoldingPlan(str, Enum):
    MATURITY = "maturity"
    TRADE = "trade"


class DurationMatch(str, Enum):
    """How well the bond's duration matches the investment horizon."""

    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class EvaluationMode(str, Enum):
    """Smart evaluator mode: prospective purchase or existing position."""

    BUY = "buy"
    HOLD = "hold"

    @classmethod
    def _missing_(cls, value: object) -> "EvaluationMode | None":
        if isinstance(value, str) and value.strip().lower() in ("sell", "hold-sell", "hold_sell"):
            return cls.HOLD
        return None


class PercentileBasis(str, Enum):
    """Which 52-week range drives the smart evaluator's valuation signal."""

    PRICE = "price-percentile"
    YIELD = "yield-percentile"


def parse_enum(enum_cls: type[Enum], value: object, field: str) -> Enum:
    """Coerce a raw value into `enum_cls`, raising InvalidInputError on failure."""
    if isinstance(value, enum_cls):
        return value
    raw = value.strip().lower() if isinstance(value, str) else value
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidInputError(
            f"{field} must be one of: {allowed} (got {value!r})"
        ) from None
