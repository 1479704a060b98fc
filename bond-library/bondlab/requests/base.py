"""Validation helpers shared by the request dataclasses."""

from __future__ import annotations

import math
from datetime import date, datetime
from enum import Enum
from typing import Any

from bondlab.enums import CreditRating, parse_enum
from bondlab.errors import InvalidInputError


def require_number(name: str, value: Any) -> float:
    """Return `value` as a finite float or raise InvalidInputError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be a number (got {value!r})")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite (got {value!r})")
    return float(value)


def require_positive(name: str, value: Any) -> float:
    number = require_number(name, value)
    if number <= 0:
        raise InvalidInputError(f"{name} must be positive (got {number})")
    return number


def require_non_negative(name: str, value: Any) -> float:
    number = require_number(name, value)
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0 (got {number})")
    return number


def require_date(name: str, value: Any) -> date:
    """Accept a date, a datetime, or a whole ISO-8601 date or timestamp string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise InvalidInputError(f"{name} is not a valid date (got {value!r})")


class RequestFields:
    """Mixin giving frozen request dataclasses in-place coercion in __post_init__."""

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def _number(self, *names: str) -> None:
        for name in names:
            self._set(name, require_number(name, getattr(self, name)))

    def _positive(self, *names: str) -> None:
        for name in names:
            self._set(name, require_positive(name, getattr(self, name)))

    def _non_negative(self, *names: str) -> None:
        for name in names:
            self._set(name, require_non_negative(name, getattr(self, name)))

    def _enum(self, name: str, enum_cls: type[Enum]) -> None:
        self._set(name, parse_enum(enum_cls, getattr(self, name), name))

    def _rating(self, name: str) -> None:
        self._set(name, CreditRating.parse(getattr(self, name)))

    def _flag(self, name: str) -> None:
        value = getattr(self, name)
        if not isinstance(value, bool):
            raise InvalidInputError(f"{name} must be a boolean (got {value!r})")
