"""
Bond math primitives.

Conventions used throughout the library:
- Rates are **decimals** (5% = 0.05).
- Yield-to-maturity and Macaulay duration assume **annual compounding** with a
  coupon at every whole year t = 1..floor(n) and redemption discounted at n.
- Fair price discounts **periodic** coupons at the periodic rate r/m.

Every function here is pure: numbers in, number out. Discounting with a
non-positive base (1 + y <= 0) or producing a non-finite value raises
ComputationError here; any other arithmetic error (ZeroDivisionError,
OverflowError) is turned into ComputationError at the pipeline boundary.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date

from bondlab.errors import ComputationError, ConvergenceError

logger = logging.getLogger(__name__)

YTM_INITIAL_GUESS = 0.05
YTM_TOLERANCE = 1e-10
YTM_MAX_ITERATIONS = 100
YTM_FLOOR = -0.99
DAYS_PER_YEAR = 365.25


@dataclass(frozen=True)
class YieldSolution:
    """Outcome of the Newton-Raphson yield solve."""

    ytm: float
    iterations: int
    converged: bool


def _coupon_periods(n: float) -> range:
    # Whole periods only: a 10.5 period bond pays 10 coupons.
    return range(1, int(n) + 1)


def _discount_base(rate: float, label: str) -> float:
    # A non-positive base gives division by zero or a complex power.
    base = 1 + rate
    if base <= 0:
        raise ComputationError(f"{label}: discount base 1 + {rate:g} is not positive")
    return base


def _require_finite(value: float, label: str) -> float:
    if not math.isfinite(value):
        raise ComputationError(f"{label} is not finite ({value})")
    return value


def solve_ytm_detailed(
    price: float,
    face_value: float,
    coupon_rate: float,
    years: float,
    initial_guess: float = YTM_INITIAL_GUESS,
    max_iterations: int = YTM_MAX_ITERATIONS,
    tolerance: float = YTM_TOLERANCE,
) -> YieldSolution:
    r"""
    Solve for the annual yield y with PV(y) = price (Newton-Raphson).

    PV(y) = \sum_t F c / (1+y)^t + F / (1+y)^n
    dPV/dy = -\sum_t t F c / (1+y)^{t+1} - n F / (1+y)^{n+1}

    The iterate is floored at -0.99 so (1+y) never reaches zero.
    """
    coupon = face_value * coupon_rate
    y = initial_guess
    for iteration in range(1, max_iterations + 1):
        pv = 0.0
        dpv = 0.0
        for t in _coupon_periods(years):
            pv += coupon / (1 + y) ** t
            dpv -= t * coupon / (1 + y) ** (t + 1)
        pv += face_value / (1 + y) ** years
        dpv -= years * face_value / (1 + y) ** (years + 1)
        pv -= price

        logger.debug("YTM Newton iter %s: y=%s f=%s f'=%s", iteration, y, pv, dpv)
        if abs(pv) < tolerance:
            return YieldSolution(ytm=y, iterations=iteration, converged=True)

        y = y - pv / dpv
        if y < YTM_FLOOR:
            y = YTM_FLOOR

    logger.warning(
        "YTM solver did not converge after %s iterations (price=%s, face=%s, "
        "coupon=%s, years=%s); returning last iterate %s",
        max_iterations, price, face_value, coupon_rate, years, y,
    )
    return YieldSolution(ytm=y, iterations=max_iterations, converged=False)


def solve_ytm(
    price: float,
    face_value: float,
    coupon_rate: float,
    years: float,
    initial_guess: float = YTM_INITIAL_GUESS,
    max_iterations: int = YTM_MAX_ITERATIONS,
    strict: bool = False,
) -> float:
    """
    Yield to maturity (decimal) for a clean price.

    Returns the last Newton iterate when the solver does not converge, unless
    `strict` is set, in which case ConvergenceError is raised.
    """
    solution = solve_ytm_detailed(
        price, face_value, coupon_rate, years, initial_guess, max_iterations
    )
    if strict and not solution.converged:
        raise ConvergenceError(
            f"YTM did not converge within {solution.iterations} iterations "
            f"(last iterate {solution.ytm:.6f})"
        )
    return solution.ytm


def calculate_duration(
    face_value: float,
    coupon_rate: float,
    ytm: float,
    years: float,
    price: float,
) -> float:
    r"""
    Macaulay duration in years.

    D = (\sum_t t F c / (1+y)^t + n F / (1+y)^n) / P

    Callers pass a consistent (yield, price) pair, usually the solved YTM and
    the market price.
    """
    base = _discount_base(ytm, "duration")
    coupon = face_value * coupon_rate
    numerator = sum(t * coupon / base ** t for t in _coupon_periods(years))
    numerator += years * face_value / base ** years
    return _require_finite(numerator / price, "duration")


def calculate_modified_duration(macaulay_duration: float, ytm: float) -> float:
    """Modified duration D / (1 + y) for annual compounding."""
    return macaulay_duration / _discount_base(ytm, "modified duration")


def calculate_fair_price(
    face_value: float,
    coupon_rate: float,
    required_yield: float,
    years: float,
    frequency: float = 1,
) -> float:
    r"""
    Present value at the required yield.

    With m coupons per year, C = F c / m, periodic rate r/m and N = n m:
    P = \sum_{t=1}^{N} C / (1 + r/m)^t + F / (1 + r/m)^N
    """
    m = float(frequency)
    periods = years * m
    base = _discount_base(required_yield / m, "fair price")
    coupon = face_value * (coupon_rate / m)
    fair_price = sum(coupon / base ** t for t in _coupon_periods(periods))
    fair_price += face_value / base ** periods
    return _require_finite(fair_price, "fair price")


def current_yield(face_value: float, coupon_rate: float, price: float) -> float:
    """Annual coupon over price (decimal)."""
    return face_value * coupon_rate / price


def real_yield(nominal: float, inflation: float, currency_devaluation: float = 0.0) -> float:
    """Fisher real yield, optionally also deflated by currency devaluation."""
    return (1 + nominal) / ((1 + inflation) * (1 + currency_devaluation)) - 1


def home_real_return(nominal: float, currency_change: float, home_inflation: float) -> float:
    """Real return in the investor's home currency."""
    return (1 + nominal) * (1 + currency_change) / (1 + home_inflation) - 1


def price_vs_fair_pct(price: float, fair_price: float) -> float:
    """Premium (+) or discount (-) to fair price in percent."""
    return (price - fair_price) / fair_price * 100


def years_between(start: date, end: date) -> float:
    """Year fraction from `start` to `end` on a 365.25-day year."""
    return (end - start).days / DAYS_PER_YEAR
