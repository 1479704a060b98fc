"""Tests for the YTM solver, Macaulay duration and fair price."""

import math
from datetime import date

import pytest

from bondlab.bond_math import (
    YTM_FLOOR,
    calculate_duration,
    calculate_fair_price,
    calculate_modified_duration,
    current_yield,
    home_real_return,
    price_vs_fair_pct,
    real_yield,
    solve_ytm,
    solve_ytm_detailed,
    years_between,
)
from bondlab.errors import ComputationError, ConvergenceError


def test_fair_price_at_par() -> None:
    """Required yield equal to coupon (annual): fair price = face value."""
    fair = calculate_fair_price(100.0, 0.05, 0.05, 10, 1)
    assert abs(fair - 100.0) < 1e-9


def test_fair_price_semiannual() -> None:
    """10 semi-annual periods of 3.0 at 2.5% plus redemption."""
    fair = calculate_fair_price(100.0, 0.06, 0.05, 5, 2)
    annuity = (1 - 1.025 ** -10) / 0.025
    expected = 3.0 * annuity + 100.0 / 1.025 ** 10
    assert abs(fair - expected) < 1e-9
    assert abs(fair - 104.376) < 1e-3


def test_fair_price_zero_coupon() -> None:
    fair = calculate_fair_price(1000.0, 0.0, 0.04, 3, 1)
    assert abs(fair - 1000.0 / 1.04 ** 3) < 1e-9


@pytest.mark.parametrize("price", [80.0, 95.0, 100.0, 104.5, 120.0])
@pytest.mark.parametrize("coupon", [0.0, 0.025, 0.05, 0.08])
@pytest.mark.parametrize("years", [1, 3, 10, 30])
def test_ytm_round_trip(price: float, coupon: float, years: int) -> None:
    """Pricing at the solved yield reproduces the input price."""
    y = solve_ytm(price, 100.0, coupon, years)
    assert abs(calculate_fair_price(100.0, coupon, y, years, 1) - price) < 1e-6


def test_ytm_at_par_equals_coupon() -> None:
    solution = solve_ytm_detailed(100.0, 100.0, 0.05, 10)
    assert solution.converged
    assert solution.iterations == 1
    assert abs(solution.ytm - 0.05) < 1e-12


def test_ytm_discount_bond_above_coupon() -> None:
    """A bond below par yields more than its coupon."""
    y = solve_ytm(95.0, 100.0, 0.05, 10)
    assert 0.05 < y < 0.06


def test_ytm_negative_for_rich_bond() -> None:
    """Paying 130 for 105 of total cash flows means a negative yield."""
    assert solve_ytm(130.0, 100.0, 0.01, 5) < 0


def test_ytm_floor_clamp_still_converges() -> None:
    """First Newton step overshoots below -0.99; clamping keeps (1+y) positive."""
    solution = solve_ytm_detailed(1000.0, 100.0, 0.0, 1)
    assert solution.converged
    assert solution.ytm >= YTM_FLOOR
    assert abs(solution.ytm - (-0.9)) < 1e-9


def test_ytm_non_convergence_returns_last_iterate() -> None:
    solution = solve_ytm_detailed(95.0, 100.0, 0.05, 10, max_iterations=1)
    assert not solution.converged
    assert solution.iterations == 1
    # One Newton step from 5% moves toward the ~5.67% root.
    assert 0.05 < solution.ytm < 0.06
    assert solve_ytm(95.0, 100.0, 0.05, 10, max_iterations=1) == solution.ytm


def test_ytm_strict_raises_convergence_error() -> None:
    with pytest.raises(ConvergenceError, match="did not converge"):
        solve_ytm(95.0, 100.0, 0.05, 10, max_iterations=1, strict=True)
    assert issubclass(ConvergenceError, ComputationError)


def test_duration_zero_coupon_equals_maturity() -> None:
    y = 0.04
    price = calculate_fair_price(100.0, 0.0, y, 7, 1)
    assert abs(calculate_duration(100.0, 0.0, y, 7, price) - 7.0) < 1e-9


def test_duration_par_bond_closed_form() -> None:
    """Par bond: D = (1+y)/y * (1 - (1+y)^-n)."""
    y = 0.05
    expected = (1 + y) / y * (1 - (1 + y) ** -10)
    assert abs(calculate_duration(100.0, 0.05, y, 10, 100.0) - expected) < 1e-9


@pytest.mark.parametrize("coupon,y", [(0.05, 0.05), (0.06, 0.04), (0.08, 0.03)])
def test_duration_non_decreasing_in_maturity(coupon: float, y: float) -> None:
    durations = []
    for n in range(1, 31):
        price = calculate_fair_price(100.0, coupon, y, n, 1)
        durations.append(calculate_duration(100.0, coupon, y, n, price))
    assert all(b >= a for a, b in zip(durations, durations[1:]))


def test_duration_below_maturity_for_coupon_bond() -> None:
    d = calculate_duration(100.0, 0.05, 0.05, 10, 100.0)
    assert 0 < d < 10


def test_modified_duration() -> None:
    assert abs(calculate_modified_duration(8.0, 0.06) - 8.0 / 1.06) < 1e-12


def test_current_yield() -> None:
    assert abs(current_yield(100.0, 0.05, 95.0) - 5.0 / 95.0) < 1e-12


def test_real_yield_fisher() -> None:
    assert abs(real_yield(0.07, 0.02) - (1.07 / 1.02 - 1)) < 1e-12
    assert abs(real_yield(0.07, 0.02, 0.01) - (1.07 / (1.02 * 1.01) - 1)) < 1e-12


def test_home_real_return() -> None:
    assert abs(home_real_return(0.06, -0.03, 0.02) - (1.06 * 0.97 / 1.02 - 1)) < 1e-12


def test_price_vs_fair_pct() -> None:
    assert abs(price_vs_fair_pct(102.0, 100.0) - 2.0) < 1e-12
    assert price_vs_fair_pct(98.0, 100.0) < 0


def test_years_between_uses_365_25_day_year() -> None:
    years = years_between(date(2026, 1, 1), date(2030, 1, 1))
    assert abs(years - 1461 / 365.25) < 1e-12
    assert math.isclose(years, 4.0)


@pytest.mark.parametrize(
    "required_yield,years,frequency",
    [
        (-1.0, 5, 1),  # base exactly zero
        (-3.0, 10.25, 2),  # negative base with fractional periods (complex power)
    ],
)
def test_fair_price_rejects_non_positive_discount_base(
    required_yield: float, years: float, frequency: int
) -> None:
    with pytest.raises(ComputationError, match="discount base"):
        calculate_fair_price(100, 0.05, required_yield, years, frequency)


def test_fair_price_rejects_infinite_result() -> None:
    # Periodic base 0.01 over 160 periods underflows the discount factor.
    with pytest.raises(ComputationError, match="fair price is not finite"):
        calculate_fair_price(100, 0.05, -1.98, 80, 2)


@pytest.mark.parametrize("ytm", [-1.0, -1.5])
def test_duration_rejects_non_positive_discount_base(ytm: float) -> None:
    with pytest.raises(ComputationError, match="discount base"):
        calculate_duration(100, 0.05, ytm, 10, 95)
    with pytest.raises(ComputationError, match="discount base"):
        calculate_modified_duration(8.0, ytm)
