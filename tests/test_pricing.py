"""Tests for nights, seasonal rates and price breakdowns."""

from datetime import date
from decimal import Decimal

import pytest

from travel_api.core.exceptions import ValidationError
from travel_api.domain.pricing import (
    calculate_nights,
    compute_price,
    seasonal_rate,
    validate_seasonal_windows,
)

SUMMER = {"start_date": "2024-06-01", "end_date": "2024-08-31", "multiplier": 1.5}
WINTER = {"start_date": "2024-12-20", "end_date": "2025-01-05", "multiplier": 1.2}


def test_calculate_nights():
    assert calculate_nights(date(2024, 6, 1), date(2024, 6, 3)) == 2
    assert calculate_nights(date(2024, 2, 28), date(2024, 3, 1)) == 2


def test_calculate_nights_rejects_empty_stay():
    with pytest.raises(ValidationError):
        calculate_nights(date(2024, 6, 3), date(2024, 6, 3))


@pytest.mark.parametrize("nights", [1, 3, 7])
def test_price_is_linear_in_nights(nights):
    single = compute_price(Decimal("89.90"), nights)
    double = compute_price(Decimal("89.90"), nights * 2)

    assert double.total_price == single.total_price * 2


def test_tax_is_added_on_full_base_price():
    price = compute_price(Decimal("100"), 3, tax_rate=Decimal("0.10"))

    assert price.base_price == Decimal("300.00")
    assert price.extra == Decimal("30.00")
    assert price.total_price == Decimal("330.00")


def test_daily_extra_is_charged_per_day():
    price = compute_price(50, 4, daily_extra=10)

    assert price.base_price == Decimal("200.00")
    assert price.extra == Decimal("40.00")
    assert price.total_price == Decimal("240.00")


def test_zero_nights_rejected():
    with pytest.raises(ValidationError):
        compute_price(100, 0)


def test_seasonal_rate_applies_window_containing_check_in():
    assert seasonal_rate(Decimal("100"), [SUMMER, WINTER], date(2024, 7, 15)) == Decimal("150.00")
    assert seasonal_rate(Decimal("100"), [SUMMER, WINTER], date(2024, 12, 31)) == Decimal("120.00")
    assert seasonal_rate(Decimal("100"), [SUMMER, WINTER], date(2024, 10, 1)) == Decimal("100.00")
    assert seasonal_rate(Decimal("100"), [], date(2024, 7, 15)) == Decimal("100.00")


def test_seasonal_window_edges_are_inclusive():
    assert seasonal_rate(100, [SUMMER], date(2024, 6, 1)) == Decimal("150.00")
    assert seasonal_rate(100, [SUMMER], date(2024, 8, 31)) == Decimal("150.00")


def test_overlapping_seasonal_windows_rejected():
    overlapping = {"start_date": "2024-08-31", "end_date": "2024-09-15", "multiplier": 1.1}

    with pytest.raises(ValidationError) as exc_info:
        validate_seasonal_windows([SUMMER, overlapping])

    assert exc_info.value.path == "seasonalPrices"


def test_inverted_seasonal_window_rejected():
    with pytest.raises(ValidationError):
        validate_seasonal_windows([{"start_date": "2024-09-01", "end_date": "2024-08-01", "multiplier": 1}])


def test_disjoint_seasonal_windows_accepted():
    windows = validate_seasonal_windows([WINTER, SUMMER])

    assert [w.multiplier for w in windows] == [Decimal("1.2"), Decimal("1.5")]
