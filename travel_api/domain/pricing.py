"""Price calculation for hotel stays and vehicle rentals."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from travel_api.core.exceptions import ValidationError

ONE_DAY = timedelta(days=1)
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_nights(start: date, end: date) -> int:
    """Number of nights (or rental days) between two dates, partial days rounded up."""
    if end <= start:
        raise ValidationError("End date must be after start date", path="endDate")
    return math.ceil((end - start) / ONE_DAY)


@dataclass(frozen=True)
class SeasonalWindow:
    start_date: date
    end_date: date
    multiplier: Decimal

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


def _as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_seasonal_windows(
    seasons: Iterable[SeasonalWindow | Mapping[str, Any]] | None,
) -> list[SeasonalWindow]:
    """Normalize stored seasonal price entries into windows, keeping their order."""
    windows = []
    for season in seasons or ():
        if isinstance(season, SeasonalWindow):
            windows.append(season)
            continue
        windows.append(
            SeasonalWindow(
                start_date=_as_date(season["start_date"]),
                end_date=_as_date(season["end_date"]),
                multiplier=to_decimal(season.get("multiplier", 1)),
            )
        )
    return windows


def validate_seasonal_windows(
    seasons: Iterable[SeasonalWindow | Mapping[str, Any]] | None,
) -> list[SeasonalWindow]:
    """Reject malformed or overlapping seasonal windows.

    Raises:
        ValidationError: If a window ends before it starts, has a negative
            multiplier, or shares a day with another window
    """
    windows = parse_seasonal_windows(seasons)

    for window in windows:
        if window.end_date < window.start_date:
            raise ValidationError("Seasonal price end date must not be before its start date", path="seasonalPrices")
        if window.multiplier < 0:
            raise ValidationError("Seasonal price multiplier must not be negative", path="seasonalPrices")

    ordered = sorted(windows, key=lambda w: w.start_date)
    for previous, current in zip(ordered, ordered[1:]):
        if current.start_date <= previous.end_date:
            raise ValidationError(
                f"Seasonal prices overlap: {previous.start_date.isoformat()} to "
                f"{previous.end_date.isoformat()} and {current.start_date.isoformat()} to "
                f"{current.end_date.isoformat()}",
                path="seasonalPrices",
            )

    return windows


def seasonal_rate(
    base_rate: Decimal | float,
    seasons: Iterable[SeasonalWindow | Mapping[str, Any]] | None,
    check_in: date,
) -> Decimal:
    """Nightly rate adjusted by the first seasonal window containing check-in."""
    rate = to_decimal(base_rate)
    for window in parse_seasonal_windows(seasons):
        if window.contains(check_in):
            return money(rate * window.multiplier)
    return money(rate)


@dataclass(frozen=True)
class PriceBreakdown:
    nightly_rate: Decimal
    nights: int
    base_price: Decimal
    extra: Decimal
    total_price: Decimal


def compute_price(
    base_rate: Decimal | float,
    nights: int,
    tax_rate: Decimal | float | None = None,
    daily_extra: Decimal | float | None = None,
) -> PriceBreakdown:
    """Compute the price of a stay or rental.

    Args:
        base_rate: Nightly (or daily) rate, already seasonally adjusted
        nights: Number of nights or rental days
        tax_rate: Fraction of the base price added as tax, e.g. 0.10
        daily_extra: Per-day surcharge such as an insurance option

    Returns:
        PriceBreakdown: base price, modifiers and total
    """
    if nights < 1:
        raise ValidationError("Booking must be at least one night", path="nights")

    rate = to_decimal(base_rate)
    base_price = money(rate * nights)

    extra = Decimal("0")
    if tax_rate is not None:
        extra += money(base_price * to_decimal(tax_rate))
    if daily_extra is not None:
        extra += money(to_decimal(daily_extra) * nights)

    return PriceBreakdown(
        nightly_rate=money(rate),
        nights=nights,
        base_price=base_price,
        extra=extra,
        total_price=base_price + extra,
    )
