"""Booking reference generation."""

import random
from datetime import UTC, date, datetime

BOOKING_KIND_PREFIXES = {
    "hotel": "H",
    "vehicle": "V",
}


def generate_booking_reference(kind: str, today: date | None = None) -> str:
    """Generate a booking reference like 'H2406010042'.

    Kind letter, YYMMDD of the booking day and a zero-padded four digit
    random number. References are not checked against existing bookings.

    Args:
        kind: Booking kind, 'hotel' or 'vehicle'
        today: Booking day, defaults to the current UTC date

    Returns:
        str: Eleven character booking reference
    """
    try:
        prefix = BOOKING_KIND_PREFIXES[kind.lower()]
    except KeyError:
        raise ValueError(f"Unknown booking kind: {kind}") from None

    date_part = (today or datetime.now(UTC).date()).strftime("%y%m%d")
    random_part = f"{random.randint(0, 9999):04d}"
    return f"{prefix}{date_part}{random_part}"
