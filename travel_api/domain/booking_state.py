"""Booking state machine."""

from travel_api.core.exceptions import ValidationError

BOOKING_TRANSITIONS = {
    "Pending": {"Confirmed", "Cancelled"},
    "Confirmed": {"Cancelled"},
    "Cancelled": set(),
}

PAYMENT_TRANSITIONS = {
    "Unpaid": {"Paid"},
    "Paid": set(),
}


def assert_booking_transition(current: str, target: str) -> None:
    if current == "Cancelled" and target == "Cancelled":
        raise ValidationError("Booking is already cancelled", path="status")
    allowed = BOOKING_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise ValidationError(f"Invalid booking transition: {current} to {target}", path="status")


def assert_payment_transition(current: str, target: str) -> None:
    allowed = PAYMENT_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise ValidationError(
            f"Invalid payment status transition: {current} to {target}", path="paymentStatus"
        )
