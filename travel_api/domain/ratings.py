"""User ratings stored alongside hotels and vehicles."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID


def upsert_rating(
    ratings: list[dict[str, Any]] | None,
    user_id: UUID,
    rating: int,
    review: str | None = None,
) -> tuple[list[dict[str, Any]], float]:
    """Replace the user's previous rating (if any) and recompute the average.

    Returns a new list so JSON columns see the change.
    """
    entries = [entry for entry in ratings or [] if entry.get("user_id") != str(user_id)]
    entries.append(
        {
            "user_id": str(user_id),
            "rating": rating,
            "review": review,
            "rated_at": datetime.now(UTC).isoformat(),
        }
    )
    return entries, average_rating(entries)


def average_rating(ratings: list[dict[str, Any]]) -> float:
    if not ratings:
        return 0.0
    return round(sum(entry["rating"] for entry in ratings) / len(ratings), 2)
