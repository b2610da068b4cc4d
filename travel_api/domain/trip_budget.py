"""Trip budget bookkeeping.

``remaining`` is kept as ``total - sum(spent)`` by adjusting it on every
recorded expense. Removing an itinerary item does not refund its cost.
"""

from decimal import Decimal
from typing import Any

from travel_api.core.exceptions import ValidationError

BUDGET_CATEGORIES = ("accommodation", "transportation", "activities", "meals", "others")


def _amount(value: Any) -> Decimal:
    return Decimal(str(value or 0))


def new_budget(total: Any) -> dict[str, Any]:
    total_amount = _amount(total)
    if total_amount < 0:
        raise ValidationError("Budget total must not be negative", path="budget.total")
    return {
        "total": float(total_amount),
        "spent": {category: 0.0 for category in BUDGET_CATEGORIES},
        "remaining": float(total_amount),
    }


def record_expense(budget: dict[str, Any], category: str, cost: Any) -> dict[str, Any]:
    """Return a copy of the budget with ``cost`` added to a spent category."""
    if category not in BUDGET_CATEGORIES:
        raise ValueError(f"Unknown budget category: {category}")

    amount = _amount(cost)
    spent = {key: budget.get("spent", {}).get(key, 0.0) for key in BUDGET_CATEGORIES}
    spent[category] = float(_amount(spent[category]) + amount)

    return {
        "total": budget["total"],
        "spent": spent,
        "remaining": float(_amount(budget["remaining"]) - amount),
    }
