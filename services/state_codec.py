"""Conversion between BudgetState and its exported JSON form.

serialize() emits the canonical structure. deserialize() accepts anything a
file or storage slot might hand over and either rebuilds a well-formed state,
coercing each field to a safe value, or returns None. It never raises.

Exported shape:
    {
        "income": 3000.0,
        "interestRate": 4.5,
        "forecastPeriodValue": 5,
        "forecastPeriodUnit": "years",
        "categories": [
            {"name": "Rent", "percentage": 40.0, "amount": 1200.0, "isSavings": false},
        ]
    }
"""

import json
import math
from typing import Any, Optional

from logger import get_logger
from models.budget_state import (
    BudgetState,
    DEFAULT_FORECAST_PERIOD_VALUE,
    MONTHS,
    YEARS,
)
from models.category import Category
from numeric import clamp, coerce_number, round2

logger = get_logger()


def serialize(state: BudgetState) -> dict:
    """Convert a state to its canonical JSON-compatible structure.

    Args:
        state: The budget to export.

    Returns:
        Dictionary with camelCase keys, categories in display order.
    """
    categories = []
    for category in state.categories:
        entry = category.to_dict()
        entry["percentage"] = _finite(entry["percentage"], "percentage")
        entry["amount"] = _finite(entry["amount"], "amount")
        categories.append(entry)

    return {
        "income": _finite(round2(state.income), "income"),
        "interestRate": _finite(round2(state.interest_rate), "interestRate"),
        "forecastPeriodValue": _finite(
            state.forecast_period_value, "forecastPeriodValue"
        ),
        "forecastPeriodUnit": state.forecast_period_unit,
        "categories": categories,
    }


def _finite(value: float, field: str) -> float:
    """JSON has no Infinity or NaN; export those as 0."""
    if math.isfinite(value):
        return value
    logger.warning(f"Exporting non-finite {field} ({value}) as 0")
    return 0.0


def dumps(state: BudgetState) -> str:
    """Serialize a state to JSON text."""
    return json.dumps(serialize(state), indent=2, allow_nan=False)


def deserialize(raw: Any) -> Optional[BudgetState]:
    """Rebuild a BudgetState from untrusted input.

    Each field is coerced independently. Amount/percentage consistency and
    the 100% ceiling are not re-checked: a loaded budget is taken as it was
    saved.

    Args:
        raw: JSON text (str or UTF-8 bytes) or an already parsed value.

    Returns:
        The rebuilt state, or None when the input isn't well-formed JSON or
        its top level isn't an object.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning(f"Rejected budget data: not UTF-8 text ({e})")
            return None

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Rejected budget data: invalid JSON ({e})")
            return None
        except RecursionError:
            logger.warning("Rejected budget data: nested too deeply")
            return None
    else:
        data = raw

    if not isinstance(data, dict):
        logger.warning(
            f"Rejected budget data: expected an object, got {type(data).__name__}"
        )
        return None

    return BudgetState(
        income=max(0.0, coerce_number(data.get("income"), 0.0)),
        interest_rate=max(0.0, coerce_number(data.get("interestRate"), 0.0)),
        forecast_period_value=max(
            0.0,
            coerce_number(
                data.get("forecastPeriodValue"), DEFAULT_FORECAST_PERIOD_VALUE
            ),
        ),
        forecast_period_unit=(
            YEARS if data.get("forecastPeriodUnit") == YEARS else MONTHS
        ),
        categories=_deserialize_categories(data.get("categories")),
    )


def _deserialize_categories(raw_categories: Any) -> list:
    """Coerce the categories field, dropping entries that aren't objects."""
    if not isinstance(raw_categories, list):
        return []

    entries = [entry for entry in raw_categories if isinstance(entry, dict)]
    if len(entries) < len(raw_categories):
        logger.debug(
            f"Dropped {len(raw_categories) - len(entries)} malformed categories"
        )

    return [
        _deserialize_category(entry, position)
        for position, entry in enumerate(entries)
    ]


def _deserialize_category(entry: dict, position: int) -> Category:
    name = entry.get("name")
    is_savings = entry.get("isSavings")
    return Category(
        name=name if isinstance(name, str) else f"Category {position + 1}",
        percentage=round2(clamp(coerce_number(entry.get("percentage"), 0.0), 0, 100)),
        amount=round2(max(0.0, coerce_number(entry.get("amount"), 0.0))),
        is_savings=is_savings if isinstance(is_savings, bool) else False,
    )
