# movies_api/utils/helpers.py

import json
import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

logger = logging.getLogger(__name__)

# --- Presentation Formatting ---

def format_dollars(value: Any) -> Optional[str]:
    """
    Formats a numeric value as US dollars, e.g. 1234.5 -> "$1,234.50".

    Args:
        value: An int, float or numeric string.

    Returns:
        The currency text, or None for None, booleans, blank strings and
        anything that is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip() == "":
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None

    amount = Decimal(str(num)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"

def format_text(value: Any) -> Optional[str]:
    """
    Turns a JSON-encoded list of names into readable text.

    Accepts lists of plain strings or of objects carrying a "name" key, either
    already decoded or as a JSON string: '[{"name": "Drama"}, "Crime"]' ->
    "Drama, Crime". A string that is not valid JSON is returned unchanged.

    Args:
        value: The stored column value (genres, production companies, ...).

    Returns:
        Comma-joined names, the raw string, or None when nothing usable is found.
    """
    if not value:
        return None
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return value
    else:
        parsed = value

    if not isinstance(parsed, list):
        return None

    names = []
    for item in parsed:
        name = item if isinstance(item, str) else (item.get("name") if isinstance(item, dict) else None)
        if isinstance(name, str):
            names.append(name)
    return ", ".join(names) if names else None

# --- Pagination Helpers ---

def calculate_offset(page: int, limit: int) -> int:
    """
    Calculates the number of rows to skip for pagination.

    Page and limit are not validated: page 0 or below yields a negative
    offset and it is up to the database engine how that is treated.
    """
    return (page - 1) * limit

def calculate_total_pages(total_items: int, limit: int) -> int:
    """
    Calculates the total number of pages required.

    Args:
        total_items: The total number of items.
        limit: The number of items per page.

    Returns:
        ceil(total_items / limit), or 0 when limit is not positive.
    """
    if limit <= 0:
        return 0
    return math.ceil(total_items / limit)
