"""
SQL clause builders.

Pure functions: filter and sort intent in, parameterized fragments out.
Values never appear in the returned SQL text, only as `?` placeholders with
a parallel list of bound parameters.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class FilterSpec:
    """What to match, how to sort and which columns to return."""
    where: Mapping[str, Any] = field(default_factory=dict)
    like: Mapping[str, str] = field(default_factory=dict)
    order: Mapping[str, str] = field(default_factory=dict)
    select: Sequence[str] = ()


def build_where_clause(
    where: Optional[Mapping[str, Any]] = None,
    like: Optional[Mapping[str, Any]] = None,
) -> Tuple[str, List[Any]]:
    """
    Build a WHERE clause with parameters.

    Equality conditions come first, then LIKE conditions, each in mapping
    order. Equality entries whose value is None are skipped, as are LIKE
    entries whose value is not a non-empty string.

    Returns:
        (clause, params). clause is "" when no condition remains.
    """
    conditions = []
    params = []

    for field, value in (where or {}).items():
        if value is None:
            continue
        conditions.append(f"{field} = ?")
        params.append(value)

    for field, pattern in (like or {}).items():
        if not isinstance(pattern, str) or not pattern:
            continue
        conditions.append(f"{field} LIKE ?")
        params.append(pattern)

    if not conditions:
        return "", []
    return "WHERE " + " AND ".join(conditions), params


def build_order_clause(order: Optional[Mapping[str, str]] = None) -> str:
    """
    Build an ORDER BY clause, fields in mapping order.

    The direction is upper-cased as given, "asc" -> "ASC"; it is not checked
    against ASC/DESC.
    """
    if not order:
        return ""
    parts = [f"{field} {direction.upper()}" for field, direction in order.items()]
    return "ORDER BY " + ", ".join(parts)
