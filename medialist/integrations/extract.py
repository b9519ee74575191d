"""
Get-or-default accessors for untyped provider payloads.

Provider responses are treated as loosely typed documents: any level may be
missing, null, or of the wrong type. These helpers never raise on shape.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def dig(payload: Any, *path: str | int) -> Any:
    """
    Walk `path` through nested mappings and lists, returning None at the first miss.

    String steps index mappings; integer steps index lists.
    """

    current = payload
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, Mapping):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def dig_str(payload: Any, *path: str | int) -> str:
    value = dig(payload, *path)
    return value if isinstance(value, str) else ""


def first_item(payload: Any, *path: str | int) -> Mapping[str, Any] | None:
    """Return the first element of the list at `path` when it is a mapping."""

    item = dig(payload, *path, 0)
    return item if isinstance(item, Mapping) else None


def find_first(items: Any, **match: Any) -> Mapping[str, Any] | None:
    if not isinstance(items, list):
        return None
    for item in items:
        if isinstance(item, Mapping) and all(item.get(k) == v for k, v in match.items()):
            return item
    return None


def year_from_date(value: Any) -> str:
    """
    Truncate a provider date to the text before the first `-`.

    "2018-01-25" -> "2018", "1999" -> "1999", None -> "".
    """

    if not isinstance(value, str) or not value:
        return ""
    return value.split("-", 1)[0]


def join_query(parts: Iterable[str | None]) -> str:
    return " ".join(p.strip() for p in parts if isinstance(p, str) and p.strip())
