# Substring search over borrower records.
# Stateless: takes a collection and a query, returns the matching records
# (same objects, original order). Never raises.

from __future__ import annotations
from typing import Any, Optional

from .types import ALL_FIELDS, Collection, Query, Record


def stringify(value: Any) -> str:
    """Render a field value the way it reads in the JSON dataset."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else stringify(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def is_present(value: Any) -> bool:
    """Truthiness as the JSON dataset sees it: empty containers count, 0 and NaN do not."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)):
        return not (value == 0 or value != value)
    return True


def record_matches(record: Record, needle: str, field: str) -> bool:
    """`needle` must already be lowercased."""
    if field == ALL_FIELDS:
        return any(needle in stringify(v).lower() for v in record.values())

    value = record.get(field)
    # Falsy values (0, NaN, "", False, None) count as missing for field searches.
    if not is_present(value):
        return False
    return needle in stringify(value).lower()


def filter_records(collection: Collection, query: Query) -> Collection:
    needle = query.text.lower()
    # Field names are keys: anything else is read as its text (["name"] -> "name").
    field = query.field if isinstance(query.field, str) else stringify(query.field)
    return [r for r in collection if record_matches(r, needle, field)]


def search_borrowers(collection: Collection, text: str, field: Optional[str] = ALL_FIELDS) -> Collection:
    return filter_records(collection, Query(text=text, field=field))

