# Data models for the search layer.
# Records stay plain dicts: the dataset has no fixed schema.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]
Collection = List[Record]

ALL_FIELDS = "all"
SEARCH_FIELDS = ("name", "email", "phone", ALL_FIELDS)


@dataclass(frozen=True)
class Query:
    """Search text plus the field to look in ("all" searches every value)."""
    text: str
    field: Optional[str] = ALL_FIELDS

    def __post_init__(self):
        if not self.field:
            object.__setattr__(self, "field", ALL_FIELDS)
