# Makes the folder importable as a package.
# Exports the query engine and its types for convenience.

from .engine import filter_records, search_borrowers, stringify
from .types import ALL_FIELDS, SEARCH_FIELDS, Collection, Query, Record

__all__ = [
    "filter_records",
    "search_borrowers",
    "stringify",
    "Query",
    "Record",
    "Collection",
    "ALL_FIELDS",
    "SEARCH_FIELDS",
]
