# Local file-backed borrowers provider.
# Re-reads the JSON file on every call; the file is read-only at runtime.

import json
from typing import Optional

from ..errors import DataUnavailableError
from ..search.types import Collection
from ..settings import settings


class FileBorrowerProvider:
    def __init__(self, path: Optional[str] = None):
        self.path = path or settings.DATA_PATH

    def read_raw(self) -> str:
        """Return the file contents verbatim (undecodable bytes become U+FFFD)."""
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace", newline="") as f:
                return f.read()
        except OSError as e:
            raise DataUnavailableError(f"Cannot read {self.path}: {e}") from e

    def fetch(self) -> Collection:
        raw = self.read_raw()
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DataUnavailableError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, list):
            raise DataUnavailableError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        return data
