# Remote borrowers provider.
# GETs the borrowers endpoint of the HTTP service. No caching, no retries:
# every fetch() goes over the network.

from typing import Optional

import requests

from ..errors import DataUnavailableError
from ..search.types import Collection
from ..settings import settings


class RemoteBorrowerProvider:
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or settings.BORROWERS_API_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def fetch(self) -> Collection:
        try:
            resp = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DataUnavailableError(str(e)) from e

        if not resp.ok:
            raise DataUnavailableError(f"API responded with status: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise DataUnavailableError(f"Invalid JSON from {self.url}: {e}") from e
        if not isinstance(data, list):
            raise DataUnavailableError(f"Expected a JSON array from {self.url}, got {type(data).__name__}")
        return data
