"""Remote Zig version index fetching."""

from __future__ import annotations

import requests
from py_app_dev.core.logging import logger

from zigsetup.domain import VersionIndex, ZigRelease
from zigsetup.exceptions import IndexFetchError

_FETCH_TIMEOUT = 60


class VersionSource:
    """Fetches and decodes JSON version indices."""

    def __init__(self, timeout: float = _FETCH_TIMEOUT) -> None:
        self.timeout = timeout

    def fetch(self, url: str) -> VersionIndex:
        """
        Fetch the index at *url* and return it keyed by version label.

        Raises:
            IndexFetchError: On HTTP or network failures, or when the payload
                is not a JSON object of objects.

        """
        logger.debug(f"Fetching version index {url}")
        try:
            with requests.get(url, timeout=self.timeout) as response:
                response.raise_for_status()
                payload = response.json()
        except requests.JSONDecodeError as exc:
            raise IndexFetchError(f"Version index {url} is not valid JSON: {exc}") from exc
        except requests.RequestException as exc:
            raise IndexFetchError(f"Failed to fetch version index {url}: {exc}") from exc
        return parse_index(payload, url)


def parse_index(payload: object, url: str = "<index>") -> VersionIndex:
    """Convert a decoded index payload into ``ZigRelease`` records."""
    if not isinstance(payload, dict):
        raise IndexFetchError(f"Version index {url} is not a JSON object")
    index: VersionIndex = {}
    for label, entry in payload.items():
        if not isinstance(entry, dict):
            raise IndexFetchError(f"Version index {url} has a malformed entry for '{label}'")
        index[label] = ZigRelease.from_dict(entry)
    return index
