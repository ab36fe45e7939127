"""Retrieval of static JSON reference documents from disk or HTTP."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any

import requests

logger = logging.getLogger(__name__)

READING_TABLE_DOCUMENT = "hanzi_to_pinyin.json"
SHARD_DIRECTORY = "pinyin-index"


class DataUnavailableError(LookupError):
    """Raised when a reference document cannot be fetched or decoded."""


def shard_document(base: str) -> str:
    """Return the relative document name of the shard for ``base``."""

    return f"{SHARD_DIRECTORY}/{base}.json"


def is_remote(root: str) -> bool:
    """Return whether ``root`` names an HTTP(S) location."""

    return root.startswith(("http://", "https://"))


@dataclass(frozen=True)
class StaticDataSource:
    """Read-only accessor for the logogram table and syllable shards.

    ``root`` is either a local directory or an ``http(s)://`` base URL laid out
    as ``hanzi_to_pinyin.json`` plus ``pinyin-index/<base>.json``. Documents
    must decode to JSON objects.
    """

    root: str
    timeout: float = 5.0
    session: requests.Session | None = field(default=None, compare=False, repr=False)

    def fetch_json(self, relative: str) -> dict[str, Any]:
        """Fetch and decode one JSON object document.

        Args:
            relative: Document path relative to ``root``.

        Returns:
            Decoded JSON object.

        Raises:
            DataUnavailableError: If the document is missing, unreachable,
                malformed, or not a JSON object.
        """

        if is_remote(self.root):
            payload = self._fetch_remote(relative)
        else:
            payload = self._fetch_local(relative)

        if not isinstance(payload, dict):
            raise DataUnavailableError(f"Document {relative} is not a JSON object.")
        return payload

    def _fetch_local(self, relative: str) -> Any:
        path = Path(self.root) / relative
        if not path.exists():
            raise DataUnavailableError(f"Document not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, ValueError) as exc:
            raise DataUnavailableError(f"Unable to read {path}: {exc}") from exc

    def _fetch_remote(self, relative: str) -> Any:
        url = f"{self.root.rstrip('/')}/{relative}"
        http = self.session or requests
        try:
            response = http.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as exc:
            raise DataUnavailableError(f"Unable to fetch {url}: {exc}") from exc
        except ValueError as exc:
            raise DataUnavailableError(f"Invalid JSON at {url}: {exc}") from exc
