"""Clients for the English homophone-word collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping, Protocol, Sequence

import requests

logger = logging.getLogger(__name__)

DATAMUSE_WORDS_URL = "https://api.datamuse.com/words"


class HomophoneWordService(Protocol):
    """Anything that maps one alphabetic word to its homophones."""

    def homophones(self, word: str) -> list[str]:
        ...


@dataclass(frozen=True)
class DatamuseHomophoneService:
    """Query the Datamuse ``rel_hom`` relation for English homophones.

    Network or decode failures yield an empty list so the caller can still
    deliver the digit and word forms.
    """

    url: str = DATAMUSE_WORDS_URL
    timeout: float = 5.0
    max_results: int = 20
    session: requests.Session | None = field(default=None, compare=False, repr=False)

    def homophones(self, word: str) -> list[str]:
        """Return homophones of ``word`` in service rank order.

        Args:
            word: Alphabetic query token such as ``two``.

        Returns:
            Homophone words, possibly empty.
        """

        if not word or not word.replace("-", "").replace(" ", "").isalpha():
            return []

        http = self.session or requests
        try:
            response = http.get(
                self.url,
                params={"rel_hom": word, "max": self.max_results},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as exc:
            logger.warning("Homophone service failed for '%s': %s", word, exc)
            return []
        except ValueError as exc:
            logger.warning("Homophone service returned invalid JSON for '%s': %s", word, exc)
            return []

        if not isinstance(payload, list):
            return []
        return [
            entry["word"]
            for entry in payload
            if isinstance(entry, dict) and isinstance(entry.get("word"), str) and entry["word"]
        ]


@dataclass(frozen=True)
class StaticHomophoneService:
    """In-memory homophone lookup, used offline and in tests."""

    entries: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def homophones(self, word: str) -> list[str]:
        return list(self.entries.get(word.lower(), ()))
