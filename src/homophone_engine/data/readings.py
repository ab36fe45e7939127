"""Logogram -> readings table loaded once per engine."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging

from homophone_engine.codecs.pinyin_key import display_form
from homophone_engine.data.source import (
    READING_TABLE_DOCUMENT,
    DataUnavailableError,
    StaticDataSource,
)
from homophone_engine.models import Reading

logger = logging.getLogger(__name__)


def parse_reading(item: object) -> Reading | None:
    """Normalize one ``{sound, tone, pretty}`` record into a :class:`Reading`.

    Args:
        item: Decoded JSON value from the table document.

    Returns:
        A reading, or ``None`` when the record has no usable ``sound``.
    """

    if not isinstance(item, dict):
        return None
    sound = str(item.get("sound") or "").strip().lower()
    if not sound:
        return None

    tone = item.get("tone")
    if isinstance(tone, bool) or not isinstance(tone, int) or not 1 <= tone <= 5:
        tone = None

    pretty = str(item.get("pretty") or "").strip()
    if not pretty:
        pretty = display_form(f"{sound}{tone}" if tone is not None else sound)
    return Reading(syllable=sound, tone=tone, display_form=pretty)


@dataclass(frozen=True)
class LogogramReadingTable:
    """Read-only table mapping each logogram to its ordered readings.

    The whole document is fetched on the first lookup and kept for the life of
    the instance. An unavailable document behaves as an empty table.
    """

    source: StaticDataSource

    @cached_property
    def table(self) -> dict[str, tuple[Reading, ...]]:
        """Load and cache the full table.

        Returns:
            Mapping of logogram to immutable reading tuples.
        """

        try:
            document = self.source.fetch_json(READING_TABLE_DOCUMENT)
        except DataUnavailableError as exc:
            logger.warning("Logogram reading table unavailable: %s", exc)
            return {}

        mapping: dict[str, tuple[Reading, ...]] = {}
        for char, items in document.items():
            if not isinstance(items, list):
                continue
            readings = [reading for reading in map(parse_reading, items) if reading is not None]
            mapping[char] = tuple(readings)
        logger.debug("Loaded readings for %d logograms", len(mapping))
        return mapping

    @property
    def is_loaded(self) -> bool:
        """Return whether the table has been fetched."""

        return "table" in self.__dict__

    def readings_of(self, char: str) -> tuple[Reading, ...]:
        """Return readings for ``char``; empty tuple when unknown."""

        return self.table.get(char, ())
