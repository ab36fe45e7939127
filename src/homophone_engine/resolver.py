"""Homophone resolution for a single top candidate.

A candidate is classified into exactly one mode, or none:

- ``singleChar`` (Chinese): exactly one logogram. Every distinct reading base
  contributes its shard members, so polyphonic characters yield the union of
  all their pronunciations.
- ``singlePinyin`` (Chinese): one romanized syllable such as ``hao3`` or
  ``ma``, looked up by tone-qualified key with a base-key fallback.
- ``numberWord`` (English): a digit string or a spelled number, expanded with
  its other spelling and the homophones of its word form.

Missing reference data always yields an empty homophone set, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Iterable

from homophone_engine.codecs.number_words import int_to_word, normalize_number_text, word_to_int
from homophone_engine.codecs.pinyin_key import (
    base_of,
    display_form,
    is_syllable_shaped,
    to_key,
    tone_of,
)
from homophone_engine.data.readings import LogogramReadingTable
from homophone_engine.data.shards import ShardCache
from homophone_engine.languages import (
    LOGOGRAPHIC_LANGUAGE,
    NUMBER_WORD_LANGUAGE,
    han_chars,
    primary_subtag,
)
from homophone_engine.models import (
    MODE_NUMBER_WORD,
    MODE_SINGLE_CHAR,
    MODE_SINGLE_PINYIN,
    ResolutionResult,
)
from homophone_engine.normalization import normalize
from homophone_engine.services.homophone_words import HomophoneWordService

logger = logging.getLogger(__name__)

DIGITS_RE = re.compile(r"[0-9]+")


def unique(items: Iterable[str | None]) -> tuple[str, ...]:
    """Deduplicate non-empty items while keeping first-seen order."""

    return tuple(dict.fromkeys(item for item in items if item))


def tone_label(tones: Iterable[int | str | None]) -> str | None:
    """Join distinct tone digits in ascending order, e.g. ``"2/4"``."""

    distinct = sorted({int(tone) for tone in tones if tone is not None})
    return "/".join(str(tone) for tone in distinct) or None


@dataclass(frozen=True)
class HomophoneResolver:
    """Classify a candidate and assemble its homophone equivalence class.

    The resolver holds no per-request state; the reading table and shard cache
    are shared reference data owned by the engine.
    """

    readings: LogogramReadingTable
    shards: ShardCache
    word_service: HomophoneWordService | None = None

    def resolve(self, candidate: str, language: str) -> ResolutionResult | None:
        """Resolve one candidate for the given language tag.

        Args:
            candidate: Top recognizer candidate, raw or normalized.
            language: BCP 47 style tag such as ``zh-CN`` or ``en-US``.

        Returns:
            The resolution, or ``None`` when no mode applies.
        """

        text = normalize(candidate)
        if not text:
            return None

        subtag = primary_subtag(language)
        if subtag == LOGOGRAPHIC_LANGUAGE:
            chars = han_chars(text)
            if len(chars) == 1:
                return self.resolve_single_char(chars[0])
            if is_syllable_shaped(text):
                return self.resolve_single_pinyin(text)
        elif subtag == NUMBER_WORD_LANGUAGE:
            return self.resolve_number_word(text)

        logger.debug("No resolution mode for %r (%s)", text, language)
        return None

    def resolve_single_char(self, char: str) -> ResolutionResult:
        """Union the shards of every distinct reading base of ``char``."""

        readings = self.readings.readings_of(char)
        bases = unique(reading.syllable for reading in readings)

        homophones: list[str] = []
        for base in bases:
            homophones.extend(self.shards.lookup(base))

        if not readings:
            logger.debug("No known readings for %r", char)
        return ResolutionResult(
            mode=MODE_SINGLE_CHAR,
            input=char,
            bases=bases,
            homophones=unique(homophones),
            tone_label=tone_label(reading.tone for reading in readings),
            display=unique(reading.display_form for reading in readings),
        )

    def resolve_single_pinyin(self, syllable: str) -> ResolutionResult:
        """Look up one romanized syllable by key, falling back to its base."""

        key = to_key(syllable)
        base = base_of(key)
        return ResolutionResult(
            mode=MODE_SINGLE_PINYIN,
            input=syllable,
            bases=(base,) if base else (),
            homophones=unique(self.shards.lookup(key)),
            tone_label=tone_of(key),
            display=(display_form(key),) if key else (),
        )

    def resolve_number_word(self, text: str) -> ResolutionResult | None:
        """Expand a digit string or spelled number into its alternates.

        The homophone service is queried with the word form, since such
        services index spellings rather than digits. The candidate itself is
        excluded from the result.

        Args:
            text: Normalized candidate such as ``Two`` or ``42``.

        Returns:
            The resolution, or ``None`` when ``text`` is not a number.
        """

        token = text.lower()
        if DIGITS_RE.fullmatch(token):
            digit_form = text
            # Digit strings past four significant digits are out of range.
            word_form = int_to_word(int(text)) if len(text.lstrip("0")) <= 4 else None
        else:
            value = word_to_int(token)
            if value is None:
                return None
            digit_form = str(value)
            word_form = int_to_word(value)

        query = word_form or (token if token.isalpha() else None)
        found: list[str] = []
        if query and self.word_service is not None:
            found = self.word_service.homophones(query)

        excluded = {token, normalize_number_text(token)}
        homophones = unique(
            item
            for item in [*found, word_form, digit_form]
            if item and item.lower() not in excluded
        )
        return ResolutionResult(
            mode=MODE_NUMBER_WORD,
            input=text,
            bases=(query,) if query else (),
            homophones=homophones,
            tone_label=None,
            digit_form=digit_form,
            word_form=word_form,
        )
