"""Data models shared by the resolver, pipeline, and serializers.

This module defines immutable contracts between components so the codecs,
caches, and resolver have narrow, testable interfaces and callers can rely on
stable fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field

MODE_SINGLE_CHAR = "singleChar"
MODE_SINGLE_PINYIN = "singlePinyin"
MODE_NUMBER_WORD = "numberWord"


@dataclass(frozen=True)
class Reading:
    """One pronunciation of one logogram.

    ``syllable`` is the lowercase tone-free base (``hao``), ``tone`` is the tone
    digit 1-5 when the source data provides one, and ``display_form`` is the
    tone-marked rendering used by user interfaces.
    """

    syllable: str
    tone: int | None
    display_form: str

    @property
    def key(self) -> str:
        """Return the numbered key such as ``hao3``, or the bare base."""

        return f"{self.syllable}{self.tone}" if self.tone is not None else self.syllable


@dataclass(frozen=True)
class ResolutionResult:
    """Equivalence class of alternate readings for one top candidate.

    ``homophones`` has set semantics with insertion-stable order. ``tone_label``
    joins the distinct tone digits with ``/`` and is ``None`` when no tone
    information exists.
    """

    mode: str
    input: str
    bases: tuple[str, ...]
    homophones: tuple[str, ...]
    tone_label: str | None
    display: tuple[str, ...] = field(default_factory=tuple)
    digit_form: str | None = None
    word_form: str | None = None


@dataclass(frozen=True)
class PipelineResult:
    """Filtered candidates in provider rank order plus optional augmentation."""

    candidates: tuple[str, ...]
    augmentation: ResolutionResult | None = None
