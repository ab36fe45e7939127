"""Pinyin key codec: tone-marked romanization <-> ASCII base + tone digit."""

from __future__ import annotations

import re

from pypinyin.contrib.tone_convert import to_tone

TONE_MARKS = {
    "ā": ("a", 1),
    "á": ("a", 2),
    "ǎ": ("a", 3),
    "à": ("a", 4),
    "ē": ("e", 1),
    "é": ("e", 2),
    "ě": ("e", 3),
    "è": ("e", 4),
    "ī": ("i", 1),
    "í": ("i", 2),
    "ǐ": ("i", 3),
    "ì": ("i", 4),
    "ō": ("o", 1),
    "ó": ("o", 2),
    "ǒ": ("o", 3),
    "ò": ("o", 4),
    "ū": ("u", 1),
    "ú": ("u", 2),
    "ǔ": ("u", 3),
    "ù": ("u", 4),
    "ǖ": ("v", 1),
    "ǘ": ("v", 2),
    "ǚ": ("v", 3),
    "ǜ": ("v", 4),
}
UMLAUT_U = "ü"

SYLLABLE_KEY_RE = re.compile(r"[a-z]+[1-5]?")
NON_LETTER_RE = re.compile(r"[^a-z]")
TRAILING_TONE_RE = re.compile(r"[1-5]$")
MAX_SYLLABLE_LENGTH = 6


def fold_tone_marks(text: str) -> str:
    """Replace tone-marked vowels in place with ASCII vowels plus tone digits.

    ``hao3`` passes through, while ``hǎo`` folds to ``ha3o`` and ``nǐhǎo`` to
    ``ni3ha3o``. Such tokens fail the key shape check, so ``to_key`` reduces
    them to a tone-free base.

    Args:
        text: Lowercase romanized text.

    Returns:
        Folded text where ``ü`` is spelled ``v``.
    """

    chars: list[str] = []
    for ch in text:
        if ch in TONE_MARKS:
            base, tone = TONE_MARKS[ch]
            chars.append(f"{base}{tone}")
        elif ch == UMLAUT_U:
            chars.append("v")
        else:
            chars.append(ch)
    return "".join(chars)


def to_key(text: str | None) -> str:
    """Convert romanized input into a shard lookup key.

    Well-formed tokens keep their tone digit (``hao3``). Anything else is
    reduced to its ASCII letters so a malformed token still reaches a
    tone-agnostic base lookup. The function is idempotent.

    Args:
        text: Raw syllable such as ``hǎo``, ``HAO3`` or ``lü``.

    Returns:
        Lookup key, possibly empty.
    """

    folded = fold_tone_marks((text or "").strip().lower())
    if SYLLABLE_KEY_RE.fullmatch(folded):
        return folded
    return NON_LETTER_RE.sub("", folded)


def base_of(key: str) -> str:
    """Strip a trailing tone digit from a key."""

    return TRAILING_TONE_RE.sub("", key)


def tone_of(key: str) -> str | None:
    """Return the trailing tone digit of a key, or ``None``."""

    match = TRAILING_TONE_RE.search(key)
    return match.group(0) if match else None


def is_syllable_shaped(text: str | None) -> bool:
    """Return whether ``text`` looks like one romanized syllable.

    The folded token must be a single run of letters with an optional tone
    digit and at most six characters long, tone digit included, so longer
    Latin words such as ``computer`` are rejected.
    """

    folded = fold_tone_marks((text or "").strip().lower())
    if not folded or re.search(r"\s", folded):
        return False
    if not SYLLABLE_KEY_RE.fullmatch(folded):
        return False
    return len(folded) <= MAX_SYLLABLE_LENGTH


def display_form(key: str) -> str:
    """Render a numbered key with tone marks (``hao3`` -> ``hǎo``)."""

    return to_tone(key)
