"""Language-tag parsing and script-family detection."""

from __future__ import annotations

import re

# Logogram ranges: CJK Unified Ideographs, Extension A, Compatibility Ideographs,
# and the supplementary ideographic planes (Extension B onward).
HAN_RE = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f]")
KANA_RE = re.compile(r"[\u3040-\u309f\u30a0-\u30ff\u31f0-\u31ff]")
HANGUL_RE = re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7af]")
LATIN_RE = re.compile(r"[A-Za-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u024f]")

LOGOGRAPHIC_LANGUAGE = "zh"
NUMBER_WORD_LANGUAGE = "en"

SCRIPT_FAMILIES: dict[str, tuple[re.Pattern[str], ...]] = {
    "zh": (HAN_RE,),
    "ja": (HAN_RE, KANA_RE),
    "ko": (HANGUL_RE, HAN_RE),
}


def primary_subtag(language: str | None) -> str:
    """Return the lowercase primary subtag of a BCP 47 style tag.

    Both ``-`` and ``_`` separators are accepted, so ``zh-CN``, ``zh_TW`` and
    ``ZH`` all map to ``zh``.
    """

    tag = (language or "").strip().lower()
    return re.split(r"[-_]", tag, maxsplit=1)[0]


def is_logographic_family(language: str | None) -> bool:
    """Return whether the language writes in a CJK script family."""

    return primary_subtag(language) in SCRIPT_FAMILIES


def has_family_script(text: str, language: str | None) -> bool:
    """Return whether ``text`` contains any character of the language's family."""

    patterns = SCRIPT_FAMILIES.get(primary_subtag(language), ())
    return any(pattern.search(text) for pattern in patterns)


def has_latin(text: str) -> bool:
    """Return whether ``text`` contains at least one Latin letter."""

    return LATIN_RE.search(text) is not None


def han_chars(text: str) -> list[str]:
    """Extract logographic characters from ``text`` in order.

    Args:
        text: Candidate text, which may include punctuation or Latin letters.

    Returns:
        Ordered list of Han characters.
    """

    return [char for char in text if HAN_RE.fullmatch(char)]
