"""Text normalization for raw recognizer output."""

from __future__ import annotations

import re

QUOTE_CHARS = "\"'`“”‘’«»「」『』＂＇"
TERMINATOR_CHARS = ".!?…。！？．｡"

WHITESPACE_RE = re.compile(r"\s+")
TRAILING_TERMINATOR_RE = re.compile(f"[{re.escape(TERMINATOR_CHARS)}]+$")


def _strip_quotes(text: str) -> str:
    """Remove at most one leading and one trailing quote-like character."""

    if text[:1] and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text[-1:] and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text.strip()


def _strip_terminator(text: str) -> str:
    """Remove one trailing run of sentence-terminating punctuation."""

    return TRAILING_TERMINATOR_RE.sub("", text).strip()


def normalize(raw: str | None) -> str:
    """Normalize one raw candidate into its display form.

    Whitespace is trimmed and collapsed, one layer of bounding quotes is
    removed, and one trailing terminator run is dropped. Single tokens get a
    second pass so inputs such as ``好！”。`` lose the punctuation exposed by
    the first pass. Case is preserved; see :func:`canonical_token`.

    Args:
        raw: Raw recognizer text; ``None`` is treated as empty.

    Returns:
        Normalized text, possibly empty.
    """

    text = WHITESPACE_RE.sub(" ", raw or "").strip()
    if not text:
        return ""

    text = _strip_terminator(_strip_quotes(text))
    if text and not WHITESPACE_RE.search(text):
        text = _strip_terminator(_strip_quotes(text))
    return text


def canonical_token(raw: str | None) -> str:
    """Return the lowercased normalized form used for classification."""

    return normalize(raw).lower()
