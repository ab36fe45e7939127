"""Normalization of speech-recognition provider responses into candidates."""

from __future__ import annotations

from typing import Any

AZURE_TEXT_FIELDS = (
    "lexical",
    "display",
    "itn",
    "maskedITN",
    "transcript",
    "NormalizedText",
    "Display",
)
MAX_PROVIDER_CANDIDATES = 5


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _azure_nbest(body: dict[str, Any]) -> list[Any]:
    nbest = body.get("NBest")
    if isinstance(nbest, list):
        return nbest
    results = body.get("results")
    if isinstance(results, list) and results and isinstance(results[0], dict):
        nested = results[0].get("NBest")
        if isinstance(nested, list):
            return nested
    return []


def extract_azure_candidates(body: dict[str, Any] | None) -> list[str]:
    """Collect ranked candidates from an Azure detailed-format response.

    Each N-best item contributes its first non-empty text field; a top-level
    ``DisplayText`` is appended. When nothing is found, ``DisplayText`` or
    ``Display`` becomes the only candidate.

    Args:
        body: Decoded JSON response.

    Returns:
        Up to five non-empty candidates in provider rank order.
    """

    if not isinstance(body, dict):
        return []

    out: list[str] = []
    for item in _azure_nbest(body):
        if not isinstance(item, dict):
            continue
        for name in AZURE_TEXT_FIELDS:
            value = _text(item.get(name))
            if value:
                out.append(value)
                break

    display_text = _text(body.get("DisplayText"))
    if display_text:
        out.append(display_text)

    candidates = out[:MAX_PROVIDER_CANDIDATES]
    if not candidates:
        fallback = display_text or _text(body.get("Display"))
        if fallback:
            candidates.append(fallback)
    return candidates


def extract_openai_candidates(body: dict[str, Any] | None) -> list[str]:
    """Return the single transcription text of an OpenAI response, if any."""

    if not isinstance(body, dict):
        return []
    text = _text(body.get("text"))
    return [text] if text else []


def extract_candidates(provider: str, body: dict[str, Any] | None) -> list[str]:
    """Dispatch to the extractor for ``provider`` (``azure`` by default)."""

    if (provider or "").strip().lower() == "openai":
        return extract_openai_candidates(body)
    return extract_azure_candidates(body)
