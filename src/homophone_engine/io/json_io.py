"""JSON serialization helpers for engine results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from homophone_engine.models import PipelineResult, ResolutionResult


def resolution_to_dict(result: ResolutionResult | None) -> dict[str, Any] | None:
    """Render a resolution with the wire field names used by clients.

    Args:
        result: Resolution or ``None``.

    Returns:
        JSON-ready dictionary, or ``None``.
    """

    if result is None:
        return None
    payload: dict[str, Any] = {
        "mode": result.mode,
        "input": result.input,
        "bases": list(result.bases),
        "homophones": list(result.homophones),
        "toneLabel": result.tone_label,
    }
    if result.display:
        payload["display"] = list(result.display)
    if result.digit_form is not None or result.word_form is not None:
        payload["digitForm"] = result.digit_form
        payload["wordForm"] = result.word_form
    return payload


def pipeline_to_dict(result: PipelineResult) -> dict[str, Any]:
    """Render a pipeline result as ``{candidates, augmentation}``."""

    return {
        "candidates": list(result.candidates),
        "augmentation": resolution_to_dict(result.augmentation),
    }


def dumps(result: PipelineResult, indent: int | None = 2) -> str:
    """Serialize a pipeline result, keeping non-ASCII text readable."""

    return json.dumps(pipeline_to_dict(result), ensure_ascii=False, indent=indent)


def read_json(path: Path) -> Any:
    """Read one UTF-8 JSON document from disk."""

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
