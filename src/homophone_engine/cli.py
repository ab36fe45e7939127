"""CLI entrypoint for resolving recognizer candidates into homophones."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Sequence

from homophone_engine.config import EngineSettings
from homophone_engine.io.json_io import dumps, read_json
from homophone_engine.models import PipelineResult
from homophone_engine.pipeline import HomophoneEngine
from homophone_engine.providers import extract_candidates


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the resolve command.
    """

    parser = argparse.ArgumentParser(
        description="Resolve speech-recognition candidates into homophone alternates."
    )
    parser.add_argument("candidates", nargs="*", help="Recognizer candidates in rank order.")
    parser.add_argument("--language", default="zh-CN", help="Target language tag (default: zh-CN).")
    parser.add_argument(
        "--data-root",
        default=None,
        help=(
            "Directory or http(s) base URL holding hanzi_to_pinyin.json and pinyin-index/ "
            "(default: HOMOPHONE_DATA_ROOT, then ./data or ./public)."
        ),
    )
    parser.add_argument(
        "--provider-json",
        type=Path,
        default=None,
        help="Saved provider response to take candidates from.",
    )
    parser.add_argument(
        "--provider",
        default="azure",
        choices=("azure", "openai"),
        help="Response format of --provider-json (default: azure).",
    )
    parser.add_argument(
        "--service-url",
        default=None,
        help="Homophone-word service endpoint (default: HOMOPHONE_SERVICE_URL or Datamuse).",
    )
    parser.add_argument(
        "--no-homophone-service",
        action="store_true",
        help="Do not query the homophone-word service for English numbers.",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="HTTP timeout in seconds (default: 5)."
    )
    parser.add_argument(
        "--max-candidates", type=int, default=5, help="Cap on returned candidates."
    )
    parser.add_argument(
        "--summary", action="store_true", help="Print a table instead of the JSON document."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_summary(result: PipelineResult) -> None:
    """Print candidates and augmentation as terminal tables."""

    ranked = [[str(rank), candidate] for rank, candidate in enumerate(result.candidates, start=1)]
    print(_format_table(["rank", "candidate"], ranked))
    augmentation = result.augmentation
    if augmentation is None:
        print("\nNo homophone augmentation.")
        return

    rows = [
        ["mode", augmentation.mode],
        ["input", augmentation.input],
        ["bases", ", ".join(augmentation.bases)],
        ["tone", augmentation.tone_label or ""],
        ["homophones", " ".join(augmentation.homophones)],
    ]
    print()
    print(_format_table(["field", "value"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through printed result.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    candidates = list(args.candidates)
    if args.provider_json is not None:
        if not args.provider_json.exists():
            raise SystemExit(f"Provider response not found: {args.provider_json}")
        try:
            body = read_json(args.provider_json)
        except ValueError as exc:
            raise SystemExit(f"Invalid provider response {args.provider_json}: {exc}") from exc
        candidates.extend(extract_candidates(args.provider, body))
    if not candidates:
        parser.error("no candidates given")

    overrides = {
        "max_candidates": args.max_candidates,
        "enable_homophone_service": not args.no_homophone_service,
    }
    if args.data_root:
        overrides["data_root"] = args.data_root
    if args.service_url:
        overrides["homophone_service_url"] = args.service_url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout

    try:
        settings = dataclasses.replace(EngineSettings.from_env(), **overrides)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    result = HomophoneEngine(settings).process(candidates, args.language)
    if args.summary:
        _print_summary(result)
    else:
        print(dumps(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
