"""Top-level orchestration from raw provider candidates to augmentation."""

from __future__ import annotations

import logging
from typing import Sequence

import requests

from homophone_engine.config import DEFAULT_MAX_CANDIDATES, EngineSettings
from homophone_engine.data.readings import LogogramReadingTable
from homophone_engine.data.shards import ShardCache
from homophone_engine.data.source import StaticDataSource
from homophone_engine.languages import has_family_script, has_latin, is_logographic_family
from homophone_engine.models import PipelineResult, ResolutionResult
from homophone_engine.normalization import normalize
from homophone_engine.resolver import HomophoneResolver
from homophone_engine.services.homophone_words import DatamuseHomophoneService, HomophoneWordService

logger = logging.getLogger(__name__)


def filter_candidates(candidates: Sequence[str], language: str) -> list[str]:
    """Drop Latin-only candidates when the target script is logographic.

    If every candidate is dropped, the first unfiltered candidate is kept so a
    script heuristic alone never empties the list.

    Args:
        candidates: Normalized, non-empty candidates in provider rank order.
        language: Target language tag.

    Returns:
        Surviving candidates in their original order.
    """

    if not is_logographic_family(language):
        return list(candidates)

    kept = [
        candidate
        for candidate in candidates
        if not (has_latin(candidate) and not has_family_script(candidate, language))
    ]
    if not kept and candidates:
        logger.debug("Script filter removed every candidate; keeping %r", candidates[0])
        return [candidates[0]]
    return kept


def process_candidates(
    raw_candidates: Sequence[str | None],
    language: str,
    resolver: HomophoneResolver,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> PipelineResult:
    """Normalize, filter, and resolve the top candidate.

    Args:
        raw_candidates: Provider candidates in rank order.
        language: Target language tag such as ``zh-CN``.
        resolver: Resolver sharing the engine's reference data.
        max_candidates: Cap on returned candidates.

    Returns:
        ``PipelineResult`` with at most ``max_candidates`` candidates and the
        resolution of the first one, if any.
    """

    normalized = [text for text in map(normalize, raw_candidates) if text]
    candidates = filter_candidates(normalized, language)[:max_candidates]
    if not candidates:
        return PipelineResult(candidates=(), augmentation=None)

    augmentation = resolver.resolve(candidates[0], language)
    if augmentation is not None:
        logger.debug(
            "Resolved %r as %s with %d homophones",
            augmentation.input,
            augmentation.mode,
            len(augmentation.homophones),
        )
    return PipelineResult(candidates=tuple(candidates), augmentation=augmentation)


class HomophoneEngine:
    """Owner of the shared reference data and the single engine entry point.

    Build one instance at service start-up; its reading table and shard cache
    are loaded lazily on first demand and reused by every request.
    """

    def __init__(
        self,
        settings: EngineSettings,
        *,
        word_service: HomophoneWordService | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings
        self.source = StaticDataSource(
            root=settings.data_root,
            timeout=settings.request_timeout,
            session=session,
        )
        self.readings = LogogramReadingTable(self.source)
        self.shards = ShardCache(self.source)

        if word_service is None and settings.enable_homophone_service:
            word_service = DatamuseHomophoneService(
                url=settings.homophone_service_url,
                timeout=settings.request_timeout,
                max_results=settings.max_homophone_words,
                session=session,
            )
        self.resolver = HomophoneResolver(
            readings=self.readings,
            shards=self.shards,
            word_service=word_service,
        )

    def resolve(self, candidate: str, language: str) -> ResolutionResult | None:
        """Resolve a single candidate without pipeline filtering."""

        return self.resolver.resolve(candidate, language)

    def process(self, raw_candidates: Sequence[str | None], language: str) -> PipelineResult:
        """Run the candidate pipeline for one request."""

        return process_candidates(
            raw_candidates,
            language,
            resolver=self.resolver,
            max_candidates=self.settings.max_candidates,
        )
