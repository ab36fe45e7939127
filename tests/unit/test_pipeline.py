"""Unit tests for candidate filtering and pipeline orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest

from homophone_engine.config import EngineSettings
from homophone_engine.data.readings import LogogramReadingTable
from homophone_engine.data.shards import ShardCache
from homophone_engine.data.source import StaticDataSource
from homophone_engine.models import MODE_NUMBER_WORD, MODE_SINGLE_CHAR
from homophone_engine.pipeline import HomophoneEngine, filter_candidates, process_candidates
from homophone_engine.resolver import HomophoneResolver
from homophone_engine.services.homophone_words import StaticHomophoneService

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


@pytest.fixture()
def resolver() -> HomophoneResolver:
    source = StaticDataSource(str(FIXTURES))
    return HomophoneResolver(LogogramReadingTable(source), ShardCache(source))


def test_filter_drops_latin_only_candidates_for_logographic_targets() -> None:
    """CJK targets drop candidates with no script of their family."""

    assert filter_candidates(["你好", "hello"], "zh-CN") == ["你好"]
    assert filter_candidates(["你好abc", "hello"], "zh") == ["你好abc"]
    assert filter_candidates(["hello", "こんにちは"], "ja-JP") == ["こんにちは"]
    assert filter_candidates(["hi", "안녕", "123"], "ko") == ["안녕", "123"]


def test_filter_falls_back_to_first_unfiltered_candidate() -> None:
    """If filtering removes everything, the top candidate is kept."""

    assert filter_candidates(["hello"], "zh") == ["hello"]
    assert filter_candidates(["hao3", "hao"], "zh") == ["hao3"]
    assert filter_candidates([], "zh") == []


def test_filter_keeps_everything_for_other_languages() -> None:
    """Non-CJK targets are not filtered by script."""

    assert filter_candidates(["hello", "你好"], "en-US") == ["hello", "你好"]


def test_process_caps_candidates_and_resolves_top(resolver: HomophoneResolver) -> None:
    """Candidates are capped and only the first is resolved."""

    result = process_candidates(["好。", "号", "豪", "毫", "郝", "浩"], "zh", resolver)

    assert result.candidates == ("好", "号", "豪", "毫", "郝")
    assert result.augmentation is not None
    assert result.augmentation.mode == MODE_SINGLE_CHAR
    assert result.augmentation.input == "好"


def test_process_normalizes_and_drops_empty_candidates(resolver: HomophoneResolver) -> None:
    """Candidates empty after normalization are dropped."""

    result = process_candidates(["", "  ", "。", None, "你好！"], "zh", resolver, max_candidates=3)

    assert result.candidates == ("你好",)
    assert result.augmentation is None


def test_process_survives_oversized_digit_candidate(resolver: HomophoneResolver) -> None:
    """A 5000-digit English candidate passes through as a number without a word form."""

    digits = "9" * 5000
    result = process_candidates([digits], "en", resolver)

    assert result.candidates == (digits,)
    assert result.augmentation is not None
    assert result.augmentation.mode == MODE_NUMBER_WORD
    assert result.augmentation.word_form is None


def test_process_with_no_candidates(resolver: HomophoneResolver) -> None:
    """No candidates produce an empty, unaugmented result."""

    result = process_candidates([], "zh", resolver)

    assert result.candidates == ()
    assert result.augmentation is None


def test_engine_wires_settings_and_word_service() -> None:
    """The engine applies its settings and the given word service."""

    engine = HomophoneEngine(
        EngineSettings(data_root=str(FIXTURES), max_candidates=2),
        word_service=StaticHomophoneService({"two": ["to", "too"]}),
    )

    result = engine.process(["Two.", "to", "too"], "en-US")

    assert result.candidates == ("Two", "to")
    assert result.augmentation is not None
    assert result.augmentation.mode == MODE_NUMBER_WORD
    assert result.augmentation.homophones == ("to", "too", "2")


def test_engine_without_homophone_service() -> None:
    """Disabling the service leaves number resolution to the codec alone."""

    engine = HomophoneEngine(
        EngineSettings(data_root=str(FIXTURES), enable_homophone_service=False)
    )

    assert engine.resolver.word_service is None
    result = engine.resolve("2", "en")
    assert result is not None
    assert result.homophones == ("two",)
