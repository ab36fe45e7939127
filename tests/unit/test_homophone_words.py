"""Unit tests for homophone-word service clients."""

from __future__ import annotations

import requests

from homophone_engine.services.homophone_words import (
    DatamuseHomophoneService,
    StaticHomophoneService,
)


class _FakeResponse:
    def __init__(self, payload: object, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> object:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class _FakeSession:
    def __init__(self, outcome: object) -> None:
        self.outcome = outcome
        self.calls: list[tuple[str, dict | None, float | None]] = []

    def get(self, url: str, params: dict | None = None, timeout: float | None = None):
        self.calls.append((url, params, timeout))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def test_datamuse_returns_words_in_rank_order() -> None:
    """Datamuse words are returned in the order the service ranks them."""

    session = _FakeSession(
        _FakeResponse([{"word": "to", "score": 9}, {"word": "too", "score": 8}, {"score": 1}])
    )
    service = DatamuseHomophoneService(timeout=1.5, max_results=10, session=session)

    assert service.homophones("two") == ["to", "too"]
    assert session.calls == [
        ("https://api.datamuse.com/words", {"rel_hom": "two", "max": 10}, 1.5)
    ]


def test_datamuse_degrades_to_empty_on_failures() -> None:
    """Any request or payload failure yields an empty list."""

    outcomes = [
        requests.ConnectionError("offline"),
        requests.Timeout("slow"),
        _FakeResponse([], status_code=503),
        _FakeResponse(ValueError("not json")),
        _FakeResponse({"word": "to"}),
    ]
    for outcome in outcomes:
        service = DatamuseHomophoneService(session=_FakeSession(outcome))
        assert service.homophones("two") == []


def test_datamuse_skips_non_alphabetic_queries() -> None:
    """Digit or empty queries never reach the service."""

    session = _FakeSession(_FakeResponse([{"word": "x"}]))
    service = DatamuseHomophoneService(session=session)

    assert service.homophones("42") == []
    assert service.homophones("") == []
    assert session.calls == []


def test_static_service_is_case_insensitive() -> None:
    """The in-memory service matches words regardless of case."""

    service = StaticHomophoneService({"two": ["to", "too"]})

    assert service.homophones("Two") == ["to", "too"]
    assert service.homophones("four") == []
