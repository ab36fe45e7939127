"""Unit tests for engine settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from homophone_engine.config import EngineSettings, resolve_default_data_root
from homophone_engine.services.homophone_words import DATAMUSE_WORDS_URL


def test_from_env_reads_homophone_variables() -> None:
    """Settings pick up the HOMOPHONE_* environment variables."""

    settings = EngineSettings.from_env(
        {
            "HOMOPHONE_DATA_ROOT": "https://cdn.example.com/static",
            "HOMOPHONE_SERVICE_URL": "http://localhost:9000/words",
            "HOMOPHONE_REQUEST_TIMEOUT": "1.5",
        }
    )

    assert settings.data_root == "https://cdn.example.com/static"
    assert settings.homophone_service_url == "http://localhost:9000/words"
    assert settings.request_timeout == 1.5
    assert settings.max_candidates == 5


def test_from_env_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty environment falls back to ./public and Datamuse."""

    monkeypatch.chdir(tmp_path)

    settings = EngineSettings.from_env({})

    assert settings.data_root == "public"
    assert settings.homophone_service_url == DATAMUSE_WORDS_URL


def test_default_data_root_prefers_data_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A ./data directory wins over the ./public default."""

    monkeypatch.chdir(tmp_path)
    (tmp_path / "data").mkdir()

    assert resolve_default_data_root() == "data"


def test_invalid_settings_raise_value_error() -> None:
    """Unparseable or out-of-range settings raise ValueError naming the field."""

    with pytest.raises(ValueError, match="HOMOPHONE_REQUEST_TIMEOUT"):
        EngineSettings.from_env({"HOMOPHONE_DATA_ROOT": "data", "HOMOPHONE_REQUEST_TIMEOUT": "soon"})
    with pytest.raises(ValueError, match="max_candidates"):
        EngineSettings(data_root="data", max_candidates=0)
    with pytest.raises(ValueError, match="request_timeout"):
        EngineSettings(data_root="data", request_timeout=0)
    with pytest.raises(ValueError, match="data_root"):
        EngineSettings(data_root="")
