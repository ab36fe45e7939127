"""Engine settings and their environment/default resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from homophone_engine.services.homophone_words import DATAMUSE_WORDS_URL

DEFAULT_MAX_CANDIDATES = 5
DEFAULT_MAX_HOMOPHONE_WORDS = 20
DEFAULT_REQUEST_TIMEOUT = 5.0

ENV_DATA_ROOT = "HOMOPHONE_DATA_ROOT"
ENV_SERVICE_URL = "HOMOPHONE_SERVICE_URL"
ENV_REQUEST_TIMEOUT = "HOMOPHONE_REQUEST_TIMEOUT"


def resolve_default_data_root() -> str:
    """Resolve the default data root from the working directory layout.

    Returns:
        ``data`` when it exists under the working directory, else ``public``,
        the directory static sites usually serve these documents from.
    """

    cwd_data = Path("data")
    if cwd_data.exists():
        return str(cwd_data)
    return "public"


@dataclass(frozen=True)
class EngineSettings:
    """Configuration for one :class:`~homophone_engine.pipeline.HomophoneEngine`.

    Attributes:
        data_root: Local directory or ``http(s)://`` base URL of static data.
        homophone_service_url: Endpoint of the homophone-word service.
        request_timeout: Per-request timeout in seconds for HTTP fetches.
        max_candidates: Cap on candidates returned by the pipeline.
        max_homophone_words: Cap on words requested from the service.
        enable_homophone_service: Whether English numbers query the service.
    """

    data_root: str
    homophone_service_url: str = DATAMUSE_WORDS_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_candidates: int = DEFAULT_MAX_CANDIDATES
    max_homophone_words: int = DEFAULT_MAX_HOMOPHONE_WORDS
    enable_homophone_service: bool = True

    def __post_init__(self) -> None:
        if not self.data_root:
            raise ValueError("data_root must not be empty")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.max_candidates < 1:
            raise ValueError(f"max_candidates must be at least 1, got {self.max_candidates}")
        if self.max_homophone_words < 1:
            raise ValueError(
                f"max_homophone_words must be at least 1, got {self.max_homophone_words}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineSettings":
        """Build settings from ``HOMOPHONE_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Settings with defaults for unset variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """

        env = os.environ if environ is None else environ
        timeout_raw = env.get(ENV_REQUEST_TIMEOUT)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
        except ValueError as exc:
            raise ValueError(f"Invalid {ENV_REQUEST_TIMEOUT}: {timeout_raw!r}") from exc

        return cls(
            data_root=env.get(ENV_DATA_ROOT) or resolve_default_data_root(),
            homophone_service_url=env.get(ENV_SERVICE_URL) or DATAMUSE_WORDS_URL,
            request_timeout=timeout,
        )
