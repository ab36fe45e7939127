"""Per-syllable shard cache backing homophone lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re

from homophone_engine.codecs.pinyin_key import base_of
from homophone_engine.data.source import DataUnavailableError, StaticDataSource, shard_document

logger = logging.getLogger(__name__)

SHARD_BASE_RE = re.compile(r"[a-z]+")

Shard = dict[str, tuple[str, ...]]


def parse_shard(document: dict) -> Shard:
    """Convert a decoded shard document into an immutable-valued mapping.

    Non-list values and non-string members are skipped.
    """

    shard: Shard = {}
    for key, members in document.items():
        if not isinstance(members, list):
            continue
        shard[str(key)] = tuple(member for member in members if isinstance(member, str))
    return shard


@dataclass
class ShardCache:
    """Lazily populated mapping from base syllable to its shard.

    Each base is fetched at most once per cache instance; failures are stored
    as empty shards, meaning "no known homophones". Concurrent misses on the
    same base may fetch twice and store equal values, so no locking is used.
    """

    source: StaticDataSource
    _shards: dict[str, Shard] = field(default_factory=dict, init=False, repr=False)

    def load(self, base: str) -> Shard:
        """Return the shard for ``base``, fetching it on first use.

        Args:
            base: Tone-free lowercase syllable such as ``hao``.

        Returns:
            Shard mapping; empty when the base is unknown or unreachable.
        """

        cached = self._shards.get(base)
        if cached is not None:
            return cached

        shard: Shard = {}
        if SHARD_BASE_RE.fullmatch(base or ""):
            try:
                shard = parse_shard(self.source.fetch_json(shard_document(base)))
            except DataUnavailableError as exc:
                logger.warning("No shard for base '%s': %s", base, exc)
        else:
            logger.debug("Rejected malformed shard base %r", base)

        self._shards[base] = shard
        return shard

    def lookup(self, key: str) -> tuple[str, ...]:
        """Return logograms for a key, falling back from ``hao3`` to ``hao``.

        The base-keyed entry is the union across all tones, so the fallback is
        exhaustive for the base.
        """

        base = base_of(key)
        if not base:
            return ()
        shard = self.load(base)
        if key in shard:
            return shard[key]
        return shard.get(base, ())

    def is_loaded(self, base: str) -> bool:
        """Return whether ``base`` has already been fetched."""

        return base in self._shards

    @property
    def loaded_bases(self) -> tuple[str, ...]:
        """Return fetched bases in load order."""

        return tuple(self._shards)
