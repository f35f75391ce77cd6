"""Teammate lookups composing the key store with the scoring core.

Each call recomputes from a fresh prefix scan; nothing is cached.
Not-found is reported as None, never as an exception. Only
StoreUnavailableError propagates to callers.
"""

from __future__ import annotations

import asyncio

from wowbehave.logging import get_logger
from wowbehave.models import (
    CategoryTotals,
    KeyStream,
    RejoinRecord,
    TeammateScore,
    build_key_prefix,
)
from wowbehave.scoring import (
    aggregate_behaviors,
    compute_score,
    decode_behavior_keys,
    decode_rejoin_keys,
    rejoin_yes_rate,
)
from wowbehave.store.client import KeyStore

logger = get_logger(__name__)


class TeammateService:
    """Per-player behavior, rejoin and score lookups.

    Args:
        store: Injected key store; only its prefix scan is used.
    """

    def __init__(self, store: KeyStore) -> None:
        self._store = store

    async def _fetch_keys(self, stream: KeyStream, name: str, realm: str) -> list[str]:
        keys = await self._store.scan_prefix(build_key_prefix(stream, name, realm))
        logger.debug("keys_fetched", stream=stream.value, name=name, realm=realm, key_count=len(keys))
        return keys

    async def get_behaviors(self, name: str, realm: str) -> CategoryTotals | None:
        """Return per-category totals, or None when no behavior keys exist."""
        keys = await self._fetch_keys(KeyStream.BEHAVIOR, name, realm)
        if not keys:
            logger.info("behaviors_not_found", name=name, realm=realm)
            return None

        logger.info("behaviors_lookup", name=name, realm=realm, record_count=len(keys))
        return aggregate_behaviors(decode_behavior_keys(keys))

    async def get_rejoin_entries(self, name: str, realm: str) -> list[RejoinRecord] | None:
        """Return decoded rejoin answers, or None when no rejoin keys exist."""
        keys = await self._fetch_keys(KeyStream.REJOIN, name, realm)
        if not keys:
            logger.info("rejoin_not_found", name=name, realm=realm)
            return None

        logger.info("rejoin_lookup", name=name, realm=realm, record_count=len(keys))
        return decode_rejoin_keys(keys)

    async def get_score(self, name: str, realm: str) -> TeammateScore | None:
        """Compute the teammate score, or None when either stream is empty.

        Both streams are fetched concurrently. The first StoreUnavailableError
        raised by either scan propagates.
        """
        behavior_keys, rejoin_keys = await asyncio.gather(
            self._fetch_keys(KeyStream.BEHAVIOR, name, realm),
            self._fetch_keys(KeyStream.REJOIN, name, realm),
        )
        if not behavior_keys or not rejoin_keys:
            logger.info(
                "score_inputs_missing",
                name=name,
                realm=realm,
                behavior_keys=len(behavior_keys),
                rejoin_keys=len(rejoin_keys),
            )
            return None

        totals = aggregate_behaviors(decode_behavior_keys(behavior_keys))
        yes_rate = rejoin_yes_rate(decode_rejoin_keys(rejoin_keys))
        score = compute_score(totals, yes_rate)

        logger.info(
            "teammate_score",
            name=name,
            realm=realm,
            score=score,
            yes_rate=yes_rate,
            categories=len(totals),
        )
        return TeammateScore(score=score, totals=totals, yes_rate=yes_rate)
