"""Upstash Redis REST client implementation via httpx async.

Commands are POSTed as a JSON array to the REST URL; Upstash answers
with ``{"result": ...}`` or ``{"error": "..."}``.
"""

from typing import Any

import httpx

from wowbehave.config import StoreSettings
from wowbehave.exceptions import StoreUnavailableError
from wowbehave.logging import get_logger
from wowbehave.store.client import KeyStore

logger = get_logger(__name__)

_SCAN_DONE = "0"


class UpstashKeyStore(KeyStore):
    """Concrete key store backed by the Upstash Redis REST API."""

    def __init__(
        self,
        settings: StoreSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.url,
            headers={"Authorization": f"Bearer {settings.token.get_secret_value()}"},
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
        logger.info("store_connection_closed")

    async def execute(self, *command: str | int) -> Any:
        """Run one Redis command and return its ``result`` field.

        Raises:
            StoreUnavailableError: on transport failure, timeout, a non-2xx
                response, a malformed reply or an error payload.
        """
        try:
            response = await self._client.post("/", json=[str(part) for part in command])
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("store_command_failed", command=command[0], error=str(e))
            raise StoreUnavailableError(f"{command[0]} failed: {e}") from e

        if not isinstance(payload, dict):
            logger.error("store_command_failed", command=command[0], error="malformed reply")
            raise StoreUnavailableError(f"{command[0]} failed: malformed reply {payload!r}")

        if "error" in payload:
            logger.error("store_command_rejected", command=command[0], error=payload["error"])
            raise StoreUnavailableError(f"{command[0]} rejected: {payload['error']}")

        return payload.get("result")

    async def scan_keys(self, pattern: str) -> list[str]:
        """Collect keys matching ``pattern`` with cursor-based SCAN.

        SCAN may return a key more than once; duplicates are dropped,
        keeping first-seen order.
        """
        cursor = _SCAN_DONE
        seen: dict[str, None] = {}
        rounds = 0

        while True:
            result = await self.execute(
                "SCAN", cursor, "MATCH", pattern, "COUNT", self._settings.scan_count
            )
            if not (isinstance(result, list) and len(result) == 2 and isinstance(result[1], list)):
                logger.error("store_scan_malformed", pattern=pattern, result=repr(result))
                raise StoreUnavailableError(f"SCAN returned malformed result {result!r}")
            cursor, batch = str(result[0]), result[1]
            seen.update(dict.fromkeys(batch))
            rounds += 1
            if cursor == _SCAN_DONE:
                break

        logger.debug("store_scan_complete", pattern=pattern, key_count=len(seen), rounds=rounds)
        return list(seen)
