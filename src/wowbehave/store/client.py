"""Abstract key-value store interface.

The service depends only on a prefix scan over key names, so that is
all this contract exposes. Upstash-specific details stay in the
concrete implementation.
"""

from abc import ABC, abstractmethod

_GLOB_SPECIAL = "\\*?[]"


def escape_glob(text: str) -> str:
    """Escape Redis glob metacharacters so ``text`` matches literally."""
    return "".join(f"\\{char}" if char in _GLOB_SPECIAL else char for char in text)


class KeyStore(ABC):
    """Abstract base class for key-value store clients."""

    @abstractmethod
    async def scan_keys(self, pattern: str) -> list[str]:
        """Return every key matching a Redis glob ``pattern``.

        No ordering is guaranteed. Raises StoreUnavailableError when the
        store cannot be reached.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connection resources."""
        ...

    async def scan_prefix(self, prefix: str) -> list[str]:
        """Return every key starting with the literal ``prefix``."""
        return await self.scan_keys(f"{escape_glob(prefix)}*")
