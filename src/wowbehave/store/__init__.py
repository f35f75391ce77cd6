"""Key-value store layer -- Upstash Redis REST access via httpx."""

from wowbehave.store.client import KeyStore, escape_glob
from wowbehave.store.upstash_client import UpstashKeyStore

__all__ = ["KeyStore", "UpstashKeyStore", "escape_glob"]
