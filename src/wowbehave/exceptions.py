"""Custom exceptions for the wowbehave service.

Malformed telemetry keys and empty lookups are not errors and never
raise; the only fault surfaced to callers is an unreachable store.
"""


class WowBehaveError(Exception):
    """Base exception for all wowbehave errors."""


class StoreUnavailableError(WowBehaveError):
    """Raised when the key-value store cannot be reached or rejects a command."""
