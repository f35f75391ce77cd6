"""Raw key decoding for behavior and rejoin telemetry.

Keys arrive straight from a prefix scan. Malformed behavior keys are
noisy telemetry, not faults: they are dropped without raising.
"""

import re
from collections.abc import Iterable

from wowbehave.models import BehaviorRecord, RejoinRecord

KEY_DELIMITER = ":"

#: Number of leading segments (namespace, name, realm) in a rejoin key
#: that precede the answer.
_REJOIN_PREFIX_SEGMENTS = 3

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int | None:
    """Parse a strict base-10 integer, or return None.

    Unlike ``int()``, rejects surrounding whitespace, underscores and
    non-ASCII digits.
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


def decode_behavior_key(key: str) -> BehaviorRecord | None:
    """Decode ``<ns>:<name>:<realm>:<category>:<value>`` into a BehaviorRecord.

    The category is the second-to-last segment and the value the last.

    Returns:
        BehaviorRecord, or None when the value is not an integer or the
        category segment is empty or absent.
    """
    segments = key.split(KEY_DELIMITER)
    if len(segments) < 2:
        return None

    category = segments[-2]
    value = parse_int(segments[-1])
    if not category or value is None:
        return None

    return BehaviorRecord(category=category, value=value)


def decode_behavior_keys(keys: Iterable[str]) -> list[BehaviorRecord]:
    """Decode every valid behavior key, silently dropping malformed ones."""
    records = []
    for key in keys:
        record = decode_behavior_key(key)
        if record is not None:
            records.append(record)
    return records


def decode_rejoin_key(key: str) -> RejoinRecord:
    """Decode ``<ns>:<name>:<realm>:<answer>[:...]`` into a RejoinRecord.

    Everything after the third segment is the answer, rejoined with ``:``.
    Keys with fewer than four segments yield an empty answer.
    """
    segments = key.split(KEY_DELIMITER)
    return RejoinRecord(answer=KEY_DELIMITER.join(segments[_REJOIN_PREFIX_SEGMENTS:]))


def decode_rejoin_keys(keys: Iterable[str]) -> list[RejoinRecord]:
    """Decode every rejoin key. Empty answers are kept."""
    return [decode_rejoin_key(key) for key in keys]
