"""Shared data models for behavior and rejoin telemetry.

All telemetry payload lives in the key itself; values stored under the
keys are never read.
"""

from dataclasses import dataclass
from enum import Enum

KEY_NAMESPACE = "wowbehave"

#: Categories that feed the teammate score. Any other category is still
#: aggregated and reported but does not affect the score.
TRACKED_CATEGORIES: tuple[str, ...] = ("damage", "defense", "healing", "communication")

#: Category name -> summed value. Absent categories read as 0.
CategoryTotals = dict[str, int]


class KeyStream(str, Enum):
    """Telemetry stream, the second segment of every key."""

    BEHAVIOR = "behavior"
    REJOIN = "rejoin"


@dataclass(frozen=True)
class BehaviorRecord:
    """One decoded behavior-dialect key: ``<ns>:<name>:<realm>:<category>:<value>``."""

    category: str
    value: int


@dataclass(frozen=True)
class RejoinRecord:
    """One decoded rejoin-dialect key. ``answer`` may itself contain colons."""

    answer: str


@dataclass(frozen=True)
class TeammateScore:
    """Final score with the inputs it was computed from."""

    score: float
    totals: CategoryTotals
    yes_rate: float | None


def build_key_prefix(stream: KeyStream, name: str, realm: str) -> str:
    """Return the raw key prefix for a player's stream, e.g. ``wowbehave:behavior:Foo:Bar:``."""
    return f"{KEY_NAMESPACE}:{stream.value}:{name}:{realm}:"
