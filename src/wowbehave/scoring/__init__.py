"""Teammate scoring core: key decoding, aggregation and score calculation.

Pure, synchronous functions with no shared state; safe to call
concurrently from any number of requests.
"""

from wowbehave.scoring.aggregator import aggregate_behaviors, rejoin_yes_rate
from wowbehave.scoring.calculator import compute_score, normalize_category_average
from wowbehave.scoring.decoder import (
    decode_behavior_key,
    decode_behavior_keys,
    decode_rejoin_key,
    decode_rejoin_keys,
)

__all__ = [
    "aggregate_behaviors",
    "compute_score",
    "decode_behavior_key",
    "decode_behavior_keys",
    "decode_rejoin_key",
    "decode_rejoin_keys",
    "normalize_category_average",
    "rejoin_yes_rate",
]
