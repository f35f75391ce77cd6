"""Teammate score calculation.

score = ((avg(damage, defense, healing, communication) + 1) / 2) * 100
        + yes_rate * 10

The normalization assumes each category total lies roughly in [-1, 1],
which puts the category part in [0, 100]. That range is never enforced:
totals outside it yield scores outside [0, 100] and are returned as-is.
Clamping would change results for existing players.
"""

from wowbehave.models import TRACKED_CATEGORIES, CategoryTotals

REJOIN_WEIGHT = 10.0


def normalize_category_average(category_average: float) -> float:
    """Map a category average from [-1, 1] onto [0, 100] (unclamped)."""
    return ((category_average + 1) / 2) * 100


def compute_score(totals: CategoryTotals, yes_rate: float | None) -> float:
    """Combine category totals and the rejoin rate into a single score.

    Args:
        totals: Per-category sums. Missing tracked categories count as 0;
            untracked categories are ignored.
        yes_rate: Rejoin yes-rate, or None when no rejoin data exists
            (contributes 0).

    Returns:
        Score clustering near 0-110 for conventionally bounded totals.
    """
    category_sum = sum(totals.get(category, 0) for category in TRACKED_CATEGORIES)
    category_average = category_sum / len(TRACKED_CATEGORIES)

    rejoin_contribution = 0.0 if yes_rate is None else yes_rate * REJOIN_WEIGHT

    return normalize_category_average(category_average) + rejoin_contribution
