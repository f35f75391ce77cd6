"""Reduction of decoded records into per-category totals and a rejoin rate."""

from collections import defaultdict
from collections.abc import Iterable, Sequence

from wowbehave.models import BehaviorRecord, CategoryTotals, RejoinRecord

YES_ANSWER = "yes"


def aggregate_behaviors(records: Iterable[BehaviorRecord]) -> CategoryTotals:
    """Sum record values per category.

    Only categories present in ``records`` appear in the result; callers
    reading a missing category must default it to 0.

    Args:
        records: Decoded behavior records, in any order.

    Returns:
        New dict mapping category name to summed value.
    """
    totals: defaultdict[str, int] = defaultdict(int)
    for record in records:
        totals[record.category] += record.value
    return dict(totals)


def rejoin_yes_rate(records: Sequence[RejoinRecord]) -> float | None:
    """Fraction of records whose answer is exactly ``"yes"`` (case-sensitive).

    Args:
        records: Decoded rejoin records.

    Returns:
        Rate in [0, 1], or None when ``records`` is empty. None is
        distinct from a computed rate of 0.0.
    """
    if not records:
        return None

    yes_count = sum(1 for record in records if record.answer == YES_ANSWER)
    return yes_count / len(records)
