"""Tests for behavior and rejoin key decoding.

Malformed behavior keys must be dropped without raising; rejoin answers
keep any embedded colons.
"""

import pytest

from wowbehave.models import BehaviorRecord, RejoinRecord
from wowbehave.scoring.decoder import (
    decode_behavior_key,
    decode_behavior_keys,
    decode_rejoin_key,
    decode_rejoin_keys,
    parse_int,
)


class TestParseInt:
    """Tests for strict base-10 integer parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("42", 42), ("007", 7), ("-3", -3), ("+5", 5)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", " 1", "1 ", "1_000", "12abc", "-", "٣"])
    def test_invalid(self, text: str) -> None:
        assert parse_int(text) is None


class TestDecodeBehaviorKey:
    """Tests for single behavior key decoding."""

    def test_valid_key(self) -> None:
        record = decode_behavior_key("wowbehave:behavior:Foo:Bar:damage:2")
        assert record == BehaviorRecord(category="damage", value=2)

    def test_non_integer_value_dropped(self) -> None:
        assert decode_behavior_key("wowbehave:behavior:Foo:Bar:damage:lots") is None

    def test_empty_category_dropped(self) -> None:
        assert decode_behavior_key("wowbehave:behavior:Foo:Bar::2") is None

    def test_single_segment_dropped(self) -> None:
        """No second-to-last segment means no category."""
        assert decode_behavior_key("5") is None

    def test_category_is_second_to_last_segment(self) -> None:
        """Extra segments before the category do not matter."""
        record = decode_behavior_key("wowbehave:behavior:Foo:Bar:extra:healing:0")
        assert record == BehaviorRecord(category="healing", value=0)


class TestDecodeBehaviorKeys:
    """Tests for bulk behavior key decoding."""

    def test_drops_only_malformed(self) -> None:
        keys = [
            "wowbehave:behavior:Foo:Bar:damage:2",
            "wowbehave:behavior:Foo:Bar:damage:x",
            "wowbehave:behavior:Foo:Bar:healing:0",
            "wowbehave:behavior:Foo:Bar::1",
        ]
        assert decode_behavior_keys(keys) == [
            BehaviorRecord(category="damage", value=2),
            BehaviorRecord(category="healing", value=0),
        ]

    def test_empty_input(self) -> None:
        assert decode_behavior_keys([]) == []

    def test_accepts_any_iterable(self) -> None:
        keys = (k for k in ["ns:a:b:damage:1"])
        assert decode_behavior_keys(keys) == [BehaviorRecord(category="damage", value=1)]


class TestDecodeRejoinKey:
    """Tests for rejoin key decoding."""

    def test_simple_answer(self) -> None:
        assert decode_rejoin_key("wowbehave:rejoin:Foo:Bar:yes") == RejoinRecord(answer="Bar:yes")

    def test_answer_after_third_segment(self) -> None:
        """The answer is everything after the third segment, colons included."""
        assert decode_rejoin_key("ns:Foo:Bar:yes") == RejoinRecord(answer="yes")
        assert decode_rejoin_key("ns:Foo:Bar:yes:2024:01") == RejoinRecord(answer="yes:2024:01")

    def test_short_key_yields_empty_answer(self) -> None:
        assert decode_rejoin_key("ns:Foo:Bar") == RejoinRecord(answer="")
        assert decode_rejoin_key("ns") == RejoinRecord(answer="")

    def test_empty_answers_retained(self) -> None:
        records = decode_rejoin_keys(["ns:Foo:Bar", "ns:Foo:Bar:no"])
        assert records == [RejoinRecord(answer=""), RejoinRecord(answer="no")]
