"""
Summary: Tests for the dotted text codec.
Why: Pin parse splitting, description format and the aggregate asymmetry.
"""

from __future__ import annotations

import pytest

from hierns.features.segment import (
    NONE,
    AggregateSegment,
    AtomicSegment,
    describe,
    parse,
)


def test_parse_empty_string_is_none() -> None:
    assert parse("") is NONE
    assert NONE.description == ""
    assert describe(NONE) == ""


@pytest.mark.parametrize("text", ["a", "foo", "with space", "(a)", "ünïcode", "a/b"])
def test_atomic_text_round_trips(text: str) -> None:
    segment = parse(text)
    assert segment == AtomicSegment(text)
    assert describe(segment) == text


@pytest.mark.parametrize(
    ("text", "parts"),
    [
        ("a.b", ["a", "b"]),
        ("a.b.c", ["a", "b", "c"]),
        (".", ["", ""]),
        ("a..b", ["a", "", "b"]),
        (".a", ["", "a"]),
        ("a.", ["a", ""]),
    ],
)
def test_dotted_text_parses_to_flat_aggregate(text: str, parts: list[str]) -> None:
    segment = parse(text)
    assert segment == AggregateSegment(AtomicSegment(part) for part in parts)
    assert all(isinstance(child, AtomicSegment) for child in segment.to_array())


def test_describe_wraps_aggregates_in_parentheses() -> None:
    segment = AggregateSegment(
        [
            AtomicSegment("a"),
            AggregateSegment([AtomicSegment("b"), AtomicSegment("c")]),
            NONE,
        ]
    )
    assert describe(segment) == "(a.(b.c).)"
    assert describe(AggregateSegment([])) == "()"


def test_dotted_text_does_not_round_trip() -> None:
    """Re-describing parsed dotted text adds parentheses."""
    assert parse("a.b").description == "(a.b)"
    assert parse("a.b").description != "a.b"


def test_described_aggregate_does_not_parse_back() -> None:
    """Parentheses are never stripped by the parser."""
    single = AggregateSegment([AtomicSegment("a")])
    assert parse(describe(single)) == AtomicSegment("(a)")
    assert parse(describe(single)) != single

    pair = AggregateSegment([AtomicSegment("a"), AtomicSegment("b")])
    assert parse(describe(pair)) == AggregateSegment(
        [AtomicSegment("(a"), AtomicSegment("b)")]
    )
    assert parse(describe(pair)) != pair
