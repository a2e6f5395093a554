"""
Unit tests for the token range classifier (classify, validate_token_ranges).
"""

from __future__ import annotations

import pytest

from token_range_v1 import classify, validate_token_ranges
from token_uri_errors import InvalidAmount, InvalidRangeTable
from v1_contract_config import CANONICAL_RANGE_LOWER_BOUNDS
from v1_datum_types import TokenRange, build_token_ranges


@pytest.fixture
def ranges():
    return build_token_ranges(CANONICAL_RANGE_LOWER_BOUNDS)


def test_canonical_table_has_60_gap_free_ranges(ranges) -> None:
    assert len(ranges) == 60
    validate_token_ranges(ranges)
    for current, following in zip(ranges, ranges[1:]):
        assert current.upper_bound + 1 == following.lower_bound
    assert ranges[-1].upper_bound == 0
    assert ranges[-1].index == 60


@pytest.mark.parametrize(
    "amount,expected",
    [
        (1, 1),
        (100, 1),
        (101, 2),
        (200, 2),
        (201, 3),
        (300, 3),
        (301, 3),
        (400, 3),
        (401, 4),
        (1000, 9),
        (1001, 10),
        (10000, 18),
        (10001, 19),
        (30000, 28),
        (30001, 29),
        (100000, 35),
        (100001, 36),
        (1000000, 44),
        (10000000, 53),
        (10000001, 54),
        (40000000, 55),
        (50000000, 56),
        (100000000, 57),
        (500000000, 58),
        (700000000, 59),
        (700000001, 60),
        (10**12, 60),
    ],
)
def test_classify_boundaries(ranges, amount: int, expected: int) -> None:
    assert classify(amount, ranges) == expected


def test_every_bucket_edge_maps_to_its_own_index(ranges) -> None:
    for token_range in ranges:
        assert classify(token_range.lower_bound, ranges) == token_range.index
        if token_range.upper_bound:
            assert classify(token_range.upper_bound, ranges) == token_range.index


def test_classify_is_total_and_monotonic_over_samples(ranges) -> None:
    samples = sorted(
        {1, 10**12}
        | {r.lower_bound for r in ranges}
        | {r.lower_bound - 1 for r in ranges if r.lower_bound > 1}
        | {7 ** k for k in range(15)}
        | {10**k + 1 for k in range(13)}
    )
    previous = 0
    for amount in samples:
        index = classify(amount, ranges)
        assert 1 <= index <= 60
        assert index >= previous
        previous = index


@pytest.mark.parametrize("amount", [0, -1, -10**9])
def test_non_positive_amount_raises_invalid_amount(ranges, amount: int) -> None:
    with pytest.raises(InvalidAmount) as exc_info:
        classify(amount, ranges)
    assert exc_info.value.amount == amount
    assert str(amount) in str(exc_info.value)
    assert "INSUFFICIENT_BALANCE" in str(exc_info.value)


@pytest.mark.parametrize("amount", [1.5, "100", True, None])
def test_non_integer_amount_raises_invalid_amount(ranges, amount) -> None:
    with pytest.raises(InvalidAmount):
        classify(amount, ranges)


def test_gap_in_table_is_rejected() -> None:
    # 301-400 missing, as in one of the reference variants
    gapped = [
        TokenRange(lower_bound=1, upper_bound=100, index=1),
        TokenRange(lower_bound=101, upper_bound=200, index=2),
        TokenRange(lower_bound=201, upper_bound=300, index=3),
        TokenRange(lower_bound=401, upper_bound=0, index=4),
    ]
    with pytest.raises(InvalidRangeTable) as exc_info:
        validate_token_ranges(gapped)
    assert "gap" in str(exc_info.value)
    assert "300" in str(exc_info.value)

    with pytest.raises(InvalidRangeTable) as exc_info:
        classify(350, gapped)
    assert "350" in str(exc_info.value)
    assert classify(300, gapped) == 3
    assert classify(401, gapped) == 4


def test_overlap_in_table_is_rejected() -> None:
    overlapping = [
        TokenRange(lower_bound=1, upper_bound=150, index=1),
        TokenRange(lower_bound=101, upper_bound=0, index=2),
    ]
    with pytest.raises(InvalidRangeTable, match="overlap"):
        validate_token_ranges(overlapping)


@pytest.mark.parametrize(
    "table",
    [
        [],
        [TokenRange(lower_bound=2, upper_bound=0, index=1)],
        [TokenRange(lower_bound=1, upper_bound=100, index=1)],
        [TokenRange(lower_bound=1, upper_bound=0, index=1), TokenRange(lower_bound=1, upper_bound=0, index=2)],
        [TokenRange(lower_bound=1, upper_bound=100, index=2), TokenRange(lower_bound=101, upper_bound=0, index=1)],
    ],
)
def test_malformed_tables_are_rejected(table) -> None:
    with pytest.raises(InvalidRangeTable):
        validate_token_ranges(table)


def test_custom_table_variant() -> None:
    ranges = build_token_ranges([1, 11, 1001])
    validate_token_ranges(ranges)
    assert classify(10, ranges) == 1
    assert classify(11, ranges) == 2
    assert classify(999999, ranges) == 3


def test_single_unbounded_range() -> None:
    ranges = build_token_ranges([1])
    validate_token_ranges(ranges)
    assert classify(1, ranges) == 1
    assert classify(10**15, ranges) == 1


def test_classify_accepts_tuple_table(ranges) -> None:
    table = tuple(ranges)
    assert classify(401, table) == 4
    assert classify(700000001, table) == 60
