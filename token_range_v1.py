"""
Token Range Classifier V1 - locked amount to bucket index.

The amount domain is split into contiguous buckets that get wider as the
amount grows (whales get coarser artwork granularity). The table comes from
the ResolverDatum, never from this module.

Lookup:
1. Reject amounts that are not positive integers (INSUFFICIENT_BALANCE)
2. Binary search the ascending lower bounds
3. Confirm the candidate range really contains the amount, so a table with
   a gap fails loudly instead of falling through to a neighbour
"""
import logging
from bisect import bisect_right
from typing import List

from token_uri_errors import InvalidAmount, InvalidRangeTable
from v1_datum_types import TokenRange, contains, is_unbounded

logger = logging.getLogger(__name__)


def range_lower_bound(token_range: TokenRange) -> int:
    return token_range.lower_bound


# =============================================================================
# VALIDATION
# =============================================================================

def check_amount(amount) -> int:
    """Return amount if it is a positive int, else raise InvalidAmount."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(amount, "must be an integer")
    if amount <= 0:
        raise InvalidAmount(amount)
    return amount


def validate_token_ranges(ranges: List[TokenRange]) -> None:
    """
    Check that the table covers every positive integer exactly once.

    Rules:
    - First range starts at 1
    - Each upper bound is exactly one below the next lower bound
    - Only the last range is unbounded, and it must be
    - Indices run 1..N in table order
    """
    if not ranges:
        raise InvalidRangeTable("token range table is empty")
    if ranges[0].lower_bound != 1:
        raise InvalidRangeTable(
            f"first range must start at 1, got lower_bound {ranges[0].lower_bound}"
        )

    last = len(ranges) - 1
    for position, token_range in enumerate(ranges):
        if token_range.index != position + 1:
            raise InvalidRangeTable(
                f"range #{position + 1} has index {token_range.index}, expected {position + 1}"
            )
        if position == last:
            if not is_unbounded(token_range):
                raise InvalidRangeTable(
                    f"last range {token_range.lower_bound}-{token_range.upper_bound} "
                    "must have no upper bound"
                )
            continue

        if is_unbounded(token_range):
            raise InvalidRangeTable(
                f"range index {token_range.index} is unbounded but is not the last range"
            )
        if token_range.upper_bound < token_range.lower_bound:
            raise InvalidRangeTable(
                f"range index {token_range.index} is empty: "
                f"{token_range.lower_bound}-{token_range.upper_bound}"
            )
        next_lower = ranges[position + 1].lower_bound
        if token_range.upper_bound + 1 != next_lower:
            kind = "gap" if token_range.upper_bound + 1 < next_lower else "overlap"
            raise InvalidRangeTable(
                f"{kind} between range index {token_range.index} "
                f"(ends {token_range.upper_bound}) and index {token_range.index + 1} "
                f"(starts {next_lower})"
            )

    logger.debug("token range table ok: %d ranges", len(ranges))


# =============================================================================
# CLASSIFIER
# =============================================================================

def classify(amount: int, ranges: List[TokenRange]) -> int:
    """Return the bucket index for a locked amount."""
    check_amount(amount)
    if not ranges:
        raise InvalidRangeTable("token range table is empty")

    position = bisect_right(ranges, amount, key=range_lower_bound) - 1
    if position < 0 or not contains(ranges[position], amount):
        raise InvalidRangeTable(f"amount {amount} is not covered by any token range")
    return ranges[position].index
