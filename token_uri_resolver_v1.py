"""
Token URI Resolver V1 - (locked amount, duration) to veBanny metadata URI.

Off-chain copy of JBVeTokenUriResolver.tokenURI. All configuration is read
from the ResolverDatum passed in; nothing about the table is hardcoded here.

Resolution:
1. Bucket index from the token range table (token_range_v1.classify)
2. Stake multiplier = 1-based position of the duration in the duration table
3. URI index = bucket * 5 - 5 + multiplier, one slot per (bucket, multiplier)

Both lookups fail fast. There is no nearest-duration fallback: the contract
only accepts the five lock periods, so neither does this.
"""
import logging
from typing import List

from token_range_v1 import check_amount, classify, validate_token_ranges
from token_uri_errors import InvalidDuration, InvalidDurationTable, ResolverConfigError
from v1_contract_config import STAKE_MULTIPLIER_COUNT, TOKEN_URI_SCHEME
from v1_datum_types import ResolverDatum, ipfs_root_text

logger = logging.getLogger(__name__)


# =============================================================================
# DURATION LOOKUP
# =============================================================================

def validate_durations(durations: List[int]) -> None:
    """Check the duration table holds five strictly ascending positive ints."""
    if len(durations) != STAKE_MULTIPLIER_COUNT:
        raise InvalidDurationTable(
            f"expected {STAKE_MULTIPLIER_COUNT} durations, got {len(durations)}: {list(durations)}"
        )
    previous = 0
    for duration in durations:
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise InvalidDurationTable(f"duration {duration!r} is not an integer")
        if duration <= previous:
            raise InvalidDurationTable(
                f"durations must be positive and strictly ascending: {list(durations)}"
            )
        previous = duration


def check_duration(duration) -> int:
    """Return duration if it is a positive int, else raise InvalidDuration."""
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidDuration(duration, "must be an integer")
    if duration <= 0:
        raise InvalidDuration(duration, "must be > 0")
    return duration


def multiplier_for(duration: int, durations: List[int]) -> int:
    """Return the 1-based position of duration in the duration table."""
    check_duration(duration)
    for position, candidate in enumerate(durations):
        if candidate == duration:
            return position + 1

    raise InvalidDuration(
        duration, f"is not one of the staking durations {list(durations)}"
    )


# =============================================================================
# URI INDEX
# =============================================================================

def token_uri_index(bucket: int, multiplier: int) -> int:
    """Slot of a (bucket, multiplier) pair in the metadata folder."""
    return bucket * STAKE_MULTIPLIER_COUNT - STAKE_MULTIPLIER_COUNT + multiplier


def token_uri_slot_count(datum: ResolverDatum) -> int:
    """Number of URI slots the datum can address (300 for the canonical table)."""
    return len(datum.ranges) * STAKE_MULTIPLIER_COUNT


def format_token_uri(ipfs_root: str, index: int) -> str:
    return f"{TOKEN_URI_SCHEME}{ipfs_root}/{index}"


# =============================================================================
# RESOLVER
# =============================================================================

def validate_resolver_datum(datum: ResolverDatum) -> None:
    """Validate every part of the datum; raises a TokenUriError subclass."""
    if not datum.ipfs_root:
        raise ResolverConfigError("ipfs_root must not be empty")
    try:
        ipfs_root_text(datum)
    except UnicodeDecodeError as exc:
        raise ResolverConfigError(f"ipfs_root {datum.ipfs_root!r} is not ASCII") from exc
    validate_durations(datum.durations)
    validate_token_ranges(datum.ranges)
    logger.debug(
        "resolver datum ok: root=%s durations=%s slots=%d",
        ipfs_root_text(datum), list(datum.durations), token_uri_slot_count(datum),
    )


def resolve(amount: int, duration: int, datum: ResolverDatum) -> str:
    """
    Compute the token URI for a locked amount and staking duration.

    Raises InvalidAmount / InvalidDuration for bad inputs, InvalidRangeTable
    if the amount lands in a gap of a malformed table.

    The datum itself is not validated here; callers run
    validate_resolver_datum once per datum (load_resolver_datum and
    simulate both do).
    """
    check_amount(amount)
    check_duration(duration)

    bucket = classify(amount, datum.ranges)
    multiplier = multiplier_for(duration, datum.durations)
    return format_token_uri(ipfs_root_text(datum), token_uri_index(bucket, multiplier))
