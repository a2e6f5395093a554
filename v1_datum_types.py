"""
V1 Resolver Datum Types - Shared Data Structures for the Token URI Resolver

The resolver configuration is a datum, exactly as the contract receives it:
- TokenRange: one bucket of the locked-amount table
- ResolverDatum: IPFS root + staking durations + the full range table

Nothing is baked into the resolver. Every lookup reads these values at
runtime, so several table variants can be simulated side by side and the
exact datum can be exported as CBOR and compared with what gets deployed.
"""

from opshin.prelude import *

from v1_contract_config import (
    CANONICAL_RANGE_LOWER_BOUNDS,
    DURATION_VARIANTS,
    DEFAULT_DURATION_VARIANT,
    VEBANNY_IPFS_ROOT,
)


# =============================================================================
# TOKEN RANGE (one bucket of the amount table)
# =============================================================================

@dataclass
class TokenRange(PlutusData):
    """
    Contiguous range of locked amounts that share one bucket index.

    Fields:
        lower_bound: Smallest amount in the bucket (inclusive)
        upper_bound: Largest amount in the bucket (inclusive), 0 = unbounded
        index: Bucket index, 1-based
    """
    CONSTR_ID = 0
    lower_bound: int
    upper_bound: int                # 0 = no upper bound (last bucket only)
    index: int


# =============================================================================
# RESOLVER DATUM
# =============================================================================

@dataclass
class ResolverDatum(PlutusData):
    """
    Full resolver configuration.

    Fields:
        ipfs_root: Content identifier of the metadata folder (ASCII bytes)
        durations: The five staking periods in seconds, ascending
        ranges: Token range table, ascending and gap-free
    """
    CONSTR_ID = 0
    ipfs_root: bytes
    durations: List[int]
    ranges: List[TokenRange]


# =============================================================================
# HELPERS
# =============================================================================

def is_unbounded(token_range: TokenRange) -> bool:
    """Check if the range has no upper bound."""
    return token_range.upper_bound == 0


def contains(token_range: TokenRange, amount: int) -> bool:
    """Check if amount falls inside the range."""
    if amount < token_range.lower_bound:
        return False
    return is_unbounded(token_range) or amount <= token_range.upper_bound


def build_token_ranges(lower_bounds) -> List[TokenRange]:
    """Build a gap-free range table from ascending lower bounds; the last range is unbounded."""
    bounds = list(lower_bounds)
    ranges = []
    for position, lower in enumerate(bounds):
        if position + 1 < len(bounds):
            upper = bounds[position + 1] - 1
        else:
            upper = 0
        ranges.append(TokenRange(lower_bound=lower, upper_bound=upper, index=position + 1))
    return ranges


def build_resolver_datum(
    ipfs_root: str = VEBANNY_IPFS_ROOT,
    durations=None,
    lower_bounds=CANONICAL_RANGE_LOWER_BOUNDS,
) -> ResolverDatum:
    """Pack plain configuration values into a ResolverDatum (not validated)."""
    if durations is None:
        durations = DURATION_VARIANTS[DEFAULT_DURATION_VARIANT]
    return ResolverDatum(
        ipfs_root=ipfs_root.encode("ascii"),
        durations=list(durations),
        ranges=build_token_ranges(lower_bounds),
    )


def ipfs_root_text(datum: ResolverDatum) -> str:
    return datum.ipfs_root.decode("ascii")
