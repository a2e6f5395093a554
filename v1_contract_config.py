"""
V1 Resolver Configuration - CONSTANTS AND DEFAULT FIXTURES ONLY

This file contains the values the deployed JBVeTokenUriResolver was built with:
- The veBanny IPFS metadata root
- The canonical token range table (as ascending lower bounds)
- The two staking duration variants
- The amount fixtures used by the pre-deployment simulation

None of these are read directly by the resolver. They are packed into a
ResolverDatum (see v1_datum_types.py) and the resolver reads the datum at
runtime, so a different table can be checked without touching any code.

Canonical range table:
- 60 buckets, contiguous from 1 upwards, last bucket unbounded
- Bucket 3 covers 201-400 (one reference variant skipped 301-400 entirely)
"""

# =============================================================================
# TOKEN URI LAYOUT
# =============================================================================

TOKEN_URI_SCHEME: str = "ipfs://"
VEBANNY_IPFS_ROOT: str = "QmauKpZU5NyDWJBkcFZGLCcbXLXZV4z86k2Mhi3sPHvuUZ"

# One URI slot per (bucket, multiplier); index = bucket * 5 - 5 + multiplier
STAKE_MULTIPLIER_COUNT: int = 5


# =============================================================================
# STAKING DURATIONS (seconds)
# =============================================================================

SECONDS_PER_DAY: int = 86400

# 10 / 25 / 100 / 250 / 1000 days - used by the simulate and getTokenURIs scripts
SIMULATION_DURATIONS: tuple = (
    10 * SECONDS_PER_DAY,
    25 * SECONDS_PER_DAY,
    100 * SECONDS_PER_DAY,
    250 * SECONDS_PER_DAY,
    1000 * SECONDS_PER_DAY,
)

# 10 / 50 / 100 / 500 / 1000 days - the veBanny contract lock periods
CONTRACT_DURATIONS: tuple = (
    10 * SECONDS_PER_DAY,
    50 * SECONDS_PER_DAY,
    100 * SECONDS_PER_DAY,
    500 * SECONDS_PER_DAY,
    1000 * SECONDS_PER_DAY,
)

DURATION_VARIANTS: dict = {
    "simulation": SIMULATION_DURATIONS,
    "contract": CONTRACT_DURATIONS,
}
DEFAULT_DURATION_VARIANT: str = "simulation"


# =============================================================================
# TOKEN RANGES - lower bound of each bucket, bucket index = position + 1
# =============================================================================

CANONICAL_RANGE_LOWER_BOUNDS: tuple = (
    # 1 - 1,000: buckets 1-9
    1, 101, 201, 401, 501, 601, 701, 801, 901,
    # 1,001 - 10,000: buckets 10-18
    1001, 2001, 3001, 4001, 5001, 6001, 7001, 8001, 9001,
    # 10,001 - 30,000: buckets 19-28
    10001, 12001, 14001, 16001, 18001, 20001, 22001, 24001, 26001, 28001,
    # 30,001 - 100,000: buckets 29-35
    30001, 40001, 50001, 60001, 70001, 80001, 90001,
    # 100,001 - 1,000,000: buckets 36-44
    100001, 200001, 300001, 400001, 500001, 600001, 700001, 800001, 900001,
    # 1,000,001 - 10,000,000: buckets 45-53
    1000001, 2000001, 3000001, 4000001, 5000001, 6000001, 7000001, 8000001, 9000001,
    # Whales: buckets 54-60, bucket 60 has no upper bound
    10000001, 20000001, 40000001, 50000001, 100000001, 500000001, 700000001,
)


# =============================================================================
# SIMULATION FIXTURES
# =============================================================================

# First amount of every canonical bucket, so 60 x 5 rows reach all 300 slots
SIMULATION_AMOUNTS: tuple = CANONICAL_RANGE_LOWER_BOUNDS
