"""
Token URI Simulation V1 - pre-deployment check of the resolver table.

Runs the resolver over every (amount, duration) pair of the fixtures so the
output can be diffed against what the deployed contract returns for the
same inputs. The driver does no I/O; printing/writing is left to the caller
(see simulate_token_uris.py).

Failure policy: the first pair that does not resolve aborts the batch with
a SimulationError naming the pair. A gap in the table is a configuration
mismatch and must be fixed, not skipped.
"""
import logging
from typing import Iterable, Iterator, List, NamedTuple

from token_uri_errors import SimulationError, TokenUriError
from token_uri_resolver_v1 import resolve, token_uri_slot_count, validate_resolver_datum
from v1_contract_config import TOKEN_URI_SCHEME
from v1_datum_types import ResolverDatum

logger = logging.getLogger(__name__)


class SimulationRow(NamedTuple):
    amount: int
    duration: int
    uri: str


def simulate(amounts: Iterable[int], durations: Iterable[int], datum: ResolverDatum) -> Iterator[SimulationRow]:
    """
    Lazily resolve the cross-product of amounts and durations.

    Amount-major order, durations in the order given. Each call starts a
    fresh run; nothing is shared between runs.

    The datum is validated before the first row is produced.
    """
    validate_resolver_datum(datum)
    durations = list(durations)
    count = 0
    for amount in amounts:
        for duration in durations:
            try:
                uri = resolve(amount, duration, datum)
            except TokenUriError as exc:
                logger.debug("simulation failed after %d rows", count)
                raise SimulationError(amount, duration, exc) from exc
            count += 1
            yield SimulationRow(amount, duration, uri)
    logger.debug("simulation finished: %d rows", count)


def format_row(row: SimulationRow) -> str:
    return f"[{row.amount}|{row.duration}] => {row.uri}"


def render_simulation(rows: Iterable[SimulationRow]) -> Iterator[str]:
    """Formatted lines, with a blank line after each amount group."""
    current = None
    for row in rows:
        if current is not None and row.amount != current:
            yield ""
        current = row.amount
        yield format_row(row)
    if current is not None:
        yield ""


def uri_slot(uri: str) -> int:
    """Trailing slot number of a token URI."""
    if not uri.startswith(TOKEN_URI_SCHEME):
        raise ValueError(f"not a token URI: {uri!r}")
    return int(uri.rsplit("/", 1)[1])


def missing_slots(rows: Iterable[SimulationRow], datum: ResolverDatum) -> List[int]:
    """URI slots of the datum that none of the rows produced."""
    seen = {uri_slot(row.uri) for row in rows}
    return [slot for slot in range(1, token_uri_slot_count(datum) + 1) if slot not in seen]
