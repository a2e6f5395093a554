"""
Print the token URI for every fixture (amount, duration) pair.

Run before deploying the resolver and diff the output against the deployed
contract's tokenURI() for the same pairs.

  python simulate_token_uris.py [--variant contract] [--output out.txt]
                                [--require-full-coverage] [--dump-datum]
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from resolver_settings import (
    ENV_DATUM_CBOR,
    ENV_DURATION_VARIANT,
    ENV_DURATIONS,
    ENV_IPFS_ROOT,
    LOG_LEVELS,
    log_level,
    load_resolver_datum,
    parse_int_list,
)
from token_uri_errors import TokenUriError
from token_uri_resolver_v1 import token_uri_slot_count
from token_uri_simulation_v1 import missing_slots, render_simulation, simulate
from v1_contract_config import DURATION_VARIANTS, SIMULATION_AMOUNTS

logger = logging.getLogger("simulate_token_uris")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate veBanny token URIs off-chain")
    parser.add_argument("--variant", choices=sorted(DURATION_VARIANTS), help="Named duration table")
    parser.add_argument("--durations", help="Comma separated durations in seconds (overrides --variant)")
    parser.add_argument("--amounts", help="Comma separated amounts (default: first amount of every bucket)")
    parser.add_argument("--ipfs-root", help="Metadata folder CID")
    parser.add_argument("--output", type=Path, help="Write the simulation here instead of stdout")
    parser.add_argument(
        "--require-full-coverage",
        action="store_true",
        help="Fail if any URI slot is never produced",
    )
    parser.add_argument("--dump-datum", action="store_true", help="Print the resolver datum as CBOR hex and exit")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: VEURI_LOG_LEVEL or INFO)",
    )
    return parser


def settings_overlay(args: argparse.Namespace) -> dict:
    """Environment with the command line overrides applied on top."""
    env = dict(os.environ)
    overridden = False
    if args.variant:
        env[ENV_DURATION_VARIANT] = args.variant
        env.pop(ENV_DURATIONS, None)
        overridden = True
    if args.durations:
        env[ENV_DURATIONS] = args.durations
        overridden = True
    if args.ipfs_root:
        env[ENV_IPFS_ROOT] = args.ipfs_root
        overridden = True
    if overridden:
        env.pop(ENV_DATUM_CBOR, None)
    return env


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        level = args.log_level or log_level()
    except TokenUriError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("invalid resolver configuration: %s", exc)
        return 1
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        datum = load_resolver_datum(settings_overlay(args))
        amounts = parse_int_list(args.amounts, "--amounts") if args.amounts else list(SIMULATION_AMOUNTS)
    except TokenUriError as exc:
        logger.error("invalid resolver configuration: %s", exc)
        return 1

    if args.dump_datum:
        print(datum.to_cbor_hex())
        return 0

    logger.info(
        "simulating %d amounts x %d durations (%d slots)",
        len(amounts), len(datum.durations), token_uri_slot_count(datum),
    )
    try:
        rows = list(simulate(amounts, datum.durations, datum))
    except TokenUriError as exc:
        logger.error("%s", exc)
        return 1

    text = "\n".join(render_simulation(rows)) + "\n"
    if args.output:
        try:
            args.output.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("cannot write %s: %s", args.output, exc)
            return 1
        logger.info("wrote %d rows to %s", len(rows), args.output)
    else:
        sys.stdout.write(text)

    missing = missing_slots(rows, datum)
    if missing:
        logger.warning("%d URI slots never produced: %s", len(missing), missing)
        if args.require_full_coverage:
            return 1
    else:
        logger.info("all %d URI slots covered", token_uri_slot_count(datum))
    return 0


if __name__ == "__main__":
    sys.exit(main())
