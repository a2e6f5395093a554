"""
resolver_settings.py - environment configuration for the token URI resolver.

Reads .env (python-dotenv) and the process environment, and turns them into
a validated ResolverDatum.

  VEURI_DATUM_CBOR         full ResolverDatum as CBOR hex (wins over all below)
  VEURI_IPFS_ROOT          metadata folder CID
  VEURI_DURATION_VARIANT   "simulation" (10/25/100/250/1000 days) or "contract"
  VEURI_DURATIONS          explicit comma separated durations in seconds
  VEURI_LOG_LEVEL          CLI log level
"""
import logging
import os

from dotenv import load_dotenv
from pycardano.exception import DeserializeException

from token_uri_errors import ResolverConfigError
from token_uri_resolver_v1 import validate_resolver_datum
from v1_contract_config import DEFAULT_DURATION_VARIANT, DURATION_VARIANTS, VEBANNY_IPFS_ROOT
from v1_datum_types import ResolverDatum, build_resolver_datum

load_dotenv()

logger = logging.getLogger(__name__)

ENV_DATUM_CBOR = "VEURI_DATUM_CBOR"
ENV_IPFS_ROOT = "VEURI_IPFS_ROOT"
ENV_DURATION_VARIANT = "VEURI_DURATION_VARIANT"
ENV_DURATIONS = "VEURI_DURATIONS"
ENV_LOG_LEVEL = "VEURI_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_int_list(value: str, name: str) -> list:
    """Parse "1, 2,3" into [1, 2, 3]; raises ResolverConfigError naming the setting."""
    items = [part.strip() for part in value.split(",") if part.strip()]
    if not items:
        raise ResolverConfigError(f"{name} is empty")
    try:
        return [int(item) for item in items]
    except ValueError as exc:
        raise ResolverConfigError(f"{name} must be comma separated integers, got {value!r}") from exc


def durations_for_variant(variant: str) -> tuple:
    try:
        return DURATION_VARIANTS[variant]
    except KeyError:
        raise ResolverConfigError(
            f"unknown duration variant {variant!r}, expected one of {sorted(DURATION_VARIANTS)}"
        ) from None


def decode_datum(cbor_hex: str) -> ResolverDatum:
    """Decode a ResolverDatum from CBOR hex."""
    try:
        return ResolverDatum.from_cbor(cbor_hex.strip())
    except (ValueError, TypeError, DeserializeException) as exc:
        raise ResolverConfigError(f"{ENV_DATUM_CBOR} is not a valid ResolverDatum: {exc}") from exc


def load_resolver_datum(environ=None) -> ResolverDatum:
    """Build and validate the resolver datum from the environment."""
    env = os.environ if environ is None else environ

    cbor_hex = env.get(ENV_DATUM_CBOR, "").strip()
    if cbor_hex:
        datum = decode_datum(cbor_hex)
        logger.debug("resolver datum loaded from %s", ENV_DATUM_CBOR)
    else:
        ipfs_root = env.get(ENV_IPFS_ROOT, "").strip() or VEBANNY_IPFS_ROOT
        if not ipfs_root.isascii():
            raise ResolverConfigError(f"{ENV_IPFS_ROOT} must be ASCII, got {ipfs_root!r}")

        explicit = env.get(ENV_DURATIONS, "").strip()
        if explicit:
            durations = parse_int_list(explicit, ENV_DURATIONS)
        else:
            variant = env.get(ENV_DURATION_VARIANT, "").strip() or DEFAULT_DURATION_VARIANT
            durations = durations_for_variant(variant)

        datum = build_resolver_datum(ipfs_root=ipfs_root, durations=durations)

    validate_resolver_datum(datum)
    return datum


def log_level(environ=None) -> str:
    """CLI log level name from the environment; raises ResolverConfigError if unknown."""
    env = os.environ if environ is None else environ
    level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        raise ResolverConfigError(
            f"{ENV_LOG_LEVEL} must be one of {list(LOG_LEVELS)}, got {env.get(ENV_LOG_LEVEL)!r}"
        )
    return level
