# Ensure the repository root is on sys.path when pytest runs (flat module layout)
import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parent.parent
_str_root = str(_root)
if _str_root not in sys.path:
    sys.path.insert(0, _str_root)

from v1_datum_types import build_resolver_datum  # noqa: E402


@pytest.fixture
def datum():
    """Canonical table, simulation durations, veBanny root."""
    return build_resolver_datum()
