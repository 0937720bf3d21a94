"""
Pytest configuration and shared fixtures for the divisor tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the root, so parent is the root)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from divisors import CurveParams, DivisorContext  # noqa: E402
from primitives.field import prime_field  # noqa: E402
from tests.curve_utils import CURVE_A, CURVE_B, M61  # noqa: E402

SMALL_PRIME = 101


@pytest.fixture(scope="session")
def gf101():
    return prime_field(SMALL_PRIME)


@pytest.fixture(scope="session")
def curve101(gf101):
    return CurveParams(gf101, CURVE_A, CURVE_B)


@pytest.fixture
def ctx101(curve101):
    """16-sample context over GF(101)."""
    return DivisorContext(curve101, 16)


@pytest.fixture(scope="session")
def gf61():
    return prime_field(M61)


@pytest.fixture(scope="session")
def curve61(gf61):
    return CurveParams(gf61, CURVE_A, CURVE_B)


@pytest.fixture
def ctx61(curve61):
    """8-sample context over GF(2^61 - 1)."""
    return DivisorContext(curve61, 8)
