"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from test_fixtures import make_pool  # noqa: E402


@pytest.fixture
def anyio_backend():
    """Async tests run on asyncio only."""
    return "asyncio"


@pytest.fixture
def pool():
    return make_pool()


@pytest.fixture
def seeded_rng():
    return random.Random(20240314)
