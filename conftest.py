from pathlib import Path
import sys

# Ensure project root is on sys.path before tests import modules
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture
def anyio_backend():
    # The async tests drive concurrency via asyncio.gather, so run them on asyncio only.
    return "asyncio"
