import sys
from pathlib import Path

import pytest

# Make the shared helpers in this directory importable as `fakes`
sys.path.insert(0, str(Path(__file__).parent))

from fakes import ARSENAL, ARSENAL_WOMEN, CHELSEA, SPURS  # noqa: E402


@pytest.fixture
def roster():
    return {"count": 4, "teams": [ARSENAL, ARSENAL_WOMEN, CHELSEA, SPURS]}
