import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from fuzzy_date.fuzzy_date import FuzzyDate  # noqa: E402


@pytest.fixture
def parsed():
    """Parse helper that fails the test on an Err result."""

    def _parse(text: str) -> FuzzyDate:
        result = FuzzyDate.parse(text)
        assert result.ok, f"{text!r} failed to parse: {result.error}"
        return result.value

    return _parse
