"""Pytest configuration for sandcave tests."""
import sys
from pathlib import Path
import pytest


def pytest_configure(config):
    """Configure pytest environment for sandcave tests."""
    # Make the package importable when running from a source checkout
    root_dir = Path(__file__).parent.parent
    if str(root_dir) not in sys.path:
        sys.path.insert(0, str(root_dir))


SAMPLE_CAVE = (
    "498,4 -> 498,6 -> 496,6\n"
    "503,4 -> 502,4 -> 502,9 -> 494,9"
)


@pytest.fixture
def sample_text():
    """The two-path sample cave."""
    return SAMPLE_CAVE


@pytest.fixture
def sample_cave(sample_text):
    """Parsed sample cave with the synthetic floor enabled."""
    from sandcave.cave import Cave
    return Cave.parse(sample_text)


@pytest.fixture(params=[True, False], ids=["floor", "abyss"])
def floor(request):
    """Run a test with and without the synthetic floor."""
    return request.param
