"""Shared pytest fixtures for the path2d test suite.

Fixtures:
    straight_path: One open sub-path from (0, 0) to (10, 0)
    square_path: Closed 10x10 rectangle at the origin
    two_subpath_path: Two parallel horizontal lines, 10 units each
    curved_path: Open cubic curve with default sampling

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from path2d import Path2d  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Path Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def straight_path():
    """Return a path holding the single segment (0, 0) -> (10, 0)."""
    path = Path2d()
    path.move_to((0, 0))
    path.line_to((10, 0))
    return path


@pytest.fixture
def square_path():
    """Return a closed 10x10 rectangle, total length 40."""
    path = Path2d()
    path.rect(0, 0, 10, 10)
    return path


@pytest.fixture
def two_subpath_path():
    """Return two horizontal lines: y=0 and y=10, both from x=0 to x=10."""
    path = Path2d()
    path.move_to((0, 0))
    path.line_to((10, 0))
    path.move_to((0, 10))
    path.line_to((10, 10))
    return path


@pytest.fixture
def curved_path():
    """Return an arch-shaped cubic curve from (0, 0) to (100, 0)."""
    path = Path2d()
    path.move_to((0, 0))
    path.cubic_curve_to((30, 40), (70, 40), (100, 0))
    return path
