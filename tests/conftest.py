"""Pytest configuration and fixtures for isocal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isocal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sweep_years() -> range:
    """ISO years covered by the exhaustive week-date sweep."""
    return range(2001, 2023)
