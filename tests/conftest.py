"""
Spira Test Configuration

Pytest fixtures and configuration for Spira tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from spira.version import VersionInfo  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "cli: marks tests that invoke the command-line interface"
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def release() -> VersionInfo:
    """Release identifier matching the shipped constants."""
    return VersionInfo(major=0, minor=0, patch=13)


@pytest.fixture
def beta_release() -> VersionInfo:
    """Release identifier with a pre-release label."""
    return VersionInfo(major=0, minor=0, patch=13, extra="beta")
