"""
Pytest configuration and fixtures for structbench tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Plots are only ever written to files during tests
matplotlib.use("Agg")


@pytest.fixture
def sample_numbers():
    """The concrete scenario with one repeated value."""
    return [5, 3, 5, 1]


@pytest.fixture
def distinct_numbers():
    """A small dataset without duplicates, in no particular order."""
    return [42, 7, 19, 3, 88, 61, 25, 0, 999_999, 500_000]


@pytest.fixture
def identical_numbers():
    """A dataset of one value repeated."""
    return [7] * 25


@pytest.fixture
def random_numbers():
    """A seeded random dataset small enough for quadratic strategies."""
    from structbench.data.generate import generate_random_integers

    return generate_random_integers(1_500, seed=1234)


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests (full-size quadratic runs)
        if any(keyword in item.nodeid for keyword in ["full_size", "stress"]):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
