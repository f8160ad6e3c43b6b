"""Pytest configuration for integration tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(runner, tmp_path):
    """Run each test in its own empty working directory."""
    with runner.isolated_filesystem(temp_dir=tmp_path) as path:
        yield Path(path)
