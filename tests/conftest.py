"""
Pytest configuration and shared fixtures for gobuild tests.
"""

import io
from unittest.mock import Mock, patch

import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.projects import go_project, go_project_with_config


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that invoke a real Go toolchain",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_host_detection():
    """Clear the cached host platform before and after each test."""
    from gobuild.core.platform import clear_platform_cache

    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def mock_run():
    """Patch subprocess.run in the orchestrator; builds succeed by default."""
    with patch("gobuild.build.orchestrator.subprocess.run") as run:
        run.return_value = Mock(returncode=0)
        yield run


@pytest.fixture
def output_stream() -> io.StringIO:
    """In-memory stream for orchestrator progress lines."""
    return io.StringIO()
