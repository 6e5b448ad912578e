"""
Pytest configuration and shared fixtures for deleteproject tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Use DeletionHarness when the order of collaborator calls matters
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from deleteproject.infrastructure.observability.correlation import set_correlation_id
from tests.helpers.deletion_harness import DeletionHarness


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from deleteproject import __version__

    return __version__


@pytest.fixture(autouse=True)
def clear_correlation_id():
    """Start every test without a correlation id in context."""
    set_correlation_id("")
    yield
    set_correlation_id("")


@pytest.fixture
def harness() -> DeletionHarness:
    """Create a fresh deletion harness."""
    return DeletionHarness()
