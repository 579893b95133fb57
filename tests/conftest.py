import pytest

from unitcheck import bootstrap


@pytest.fixture(scope="session", autouse=True)
def setup_unitcheck_registry() -> None:
    """Register built-in suites once for the entire test session."""

    bootstrap()
