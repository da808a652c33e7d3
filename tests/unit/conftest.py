"""Unit test fixtures."""

import pytest

from console_tables import ConsoleTable
from tests.fixtures.sinks import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    """Create a recording sink with default terminal colors."""
    return RecordingSink()


@pytest.fixture
def people() -> ConsoleTable:
    """Two-column table used across rendering tests."""
    return ConsoleTable("Name", "Age").add_row("Alice", "30").add_row("Bob", "7")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep option environment variables out of the tests."""
    monkeypatch.delenv("CONSOLE_TABLES_ENABLE_COUNT", raising=False)
    monkeypatch.delenv("CONSOLE_TABLES_NUMBER_ALIGNMENT", raising=False)
