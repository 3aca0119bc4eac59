"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sempoa.config import get_settings
from sempoa.core.beads import BoardConfig
from sempoa.db.progress_store import InMemoryProgressStore
from sempoa.learning.progression import ProgressionService
from sempoa.learning.question_generator import QuestionGenerator


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (file and SQLite stores)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "e2e: End-to-end learning journey tests")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Default settings with all data kept under a temp directory."""
    for name in (
        "SEMPOA_BOARD_COLUMNS",
        "SEMPOA_UPPER_BEADS_PER_COLUMN",
        "SEMPOA_LOWER_BEADS_PER_COLUMN",
        "SEMPOA_MASTERY_THRESHOLD",
        "SEMPOA_GENERATOR_RETRY_BUDGET",
        "SEMPOA_PROGRESS_KEY",
        "SEMPOA_STORAGE_BACKEND",
        "SEMPOA_DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SEMPOA_DATA_DIR", str(tmp_path / "sempoa-data"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def board():
    """Standard 9-column board: 1 upper and 4 lower beads per column."""
    return BoardConfig(columns=9, upper_beads=1, lower_beads=4)


@pytest.fixture
def generator():
    """Question generator with a fixed seed."""
    return QuestionGenerator(rng=random.Random(1234))


@pytest.fixture
def memory_store():
    return InMemoryProgressStore()


@pytest.fixture
def service(memory_store):
    """Progression service backed by an in-memory store."""
    return ProgressionService(memory_store)


@pytest.fixture
def progress(service):
    """Fresh progress: first level unlocked and current."""
    return service.initialize_progress()
