"""Pytest configuration and shared fixtures for SnapKV tests."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from snapkv.config.settings import Settings
from snapkv.core.clock import ManualClock
from snapkv.models.entry import Entry
from snapkv.store.core import KeyValueStore

START_TIME = 1_700_000_000


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings with temporary directories."""
    return Settings(
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        LOG_DIR=temp_dir / "logs",
        DEFAULT_TTL_SECONDS=1800,
        DATA_FILE=temp_dir / "data" / "snapkv.json",
        JSON_INDENT=4,
    )


@pytest.fixture
def clock() -> ManualClock:
    """A clock that starts at a fixed instant and only moves when advanced."""
    return ManualClock(start=START_TIME)


@pytest.fixture
def store(test_settings: Settings, clock: ManualClock) -> KeyValueStore:
    """An empty store wired to the manual clock."""
    return KeyValueStore(test_settings, clock)


@pytest.fixture
def populated_store(store: KeyValueStore) -> KeyValueStore:
    """A store holding a mix of expiring and permanent keys."""
    store.set("alpha", "1", 0)
    store.set("beta", "2", 60)
    store.set("gamma", "3", -5)
    return store


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """A path for a store document inside an existing directory."""
    return temp_dir / "store.json"


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(value="hello", expires_at=START_TIME + 30)


# Environment cleanup
@pytest.fixture(autouse=True)
def cleanup_env():
    """Clean up environment variables before/after tests."""
    original_env = dict(os.environ)

    yield

    os.environ.clear()
    os.environ.update(original_env)
