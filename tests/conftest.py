"""Shared test fixtures for the venture_cms test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from venture_cms.business.models import BusinessRecord
from venture_cms.business.stores.inmemory import InMemoryBusinessStore

SAMPLE_DESCRIPTION = (
    "A cozy cafe along Magsaysay Avenue serving locally roasted coffee, "
    "Bicolano pastries and all-day breakfast. Our baristas source beans from "
    "upland farms in Camarines Sur, and the second floor doubles as a quiet "
    "co-working space with fast wifi for visiting travelers."
)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "app_name = 'dev'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"VENTURE_APP_NAME": "override"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from venture_cms.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_description() -> str:
    """A description long enough for the 200 character minimum."""
    return SAMPLE_DESCRIPTION


@pytest.fixture
def store() -> InMemoryBusinessStore:
    """Create a fresh store for each test."""
    return InMemoryBusinessStore()


@pytest.fixture
def existing_business() -> BusinessRecord:
    """A stored listing as loaded for the edit screen."""
    return BusinessRecord(
        business_name="Naga Heritage Inn",
        business_type="accommodation",
        description=SAMPLE_DESCRIPTION,
        address="123 Elias Angeles Street, Barangay San Francisco",
        city="Naga City",
        province="Camarines Sur",
        postal_code="4400",
        location="POINT(123.1815 13.6235)",
        phone="+63 54 473 1234",
        email="stay@heritageinn.ph",
        website="https://heritageinn.ph",
    )
