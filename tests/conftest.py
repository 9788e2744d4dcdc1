"""Shared test fixtures for the schema-migrator test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from schema_migrator import SchemaMigrator, create_migrator
from schema_migrator.config import get_settings
from schema_migrator.config.models.migrator import MigratorConfig
from schema_migrator.config.settings import set_toml_config
from tests.factories.sinks import RecordingLogger
from tests.factories.users import (
    UserV1,
    UserV2,
    UserV3,
    downgrade_v2_to_v1,
    downgrade_v3_to_v2,
    upgrade_v1_to_v2,
    upgrade_v2_to_v3,
)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def migrator_config() -> MigratorConfig:
    return MigratorConfig()


@pytest.fixture
def user_migrator(
    migrator_config: MigratorConfig, recording_logger: RecordingLogger
) -> SchemaMigrator:
    """Migrator for the three user versions with transforms in both directions."""
    return (
        create_migrator(config=migrator_config, logger=recording_logger)
        .add_migration(1, UserV1, UserV2, upgrade_v1_to_v2, downgrade_v2_to_v1)
        .add_migration(2, UserV2, UserV3, upgrade_v2_to_v3, downgrade_v3_to_v2)
        .finalize()
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
                "development.toml": "[migrator]\nlog_steps = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and loaded TOML before and after each test."""
    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})
