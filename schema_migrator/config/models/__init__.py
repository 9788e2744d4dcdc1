"""Configuration models for each settings section."""

from schema_migrator.config.models.migrator import MigratorConfig
from schema_migrator.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = ["LoggingConfig", "MigratorConfig", "ObservabilityConfig"]
