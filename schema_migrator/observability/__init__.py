"""Observability: structured logging for registration and migration events."""

from schema_migrator.observability.logging import configure_logging, get_logger, setup_logging

__all__ = ["configure_logging", "get_logger", "setup_logging"]
