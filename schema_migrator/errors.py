"""Exception hierarchy for schema migration.

Every error raised by the migrator itself inherits from SchemaMigratorError.
Validation failures from pydantic are not wrapped; they surface as
pydantic.ValidationError so callers see exactly which fields were rejected.
"""

from typing import TypeAlias

from pydantic import ValidationError


class SchemaMigratorError(Exception):
    """Base exception for all schema migrator errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SchemaNotFoundError(SchemaMigratorError):
    """Raised when no schema is registered for a requested version."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Schema for version {version} not found.")


class MigrationNotFoundError(SchemaMigratorError):
    """Raised when a hop of the version chain has no registered transform."""

    def __init__(self, from_version: int, to_version: int) -> None:
        self.from_version = from_version
        self.to_version = to_version
        super().__init__(
            f"Migration from version {from_version} to {to_version} not found."
        )


class TransformationError(SchemaMigratorError):
    """Raised when a registered transform fails.

    The original failure is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, from_version: int, to_version: int, cause: BaseException) -> None:
        self.from_version = from_version
        self.to_version = to_version
        self.cause = cause
        super().__init__(
            f"Error during transformation from version {from_version} to {to_version}."
        )
        self.__cause__ = cause


class MigrationError(SchemaMigratorError):
    """Domain failure a transform raises on purpose.

    Example: a record that cannot be upgraded because a required field has
    no sensible default.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RegistrationError(SchemaMigratorError, ValueError):
    """Raised at build time when a version or transform cannot be registered."""


MigrateError: TypeAlias = (
    SchemaNotFoundError
    | MigrationNotFoundError
    | TransformationError
    | MigrationError
    | ValidationError
)
