"""Versioned schema migration.

Register the schema of every version of a record and the transforms between
adjacent versions, then migrate data from any registered version to any
other by walking the chain one version at a time.

Usage:
    from schema_migrator import create_migrator

    migrator = (
        create_migrator()
        .register_version(1, UserV1)
        .add_upgrade(1, UserV2, lambda user: {**user, "email": None})
        .finalize()
    )
    migrator.migrate({"id": 1, "name": "Alice"}, 1, 2)
"""

from schema_migrator.builder import SchemaMigratorBuilder, create_migrator
from schema_migrator.engine import SchemaMigrator
from schema_migrator.errors import (
    MigrateError,
    MigrationError,
    MigrationNotFoundError,
    RegistrationError,
    SchemaMigratorError,
    SchemaNotFoundError,
    TransformationError,
)
from schema_migrator.models import MigrationEntry, MigrationFn, SchemaVersion

__all__ = [
    # Builder and engine
    "create_migrator",
    "SchemaMigratorBuilder",
    "SchemaMigrator",
    # Records
    "SchemaVersion",
    "MigrationEntry",
    "MigrationFn",
    # Errors
    "SchemaMigratorError",
    "SchemaNotFoundError",
    "MigrationNotFoundError",
    "TransformationError",
    "MigrationError",
    "RegistrationError",
    "MigrateError",
]
