"""Builder that accumulates schema versions and transforms.

Register versions and directed transforms, then call finalize() to obtain
an immutable SchemaMigrator. Re-registering is never an error:

- a version already registered with a different schema logs a warning and
  keeps the original schema;
- a transform already registered for the same (from, to) pair logs a warning
  and is replaced.
"""

from typing import Any

from schema_migrator.config.models.migrator import MigratorConfig
from schema_migrator.engine import SchemaMigrator
from schema_migrator.errors import RegistrationError
from schema_migrator.models import MigrationEntry, MigrationFn, MigrationKey, SchemaVersion
from schema_migrator.observability.logging import get_logger


def _check_version(version: Any) -> None:
    # bool is an int subclass but never a meaningful version
    if not isinstance(version, int) or isinstance(version, bool) or version < 0:
        raise RegistrationError(
            f"Version must be a non-negative integer, got {version!r}"
        )


class SchemaMigratorBuilder:
    """Accumulates SchemaVersion and MigrationEntry records.

    Not safe for concurrent mutation; build during setup, then share the
    finalized SchemaMigrator.
    """

    def __init__(
        self,
        config: MigratorConfig | None = None,
        logger: Any = None,
    ) -> None:
        self._schemas: dict[int, SchemaVersion] = {}
        self._migrations: dict[MigrationKey, MigrationEntry] = {}
        self._config = config
        self._logger = logger if logger is not None else get_logger(__name__)

    def register_version(self, version: int, schema: Any) -> "SchemaMigratorBuilder":
        """Register the schema for a version.

        The first registration wins. Registering a different schema object
        under the same version logs a warning and is otherwise ignored.
        """
        _check_version(version)

        existing = self._schemas.get(version)
        if existing is None:
            self._schemas[version] = SchemaVersion(version=version, schema=schema)
        elif existing.schema is not schema:
            self._logger.warning(
                "schema_version_conflict",
                version=version,
                kept="original",
            )
        return self

    def register_transform(
        self,
        from_version: int,
        to_version: int,
        fn: MigrationFn,
        *,
        from_schema: Any = None,
        to_schema: Any = None,
        description: str = "",
    ) -> "SchemaMigratorBuilder":
        """Register a directed transform from one version to another.

        The source schema must already be registered or be passed as
        from_schema. Nothing is registered when the call fails.

        Raises:
            RegistrationError: Invalid versions or missing source schema
        """
        _check_version(from_version)
        _check_version(to_version)
        if from_version == to_version:
            raise RegistrationError(
                f"Cannot register a transform from version {from_version} to itself"
            )
        if not callable(fn):
            raise RegistrationError(
                f"Transform {from_version}->{to_version} must be callable"
            )

        if from_version not in self._schemas and from_schema is None:
            raise RegistrationError(
                f"Cannot add transform from version {from_version}: source schema "
                f"not found. Register version {from_version} first."
            )

        if from_schema is not None:
            self.register_version(from_version, from_schema)
        if to_schema is not None:
            self.register_version(to_version, to_schema)

        key = (from_version, to_version)
        if key in self._migrations:
            self._logger.warning(
                "migration_overwritten",
                from_version=from_version,
                to_version=to_version,
            )
        self._migrations[key] = MigrationEntry(
            from_version=from_version,
            to_version=to_version,
            transform=fn,
            description=description,
        )
        return self

    def add_upgrade(
        self, from_version: int, to_schema: Any, fn: MigrationFn
    ) -> "SchemaMigratorBuilder":
        """Register the next version's schema and the transform up to it."""
        _check_version(from_version)
        if from_version not in self._schemas:
            raise RegistrationError(
                f"Cannot add upgrade from version {from_version}: source schema "
                f"not found. Register version {from_version} first."
            )
        return self.register_transform(
            from_version, from_version + 1, fn, to_schema=to_schema
        )

    def add_downgrade(
        self, from_version: int, to_schema: Any, fn: MigrationFn
    ) -> "SchemaMigratorBuilder":
        """Register the previous version's schema and the transform down to it."""
        _check_version(from_version)
        if from_version == 0:
            raise RegistrationError("Cannot add downgrade to a version less than 0")
        if from_version not in self._schemas:
            raise RegistrationError(
                f"Cannot add downgrade from version {from_version}: source schema "
                f"not found. Register version {from_version} first."
            )
        return self.register_transform(
            from_version, from_version - 1, fn, to_schema=to_schema
        )

    def add_migration(
        self,
        version: int,
        from_schema: Any,
        to_schema: Any,
        upgrade: MigrationFn,
        downgrade: MigrationFn,
    ) -> "SchemaMigratorBuilder":
        """Register versions V and V+1 with transforms in both directions."""
        _check_version(version)
        self.register_version(version, from_schema)
        self.register_version(version + 1, to_schema)
        self.register_transform(version, version + 1, upgrade)
        self.register_transform(version + 1, version, downgrade)
        return self

    def finalize(self) -> SchemaMigrator:
        """Freeze the registrations into a SchemaMigrator.

        The migrator holds copies; later registrations on this builder do not
        affect it. Without an explicit config the MigratorConfig defaults
        apply; pass get_settings().migrator to use the loaded settings.
        """
        return SchemaMigrator(
            schemas=self._schemas,
            migrations=self._migrations,
            config=self._config,
            logger=self._logger,
        )

    build = finalize


def create_migrator(
    config: MigratorConfig | None = None,
    logger: Any = None,
) -> SchemaMigratorBuilder:
    """Create a new builder.

    Args:
        config: Engine configuration; defaults to MigratorConfig()
        logger: Diagnostic sink with structlog-style warning/debug methods
    """
    return SchemaMigratorBuilder(config=config, logger=logger)
