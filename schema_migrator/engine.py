"""Migration engine: walks the version chain between two schema versions.

The engine is an immutable snapshot produced by SchemaMigratorBuilder.finalize().
Input is decoded under the source schema, every unit hop between the two
versions is applied in order, and the result is encoded under the target
schema. Intermediate values are never validated, so transforms are free to
work on plain data.

A registered edge that skips versions, such as (1, 3), is kept in the
registry but never consulted: migrating 1 -> 3 always goes 1 -> 2 -> 3, and a
missing unit hop aborts the call.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter

from schema_migrator.config.models.migrator import MigratorConfig
from schema_migrator.errors import MigrationNotFoundError, SchemaNotFoundError
from schema_migrator.models import MigrationEntry, MigrationKey, SchemaVersion
from schema_migrator.observability.logging import get_logger
from schema_migrator.schema import decode, encode


class SchemaMigrator:
    """Serves migrate requests over a frozen set of schemas and transforms.

    Safe to share between threads: nothing is mutated after construction.
    """

    def __init__(
        self,
        schemas: Mapping[int, SchemaVersion],
        migrations: Mapping[MigrationKey, MigrationEntry],
        config: MigratorConfig | None = None,
        logger: Any = None,
    ) -> None:
        self._schemas: Mapping[int, SchemaVersion] = MappingProxyType(dict(schemas))
        self._migrations: Mapping[MigrationKey, MigrationEntry] = MappingProxyType(
            dict(migrations)
        )
        self._latest_version = max(self._schemas, default=None)
        self._config = config or MigratorConfig()
        self._logger = logger if logger is not None else get_logger(__name__)

    @property
    def schemas(self) -> Mapping[int, SchemaVersion]:
        """Read-only view of registered schema versions."""
        return self._schemas

    @property
    def migrations(self) -> Mapping[MigrationKey, MigrationEntry]:
        """Read-only view of registered transforms keyed by (from, to)."""
        return self._migrations

    @property
    def versions(self) -> tuple[int, ...]:
        return tuple(sorted(self._schemas))

    @property
    def config(self) -> MigratorConfig:
        return self._config

    def latest_version(self) -> int | None:
        """Highest registered version number, or None if nothing is registered."""
        return self._latest_version

    def schema_for(self, version: int) -> Any | None:
        """Schema registered for a version, or None."""
        entry = self._schemas.get(version)
        return entry.schema if entry is not None else None

    @staticmethod
    def hops(from_version: int, to_version: int) -> Iterator[MigrationKey]:
        """Yield the unit hops the chain walk requests, in order.

        Nothing is yielded when both versions are equal.
        """
        direction = 1 if to_version > from_version else -1
        for version in range(from_version, to_version, direction):
            yield (version, version + direction)

    @classmethod
    def path(cls, from_version: int, to_version: int) -> list[MigrationKey]:
        """Unit hops between two versions as a list, for diagnostics."""
        return list(cls.hops(from_version, to_version))

    def has_path(self, from_version: int, to_version: int) -> bool:
        """Whether both schemas and every unit hop between them are registered."""
        if from_version not in self._schemas or to_version not in self._schemas:
            return False
        return all(key in self._migrations for key in self.hops(from_version, to_version))

    def migrate(self, data: Any, from_version: int, to_version: int) -> Any:
        """Migrate data from one schema version to another.

        When both versions are equal the data is only decoded and the typed
        value is returned. Otherwise the encoded target value is returned.

        Args:
            data: Raw input expected to conform to the from_version schema
            from_version: Version the input is encoded under
            to_version: Version to migrate to

        Raises:
            SchemaNotFoundError: Target or source version is not registered
            MigrationNotFoundError: A hop of the chain has no transform
            TransformationError: A transform failed
            pydantic.ValidationError: Input or output does not match its schema
        """
        target = self._require_schema(to_version)
        if from_version == to_version:
            return decode(self._require_schema(from_version), data)

        current = decode(self._require_schema(from_version), data)
        for step_from, step_to in self.hops(from_version, to_version):
            current = self._require_migration(step_from, step_to).apply(current)
            self._log_step(step_from, step_to)

        return self._finish(target, current, from_version, to_version)

    async def migrate_async(self, data: Any, from_version: int, to_version: int) -> Any:
        """Async variant of migrate; transforms may return awaitables.

        Hops run strictly in sequence because each consumes the previous
        hop's output.
        """
        target = self._require_schema(to_version)
        if from_version == to_version:
            return decode(self._require_schema(from_version), data)

        current = decode(self._require_schema(from_version), data)
        for step_from, step_to in self.hops(from_version, to_version):
            current = await self._require_migration(step_from, step_to).apply_async(current)
            self._log_step(step_from, step_to)

        return self._finish(target, current, from_version, to_version)

    def _require_schema(self, version: int) -> TypeAdapter[Any]:
        entry = self._schemas.get(version)
        if entry is None:
            raise SchemaNotFoundError(version)
        return entry.adapter

    def _require_migration(self, from_version: int, to_version: int) -> MigrationEntry:
        entry = self._migrations.get((from_version, to_version))
        if entry is None:
            raise MigrationNotFoundError(from_version, to_version)
        return entry

    def _finish(
        self, target: TypeAdapter[Any], value: Any, from_version: int, to_version: int
    ) -> Any:
        result = encode(
            target,
            value,
            mode=self._config.encode_mode,
            by_alias=self._config.by_alias,
        )
        if self._config.log_steps:
            self._logger.debug(
                "migration_completed",
                from_version=from_version,
                to_version=to_version,
                hops=abs(to_version - from_version),
            )
        return result

    def _log_step(self, from_version: int, to_version: int) -> None:
        if self._config.log_steps:
            self._logger.debug(
                "migration_step_applied",
                from_version=from_version,
                to_version=to_version,
            )
