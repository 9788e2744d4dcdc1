"""Registry records for schema versions and the transforms between them."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter

from schema_migrator.errors import MigrationError, TransformationError
from schema_migrator.schema import adapter_for

MigrationFn: TypeAlias = Callable[[Any], Any | Awaitable[Any]]
MigrationKey: TypeAlias = tuple[int, int]


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


class SchemaVersion(BaseModel):
    """A schema registered under one version number."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: int = Field(..., ge=0, description="Schema generation number")
    schema_: Any = Field(..., alias="schema", description="Schema accepted by pydantic")

    _adapter: TypeAdapter[Any] = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._adapter = adapter_for(self.schema_)

    @property
    def schema(self) -> Any:  # type: ignore[override]
        return self.schema_

    @property
    def adapter(self) -> TypeAdapter[Any]:
        """TypeAdapter built for this schema when the record was created."""
        return self._adapter


class MigrationEntry(BaseModel):
    """A directed transform from one schema version to another.

    The transform receives the value of the source version and returns the
    value of the target version, either directly or as an awaitable. Any
    exception it raises is wrapped in TransformationError, except a
    TransformationError, which passes through unchanged.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    from_version: int = Field(..., ge=0, description="Source version")
    to_version: int = Field(..., ge=0, description="Target version")
    transform: Callable[[Any], Any] = Field(..., description="Migration function")
    description: str = Field(default="", description="Human-readable summary")

    @property
    def key(self) -> MigrationKey:
        return (self.from_version, self.to_version)

    def apply(self, value: Any) -> Any:
        """Run the transform synchronously.

        An awaitable result is driven to completion when no event loop is
        running in this thread. Inside a running loop use apply_async.
        """
        try:
            result = self.transform(value)
            if inspect.isawaitable(result):
                result = self._resolve(result)
        except TransformationError:
            raise
        except Exception as exc:
            raise TransformationError(self.from_version, self.to_version, exc) from exc
        return result

    async def apply_async(self, value: Any) -> Any:
        """Run the transform, awaiting its result if it is awaitable."""
        try:
            result = self.transform(value)
            if inspect.isawaitable(result):
                result = await result
        except TransformationError:
            raise
        except Exception as exc:
            raise TransformationError(self.from_version, self.to_version, exc) from exc
        return result

    def _resolve(self, awaitable: Awaitable[Any]) -> Any:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(_await(awaitable))

        if inspect.iscoroutine(awaitable):
            awaitable.close()
        raise MigrationError(
            f"Transform {self.from_version}->{self.to_version} returned an awaitable "
            "inside a running event loop; use migrate_async"
        )
