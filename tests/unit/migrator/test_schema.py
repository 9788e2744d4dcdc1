"""Unit tests for the pydantic decode/encode helpers and registry records."""

from typing import Any

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from schema_migrator import MigrationEntry, TransformationError
from schema_migrator.schema import adapter_for, decode, encode


class Account(BaseModel):
    id: int
    balance: float = 0.0


class TestAdapterFor:
    """Tests for adapter_for."""

    def test_builds_adapter_for_model(self) -> None:
        adapter = adapter_for(Account)
        assert isinstance(adapter, TypeAdapter)
        assert adapter.validate_python({"id": 1}) == Account(id=1)

    def test_type_adapter_passes_through(self) -> None:
        adapter = TypeAdapter(dict[str, int])
        assert adapter_for(adapter) is adapter

    def test_annotation_schema(self) -> None:
        schema = list[int]
        assert adapter_for(schema).validate_python(["1", 2]) == [1, 2]


class TestDecode:
    """Tests for decode."""

    def test_model_instance(self) -> None:
        account = decode(Account, {"id": "3"})
        assert account == Account(id=3, balance=0.0)

    def test_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            decode(Account, {"balance": 1.0})


class TestEncode:
    """Tests for encode."""

    def test_accepts_plain_dict(self) -> None:
        """Transforms may hand back dicts for model schemas."""
        assert encode(Account, {"id": 1}) == {"id": 1, "balance": 0.0}

    def test_accepts_instance(self) -> None:
        assert encode(Account, Account(id=2, balance=5)) == {"id": 2, "balance": 5.0}

    def test_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            encode(Account, {"id": "abc"})


class TestMigrationEntry:
    """Tests for MigrationEntry.apply and apply_async."""

    def _entry(self, fn: Any) -> MigrationEntry:
        return MigrationEntry(from_version=3, to_version=2, transform=fn)

    def test_apply_returns_value(self) -> None:
        assert self._entry(lambda value: value + 1).apply(1) == 2

    def test_apply_wraps_errors(self) -> None:
        entry = self._entry(lambda value: value["missing"])
        with pytest.raises(TransformationError) as exc_info:
            entry.apply({})
        assert (exc_info.value.from_version, exc_info.value.to_version) == (3, 2)
        assert isinstance(exc_info.value.cause, KeyError)

    @pytest.mark.asyncio
    async def test_apply_async_plain_value(self) -> None:
        """Plain return values need no awaiting."""
        assert await self._entry(lambda value: value * 2).apply_async(4) == 8

    @pytest.mark.asyncio
    async def test_apply_async_awaits(self) -> None:
        async def double(value: int) -> int:
            return value * 2

        assert await self._entry(double).apply_async(4) == 8

