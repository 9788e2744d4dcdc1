"""Decode and encode data against versioned schemas using pydantic.

A schema is anything pydantic can build a TypeAdapter for: a BaseModel
subclass, a TypedDict, a dataclass, a plain annotation like
``dict[str, int]``, or a TypeAdapter built by the caller.
"""

from typing import Any, Literal

from pydantic import TypeAdapter

EncodeMode = Literal["python", "json"]


def adapter_for(schema: Any) -> TypeAdapter[Any]:
    """Return a TypeAdapter for a schema.

    A TypeAdapter is returned as is. Anything else gets a fresh adapter, so
    callers that migrate repeatedly should keep the result; registered
    versions hold theirs on SchemaVersion.adapter.
    """
    if isinstance(schema, TypeAdapter):
        return schema
    return TypeAdapter(schema)


def decode(schema: Any, data: Any) -> Any:
    """Validate untyped data and return the typed value.

    Raises:
        pydantic.ValidationError: If data does not conform to the schema
    """
    return adapter_for(schema).validate_python(data)


def encode(
    schema: Any,
    value: Any,
    *,
    mode: EncodeMode = "python",
    by_alias: bool = False,
) -> Any:
    """Re-validate a typed value and serialize it to plain data.

    Transforms may return plain dicts or model instances, so the value is
    validated before dumping.

    Raises:
        pydantic.ValidationError: If value does not conform to the schema
    """
    adapter = adapter_for(schema)
    validated = adapter.validate_python(value)
    return adapter.dump_python(validated, mode=mode, by_alias=by_alias)
