"""Body serialization.

The default serializer is pydantic-core's JSON encoder, so pydantic models,
dataclasses, dicts, lists and scalars all work without extra glue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

import pydantic_core

from routeresult.errors import SerializationError


@runtime_checkable
class Serializer(Protocol):
    """Turns a body value into bytes, raising ``SerializationError`` on failure."""

    def serialize(self, value: Any) -> bytes: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class JsonSerializer:
    """Compact JSON via ``pydantic_core.to_json``.

    Non-finite floats (NaN, Infinity) are written as ``null`` by default so the
    body is always valid JSON.
    """

    by_alias: bool = True
    exclude_none: bool = False
    inf_nan_mode: Literal["null", "constants", "strings"] = "null"

    def serialize(self, value: Any) -> bytes:
        try:
            return pydantic_core.to_json(
                value,
                by_alias=self.by_alias,
                exclude_none=self.exclude_none,
                inf_nan_mode=self.inf_nan_mode,
            )
        except (
            pydantic_core.PydanticSerializationError,
            ValueError,
            TypeError,
            RecursionError,
        ) as exc:
            raise SerializationError(
                f"Cannot serialize {type(value).__name__} as JSON: {exc}",
                hint="Use JSON-compatible values, dataclasses or pydantic models.",
                value_type=type(value).__name__,
            ) from exc


DEFAULT_SERIALIZER = JsonSerializer()
