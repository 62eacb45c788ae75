"""The six outcomes a request handler can produce.

Each outcome is its own frozen dataclass; ``Outcome`` is their union. A value
is exactly one of them, so there are no optional fields that only make sense
for some other outcome.

Example:
    def get_item(item_id: int) -> Outcome[Item]:
        item = repo.find(item_id)
        if item is None:
            return NotFound()
        return Success(item)
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, TypeGuard, final

T = typing.TypeVar("T")


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """200 OK. ``value`` is sent as the body; ``None`` sends no body."""

    value: T


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Created[T]:
    """201 Created. ``value`` is sent as the body, ``location`` as a header."""

    value: T
    location: str

    def __post_init__(self) -> None:
        if not isinstance(self.location, str):
            raise TypeError(
                f"Created.location must be str, got {type(self.location).__name__}"
            )
        if not self.location:
            raise ValueError("Created.location must be non-empty")


@final
@dataclasses.dataclass(frozen=True, slots=True)
class NotFound:
    """404 Not Found."""


@final
@dataclasses.dataclass(frozen=True, slots=True)
class BadRequest:
    """400 Bad Request.

    ``detail`` is optional, client-safe and serialized as the body. Leave it
    as ``None`` to send no body.
    """

    detail: Any = None


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Forbidden:
    """401/403, depending on ``Config.forbidden_status``."""


@final
@dataclasses.dataclass(frozen=True, slots=True)
class InternalFailure:
    """500 Internal Server Error.

    ``cause`` is logged by the translator and never sent to the client.
    """

    cause: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.cause, BaseException):
            raise TypeError(
                "InternalFailure.cause must be an exception, got "
                f"{type(self.cause).__name__}; wrap plain values in OperationError"
            )


Outcome = Success[T] | Created[T] | NotFound | BadRequest | Forbidden | InternalFailure

OUTCOME_TYPES: tuple[type, ...] = (
    Success,
    Created,
    NotFound,
    BadRequest,
    Forbidden,
    InternalFailure,
)


def is_outcome(obj: object) -> TypeGuard[Outcome[Any]]:
    """Return True if ``obj`` is one of the six outcome variants."""
    return isinstance(obj, OUTCOME_TYPES)
