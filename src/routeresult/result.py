"""Result values for ordinary fallible operations.

Handlers call services that report failure either by raising or by returning
an ``Err``. ``attempt`` bridges the first style into the second; ``unwrap``
(see ``routeresult.propagate``) short-circuits on either.
"""

from __future__ import annotations

import dataclasses
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = typing.TypeVar("T")
E = typing.TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful operation."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed operation, containing the error."""

    error: E


Result = Ok[T] | Err[E]


def attempt[R](
    fn: Callable[..., R], /, *args: typing.Any, **kwargs: typing.Any
) -> Ok[R] | Err[Exception]:
    """Call ``fn`` and capture a raised ``Exception`` as ``Err``."""
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        return Err(exc)


async def attempt_async[R](
    fn: Callable[..., Awaitable[R]], /, *args: typing.Any, **kwargs: typing.Any
) -> Ok[R] | Err[Exception]:
    """Await ``fn(...)`` and capture a raised ``Exception`` as ``Err``."""
    try:
        return Ok(await fn(*args, **kwargs))
    except Exception as exc:
        return Err(exc)
