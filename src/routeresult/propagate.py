"""Short-circuit propagation from fallible calls into handler outcomes.

Handlers decorated with ``handler`` read as straight-line code: ``unwrap()``
either hands back the success value or leaves the handler, and the decorator
turns the early exit into ``InternalFailure(cause)``.

Example:
    @handler
    def show_order(order_id: int) -> Outcome[Order]:
        row = unwrap(db.fetch_order(order_id))  # Err -> 500, logged
        if row is None:
            return NotFound()
        return Success(Order.from_row(row))

Only unexpected failures are converted implicitly. A handler that wants a
404, 400 or 401/403 returns that outcome itself.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from routeresult.errors import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    OperationError,
    ShortCircuit,
)
from routeresult.outcome import (
    BadRequest,
    Created,
    Forbidden,
    InternalFailure,
    NotFound,
    Success,
    is_outcome,
)
from routeresult.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from routeresult.outcome import Outcome

log = logging.getLogger(__name__)


def as_cause(error: object) -> BaseException:
    """Return ``error`` as an exception, wrapping plain values in ``OperationError``."""
    if isinstance(error, BaseException):
        return error
    return OperationError(error)


def unwrap(value: object) -> Any:
    """Return the success value of ``value`` or short-circuit the handler.

    Accepts ``Ok``/``Err`` results and nested handler outcomes. ``Success``
    and ``Created`` yield their payload; every other outcome, and every
    ``Err``, raises ``ShortCircuit``.
    """
    match value:
        case Ok(value=inner):
            return inner
        case Err(error=error):
            cause = as_cause(error)
        case Success(value=inner) | Created(value=inner):
            return inner
        case NotFound():
            cause = NotFoundError()
        case BadRequest(detail=detail):
            cause = BadRequestError(detail=detail)
        case Forbidden():
            cause = ForbiddenError()
        case InternalFailure(cause=inner_cause):
            cause = inner_cause
        case _:
            raise TypeError(
                f"unwrap() expects Ok, Err or an Outcome, got {type(value).__name__}"
            )
    raise ShortCircuit(cause)


def lift(result: Ok[Any] | Err[Any]) -> Outcome[Any]:
    """Convert a ``Result`` into an outcome.

    ``Ok(None)`` means "nothing there" and becomes ``NotFound()``.
    """
    match result:
        case Ok(value=None):
            return NotFound()
        case Ok(value=inner):
            return Success(inner)
        case Err(error=error):
            return InternalFailure(as_cause(error))
        case _:
            raise TypeError(f"lift() expects Ok or Err, got {type(result).__name__}")


def to_outcome(returned: object) -> Outcome[Any]:
    """Normalize whatever a handler returned into an outcome."""
    if is_outcome(returned):
        return returned
    if isinstance(returned, (Ok, Err)):
        return lift(returned)
    if returned is None:
        return NotFound()
    return Success(returned)


def _failure(exc: Exception, name: str) -> InternalFailure:
    if isinstance(exc, ShortCircuit):
        log.debug("Handler %s short-circuited: %s", name, type(exc.cause).__name__)
        return InternalFailure(exc.cause)
    log.debug("Handler %s raised %s", name, type(exc).__name__)
    return InternalFailure(exc)


@overload
def handler[**P](
    fn: Callable[P, Awaitable[Any]],
) -> Callable[P, Awaitable[Outcome[Any]]]: ...
@overload
def handler[**P](fn: Callable[P, Any]) -> Callable[P, Outcome[Any]]: ...


def handler(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Make ``fn`` always return an outcome.

    - ``unwrap()`` short-circuits become ``InternalFailure(cause)``
    - any other ``Exception`` becomes ``InternalFailure(exc)``
    - returned ``Ok``/``Err`` go through ``lift()``
    - a returned plain value becomes ``Success(value)``, ``None`` becomes
      ``NotFound()``

    Cancellation and other non-``Exception`` signals propagate unchanged.
    Works for both ``def`` and ``async def`` handlers.
    """
    name = getattr(fn, "__qualname__", repr(fn))

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
            try:
                returned = await fn(*args, **kwargs)
            except Exception as exc:
                return _failure(exc, name)
            return to_outcome(returned)

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
        try:
            returned = fn(*args, **kwargs)
        except Exception as exc:
            return _failure(exc, name)
        return to_outcome(returned)

    return wrapper
