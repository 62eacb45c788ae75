"""Exception hierarchy for routeresult."""

from __future__ import annotations

from typing import Any


def safe_str(value: object) -> str:
    """Render ``value`` as text, falling back when its ``__str__`` raises."""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


class RouteResultError(Exception):
    """Base exception for all routeresult errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(RouteResultError):
    """Configuration validation or resolution failed."""


class SerializationError(RouteResultError):
    """A response body could not be serialized.

    The offending value itself is deliberately not kept: only its type name,
    so the error is safe to log.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        value_type: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.value_type = value_type


class OperationError(RouteResultError):
    """A failure value that is not an exception, wrapped so it can be logged.

    Two instances are equal when they wrap equal values, so
    ``lift(Err("x")) == InternalFailure(OperationError("x"))``.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(safe_str(error))
        self.error = error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperationError):
            return NotImplemented
        return type(other) is type(self) and bool(self.error == other.error)

    def __hash__(self) -> int:
        try:
            return hash((type(self), self.error))
        except TypeError:
            # Unhashable payloads (dicts, lists) still need a stable hash.
            return hash(type(self))


class ShortCircuit(RouteResultError):
    """Raised by ``unwrap()`` to leave a handler early.

    The ``handler`` decorator turns it into ``InternalFailure(cause)``.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"short-circuit: {type(cause).__name__}: {safe_str(cause)}"
        )
        self.cause = cause


class OutcomeError(RouteResultError):
    """A non-success outcome was unwrapped inside another handler."""

    default_message = "Outcome error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(OutcomeError):
    """Unwrapped a ``NotFound`` outcome."""

    default_message = "Not found"


class BadRequestError(OutcomeError):
    """Unwrapped a ``BadRequest`` outcome.

    ``detail`` is kept for server-side diagnostics only.
    """

    default_message = "Bad request"

    def __init__(self, message: str | None = None, *, detail: Any = None) -> None:
        super().__init__(message)
        self.detail = detail


class ForbiddenError(OutcomeError):
    """Unwrapped a ``Forbidden`` outcome."""

    default_message = "Forbidden"
