"""Outcome to response translation.

``translate`` is a pure function of its arguments except for logging: an
``InternalFailure`` (or a body that fails to serialize) writes one error
record. It never raises for a valid outcome; every fault becomes a bare 500.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any

from routeresult.config import DEFAULT_CONFIG
from routeresult.errors import SerializationError, safe_str
from routeresult.outcome import Created, InternalFailure
from routeresult.serialization import DEFAULT_SERIALIZER
from routeresult.table import rule_for

if TYPE_CHECKING:
    from routeresult.config import Config
    from routeresult.outcome import Outcome
    from routeresult.serialization import Serializer

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Framework-neutral response: status, ordered headers and body bytes."""

    status: int
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Return the first header called ``name`` (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def media_type(self) -> str | None:
        return self.header("content-type")


def translate(
    outcome: Outcome[Any],
    *,
    config: Config | None = None,
    serializer: Serializer | None = None,
) -> HttpResponse:
    """Build the response for ``outcome``.

    Args:
        outcome: The value returned by a handler.
        config: Deployment settings; defaults to ``DEFAULT_CONFIG``.
        serializer: Body serializer; defaults to compact JSON.

    Returns:
        HttpResponse with the status, headers and body for the outcome.

    Raises:
        TypeError: ``outcome`` is not an Outcome variant.
    """
    cfg = config or DEFAULT_CONFIG
    rule = rule_for(outcome)
    logger = logging.getLogger(cfg.logger_name) if cfg.logger_name else log

    if isinstance(outcome, InternalFailure):
        cause = outcome.cause
        logger.error(
            "Internal failure while handling request: %s",
            _describe(cause),
            exc_info=cause if cfg.log_tracebacks else None,
        )
        return _bare(rule.status_for(cfg))

    body = b""
    if rule.has_body(outcome):
        try:
            body = (serializer or DEFAULT_SERIALIZER).serialize(
                rule.body_value(outcome)
            )
        except Exception as exc:
            err = _as_serialization_error(exc)
            logger.error(
                "Failed to serialize %s response body: %s",
                type(outcome).__name__,
                safe_str(err),
                exc_info=err if cfg.log_tracebacks else None,
            )
            return _bare(500)

    headers: list[tuple[str, str]] = []
    if isinstance(outcome, Created):
        headers.append(("location", outcome.location))
    if body:
        headers.append(("content-type", cfg.media_type))
    headers.append(("content-length", str(len(body))))
    return HttpResponse(rule.status_for(cfg), tuple(headers), body)


def _bare(status: int) -> HttpResponse:
    return HttpResponse(status, (("content-length", "0"),), b"")


def _describe(cause: BaseException) -> str:
    text = safe_str(cause)
    return f"{type(cause).__name__}: {text}" if text else type(cause).__name__


def _as_serialization_error(exc: Exception) -> SerializationError:
    if isinstance(exc, SerializationError):
        return exc
    # Custom serializers may raise anything; keep the original as the cause.
    err = SerializationError(
        f"Serializer failed: {type(exc).__name__}: {safe_str(exc)}",
        hint="Serializers should raise SerializationError.",
    )
    err.__cause__ = exc
    return err
