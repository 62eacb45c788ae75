"""Static response metadata for documentation tooling.

Everything here is derived from ``RESPONSE_TABLE``; it never looks at an
outcome value and has no effect on translation.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from routeresult.config import DEFAULT_CONFIG
from routeresult.table import RESPONSE_TABLE

if TYPE_CHECKING:
    from routeresult.config import Config

_DEFAULT_REF_TEMPLATE = "#/$defs/{model}"


@dataclass(frozen=True, slots=True)
class ResponseDescription:
    """One reachable response of an ``Outcome[T]``."""

    variant: str
    status: int
    description: str
    #: JSON Schema of the body, or ``None`` when the response has no body.
    body_schema: dict[str, Any] | None
    media_type: str | None


def _json_schema(tp: Any, ref_template: str) -> dict[str, Any] | None:
    if tp is None or tp is type(None):
        return None
    return TypeAdapter(tp).json_schema(
        ref_template=ref_template, mode="serialization"
    )


def describe_responses(
    payload_type: Any,
    *,
    detail_type: Any = None,
    config: Config | None = None,
    ref_template: str = _DEFAULT_REF_TEMPLATE,
) -> tuple[ResponseDescription, ...]:
    """Describe every response an ``Outcome[payload_type]`` can produce.

    Args:
        payload_type: The ``T`` of ``Outcome[T]``; ``None`` for no payload.
        detail_type: Type of ``BadRequest.detail``, if the handler sends one.
        config: Deployment settings (chooses the Forbidden status).
        ref_template: Passed to pydantic for ``$ref`` targets.

    Returns:
        One description per outcome variant, in table order.
    """
    cfg = config or DEFAULT_CONFIG
    schemas = {
        "payload": _json_schema(payload_type, ref_template),
        "detail": _json_schema(detail_type, ref_template),
        "empty": None,
    }
    descriptions = []
    for rule in RESPONSE_TABLE.values():
        status = rule.status_for(cfg)
        body_schema = schemas[rule.body]
        descriptions.append(
            ResponseDescription(
                variant=rule.variant.__name__,
                status=status,
                description=HTTPStatus(status).phrase,
                body_schema=body_schema,
                media_type=cfg.media_type if body_schema is not None else None,
            )
        )
    return tuple(descriptions)


def openapi_responses(
    payload_type: Any,
    *,
    detail_type: Any = None,
    config: Config | None = None,
    ref_template: str = _DEFAULT_REF_TEMPLATE,
) -> dict[str, dict[str, Any]]:
    """Render ``describe_responses`` as an OpenAPI ``responses`` object.

    The result can be passed to FastAPI's ``responses=`` route argument.
    Pydantic emits nested definitions under ``$defs``; pass
    ``ref_template="#/components/schemas/{model}"`` when hoisting them.
    """
    responses: dict[str, dict[str, Any]] = {}
    for item in describe_responses(
        payload_type,
        detail_type=detail_type,
        config=config,
        ref_template=ref_template,
    ):
        entry: dict[str, Any] = {"description": item.description}
        if item.body_schema is not None and item.media_type is not None:
            entry["content"] = {item.media_type: {"schema": item.body_schema}}
        responses[str(item.status)] = entry
    return responses
