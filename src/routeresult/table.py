"""Response table: the one place that says how each outcome is sent.

Both the translator and the documentation metadata read this table, so the
status codes and body rules cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

from routeresult.outcome import (
    BadRequest,
    Created,
    Forbidden,
    InternalFailure,
    NotFound,
    Success,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from routeresult.config import Config

BodyRule = Literal["payload", "detail", "empty"]


@dataclass(frozen=True, slots=True)
class ResponseRule:
    """How one outcome variant becomes a response."""

    variant: type
    #: Status sent unless ``status_setting`` overrides it.
    status: int
    #: Which field becomes the body: ``value``, ``detail`` or nothing.
    body: BodyRule
    #: ``None`` in the body field means "no body" rather than ``null``.
    none_is_empty: bool = False
    #: Translation writes a log record.
    logs: bool = False
    #: Config attribute holding a per-deployment status.
    status_setting: str | None = None

    def status_for(self, config: Config) -> int:
        if self.status_setting is None:
            return self.status
        return int(getattr(config, self.status_setting))

    def body_value(self, outcome: Any) -> Any:
        if self.body == "payload":
            return outcome.value
        if self.body == "detail":
            return outcome.detail
        return None

    def has_body(self, outcome: Any) -> bool:
        if self.body == "empty":
            return False
        return not (self.none_is_empty and self.body_value(outcome) is None)


RESPONSE_TABLE: Mapping[type, ResponseRule] = MappingProxyType(
    {
        Success: ResponseRule(Success, 200, "payload", none_is_empty=True),
        Created: ResponseRule(Created, 201, "payload"),
        NotFound: ResponseRule(NotFound, 404, "empty"),
        BadRequest: ResponseRule(BadRequest, 400, "detail", none_is_empty=True),
        Forbidden: ResponseRule(
            Forbidden, 403, "empty", status_setting="forbidden_status"
        ),
        InternalFailure: ResponseRule(InternalFailure, 500, "empty", logs=True),
    }
)


def rule_for(outcome: object) -> ResponseRule:
    """Look up the rule for ``outcome``; non-outcomes raise ``TypeError``."""
    rule = RESPONSE_TABLE.get(type(outcome))
    if rule is None:
        raise TypeError(
            f"Expected an Outcome variant, got {type(outcome).__name__}; "
            "return Success(...), Created(...), NotFound(), BadRequest(...), "
            "Forbidden() or InternalFailure(...)"
        )
    return rule
