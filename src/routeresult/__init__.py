"""routeresult: one return type for web request handlers.

Public API:
    - Success, Created, NotFound, BadRequest, Forbidden, InternalFailure:
      the outcomes a handler can return (``Outcome`` is their union)
    - translate(): outcome -> status, headers, body (and a log record for
      internal failures)
    - handler / unwrap / lift / attempt: short-circuit propagation from
      fallible calls
    - describe_responses() / openapi_responses(): static status and schema
      metadata for documentation tooling
    - Config: per-deployment settings
"""

from __future__ import annotations

import logging

from routeresult.config import DEFAULT_CONFIG, Config
from routeresult.errors import (
    BadRequestError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    OperationError,
    OutcomeError,
    RouteResultError,
    SerializationError,
    ShortCircuit,
)
from routeresult.outcome import (
    BadRequest,
    Created,
    Forbidden,
    InternalFailure,
    NotFound,
    Outcome,
    Success,
    is_outcome,
)
from routeresult.propagate import handler, lift, unwrap
from routeresult.result import Err, Ok, Result, attempt, attempt_async
from routeresult.schema import (
    ResponseDescription,
    describe_responses,
    openapi_responses,
)
from routeresult.serialization import JsonSerializer, Serializer
from routeresult.table import RESPONSE_TABLE, ResponseRule
from routeresult.translate import HttpResponse, translate

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("routeresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("routeresult").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "RESPONSE_TABLE",
    "BadRequest",
    "BadRequestError",
    "Config",
    "ConfigurationError",
    "Created",
    "Err",
    "Forbidden",
    "ForbiddenError",
    "HttpResponse",
    "InternalFailure",
    "JsonSerializer",
    "NotFound",
    "NotFoundError",
    "Ok",
    "OperationError",
    "Outcome",
    "OutcomeError",
    "ResponseDescription",
    "ResponseRule",
    "Result",
    "RouteResultError",
    "SerializationError",
    "Serializer",
    "ShortCircuit",
    "Success",
    "attempt",
    "attempt_async",
    "describe_responses",
    "handler",
    "is_outcome",
    "lift",
    "openapi_responses",
    "translate",
    "unwrap",
]
