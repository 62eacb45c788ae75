"""Starlette (and FastAPI) integration.

Example:
    @endpoint
    async def get_item(request: Request) -> Outcome[dict[str, int]]:
        item_id = int(request.path_params["item_id"])
        row = unwrap(await attempt_async(db.fetch, item_id))
        return Success(row) if row else NotFound()

    app = Starlette(routes=[Route("/items/{item_id}", get_item)])
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any

from starlette.responses import Response

from routeresult.propagate import handler
from routeresult.translate import translate

if TYPE_CHECKING:
    from collections.abc import Callable

    from routeresult.config import Config
    from routeresult.outcome import Outcome
    from routeresult.serialization import Serializer
    from routeresult.translate import HttpResponse


def to_starlette_response(response: HttpResponse) -> Response:
    """Build a Starlette ``Response`` carrying exactly our status, headers and body."""
    # content-length is always present, so Starlette adds no framing of its own.
    return Response(
        content=response.body,
        status_code=response.status,
        headers=dict(response.headers),
    )


def respond(
    outcome: Outcome[Any],
    *,
    config: Config | None = None,
    serializer: Serializer | None = None,
) -> Response:
    """Translate ``outcome`` and wrap it as a Starlette ``Response``."""
    return to_starlette_response(
        translate(outcome, config=config, serializer=serializer)
    )


def endpoint(
    fn: Callable[..., Any] | None = None,
    *,
    config: Config | None = None,
    serializer: Serializer | None = None,
) -> Any:
    """Turn an outcome-returning handler into a Starlette/FastAPI endpoint.

    The handler gets ``handler`` semantics (short-circuits and stray
    exceptions become ``InternalFailure``). Usable bare (``@endpoint``) or
    with options (``@endpoint(config=...)``).

    With FastAPI, register the route with ``response_model=None`` so the
    ``Outcome`` return annotation is not read as a response model, and pass
    ``responses=openapi_responses(T)`` to document it.
    """

    def decorate(func: Callable[..., Any]) -> Callable[..., Any]:
        wrapped = handler(func)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_view(*args: Any, **kwargs: Any) -> Response:
                outcome = await wrapped(*args, **kwargs)
                return respond(outcome, config=config, serializer=serializer)

            return async_view

        @functools.wraps(func)
        def view(*args: Any, **kwargs: Any) -> Response:
            outcome = wrapped(*args, **kwargs)
            return respond(outcome, config=config, serializer=serializer)

        return view

    if fn is None:
        return decorate
    return decorate(fn)
