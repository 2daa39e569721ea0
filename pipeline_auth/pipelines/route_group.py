"""
Route groups: an APIRouter with its own before/after pipelines.

A RouteGroup plays the role of a "module": every route declared on
`group.router` is wrapped by a custom APIRoute class that runs the group's
`before` pipeline ahead of the endpoint and its `after` pipeline on the
resulting response.

LLM Prompt Example:
    "Demonstrate a FastAPI custom APIRoute class that wraps every handler
    in a router with per-router pre/post processing."
"""

import inspect
from typing import Any, Callable, Coroutine, Type

from fastapi import APIRouter
from fastapi.exception_handlers import http_exception_handler
from fastapi.routing import APIRoute
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from .context import get_context
from .pipeline import AfterPipeline, BeforePipeline


async def _render_http_exception(request: Request, exc: HTTPException) -> Response:
    """
    Render `exc` with the handler the application registered for it.

    Lookup matches Starlette's exception middleware: a handler keyed by the
    status code wins, then the closest class in the exception's MRO. Falls
    back to FastAPI's default handler when the app registered none.
    """
    handlers = getattr(request.app, "exception_handlers", None) or {}
    handler = handlers.get(exc.status_code)
    if handler is None:
        for cls in type(exc).__mro__:
            if cls in handlers:
                handler = handlers[cls]
                break
    if handler is None:
        handler = http_exception_handler

    if inspect.iscoroutinefunction(handler):
        return await handler(request, exc)
    return await run_in_threadpool(handler, request, exc)


class PipelineRoute(APIRoute):
    """APIRoute that runs its owning group's pipelines around the endpoint."""

    group: "RouteGroup"

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_handler = super().get_route_handler()
        group = self.group

        async def pipeline_handler(request: Request) -> Response:
            context = get_context(request)

            response = await group.before.invoke(context)
            if response is None:
                try:
                    response = await original_handler(request)
                except HTTPException as exc:
                    # Render here so the group's after hooks see the error response
                    response = await _render_http_exception(request, exc)

            context.response = response
            await group.after.invoke(context)
            return context.response

        return pipeline_handler


class RouteGroup:
    """
    A group of routes sharing before/after pipelines.

    Attributes:
        router (APIRouter): Declare routes here; include it in the app as usual.
        before (BeforePipeline): Hooks run before each route handler in the group.
        after (AfterPipeline): Hooks run after each route handler in the group.
        requires_authentication (bool): Set by security.requires_authentication.
    """

    def __init__(self, prefix: str = "", **router_kwargs: Any) -> None:
        self.before = BeforePipeline()
        self.after = AfterPipeline()
        self.requires_authentication = False
        self.router = APIRouter(prefix=prefix, route_class=self._route_class(), **router_kwargs)

    def _route_class(self) -> Type[PipelineRoute]:
        return type("GroupPipelineRoute", (PipelineRoute,), {"group": self})
