"""
Application-wide pipelines driven by a Starlette middleware.

Usage:
    pipelines = ApplicationPipelines()
    pipelines.before_request.add_item_to_end_of_pipeline(my_hook)
    pipelines.install(app)

Every request builds (or reuses) the shared RequestContext, runs
`before_request`, calls the downstream app unless a hook short-circuited,
then runs `after_request` on whichever response was produced.
"""

import logging

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .context import get_context
from .pipeline import AfterPipeline, BeforePipeline

log = logging.getLogger("pipeline_auth.pipelines")


class ApplicationPipelines:
    """Before/after request pipelines applied to every route of an app."""

    def __init__(self) -> None:
        self.before_request = BeforePipeline()
        self.after_request = AfterPipeline()

    def install(self, app: FastAPI) -> None:
        """Register the middleware that drives these pipelines on `app`."""
        app.add_middleware(PipelineMiddleware, pipelines=self)
        log.info(
            "Application pipelines installed (%d before, %d after hooks)",
            len(self.before_request),
            len(self.after_request),
        )


class PipelineMiddleware(BaseHTTPMiddleware):
    """Runs ApplicationPipelines around the downstream ASGI app."""

    def __init__(self, app, pipelines: ApplicationPipelines):
        super().__init__(app)
        self.pipelines = pipelines

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        context = get_context(request)

        response = await self.pipelines.before_request.invoke(context)
        if response is None:
            response = await call_next(request)

        context.response = response
        await self.pipelines.after_request.invoke(context)
        return context.response
