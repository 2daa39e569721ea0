"""
Host request pipelines: per-request context, ordered hook lists, and the
application/route-group attachment points that drive them.
"""

from .application import ApplicationPipelines, PipelineMiddleware
from .context import RequestContext, get_context
from .pipeline import AfterPipeline, BeforePipeline, Pipeline
from .route_group import PipelineRoute, RouteGroup

__all__ = [
    "AfterPipeline",
    "ApplicationPipelines",
    "BeforePipeline",
    "Pipeline",
    "PipelineMiddleware",
    "PipelineRoute",
    "RequestContext",
    "RouteGroup",
    "get_context",
]
