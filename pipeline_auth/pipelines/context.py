"""
Per-request context shared by every hook in a request's pipelines.

A single RequestContext is created per request and stored on
`request.state`, so application-wide hooks (middleware) and route-group
hooks (custom route class) see the same `items` store.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from starlette.requests import Request
from starlette.responses import Response

_STATE_ATTR = "pipeline_context"


@dataclass
class RequestContext:
    """Inbound request, cross-hook item store and (after handling) the response."""

    request: Request
    items: Dict[str, Any] = field(default_factory=dict)
    response: Optional[Response] = None


def get_context(request: Request) -> RequestContext:
    """
    Return the context attached to this request, creating it on first use.

    Args:
        request (Request): Incoming Starlette/FastAPI request.

    Returns:
        RequestContext: The request's single shared context.
    """
    context = getattr(request.state, _STATE_ATTR, None)
    if context is None:
        context = RequestContext(request=request)
        setattr(request.state, _STATE_ATTR, context)
    return context
