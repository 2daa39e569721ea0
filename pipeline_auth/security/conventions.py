"""
Identity marker conventions and the minimal authorization check.

Authentication hooks write the validated username into the request
context's item store under AUTHENTICATED_USERNAME_KEY. Everything that
needs to know "who is calling" reads it back through the helpers here.

LLM Prompt Example:
    "Explain how to decouple authentication (who are you) from
    authorization (may you) using a well-known per-request key."
"""

from typing import Optional

from fastapi import Request, status
from starlette.responses import Response

from ..pipelines.context import RequestContext, get_context
from ..pipelines.route_group import RouteGroup

AUTHENTICATED_USERNAME_KEY = "username"


def current_username(context: RequestContext) -> Optional[str]:
    """Return the authenticated username for this request, or None."""
    return context.items.get(AUTHENTICATED_USERNAME_KEY)


def get_current_username(request: Request) -> Optional[str]:
    """
    FastAPI dependency returning the authenticated username (or None).

    Use with Depends() on routes that behave differently for anonymous callers.
    """
    return current_username(get_context(request))


def _reject_anonymous(context: RequestContext) -> Optional[Response]:
    if current_username(context) is None:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return None


def requires_authentication(group: RouteGroup) -> None:
    """
    Mark a route group as requiring an authenticated user.

    Sets `group.requires_authentication` and appends a before hook that
    answers 401 when no identity marker is present. Authentication hooks
    are expected at the start of the pipeline so they run first.
    """
    group.requires_authentication = True
    group.before.add_item_to_end_of_pipeline(_reject_anonymous)
