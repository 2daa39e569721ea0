"""
HTTP Basic authentication for request pipelines.

Responsibilities:
    - Pre-request hook: read `Authorization: Basic <base64(user:pass)>`,
      ask the configured UserValidator, and record the username in the
      request context on success
    - Post-request hook: on a 401 response, add
      `WWW-Authenticate: Basic realm="<realm>"` so clients prompt for credentials
    - Registration for a whole application or a single route group

Notes:
    - Missing, malformed or rejected credentials never raise; the request just
      stays anonymous and an authorization step decides what to do with it.
    - The decoded text is split on every ":" and must yield exactly two parts,
      so a password containing ":" is never accepted.
    - Exceptions raised by the validator are not caught here.

LLM Prompt Example:
    "Show how to implement HTTP Basic auth as a pair of pipeline hooks that
    only annotate the request, leaving the access decision to a later step."
"""

import base64
import logging
from typing import List, Optional

from starlette.requests import Request
from starlette.responses import Response

from ..exceptions import InvalidArgumentError
from ..pipelines.application import ApplicationPipelines
from ..pipelines.context import RequestContext
from ..pipelines.pipeline import AfterHook, BeforeHook
from ..pipelines.route_group import RouteGroup
from ..security.conventions import AUTHENTICATED_USERNAME_KEY, requires_authentication
from .configuration import BasicAuthenticationConfiguration

SCHEME = "Basic"

# Context item holding ids of configurations whose retrieval hook already ran
_RETRIEVED_KEY = "basic-auth-retrieved"

log = logging.getLogger("pipeline_auth.authentication.basic")


def enable(pipelines: ApplicationPipelines, configuration: BasicAuthenticationConfiguration) -> None:
    """
    Enable Basic authentication for every request of an application.

    Args:
        pipelines (ApplicationPipelines): Application pipelines to add hooks to.
        configuration (BasicAuthenticationConfiguration): Validator and realm.

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    if pipelines is None:
        raise InvalidArgumentError("pipelines")
    if configuration is None:
        raise InvalidArgumentError("configuration")

    pipelines.before_request.add_item_to_start_of_pipeline(get_credential_retrieval_hook(configuration))
    pipelines.after_request.add_item_to_end_of_pipeline(get_authentication_prompt_hook(configuration))
    log.info("Basic authentication enabled for application (realm=%r)", configuration.realm)


def enable_for_group(group: RouteGroup, configuration: BasicAuthenticationConfiguration) -> None:
    """
    Enable Basic authentication for one route group and require a user on it.

    Args:
        group (RouteGroup): Route group to protect.
        configuration (BasicAuthenticationConfiguration): Validator and realm.

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    if group is None:
        raise InvalidArgumentError("group")
    if configuration is None:
        raise InvalidArgumentError("configuration")

    requires_authentication(group)
    group.before.add_item_to_start_of_pipeline(get_credential_retrieval_hook(configuration))
    group.after.add_item_to_end_of_pipeline(get_authentication_prompt_hook(configuration))
    log.info(
        "Basic authentication enabled for route group %r (realm=%r)",
        group.router.prefix,
        configuration.realm,
    )


def get_credential_retrieval_hook(configuration: BasicAuthenticationConfiguration) -> BeforeHook:
    """
    Build the pre-request hook that loads the user from the Authorization header.

    The hook checks credentials at most once per request for a given
    configuration, so enabling it for both the application and a route
    group does not call the validator twice.

    Returns:
        BeforeHook: Always returns None so the pipeline continues.

    Raises:
        InvalidArgumentError: If configuration is None.
    """
    if configuration is None:
        raise InvalidArgumentError("configuration")

    def credential_retrieval_hook(context: RequestContext) -> Optional[Response]:
        # Application and route group pipelines share one context per request
        retrieved = context.items.setdefault(_RETRIEVED_KEY, set())
        if id(configuration) in retrieved:
            return None
        retrieved.add(id(configuration))
        retrieve_credentials(context, configuration)
        return None

    return credential_retrieval_hook


def get_authentication_prompt_hook(configuration: BasicAuthenticationConfiguration) -> AfterHook:
    """Build the post-request hook that challenges 401 responses."""
    challenge = f'{SCHEME} realm="{configuration.realm}"'

    def authentication_prompt_hook(context: RequestContext) -> None:
        response = context.response
        if response is not None and response.status_code == 401:
            response.headers["WWW-Authenticate"] = challenge

    return authentication_prompt_hook


def retrieve_credentials(context: RequestContext, configuration: BasicAuthenticationConfiguration) -> None:
    """Validate the request's Basic credentials and record the username on success."""
    credentials = extract_credentials_from_headers(context.request)

    if credentials is None or len(credentials) != 2:
        return

    username, password = credentials
    if configuration.user_validator.validate(username, password):
        context.items[AUTHENTICATED_USERNAME_KEY] = username
    else:
        log.debug("Basic credentials rejected for user %r", username)


def extract_credentials_from_headers(request: Request) -> Optional[List[str]]:
    """
    Decode the first Authorization header value into its ":"-separated parts.

    Returns:
        Optional[List[str]]: Parts of the decoded text (not yet checked for
        count), or None when there is no usable Basic header.
    """
    values = request.headers.getlist("authorization")
    if not values:
        return None

    authorization = values[0]
    if not authorization.startswith(SCHEME):
        log.debug("Ignoring Authorization header with non-Basic scheme")
        return None

    # Whitespace inside the payload is ignored, like surrounding whitespace
    encoded_user_pass = "".join(authorization[len(SCHEME):].split())
    try:
        user_pass = base64.b64decode(encoded_user_pass, validate=True).decode("utf-8")
    except ValueError:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        log.debug("Ignoring malformed Basic credentials payload")
        return None

    if not user_pass.strip():
        return None
    return user_pass.split(":")
