"""
Demo API module for pipeline_auth.

Responsibilities:
    - Build a FastAPI app whose every request passes through Basic
      authentication (anonymous callers allowed)
    - Expose a route group that requires an authenticated user
    - Provide a health check

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The UserValidator and realm are injected; defaults come from
      pipeline_auth.config.settings (environment).
    - Authentication only annotates the request; the route group's
      requires_authentication hook turns anonymous access into a 401,
      and the challenge hook adds WWW-Authenticate to it.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory
    where authentication is registered as request pipeline hooks."
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from pipeline_auth.authentication import (
    BasicAuthenticationConfiguration,
    InMemoryUserValidator,
    UserValidator,
    basic,
)
from pipeline_auth.config import settings
from pipeline_auth.pipelines import ApplicationPipelines, RouteGroup
from pipeline_auth.schemas import ProfileOut, WhoAmI
from pipeline_auth.security import get_current_username


def create_app(
    user_validator: Optional[UserValidator] = None,
    realm: Optional[str] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        user_validator (UserValidator, optional): Credential checker. Defaults to an
            InMemoryUserValidator over settings.DEMO_USERS.
        realm (str, optional): Challenge realm. Defaults to settings.REALM.

    Returns:
        FastAPI: A configured application with its own pipelines and validator.

    Why an app factory?
        - Enables per-test isolation in pytest (each test can inject a validator).
        - Avoids accidental global state across workers/processes.
    """
    app = FastAPI(
        title="Pipeline Basic Auth",
        description="HTTP Basic authentication as request pipeline hooks",
        docs_url="/docs",
    )
    log = logging.getLogger("pipeline_auth")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    if user_validator is None:
        user_validator = InMemoryUserValidator(settings.DEMO_USERS)
    configuration = BasicAuthenticationConfiguration(
        user_validator=user_validator,
        realm=realm or settings.REALM,
    )
    log.info("Basic auth realm: %s", configuration.realm)

    # ----------------------------------------------------------------
    # Application-wide pipelines: identify the caller on every request
    # ----------------------------------------------------------------
    pipelines = ApplicationPipelines()
    basic.enable(pipelines, configuration)
    pipelines.install(app)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/whoami", response_model=WhoAmI)
    def whoami(username: Optional[str] = Depends(get_current_username)) -> WhoAmI:
        """
        Report who the caller is authenticated as.

        Anonymous and wrongly-authenticated callers get 200 with
        authenticated=False; only protected routes answer 401.
        """
        return WhoAmI(authenticated=username is not None, username=username)

    # ----------------------------------------------------------------
    # Protected route group
    # ----------------------------------------------------------------
    secure = RouteGroup(prefix="/secure", tags=["secure"])
    basic.enable_for_group(secure, configuration)

    @secure.router.get("/profile", response_model=ProfileOut)
    def profile(username: Optional[str] = Depends(get_current_username)) -> ProfileOut:
        return ProfileOut(username=username, message=f"Hello, {username}")

    app.include_router(secure.router)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
