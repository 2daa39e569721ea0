"""
Runtime configuration for the pipeline_auth demo application
============================================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
The library code (hooks, pipelines) never reads the environment; only
`main.create_app()` consumes these values.

Authentication
--------------
- BASICAUTH_REALM       : realm sent in the WWW-Authenticate challenge (default "pipeline-auth")
- BASICAUTH_DEMO_USERS  : comma separated "user:password" pairs for the demo validator
                          (default "demo:demo,admin:admin")

Logging
-------
- BASICAUTH_LOG_LEVEL   : root log level used when no handlers are configured (default "INFO")
"""

import os
from typing import Dict


def _get_users(name: str, default: str) -> Dict[str, str]:
    raw = os.getenv(name, default)
    users: Dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair or ":" not in pair:
            continue
        username, password = pair.split(":", 1)
        users[username.strip()] = password
    return users


class _Settings:
    # -------- Authentication --------
    REALM: str = os.getenv("BASICAUTH_REALM", "pipeline-auth").strip() or "pipeline-auth"
    DEMO_USERS: Dict[str, str] = _get_users("BASICAUTH_DEMO_USERS", "demo:demo,admin:admin")

    # -------- Logging --------
    LOG_LEVEL: str = os.getenv("BASICAUTH_LOG_LEVEL", "INFO").strip().upper()


settings = _Settings()
