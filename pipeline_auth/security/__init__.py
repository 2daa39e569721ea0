"""
Security conventions shared between authentication and authorization.
"""

from .conventions import (
    AUTHENTICATED_USERNAME_KEY,
    current_username,
    get_current_username,
    requires_authentication,
)

__all__ = [
    "AUTHENTICATED_USERNAME_KEY",
    "current_username",
    "get_current_username",
    "requires_authentication",
]
