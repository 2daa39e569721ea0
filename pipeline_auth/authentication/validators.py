"""
Ready-made UserValidator implementations.

- CallableUserValidator: adapt a plain `(username, password) -> bool` function
- InMemoryUserValidator: fixed username -> password mapping (demo and tests)

InMemoryUserValidator is intentionally simple: plain-text passwords held
in memory. Replace it with a validator backed by a real user store in
production.
"""

import secrets
from typing import Callable, Dict, Mapping

from .base import UserValidator


class CallableUserValidator(UserValidator):
    """Wrap a function so it can be passed where a UserValidator is expected."""

    def __init__(self, func: Callable[[str, str], bool]):
        self._func = func

    def validate(self, username: str, password: str) -> bool:
        return bool(self._func(username, password))


class InMemoryUserValidator(UserValidator):
    """
    Validate against an in-memory username -> password mapping.

    Args:
        users (Mapping[str, str]): Known users. Copied on construction so
            later changes to the caller's dict are not observed.
    """

    def __init__(self, users: Mapping[str, str]):
        self._users: Dict[str, str] = dict(users)

    def validate(self, username: str, password: str) -> bool:
        stored_password = self._users.get(username)
        if stored_password is None:
            return False
        return secrets.compare_digest(
            stored_password.encode("utf8"), password.encode("utf8")
        )
