"""
User validator interface.

Purpose:
    The single collaborator Basic authentication delegates to. The
    embedding application decides how usernames and passwords are checked
    (database, LDAP, fixed list); this package only calls `validate`.

Implementations must be safe to call from several threads at once: the
credential retrieval hook runs in the threadpool for concurrent requests.

Testing & Coverage:
    The abstract method is not executed directly in tests.
"""

from abc import ABC, abstractmethod


class UserValidator(ABC):
    """Abstract base class for username/password validators."""

    @abstractmethod  # pragma: no cover
    def validate(self, username: str, password: str) -> bool:
        """
        Decide whether a username/password pair is valid.

        Returns:
            bool: True if the pair should be treated as authenticated.

        Raises:
            Any exception the implementation chooses; it is not caught by
            the authentication hooks and reaches the host's error handling.
        """
        raise NotImplementedError
