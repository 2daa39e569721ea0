"""
Basic authentication configuration.
"""

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError
from .base import UserValidator


@dataclass(frozen=True)
class BasicAuthenticationConfiguration:
    """
    Immutable settings shared by every request.

    Attributes:
        user_validator (UserValidator): Decides whether credentials are valid.
        realm (str): Protection space name sent in the WWW-Authenticate challenge.

    Raises:
        InvalidArgumentError: If `user_validator` is None or `realm` is blank.
    """

    user_validator: UserValidator
    realm: str

    def __post_init__(self) -> None:
        if self.user_validator is None:
            raise InvalidArgumentError("user_validator")
        if not self.realm or not self.realm.strip():
            raise InvalidArgumentError("realm", "realm must be a non-empty string")
