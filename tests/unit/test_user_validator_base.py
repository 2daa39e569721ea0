"""
Coverage probe for pipeline_auth.authentication.base.UserValidator.

Goal:
    Execute the abstract method body (which raises NotImplementedError)
    via super() in a concrete subclass.
"""

import pytest

from pipeline_auth.authentication.base import UserValidator


class _ProbeValidator(UserValidator):
    """Concrete test subclass that forwards to UserValidator via super()."""

    def validate(self, username: str, password: str) -> bool:
        return super().validate(username, password)


def test_user_validator_validate_raises_not_implemented():
    with pytest.raises(NotImplementedError):
        _ProbeValidator().validate("alice", "secret")


def test_user_validator_cannot_be_instantiated():
    with pytest.raises(TypeError):
        UserValidator()
