"""
HTTP Basic authentication: configuration, validators and pipeline hooks.
"""

from .base import UserValidator
from .basic import (
    SCHEME,
    enable,
    enable_for_group,
    extract_credentials_from_headers,
    get_authentication_prompt_hook,
    get_credential_retrieval_hook,
    retrieve_credentials,
)
from .configuration import BasicAuthenticationConfiguration
from .validators import CallableUserValidator, InMemoryUserValidator

__all__ = [
    "SCHEME",
    "BasicAuthenticationConfiguration",
    "CallableUserValidator",
    "InMemoryUserValidator",
    "UserValidator",
    "enable",
    "enable_for_group",
    "extract_credentials_from_headers",
    "get_authentication_prompt_hook",
    "get_credential_retrieval_hook",
    "retrieve_credentials",
]
