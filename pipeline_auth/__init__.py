"""
pipeline_auth package initializer.
"""

from . import authentication
from . import pipelines
from . import security

__all__ = ["authentication", "pipelines", "security"]
