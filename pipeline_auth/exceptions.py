"""
Exceptions raised by pipeline_auth at setup time.

Request-time problems (missing or malformed credentials) are never raised;
they simply leave the request unauthenticated.
"""


class InvalidArgumentError(ValueError):
    """A required argument was missing or empty when wiring authentication."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        super().__init__(message or f"{argument} is required")
