"""
Pydantic schemas for responses of the demo application.
"""

from typing import Optional

from pydantic import BaseModel


class WhoAmI(BaseModel):
    """Schema for responses describing the calling user."""
    authenticated: bool
    username: Optional[str] = None


class ProfileOut(BaseModel):
    """Schema for the protected profile endpoint."""
    username: str
    message: str
