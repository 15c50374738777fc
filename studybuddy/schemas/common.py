"""
Common schemas for API responses.
"""
from typing import Optional

from pydantic import BaseModel


class Message(BaseModel):
    """Generic message response."""

    message: str


class ContactCreate(BaseModel):
    """Contact form submission. Field checks happen in the endpoint."""

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
