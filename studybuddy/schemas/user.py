"""
Pydantic schemas for User model.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class UserBase(BaseModel):
    """Base user schema."""

    name: str
    email: EmailStr


class UserCreate(BaseModel):
    """Schema for user signup. Missing fields are reported by the endpoint."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for login with email and password."""

    email: Optional[str] = None
    password: Optional[str] = None


class User(UserBase):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Token plus the user it was issued for."""

    token: str
    user: User
