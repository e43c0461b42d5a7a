"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    full_name: Optional[str] = Field(None, max_length=255)


# Request schemas
class UserCreate(UserBase):
    """Schema for registering a user known to the identity collaborator."""
    pass


class UserUpdate(BaseModel):
    """Schema for updating account details."""
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, max_length=255)


# Response schemas
class UserResponse(UserBase):
    """Schema for user data in API responses."""
    id: int
    is_active: bool
    is_premium: bool
    subscription_status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects
