"""
Authentication schemas.

These define the API contracts for registration, login and the
current-user profile.
"""

import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=30, description="Unique username")
    email: str = Field(min_length=3, max_length=254, description="Unique email address")
    password: str = Field(min_length=6, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "email": "new.user@example.com",
                "password": "securepassword123",
            }
        }
    )

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not v.replace('_', '').replace('-', '').isalnum():
            raise ValueError('Username can only contain letters, numbers, hyphens, and underscores')
        return v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please provide a valid email")
        return v


class LoginRequest(BaseModel):
    """Login with username or email."""

    identifier: str = Field(min_length=1, max_length=254, description="Username or email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"identifier": "john_doe", "password": "securepassword123"}}
    )

    @field_validator("identifier", mode="before")
    @classmethod
    def strip_identifier(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserResponse(BaseModel):
    """Public user profile. Never carries the password hash."""

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserData(BaseModel):
    user: UserResponse


class AuthData(BaseModel):
    """Session token plus the user it belongs to."""

    token: str = Field(description="Bearer session token")
    user: UserResponse
