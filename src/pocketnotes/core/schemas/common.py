"""
Shared response schemas - the envelope every endpoint answers with
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')


class FieldError(BaseModel):
    """One rejected input field."""

    field: str = Field(description="Dotted path of the offending field")
    message: str = Field(description="Why it was rejected")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope: success flag, optional message, payload and errors."""

    success: bool = Field(default=True, description="Operation success status")
    message: Optional[str] = Field(default=None, description="Human-readable message")
    data: Optional[T] = Field(default=None, description="Response payload")
    errors: Optional[List[FieldError]] = Field(default=None, description="Validation errors")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Group created successfully",
                "data": {"group": {"id": "123e4567-e89b-12d3-a456-426614174000"}},
            }
        }
    )

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, errors: Optional[List[FieldError]] = None) -> "ApiResponse[T]":
        return cls(success=False, message=message, errors=errors)
