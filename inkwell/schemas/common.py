# inkwell/schemas/common.py
"""Common schemas used across multiple modules."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

# Lowercase letters, digits and hyphens only
SLUG_PATTERN = r"^[a-z0-9-]+$"


class DeleteInput(BaseModel):
    """Input for every delete procedure."""
    id: int


class SlugInput(BaseModel):
    """Input for slug lookups. Matching is exact and case-sensitive."""
    slug: str


class DeleteResult(BaseModel):
    """Outcome of a delete procedure."""
    success: bool = Field(..., description="True when a row was removed")


class HealthCheck(BaseModel):
    status: str = "ok"
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str = Field(..., description="Error type or code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(None, description="Additional error details")


def reject_null(value, info):
    """Field validator for update inputs: a field may be omitted but not sent as null."""
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


def reject_blank(value: Optional[str], info):
    if value is not None and len(value.strip()) == 0:
        raise ValueError(f"{info.field_name.capitalize()} cannot be empty")
    return value
