"""Error response schemas."""

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Uniform error body."""

    status: int
    message: str
    timestamp: datetime


class ValidationErrorResponse(ErrorResponse):
    """Error body for field-level validation failures."""

    errors: dict[str, str]
