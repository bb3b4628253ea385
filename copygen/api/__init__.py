"""API module for the copy generation service."""

from copygen.api.models import (
    ErrorResponse,
    GenerateContentRequest,
    GenerateContentResponse,
)

__all__ = [
    "ErrorResponse",
    "GenerateContentRequest",
    "GenerateContentResponse",
]
