"""API request and response models."""

from pydantic import BaseModel, Field

from copygen.models import GenerationRequest

# The service accepts exactly the body the front end sends.
GenerateContentRequest = GenerationRequest


class GenerateContentResponse(BaseModel):
    """Response model for copy generation."""

    content: str = Field(description="Generated copy")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Human-readable error message")
