"""Shared request models for copy generation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    """Kind of copy to generate."""

    BLOG_POST = "BlogPost"
    SOCIAL_MEDIA_POST = "SocialMediaPost"
    AD_COPY = "AdCopy"
    PRODUCT_DESCRIPTION = "ProductDescription"

    @property
    def label(self) -> str:
        """Human-readable name shown in the UI and the prompt."""
        return CONTENT_TYPE_LABELS[self]


CONTENT_TYPE_LABELS = {
    ContentType.BLOG_POST: "Blog Post",
    ContentType.SOCIAL_MEDIA_POST: "Social Media Post",
    ContentType.AD_COPY: "Ad Copy",
    ContentType.PRODUCT_DESCRIPTION: "Product Description",
}


class Tone(str, Enum):
    """Brand voice for the generated copy."""

    FRIENDLY = "Friendly"
    PROFESSIONAL = "Professional"
    PERSUASIVE = "Persuasive"
    HUMOROUS = "Humorous"


DEFAULT_WORD_COUNT = "150"


class GenerationRequest(BaseModel):
    """Immutable parameter snapshot sent to the generation service.

    Attributes use snake_case; ``model_dump(by_alias=True)`` produces the
    camelCase wire body (``contentType``, ``wordCount``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    content_type: ContentType = Field(default=ContentType.BLOG_POST, description="Content type")
    niche: str = Field(description="Niche or industry")
    tone: Tone = Field(default=Tone.FRIENDLY, description="Tone / brand voice")
    word_count: str = Field(default=DEFAULT_WORD_COUNT, description="Target word count")
    keywords: str = Field(description="Comma-separated keywords")
    cta: str = Field(default="", description="Optional call-to-action")

    @field_validator("niche", "keywords")
    @classmethod
    def must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body for the remote call."""
        return self.model_dump(mode="json", by_alias=True)
