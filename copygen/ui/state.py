"""Form state for the copy generator UI."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from copygen.models import DEFAULT_WORD_COUNT, ContentType, Tone


class FormSnapshot(BaseModel):
    """Raw form values captured at submit time, not yet validated."""

    model_config = ConfigDict(frozen=True)

    content_type: ContentType
    niche: str
    tone: Tone
    word_count: str
    keywords: str
    cta: str


class FormState(BaseModel):
    """Current values of the generation form.

    Immutable: ``update`` returns a new FormState and leaves this one alone.
    No required-field checks happen here; see ``copygen.ui.validator``.
    """

    model_config = ConfigDict(frozen=True)

    content_type: ContentType = Field(default=ContentType.BLOG_POST, description="Content type")
    niche: str = Field(default="", description="Niche")
    tone: Tone = Field(default=Tone.FRIENDLY, description="Tone / brand voice")
    word_count: str = Field(default=DEFAULT_WORD_COUNT, description="Word count")
    keywords: str = Field(default="", description="Keywords")
    cta: str = Field(default="", description="Call-to-action")

    def update(self, field: str, value: Any) -> "FormState":
        """Return a copy with one field replaced.

        Args:
            field: Field name, e.g. ``"niche"``.
            value: New value. Enum fields also accept their string value.

        Raises:
            KeyError: If ``field`` is not a form field.
            pydantic.ValidationError: If the value has the wrong type.
        """
        if field not in type(self).model_fields:
            raise KeyError(field)
        return type(self).model_validate({**self.model_dump(), field: value})

    def snapshot(self) -> FormSnapshot:
        """Capture the current values for submission."""
        return FormSnapshot(**self.model_dump())
