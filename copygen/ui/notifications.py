"""User-facing notifications emitted by the UI core."""

from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

GENERIC_FAILURE_MESSAGE = "Failed to generate content. Please try again."

FIELD_LABELS = {
    "content_type": "Content Type",
    "niche": "Niche",
    "tone": "Tone",
    "word_count": "Word Count",
    "keywords": "Keywords",
    "cta": "Call-To-Action",
}


class Severity(str, Enum):
    """How prominently a notification should be rendered."""

    INFO = "info"
    WARNING = "warning"


class Notification(BaseModel):
    """A single status message for the notification collaborator."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Short headline")
    description: str = Field(description="Body text")
    severity: Severity = Field(default=Severity.INFO, description="Rendering severity")


class Notifier(Protocol):
    """Anything that can render a Notification."""

    def notify(self, notification: Notification) -> None: ...


class NotificationLog:
    """Notifier that keeps notifications in memory.

    Useful when notifications are rendered after the fact, e.g. in tests.
    """

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def drain(self) -> list[Notification]:
        """Return and forget all pending notifications."""
        pending, self.notifications = self.notifications, []
        return pending


def format_field_list(fields: list[str]) -> str:
    """Join field labels as "A", "A and B" or "A, B and C"."""
    labels = [FIELD_LABELS.get(field, field) for field in fields]
    if len(labels) <= 1:
        return "".join(labels)
    return f"{', '.join(labels[:-1])} and {labels[-1]}"


def missing_fields_notification(missing_fields: list[str]) -> Notification:
    noun = "field" if len(missing_fields) == 1 else "fields"
    return Notification(
        title="Missing Information",
        description=f"Please fill in the {format_field_list(missing_fields)} {noun}.",
        severity=Severity.WARNING,
    )


def generation_succeeded_notification() -> Notification:
    return Notification(
        title="Content Generated!",
        description="Your AI-powered content is ready.",
    )


def generation_failed_notification(message: str | None) -> Notification:
    return Notification(
        title="Generation Failed",
        description=message or GENERIC_FAILURE_MESSAGE,
        severity=Severity.WARNING,
    )


def copied_notification() -> Notification:
    return Notification(title="Copied!", description="Content copied to clipboard.")


def copy_failed_notification(reason: str | None = None) -> Notification:
    description = "Could not copy to the clipboard."
    if reason:
        description = f"{description} {reason}"
    return Notification(title="Copy Failed", description=description, severity=Severity.WARNING)
