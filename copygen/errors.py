"""Exceptions raised while preparing or running a copy generation request."""


class CopyGenError(Exception):
    """Base class for copy generation errors."""


class MissingFieldsError(CopyGenError):
    """Required form fields are empty."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class RemoteGenerationError(CopyGenError):
    """The generation service call failed or reported an error.

    ``message`` is the human-readable text from the service, or None when
    the failure carried no usable text.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message or "Remote generation failed")


class MalformedResponseError(RemoteGenerationError):
    """The service answered successfully but without usable content."""


class ClipboardUnavailableError(CopyGenError):
    """The clipboard writer could not deliver the text."""
