"""Request lifecycle state machine for copy generation.

The orchestrator owns the single RequestState value and the last
successfully generated content::

    Idle -> Generating -> Succeeded | Failed -> Generating -> ...

``submit`` is refused while a call is in flight, so at most one request is
ever outstanding, whatever the UI does with its buttons. A failed call never
clears content from an earlier success.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from copygen.errors import MissingFieldsError, RemoteGenerationError
from copygen.models import GenerationRequest
from copygen.ui.notifications import (
    GENERIC_FAILURE_MESSAGE,
    Notifier,
    generation_failed_notification,
    generation_succeeded_notification,
    missing_fields_notification,
)
from copygen.ui.state import FormState
from copygen.ui.validator import ValidationResult, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No request has been made yet."""


@dataclass(frozen=True)
class Generating:
    """A request is in flight."""

    request: GenerationRequest


@dataclass(frozen=True)
class Succeeded:
    """The last request returned content."""

    content: str


@dataclass(frozen=True)
class Failed:
    """The last request failed."""

    message: str


RequestState = Idle | Generating | Succeeded | Failed


class SubmitOutcome(str, Enum):
    """What a call to ``submit`` did."""

    BUSY = "busy"
    INVALID = "invalid"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ContentGenerator(Protocol):
    """The remote generation call; see ``GenerationClient``."""

    def generate(self, request: GenerationRequest) -> str: ...


class RequestOrchestrator:
    """Coordinates validation, the outbound call and state transitions."""

    def __init__(self, client: ContentGenerator, notifier: Notifier):
        self.client = client
        self.notifier = notifier
        self._state: RequestState = Idle()
        self._result: str | None = None
        self._last_request: GenerationRequest | None = None
        self._last_validation: ValidationResult | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def result(self) -> str | None:
        """Content of the most recent successful request, if any."""
        return self._result

    @property
    def last_request(self) -> GenerationRequest | None:
        return self._last_request

    @property
    def last_validation(self) -> ValidationResult | None:
        return self._last_validation

    @property
    def is_generating(self) -> bool:
        return isinstance(self._state, Generating)

    def submit(self, form: FormState) -> SubmitOutcome:
        """Validate the form and, if it passes, run one generation request.

        Args:
            form: Current form values.

        Returns:
            The SubmitOutcome; the resulting state is in ``state``.
        """
        if self.is_generating:
            logger.info("Submit ignored: a request is already in flight")
            return SubmitOutcome.BUSY

        snapshot = form.snapshot()
        validation = validate(snapshot)
        self._last_validation = validation
        try:
            validation.raise_for_missing()
        except MissingFieldsError as e:
            logger.info(f"Submit rejected: {e}")
            self.notifier.notify(missing_fields_notification(e.missing_fields))
            return SubmitOutcome.INVALID

        request = GenerationRequest(**snapshot.model_dump())
        self._last_request = request
        self._state = Generating(request=request)
        logger.info(f"Generating {request.content_type.value} for niche: {request.niche}")

        try:
            content = self.client.generate(request)
        except RemoteGenerationError as e:
            return self._fail(e.message)
        except Exception as e:
            logger.exception("Unexpected error during generation")
            return self._fail(str(e))

        self._result = content
        self._state = Succeeded(content=content)
        logger.info(f"Generation succeeded ({len(content)} characters)")
        self.notifier.notify(generation_succeeded_notification())
        return SubmitOutcome.SUCCEEDED

    def _fail(self, message: str | None) -> SubmitOutcome:
        message = message or GENERIC_FAILURE_MESSAGE
        logger.error(f"Generation failed: {message}")
        self._state = Failed(message=message)
        self.notifier.notify(generation_failed_notification(message))
        return SubmitOutcome.FAILED

    def reset(self) -> bool:
        """Return to Idle and forget the held result.

        Returns:
            False if a request is in flight and nothing was reset.
        """
        if self.is_generating:
            return False
        self._state = Idle()
        self._result = None
        self._last_request = None
        self._last_validation = None
        return True
