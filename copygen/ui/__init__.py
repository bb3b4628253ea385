"""UI module for the Streamlit web interface."""

from copygen.ui.api_client import GenerationClient
from copygen.ui.clipboard import ClipboardExporter
from copygen.ui.orchestrator import (
    Failed,
    Generating,
    Idle,
    RequestOrchestrator,
    RequestState,
    SubmitOutcome,
    Succeeded,
)
from copygen.ui.presenter import ResultView, ViewKind, present
from copygen.ui.state import FormSnapshot, FormState
from copygen.ui.validator import ValidationResult, validate

__all__ = [
    "ClipboardExporter",
    "Failed",
    "FormSnapshot",
    "FormState",
    "GenerationClient",
    "Generating",
    "Idle",
    "RequestOrchestrator",
    "RequestState",
    "ResultView",
    "SubmitOutcome",
    "Succeeded",
    "ValidationResult",
    "ViewKind",
    "present",
    "validate",
]
