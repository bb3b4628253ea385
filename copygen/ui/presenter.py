"""Read-only view of the orchestrator for rendering."""

from dataclasses import dataclass
from enum import Enum

from copygen.ui.orchestrator import Failed, Generating, RequestOrchestrator, Succeeded

PLACEHOLDER_TEXT = "Fill in the parameters and click Generate to create your content"


class ViewKind(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    CONTENT = "content"
    ERROR = "error"


@dataclass(frozen=True)
class ResultView:
    """Everything the result panel needs to draw itself."""

    kind: ViewKind
    content: str | None = None
    error: str | None = None
    submit_enabled: bool = True

    @property
    def can_export(self) -> bool:
        return bool(self.content) and self.kind is not ViewKind.LOADING

    @property
    def placeholder(self) -> str | None:
        return PLACEHOLDER_TEXT if self.kind is ViewKind.EMPTY else None


def present(orchestrator: RequestOrchestrator) -> ResultView:
    """Derive the result panel view from the orchestrator state.

    A failure message is only carried in ``error`` for the notification
    layer; it never replaces the displayed content.
    """
    state = orchestrator.state
    held = orchestrator.result

    if isinstance(state, Generating):
        return ResultView(kind=ViewKind.LOADING, content=held, submit_enabled=False)
    if isinstance(state, Succeeded):
        return ResultView(kind=ViewKind.CONTENT, content=state.content)
    if isinstance(state, Failed):
        kind = ViewKind.CONTENT if held else ViewKind.ERROR
        return ResultView(kind=kind, content=held, error=state.message)
    return ResultView(kind=ViewKind.EMPTY)
