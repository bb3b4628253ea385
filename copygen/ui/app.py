"""Streamlit web application for marketing copy generation."""

import logging

import streamlit as st
import streamlit.components.v1 as components

from copygen.config import configure_logging
from copygen.models import ContentType, Tone
from copygen.ui.api_client import GenerationClient
from copygen.ui.clipboard import ClipboardExporter, browser_copy_script
from copygen.ui.notifications import Notification, Severity
from copygen.ui.orchestrator import RequestOrchestrator
from copygen.ui.presenter import ViewKind, present
from copygen.ui.state import FormState
from copygen.ui.utils import create_download_markdown, download_file_name, truncate_text

configure_logging()
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Content Generator",
    page_icon="✨",
    layout="wide",
)

FORM_FIELDS = tuple(FormState.model_fields)


class StreamlitNotifier:
    """Renders notifications as Streamlit toasts."""

    ICONS = {Severity.INFO: "✅", Severity.WARNING: "⚠️"}

    def notify(self, notification: Notification) -> None:
        st.toast(
            f"**{notification.title}**\n\n{notification.description}",
            icon=self.ICONS[notification.severity],
        )


def write_browser_clipboard(text: str) -> None:
    """Copy text on the viewer's browser, not on the server running Streamlit."""
    components.html(browser_copy_script(text), height=0)


def widget_key(field: str) -> str:
    return f"form_{field}"


def init_session_state():
    """Initialize session state variables."""
    if "orchestrator" not in st.session_state:
        notifier = StreamlitNotifier()
        st.session_state.orchestrator = RequestOrchestrator(GenerationClient(), notifier)
        st.session_state.exporter = ClipboardExporter(notifier, writer=write_browser_clipboard)

    defaults = FormState()
    for field in FORM_FIELDS:
        if widget_key(field) not in st.session_state:
            st.session_state[widget_key(field)] = getattr(defaults, field)


def current_form() -> FormState:
    """Build a FormState from the widget values of this run."""
    form = FormState()
    for field in FORM_FIELDS:
        form = form.update(field, st.session_state[widget_key(field)])
    return form


def render_sidebar(orchestrator: RequestOrchestrator):
    """Render sidebar with service status and the last request."""
    with st.sidebar:
        st.title("⚙️ Settings")

        st.subheader("Service status")
        if orchestrator.client.health_check():
            st.success("✅ Generation service OK")
        else:
            st.error("❌ Generation service unreachable")
            st.caption("Start the API server with `uvicorn copygen.api.main:app`")

        request = orchestrator.last_request
        if request is not None:
            st.subheader("Last request")
            st.caption(f"{ContentType(request.content_type).label} · {request.tone.value}")
            st.caption(truncate_text(f"{request.niche}: {request.keywords}", max_length=80))

        st.divider()
        st.caption("Content Generator v0.1.0")


def render_input_section(orchestrator: RequestOrchestrator, submit_enabled: bool):
    """Render the parameter form and the generate button."""
    st.header("Content Parameters")
    st.caption("Customize your content requirements")

    st.selectbox(
        "Content Type",
        options=list(ContentType),
        format_func=lambda content_type: content_type.label,
        key=widget_key("content_type"),
    )
    st.text_input(
        "Niche *",
        placeholder="e.g., Tech, E-commerce, Health, Crypto",
        key=widget_key("niche"),
    )
    st.selectbox(
        "Tone / Brand Voice",
        options=list(Tone),
        format_func=lambda tone: tone.value,
        key=widget_key("tone"),
    )
    st.text_input("Word Count", placeholder="e.g., 150", key=widget_key("word_count"))
    st.text_input(
        "Keywords *",
        placeholder="e.g., Bitcoin, blockchain, investment",
        key=widget_key("keywords"),
    )
    st.text_input(
        "Call-To-Action (Optional)",
        placeholder="e.g., Sign up now, Learn more",
        key=widget_key("cta"),
    )

    if st.button(
        "✨ Generate Content",
        type="primary",
        disabled=not submit_enabled,
        use_container_width=True,
    ):
        with st.spinner("Generating..."):
            orchestrator.submit(current_form())


def render_output_section(orchestrator: RequestOrchestrator):
    """Render the generated content panel."""
    st.header("Generated Content")
    st.caption("Your AI-created content will appear here")

    view = present(orchestrator)

    if view.kind is ViewKind.LOADING and not view.content:
        st.info("🔄 Generating...")
        return
    if view.kind in (ViewKind.EMPTY, ViewKind.ERROR):
        st.info(view.placeholder or "👈 Adjust the parameters and try again")
        return

    # st.code carries its own copy button, which writes to the browser clipboard
    st.code(view.content, language=None, wrap_lines=True)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("📋 Copy to Clipboard", disabled=not view.can_export, use_container_width=True):
            st.session_state.exporter.export(orchestrator.result)
    with col2:
        request = orchestrator.last_request
        st.download_button(
            label="📥 Download Markdown",
            data=create_download_markdown(view.content, request),
            file_name=download_file_name(request),
            mime="text/markdown",
            disabled=not view.can_export,
            use_container_width=True,
        )


def main():
    """Main application entry point."""
    init_session_state()
    orchestrator: RequestOrchestrator = st.session_state.orchestrator

    st.title("✨ Content Generator")
    st.caption("Create high-quality, unique content in seconds with advanced AI")

    render_sidebar(orchestrator)

    col1, col2 = st.columns([1, 1])

    with col1:
        render_input_section(orchestrator, present(orchestrator).submit_enabled)

    with col2:
        render_output_section(orchestrator)


if __name__ == "__main__":
    main()
