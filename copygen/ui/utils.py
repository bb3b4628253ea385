"""Utility functions for the Streamlit UI."""

import re

from copygen.models import ContentType, GenerationRequest


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text to max length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated text with ellipsis if needed.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def download_file_name(request: GenerationRequest | None) -> str:
    """Build a file name like ``ad-copy-crypto.md`` for the download button."""
    if request is None:
        return "generated-content.md"
    label = ContentType(request.content_type).label
    slug = re.sub(r"[^a-z0-9]+", "-", f"{label} {request.niche}".lower()).strip("-")
    return f"{slug or 'generated-content'}.md"


def create_download_markdown(content: str, request: GenerationRequest | None = None) -> str:
    """Create markdown content for download.

    Args:
        content: Generated copy, included verbatim.
        request: Parameters that produced it, listed as metadata.

    Returns:
        Formatted markdown string.
    """
    lines = [content, ""]

    if request is not None:
        lines.append("---")
        lines.append("")
        lines.append(f"Content type: {ContentType(request.content_type).label}")
        lines.append(f"Niche: {request.niche}")
        lines.append(f"Tone: {request.tone.value}")
        lines.append(f"Word count: {request.word_count}")
        lines.append(f"Keywords: {request.keywords}")
        if request.cta:
            lines.append(f"Call-to-action: {request.cta}")

    return "\n".join(lines)
