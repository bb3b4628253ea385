"""LLM factory for the copy generation service."""

from langchain_google_vertexai import ChatVertexAI

from copygen.config import settings


def get_llm(temperature: float | None = None) -> ChatVertexAI:
    """Get the chat model used for copy writing.

    Args:
        temperature: Override default temperature. If None, uses settings.llm_temperature.

    Returns:
        ChatVertexAI instance configured from settings.
    """
    temp = temperature if temperature is not None else settings.llm_temperature

    return ChatVertexAI(
        model_name=settings.llm_model,
        project=settings.google_project_id,
        location=settings.google_location,
        temperature=temp,
    )
