"""Copy writing chain: turns a GenerationRequest into finished copy."""

import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_vertexai import ChatVertexAI

from copygen.llm import get_llm
from copygen.models import ContentType, GenerationRequest

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an experienced marketing copywriter.

## Task
Write a {content_type} for the {niche} niche.

## Requirements
- Tone / brand voice: {tone}
- Length: about {word_count} words
- Work these keywords in naturally: {keywords}
{cta_instruction}

## Format guidance
- Blog Post: a title line, then short paragraphs
- Social Media Post: one or two punchy paragraphs, hashtags at the end
- Ad Copy: a headline and a tight body
- Product Description: benefits first, then key features

## Output
Return only the finished copy, with no preamble or commentary."""

USER_PROMPT = """Write the {content_type} now."""


def build_cta_instruction(cta: str) -> str:
    """Return the prompt line for the call-to-action, or an empty string."""
    if not cta.strip():
        return ""
    return f'- End with this call-to-action: "{cta.strip()}"'


class CopyWriterChain:
    """Chain for generating marketing copy from request parameters."""

    def __init__(self, llm: ChatVertexAI | None = None):
        self.llm = llm or get_llm()
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", SYSTEM_PROMPT),
                ("human", USER_PROMPT),
            ]
        )
        self.chain = self.prompt | self.llm | StrOutputParser()

    def build_inputs(self, request: GenerationRequest) -> dict[str, str]:
        """Map a request onto the prompt variables."""
        return {
            "content_type": ContentType(request.content_type).label,
            "niche": request.niche.strip(),
            "tone": request.tone.value,
            "word_count": request.word_count.strip() or "150",
            "keywords": request.keywords.strip(),
            "cta_instruction": build_cta_instruction(request.cta),
        }

    def generate(self, request: GenerationRequest) -> str:
        """Generate copy for the request.

        Args:
            request: Validated generation request.

        Returns:
            Generated copy text.
        """
        logger.info(f"Generating {request.content_type.value} for niche: {request.niche}")
        content = self.chain.invoke(self.build_inputs(request))
        return content.strip()
