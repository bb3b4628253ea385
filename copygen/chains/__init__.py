"""LangChain chains for copy generation."""

from copygen.chains.copy_writer import CopyWriterChain

__all__ = [
    "CopyWriterChain",
]
