"""Marketing copy generator: Streamlit front end and generation service."""

__version__ = "0.1.0"
