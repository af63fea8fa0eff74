"""Summarize audio recordings through remote transcription and summarization services."""

__version__ = "0.1.0"
