"""Text extraction from uploaded files."""

from .extract import extract_text

__all__ = ["extract_text"]
