"""AI agents for quiz generation."""

from .generator import build_generation_messages, format_instructions, generate_quiz_text

__all__ = [
    "generate_quiz_text",
    "build_generation_messages",
    "format_instructions",
]
