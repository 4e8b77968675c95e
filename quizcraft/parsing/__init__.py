"""Parsing of generated quiz text."""

from .parser import QuizTextParser, parse_quiz_text
from .strategies import HeadingStrategy, ParagraphStrategy, get_strategy

__all__ = [
    "QuizTextParser",
    "parse_quiz_text",
    "HeadingStrategy",
    "ParagraphStrategy",
    "get_strategy",
]
