"""Data models for quiz parsing."""

from .quiz import (
    EditableQuestion,
    GenerationRequest,
    ParseResult,
    ParserConfig,
    PresentationMode,
    PresentedQuestion,
    QuestionDifficulty,
    QuestionRecord,
    QuestionSchema,
    SegmentationConvention,
)

__all__ = [
    "QuestionRecord",
    "QuestionSchema",
    "QuestionDifficulty",
    "SegmentationConvention",
    "ParserConfig",
    "ParseResult",
    "PresentationMode",
    "PresentedQuestion",
    "EditableQuestion",
    "GenerationRequest",
]
