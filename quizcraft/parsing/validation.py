"""Acceptance rules deciding whether a parsed block becomes a question."""

import re

from quizcraft.models.quiz import (
    ParserConfig,
    QuestionRecord,
    QuestionSchema,
    SegmentationConvention,
)
from quizcraft.parsing.strategies import CandidateQuestion

ANSWER_LETTER = re.compile(r"^[A-D]$")


def _is_true_false_pair(choices: list[str]) -> bool:
    lowered = {choice.strip().lower() for choice in choices}
    return len(choices) == 2 and "true" in lowered and "false" in lowered


def accepts(candidate: CandidateQuestion, config: ParserConfig) -> bool:
    """
    Check a candidate against the rules of the configured question type.

    Args:
        candidate: Fields extracted from one block
        config: Parser configuration (question type, option count, convention)

    Returns:
        True if the candidate is a complete question of the requested type
    """
    if not candidate.prompt:
        return False

    if config.convention == SegmentationConvention.PARAGRAPH:
        return len(candidate.choices) == 4 and bool(ANSWER_LETTER.match(candidate.answer))

    if not candidate.answer:
        return False

    schema = config.question_schema
    if schema == QuestionSchema.TRUE_FALSE:
        return _is_true_false_pair(candidate.choices)
    if schema == QuestionSchema.MULTIPLE_CHOICE:
        return len(candidate.choices) == config.option_count
    if schema == QuestionSchema.MULTIPLE_CHOICE_MULTI_SELECT:
        # TODO: confirm with product whether the answer must name existing choices
        return len(candidate.choices) >= 2
    return True


def to_record(candidate: CandidateQuestion, config: ParserConfig) -> QuestionRecord:
    """Build the record for an accepted candidate."""
    choices = list(candidate.choices) if config.question_schema.has_choices else None
    return QuestionRecord(
        prompt=candidate.prompt,
        choices=choices,
        correct_answer=candidate.answer,
    )
