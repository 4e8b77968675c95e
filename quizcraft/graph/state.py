"""LangGraph state for the quiz generation workflow."""

from typing import TypedDict

from quizcraft.config.settings import get_settings
from quizcraft.models.quiz import GenerationRequest, ParseResult


class QuizState(TypedDict):
    """State passed between the workflow nodes."""

    source_text: str
    request: GenerationRequest
    raw_quiz_text: str | None
    parse_result: ParseResult | None
    best_result: ParseResult | None
    best_raw_quiz_text: str | None
    attempt_count: int
    max_regeneration_attempts: int
    errors: list[str]


def create_initial_state(
    source_text: str,
    request: GenerationRequest,
    max_regeneration_attempts: int | None = None,
) -> QuizState:
    """
    Create the starting state for a generation run.

    Args:
        source_text: Study material the quiz is generated from
        request: Generation parameters
        max_regeneration_attempts: Extra attempts allowed, defaults to settings

    Returns:
        Initial QuizState
    """
    if max_regeneration_attempts is None:
        max_regeneration_attempts = get_settings().max_regeneration_attempts

    return QuizState(
        source_text=source_text,
        request=request,
        raw_quiz_text=None,
        parse_result=None,
        best_result=None,
        best_raw_quiz_text=None,
        attempt_count=0,
        max_regeneration_attempts=max_regeneration_attempts,
        errors=[],
    )
