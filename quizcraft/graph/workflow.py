"""LangGraph workflow definition for quiz generation."""

import logging
from typing import Any, Literal

from langgraph.graph import END, StateGraph

from quizcraft.agents.generator import generate_quiz_text
from quizcraft.errors import GenerationError
from quizcraft.graph.state import QuizState
from quizcraft.models.quiz import ParserConfig
from quizcraft.parsing.parser import QuizTextParser

logger = logging.getLogger(__name__)


def generate_node(state: QuizState) -> dict[str, Any]:
    """
    Ask the model for a fresh batch of quiz text.

    A failure on the first attempt propagates. Later failures are recorded
    in errors so the questions already parsed survive.
    """
    attempt = state["attempt_count"] + 1
    try:
        raw_quiz_text = generate_quiz_text(state["source_text"], state["request"])
    except GenerationError as e:
        if state["attempt_count"] == 0:
            raise
        logger.warning("Attempt %d failed: %s", attempt, e)
        errors = list(state.get("errors", []))
        errors.append(f"Attempt {attempt}: {e}")
        return {"raw_quiz_text": None, "attempt_count": attempt, "errors": errors}

    return {"raw_quiz_text": raw_quiz_text, "attempt_count": attempt}


def parse_node(state: QuizState) -> dict[str, Any]:
    """
    Parse the latest quiz text and remember the best result so far.

    Args:
        state: Current quiz state containing raw_quiz_text

    Returns:
        Dictionary with updated parse_result, best_result and best_raw_quiz_text
    """
    request = state["request"]
    parser = QuizTextParser(
        ParserConfig(
            option_count=request.option_count,
            question_schema=request.question_schema,
        )
    )
    result = parser.parse(state["raw_quiz_text"] or "")

    best = state.get("best_result")
    best_raw_quiz_text = state.get("best_raw_quiz_text")
    if best is None or result.accepted_count > best.accepted_count:
        best = result
        best_raw_quiz_text = state["raw_quiz_text"]

    errors = list(state.get("errors", []))
    if result.rejected_count:
        errors.append(
            f"Attempt {state['attempt_count']}: {result.rejected_count} of "
            f"{result.blocks_seen} questions could not be parsed"
        )

    return {
        "parse_result": result,
        "best_result": best,
        "best_raw_quiz_text": best_raw_quiz_text,
        "errors": errors,
    }


def should_regenerate(state: QuizState) -> Literal["regenerate", "finish"]:
    """
    Decide whether to ask the model again.

    Args:
        state: Current quiz state

    Returns:
        "regenerate" if too few questions parsed and attempts remain, else "finish"
    """
    best = state.get("best_result")
    wanted = state["request"].num_questions
    if best is not None and best.accepted_count >= wanted:
        return "finish"

    # attempt_count includes the first generation
    if state["attempt_count"] > state["max_regeneration_attempts"]:
        logger.warning(
            "Giving up after %d attempts with %d of %d questions",
            state["attempt_count"],
            best.accepted_count if best else 0,
            wanted,
        )
        return "finish"
    return "regenerate"


def create_quiz_workflow() -> StateGraph:
    """
    Create the LangGraph workflow for quiz generation.

    The workflow follows this structure:
    1. Generate - Model writes quiz text
    2. Parse - Text is parsed into question records
    3. [Conditional] Regenerate if too few questions were recognised

    Returns:
        StateGraph ready to be compiled
    """
    workflow = StateGraph(QuizState)

    workflow.add_node("generate", generate_node)
    workflow.add_node("parse", parse_node)

    workflow.set_entry_point("generate")
    workflow.add_edge("generate", "parse")

    workflow.add_conditional_edges(
        "parse",
        should_regenerate,
        {
            "regenerate": "generate",
            "finish": END,
        },
    )

    return workflow


def compile_workflow():
    """
    Compile the workflow and return it ready for execution.

    Returns:
        Compiled workflow
    """
    workflow = create_quiz_workflow()
    return workflow.compile()
