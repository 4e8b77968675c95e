"""Plain text and JSON rendering of quiz questions."""

import json
from pathlib import Path

from quizcraft.models.quiz import PresentedQuestion


def option_letter(index: int) -> str:
    """Letter label for the option at a position (0 -> "A")."""
    return chr(65 + index)


def render_text(questions: list[PresentedQuestion]) -> str:
    """
    Render questions as numbered plain text.

    Example:
        1. What is the capital of France?
          A. Paris
          B. Lyon
          Answer: Paris
    """
    lines: list[str] = []
    for number, question in enumerate(questions, 1):
        lines.append(f"{number}. {question.prompt or ''}".rstrip())
        for i, option in enumerate(question.choices or []):
            lines.append(f"  {option_letter(i)}. {option}")
        if question.correct_answer:
            lines.append(f"  Answer: {question.correct_answer}")
        lines.append("")
    return "\n".join(lines)


def render_json(questions: list[PresentedQuestion]) -> str:
    """Render questions as a JSON array, leaving out stripped fields."""
    return json.dumps(
        [question.model_dump(exclude_none=True) for question in questions],
        indent=2,
        ensure_ascii=False,
    )


def export_to_txt(questions: list[PresentedQuestion], output_path: str | Path) -> str:
    """Write questions to a plain text file and return its path."""
    Path(output_path).write_text(render_text(questions), encoding="utf-8")
    return str(output_path)


def export_to_json(questions: list[PresentedQuestion], output_path: str | Path) -> str:
    """Write questions to a JSON file and return its path."""
    Path(output_path).write_text(render_json(questions), encoding="utf-8")
    return str(output_path)
