"""Edit and presentation operations on parsed questions."""

import logging
import re

from quizcraft.models.quiz import (
    EditableQuestion,
    PresentationMode,
    PresentedQuestion,
    QuestionRecord,
)

logger = logging.getLogger(__name__)

CHOICE_FIELD = re.compile(r"^(?:choice|option)-(\d+)$")
ANSWER_FIELDS = {"answer", "correct_answer"}


def edit_field(
    records: list[QuestionRecord],
    index: int,
    field_path: str,
    new_value: str,
    strict: bool = False,
) -> list[QuestionRecord]:
    """
    Replace the prompt, the answer or one choice of a single question.

    Args:
        records: Current questions
        index: Position of the question to edit
        field_path: "prompt", "answer" or "choice-N" ("option-N" also accepted)
        new_value: Replacement text
        strict: Raise IndexError for an unknown index instead of ignoring it

    Returns:
        New list with the edited question; every other question is unchanged

    Raises:
        IndexError: If strict and index is out of range
        ValueError: If the field path does not name an editable field
        ValidationError: If the edited question is no longer valid, e.g. an empty prompt
    """
    if not 0 <= index < len(records):
        if strict:
            raise IndexError(f"No question at index {index}")
        logger.debug("Ignoring edit of missing question %d", index)
        return list(records)

    data = records[index].model_dump()
    choice_match = CHOICE_FIELD.match(field_path)

    if field_path == "prompt":
        data["prompt"] = new_value
    elif field_path in ANSWER_FIELDS:
        data["correct_answer"] = new_value
    elif choice_match:
        choices = data["choices"]
        choice_index = int(choice_match.group(1))
        if choices is None:
            raise ValueError(f"Question {index} has no choices to edit")
        if choice_index >= len(choices):
            raise ValueError(f"Question {index} has no choice {choice_index}")
        choices[choice_index] = new_value
    else:
        raise ValueError(f"Unknown field: {field_path}")

    updated = list(records)
    updated[index] = QuestionRecord(**data)
    return updated


def _as_presented(item: QuestionRecord | PresentedQuestion) -> PresentedQuestion:
    if isinstance(item, PresentedQuestion):
        return item
    return PresentedQuestion(
        prompt=item.prompt,
        choices=item.choices,
        correct_answer=item.correct_answer,
    )


def filter_for_presentation(
    records: list[QuestionRecord] | list[PresentedQuestion],
    mode: PresentationMode,
) -> list[PresentedQuestion]:
    """
    Strip the fields a presentation mode hides.

    The same filtered list feeds the screen and every exporter. Fields
    stripped by an earlier call stay stripped.

    Args:
        records: Questions, either parsed records or already filtered ones
        mode: Which parts of each question to keep

    Returns:
        Filtered questions in the same order
    """
    mode = PresentationMode(mode)
    presented = [_as_presented(item) for item in records]

    if mode == PresentationMode.PROMPTS_ONLY:
        return [item.model_copy(update={"correct_answer": None}) for item in presented]
    if mode == PresentationMode.ANSWERS_ONLY:
        return [
            item.model_copy(update={"prompt": None, "choices": None})
            for item in presented
        ]
    return presented


def toggle_editing(items: list[EditableQuestion], index: int) -> list[EditableQuestion]:
    """Flip the editing flag of one question."""
    return [
        item.model_copy(update={"is_being_edited": not item.is_being_edited})
        if i == index
        else item
        for i, item in enumerate(items)
    ]


def finish_editing(items: list[EditableQuestion]) -> list[EditableQuestion]:
    """Clear the editing flag on every question."""
    return [item.model_copy(update={"is_being_edited": False}) for item in items]
