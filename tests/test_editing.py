"""Tests for edit and presentation operations."""

import pytest
from pydantic import ValidationError

from quizcraft.editing.operations import (
    edit_field,
    filter_for_presentation,
    finish_editing,
    toggle_editing,
)
from quizcraft.models.quiz import (
    EditableQuestion,
    PresentationMode,
    PresentedQuestion,
    QuestionRecord,
)


class TestEditField:
    """Test field-level edits."""

    def test_edits_prompt(self, sample_records: list[QuestionRecord]):
        """Test replacing the prompt."""
        updated = edit_field(sample_records, 0, "prompt", "Capital of France?")

        assert updated[0].prompt == "Capital of France?"
        assert updated[0].choices == sample_records[0].choices

    def test_edits_answer(self, sample_records: list[QuestionRecord]):
        """Test replacing the answer."""
        updated = edit_field(sample_records, 1, "answer", "False")

        assert updated[1].correct_answer == "False"

    def test_edits_single_choice(self, sample_records: list[QuestionRecord]):
        """Test replacing one choice."""
        updated = edit_field(sample_records, 0, "choice-1", "Lille")

        assert updated[0].choices == ["Paris", "Lille", "Nice", "Marseille"]

    def test_accepts_option_alias(self, sample_records: list[QuestionRecord]):
        """Test the option-N spelling of a choice edit."""
        updated = edit_field(sample_records, 0, "option-3", "Brest")

        assert updated[0].choices[3] == "Brest"

    def test_leaves_input_and_other_records_unchanged(
        self, sample_records: list[QuestionRecord]
    ):
        """Test that only the edited record changes."""
        original = [record.model_copy(deep=True) for record in sample_records]

        updated = edit_field(sample_records, 0, "choice-0", "Rome")

        assert sample_records == original
        assert updated[1:] == original[1:]

    def test_out_of_range_is_ignored(self, sample_records: list[QuestionRecord]):
        """Test that a missing index is a no-op by default."""
        updated = edit_field(sample_records, 10, "prompt", "Nope")

        assert updated == sample_records

    def test_out_of_range_strict(self, sample_records: list[QuestionRecord]):
        """Test that a missing index raises in strict mode."""
        with pytest.raises(IndexError):
            edit_field(sample_records, -1, "prompt", "Nope", strict=True)

    def test_unknown_field(self, sample_records: list[QuestionRecord]):
        """Test that unknown fields are refused."""
        with pytest.raises(ValueError):
            edit_field(sample_records, 0, "difficulty", "hard")

    def test_choice_edit_without_choices(self, sample_records: list[QuestionRecord]):
        """Test that free response questions have no choices to edit."""
        with pytest.raises(ValueError):
            edit_field(sample_records, 2, "choice-0", "x")

    def test_choice_index_out_of_range(self, sample_records: list[QuestionRecord]):
        """Test that a missing choice is refused."""
        with pytest.raises(ValueError):
            edit_field(sample_records, 1, "choice-5", "Maybe")

    def test_empty_prompt_is_refused(self, sample_records: list[QuestionRecord]):
        """Test that edits are validated."""
        with pytest.raises(ValidationError):
            edit_field(sample_records, 0, "prompt", "")


class TestFilterForPresentation:
    """Test presentation filtering."""

    def test_prompts_and_answers_keeps_everything(
        self, sample_records: list[QuestionRecord]
    ):
        """Test that the default mode keeps every field."""
        filtered = filter_for_presentation(sample_records, PresentationMode.PROMPTS_AND_ANSWERS)

        assert filtered[0] == PresentedQuestion(
            prompt="What is the capital of France?",
            choices=["Paris", "Lyon", "Nice", "Marseille"],
            correct_answer="Paris",
        )

    def test_prompts_only_strips_answers(self, sample_records: list[QuestionRecord]):
        """Test that answers are removed."""
        filtered = filter_for_presentation(sample_records, PresentationMode.PROMPTS_ONLY)

        assert all(item.correct_answer is None for item in filtered)
        assert filtered[0].choices == ["Paris", "Lyon", "Nice", "Marseille"]

    def test_answers_only_strips_prompts_and_choices(
        self, sample_records: list[QuestionRecord]
    ):
        """Test that prompts and choices are removed."""
        filtered = filter_for_presentation(sample_records, PresentationMode.ANSWERS_ONLY)

        assert all(item.prompt is None and item.choices is None for item in filtered)
        assert [item.correct_answer for item in filtered] == [
            r.correct_answer for r in sample_records
        ]

    def test_filtering_does_not_resurrect_fields(
        self, sample_records: list[QuestionRecord]
    ):
        """Test that stripped answers stay stripped."""
        prompts = filter_for_presentation(sample_records, PresentationMode.PROMPTS_ONLY)
        again = filter_for_presentation(prompts, PresentationMode.PROMPTS_AND_ANSWERS)

        assert all(item.correct_answer is None for item in again)

    def test_same_mode_is_idempotent(self, sample_records: list[QuestionRecord]):
        """Test that applying a mode twice changes nothing."""
        once = filter_for_presentation(sample_records, PresentationMode.ANSWERS_ONLY)
        twice = filter_for_presentation(once, PresentationMode.ANSWERS_ONLY)

        assert once == twice

    def test_accepts_mode_value(self, sample_records: list[QuestionRecord]):
        """Test that the mode can be given as its string value."""
        filtered = filter_for_presentation(sample_records, "prompts_only")

        assert filtered[0].correct_answer is None


class TestEditingFlag:
    """Test the view-model editing flag."""

    def test_toggle_editing(self, editable_questions: list[EditableQuestion]):
        """Test flipping the flag on one question."""
        toggled = toggle_editing(editable_questions, 1)

        assert [item.is_being_edited for item in toggled] == [False, True, False]
        assert toggle_editing(toggled, 1)[1].is_being_edited is False

    def test_finish_editing(self, editable_questions: list[EditableQuestion]):
        """Test clearing every flag."""
        toggled = toggle_editing(toggle_editing(editable_questions, 0), 2)

        finished = finish_editing(toggled)
        assert not any(item.is_being_edited for item in finished)
        assert [item.record for item in finished] == [item.record for item in editable_questions]
