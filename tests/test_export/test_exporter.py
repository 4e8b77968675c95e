"""Tests for text rendering and export dispatch."""

import json
import os

import pytest

from quizcraft.editing.operations import filter_for_presentation
from quizcraft.export.exporter import (
    ExportFormat,
    ensure_output_directory,
    export_questions,
    generate_timestamped_filename,
)
from quizcraft.export.text_export import option_letter, render_json, render_text
from quizcraft.models.quiz import PresentationMode


@pytest.fixture
def presented(sample_records):
    return filter_for_presentation(sample_records, PresentationMode.PROMPTS_AND_ANSWERS)


class TestRenderText:
    """Test plain text rendering."""

    def test_layout(self, presented):
        """Test numbered questions, lettered options and answers."""
        text = render_text(presented[:1])

        assert text.splitlines() == [
            "1. What is the capital of France?",
            "  A. Paris",
            "  B. Lyon",
            "  C. Nice",
            "  D. Marseille",
            "  Answer: Paris",
        ]

    def test_prompts_only_has_no_answers(self, sample_records):
        """Test that stripped answers are left out."""
        text = render_text(filter_for_presentation(sample_records, PresentationMode.PROMPTS_ONLY))

        assert "Answer:" not in text

    def test_option_letter(self):
        """Test option letters."""
        assert option_letter(0) == "A"
        assert option_letter(4) == "E"


class TestRenderJson:
    """Test JSON rendering."""

    def test_omits_stripped_fields(self, sample_records):
        """Test that None fields are not written."""
        data = json.loads(
            render_json(filter_for_presentation(sample_records, PresentationMode.ANSWERS_ONLY))
        )

        assert data[0] == {"correct_answer": "Paris"}

    def test_free_response_has_no_choices(self, presented):
        """Test that free response questions have no choices key."""
        data = json.loads(render_json(presented))

        assert "choices" not in data[2]
        assert data[0]["choices"] == ["Paris", "Lyon", "Nice", "Marseille"]


class TestOutputPaths:
    """Test output directory and file naming."""

    def test_creates_directory_if_not_exists(self, tmp_path):
        """Test that directory is created if it doesn't exist."""
        output_dir = tmp_path / "test_output"
        result = ensure_output_directory(str(output_dir))

        assert output_dir.is_dir()
        assert result == output_dir

    def test_generates_filename_with_timestamp(self):
        """Test that filename includes timestamp."""
        filename = generate_timestamped_filename("quiz", "xlsx")

        assert filename.startswith("quiz_")
        assert filename.endswith(".xlsx")

    def test_handles_path_in_base_name(self):
        """Test that directories and extensions are dropped from the base name."""
        filename = generate_timestamped_filename("/path/to/quiz.txt", "json")

        assert filename.startswith("quiz_")
        assert filename.endswith(".json")


class TestExportQuestions:
    """Test export dispatch."""

    @pytest.mark.parametrize("export_format", list(ExportFormat))
    def test_writes_every_format(self, presented, tmp_path, export_format):
        """Test that each format produces a file in the output directory."""
        path = export_questions(presented, export_format, "quiz", output_dir=str(tmp_path))

        assert os.path.exists(path)
        assert os.path.dirname(path) == str(tmp_path)
        assert path.endswith(f".{export_format.value}")

    def test_writes_exact_path(self, presented, tmp_path):
        """Test export without the output directory."""
        target = tmp_path / "my_quiz.txt"

        path = export_questions(presented, ExportFormat.TXT, str(target), use_output_dir=False)

        assert path == str(target)
        assert "1. What is the capital of France?" in target.read_text(encoding="utf-8")

    def test_refuses_empty_export(self, tmp_path):
        """Test that there must be something to export."""
        with pytest.raises(ValueError):
            export_questions([], ExportFormat.JSON, "quiz", output_dir=str(tmp_path))
