"""Format dispatch and output paths for quiz export."""

import logging
from datetime import datetime
from enum import Enum
from pathlib import Path

from quizcraft.export.docx_generator import export_to_docx
from quizcraft.export.spreadsheet import export_to_xlsx
from quizcraft.export.text_export import export_to_json, export_to_txt
from quizcraft.models.quiz import PresentedQuestion

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Supported export file formats."""

    XLSX = "xlsx"
    DOCX = "docx"
    JSON = "json"
    TXT = "txt"


_EXPORTERS = {
    ExportFormat.XLSX: export_to_xlsx,
    ExportFormat.DOCX: export_to_docx,
    ExportFormat.JSON: export_to_json,
    ExportFormat.TXT: export_to_txt,
}


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, extension: str) -> str:
    """
    Generate a filename with timestamp.

    Args:
        base_name: Base name for the file
        extension: File extension (without dot)

    Returns:
        Filename with timestamp
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # Drop any directory or extension from the base name
    base_name = Path(base_name).stem
    return f"{base_name}_{timestamp}.{extension}"


def export_questions(
    questions: list[PresentedQuestion],
    export_format: ExportFormat,
    output_path: str,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export filtered questions in the requested format.

    Args:
        questions: Questions already filtered for presentation
        export_format: File format to write
        output_path: Target file path, or base name when use_output_dir is True
        use_output_dir: Write a timestamped file into output_dir
        output_dir: Directory to save files in (default: "output")

    Returns:
        Path to the created file

    Raises:
        ValueError: If there is nothing to export
    """
    if not questions:
        raise ValueError("There are no questions to export.")

    export_format = ExportFormat(export_format)
    if use_output_dir:
        directory = ensure_output_directory(output_dir)
        filename = generate_timestamped_filename(output_path, export_format.value)
        output_path = str(directory / filename)

    path = _EXPORTERS[export_format](questions, output_path)
    logger.info("Exported %d questions to %s", len(questions), path)
    return path
