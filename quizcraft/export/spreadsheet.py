"""Excel workbook export of quiz questions."""

from pathlib import Path

import pandas as pd

from quizcraft.export.text_export import option_letter
from quizcraft.models.quiz import PresentedQuestion

SHEET_NAME = "Quiz"


def build_rows(questions: list[PresentedQuestion]) -> list[dict[str, str | int]]:
    """
    Build one spreadsheet row per question.

    Columns are "No.", "Question", one "Option X" column per choice and
    "Answer"; stripped fields produce no cell.
    """
    rows = []
    for number, question in enumerate(questions, 1):
        row: dict[str, str | int] = {"No.": number}
        if question.prompt is not None:
            row["Question"] = question.prompt
        for i, option in enumerate(question.choices or []):
            row[f"Option {option_letter(i)}"] = option
        if question.correct_answer:
            row["Answer"] = question.correct_answer
        rows.append(row)
    return rows


def export_to_xlsx(questions: list[PresentedQuestion], output_path: str | Path) -> str:
    """
    Export questions to an Excel workbook with a single "Quiz" sheet.

    Args:
        questions: Questions already filtered for presentation
        output_path: Path where the workbook should be saved

    Returns:
        Path to the created workbook
    """
    frame = pd.DataFrame(build_rows(questions))
    frame.to_excel(output_path, sheet_name=SHEET_NAME, index=False, engine="openpyxl")
    return str(output_path)
