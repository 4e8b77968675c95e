"""DOCX document generator for quiz export."""

from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from quizcraft.export.text_export import option_letter
from quizcraft.models.quiz import PresentedQuestion


def export_to_docx(
    questions: list[PresentedQuestion],
    output_path: str | Path,
    title: str = "Generated Quiz",
) -> str:
    """
    Export questions to a formatted DOCX file.

    Args:
        questions: Questions already filtered for presentation
        output_path: Path where the DOCX file should be saved
        title: Document title

    Returns:
        Path to the created DOCX file
    """
    doc = Document()
    setup_document_styles(doc)

    heading = doc.add_heading(title, level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    info_para = doc.add_paragraph()
    info_para.add_run(f"Total Questions: {len(questions)}").bold = True
    info_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

    date_para = doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = RGBColor(128, 128, 128)

    doc.add_paragraph()

    for number, question in enumerate(questions, 1):
        add_question_to_document(doc, number, question)

    doc.save(str(output_path))
    return str(output_path)


def setup_document_styles(doc: Document) -> None:
    """
    Set up document-wide styles.

    Args:
        doc: Document to configure
    """
    style = doc.styles["Normal"]
    font = style.font
    font.name = "Calibri"
    font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_question_to_document(doc: Document, number: int, question: PresentedQuestion) -> None:
    """
    Add one numbered question with its options and answer.

    Args:
        doc: Document to add to
        number: Question number shown to the reader
        question: Filtered question; missing parts are skipped
    """
    q_para = doc.add_paragraph()
    q_run = q_para.add_run(f"{number}. ")
    q_run.bold = True
    q_run.font.size = Pt(12)
    if question.prompt:
        q_para.add_run(question.prompt)

    for i, option in enumerate(question.choices or []):
        opt_para = doc.add_paragraph(f"{option_letter(i)}. {option}")
        opt_para.paragraph_format.left_indent = Inches(0.5)

    if question.correct_answer:
        answer_para = doc.add_paragraph()
        answer_para.paragraph_format.left_indent = Inches(0.5)
        answer_run = answer_para.add_run(f"Answer: {question.correct_answer}")
        answer_run.italic = True
        answer_run.font.color.rgb = RGBColor(0, 128, 0)

    # Spacing between questions
    doc.add_paragraph()
