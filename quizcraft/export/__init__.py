"""Export functionality for quiz questions."""

from .exporter import ExportFormat, export_questions
from .text_export import render_json, render_text

__all__ = ["ExportFormat", "export_questions", "render_text", "render_json"]
