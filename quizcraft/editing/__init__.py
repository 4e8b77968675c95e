"""Editing and presentation filtering of parsed questions."""

from .operations import edit_field, filter_for_presentation, finish_editing, toggle_editing

__all__ = ["edit_field", "filter_for_presentation", "toggle_editing", "finish_editing"]
