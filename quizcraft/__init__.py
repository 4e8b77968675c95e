"""quizcraft - turn study material into editable, exportable quizzes."""

__version__ = "0.1.0"
