"""Exceptions raised by quizcraft."""


class QuizcraftError(Exception):
    """Base class for quizcraft errors."""


class UnsupportedFileTypeError(QuizcraftError):
    """The uploaded file is not a PDF, an image or a text file."""


class ExtractionError(QuizcraftError):
    """Text could not be read out of a supported file."""


class GenerationError(QuizcraftError):
    """The quiz generator failed to return quiz text."""
