"""Text extraction from uploaded study material (PDF, image or text files)."""

import logging
import mimetypes
from pathlib import Path

import fitz  # PyMuPDF
import pytesseract
from PIL import Image

from quizcraft.config.settings import get_settings
from quizcraft.errors import ExtractionError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

TEXT_MIME_TYPES = {"application/json"}


def detect_mime_type(path: Path) -> str:
    """Guess the MIME type of a file from its name."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


def extract_pdf_text(path: Path) -> str:
    """
    Extract the text of every page of a PDF.

    Args:
        path: PDF file

    Returns:
        Page texts joined by newlines
    """
    try:
        with fitz.open(str(path)) as doc:
            return "\n".join(page.get_text() for page in doc)
    except (RuntimeError, ValueError, OSError) as e:
        raise ExtractionError(f"Failed to extract text from PDF {path.name}: {e}") from e


def extract_image_text(path: Path, language: str | None = None) -> str:
    """
    Recognise the text in an image with Tesseract.

    Args:
        path: Image file
        language: Tesseract language code, defaults to the configured one

    Returns:
        Recognised text
    """
    settings = get_settings()
    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd

    try:
        with Image.open(path) as image:
            return pytesseract.image_to_string(image, lang=language or settings.ocr_language)
    except (pytesseract.TesseractError, OSError) as e:
        raise ExtractionError(f"Failed to extract text from image {path.name}: {e}") from e


def extract_plain_text(path: Path) -> str:
    """Read a text or JSON file as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise ExtractionError(f"Failed to read {path.name}: {e}") from e


def extract_text(path: str | Path) -> str:
    """
    Turn an uploaded file into the single string quiz generation works from.

    Args:
        path: PDF, image, plain text or JSON file

    Returns:
        Extracted text

    Raises:
        UnsupportedFileTypeError: If the file type is not supported
        ExtractionError: If the file could not be read
    """
    path = Path(path)
    mime_type = detect_mime_type(path)
    logger.debug("Extracting text from %s (%s)", path, mime_type)

    if mime_type == "application/pdf":
        text = extract_pdf_text(path)
    elif mime_type.startswith("image/"):
        text = extract_image_text(path)
    elif mime_type.startswith("text/") or mime_type in TEXT_MIME_TYPES:
        text = extract_plain_text(path)
    else:
        raise UnsupportedFileTypeError(f"Unsupported file type: {path.name} ({mime_type})")

    logger.info("Extracted %d characters from %s", len(text), path.name)
    return text
