"""
PDF text extraction module.

Reads the text layer of an uploaded syllabus so the assignment extractor can
work on plain lines.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Union

import pdfplumber

logger = logging.getLogger(__name__)

PdfSource = Union[str, Path, bytes, BinaryIO]


class PDFProcessingError(Exception):
    """Raised when there's an error reading a PDF file."""
    pass


def extract_pdf_text(source: PdfSource) -> str:
    """Extract the text of every page of a PDF.

    Args:
        source: Path to the PDF, its raw bytes, or a binary file object

    Returns:
        Page texts joined with newlines (pages without a text layer are skipped)

    Raises:
        PDFProcessingError: If the PDF cannot be opened or read
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    pages_text: List[str] = []
    try:
        with pdfplumber.open(source) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    pages_text.append(text)
    except Exception as e:
        raise PDFProcessingError(f"Could not read PDF: {e}") from e

    text = "\n".join(pages_text)
    logger.info("Extracted %d characters from %d page(s)", len(text), len(pages_text))
    return text
