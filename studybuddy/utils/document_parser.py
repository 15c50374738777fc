"""
Text extraction for uploaded PDFs.
"""
import logging
import os
from typing import Optional

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)


def extract_text_from_pdf(file_path: str, max_chars: Optional[int] = None) -> str:
    """
    Pull the text layer out of a stored PDF.

    Pages without extractable text (scans, images) are skipped. Reading
    stops once ``max_chars`` characters have been collected.

    Args:
        file_path: Path of the stored PDF
        max_chars: Optional cap on the returned text length

    Returns:
        Page texts joined by newlines

    Raises:
        ValueError: If the file is missing or cannot be read as a PDF
    """
    if not os.path.exists(file_path):
        raise ValueError(f"File not found: {file_path}")

    try:
        reader = PdfReader(file_path)
        pages = []
        collected = 0
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if not page_text:
                continue
            pages.append(page_text)
            collected += len(page_text) + 1
            if max_chars is not None and collected >= max_chars:
                break
    except Exception as e:
        raise ValueError(f"Error extracting text from PDF: {str(e)}")

    text = "\n".join(pages)
    logger.debug(f"Extracted {len(text)} characters from {len(pages)} page(s) of '{file_path}'")
    return text[:max_chars] if max_chars is not None else text
