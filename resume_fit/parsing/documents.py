"""Plain-text extraction from resume and job description files.

PDF uses pymupdf and DOCX uses python-docx, both optional dependencies.
"""

import io
import logging
from pathlib import Path

from resume_fit.core.errors import DocumentParseError, InputError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = ("pdf", "docx", "txt")


def _file_type(path: Path) -> str:
    return path.suffix.lower().lstrip(".")


def extract_text(path: str | Path) -> str:
    """Extract plain text from a PDF, DOCX or TXT file.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not pdf, docx or txt.
        DocumentParseError: If the file cannot be parsed.
        InputError: If the document holds no text.
    """
    path = Path(path)
    if not path.exists():
        msg = f"File not found: {path}"
        raise FileNotFoundError(msg)
    return extract_text_from_bytes(path.read_bytes(), _file_type(path))


def extract_text_from_bytes(data: bytes, file_type: str) -> str:
    """Extract plain text from raw document bytes of the given type."""
    file_type = file_type.lower().lstrip(".")
    if file_type == "pdf":
        text = _pdf_text(data)
    elif file_type == "docx":
        text = _docx_text(data)
    elif file_type == "txt":
        text = data.decode("utf-8", errors="replace")
    else:
        msg = f"Unsupported file type '{file_type}'. Supported: {', '.join(SUPPORTED_TYPES)}"
        raise UnsupportedFormatError(msg)

    if not text.strip():
        msg = f"No text found in {file_type} document"
        raise InputError(msg)
    logger.debug("Extracted %d characters from %s document", len(text), file_type)
    return text


def _pdf_text(data: bytes) -> str:
    try:
        import pymupdf
    except ImportError:
        msg = (
            "pymupdf is required for PDF extraction. "
            "Install with: pip install 'resume-fit[documents]'"
        )
        raise ImportError(msg) from None

    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except Exception as e:
        msg = f"Failed to parse PDF file: {e}"
        raise DocumentParseError(msg) from e

    text_parts: list[str] = []
    for page in doc:
        text_parts.append(page.get_text())
    doc.close()

    return "\n".join(text_parts)


def _docx_text(data: bytes) -> str:
    try:
        import docx
    except ImportError:
        msg = (
            "python-docx is required for Word extraction. "
            "Install with: pip install 'resume-fit[documents]'"
        )
        raise ImportError(msg) from None

    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        msg = f"Failed to parse Word document: {e}"
        raise DocumentParseError(msg) from e

    return "\n".join(paragraph.text for paragraph in document.paragraphs)
