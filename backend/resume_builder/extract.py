"""Plain-text extraction from uploaded resume documents (PDF, DOC/DOCX, TXT)."""
import logging
import os
import uuid
from contextlib import contextmanager
from typing import Iterator

from docx import Document
from pypdf import PdfReader

from .errors import ExtractionError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".pdf", ".docx", ".doc", ".txt")
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def normalize_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def _extract_pdf(path: str) -> str:
    reader = PdfReader(path)
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _extract_docx(path: str) -> str:
    doc = Document(path)
    return "\n".join(p.text for p in doc.paragraphs)


def _extract_txt(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


EXTRACTORS = {
    ".pdf": _extract_pdf,
    ".docx": _extract_docx,
    # python-docx only reads the OOXML container; legacy binary .doc fails below
    ".doc": _extract_docx,
    ".txt": _extract_txt,
}


def extract_text(path: str, extension: str) -> str:
    """Return the text of ``path`` parsed according to ``extension``."""
    extractor = EXTRACTORS.get(extension)
    if extractor is None:
        raise ExtractionError("Unsupported file type")
    try:
        return extractor(path)
    except Exception as e:
        logger.error(f"Text extraction failed for {extension} upload: {e}")
        raise ExtractionError(f"Error extracting text: {e}") from e


@contextmanager
def saved_upload(data: bytes, extension: str, directory: str) -> Iterator[str]:
    """Write an upload to ``directory`` and remove it when the block exits."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"resume_{uuid.uuid4().hex}{extension}")
    try:
        with open(path, "wb") as f:
            f.write(data)
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
