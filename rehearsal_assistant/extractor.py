"""Text extraction from uploaded script documents."""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from rehearsal_assistant.errors import ExtractionError

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
PDF_MAGIC_WINDOW = 1024  # leading bytes searched for the header


def _extract_pdf(document: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(document))
        pages = [page.extract_text() or "" for page in reader.pages]
    except PdfReadError as e:
        raise ExtractionError(f"Could not read PDF: {e}") from e
    return "\n".join(pages)


def _extract_plain(document: bytes) -> str:
    try:
        return document.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ExtractionError("Document is neither a PDF nor UTF-8 text") from e


def extract(document: bytes) -> str:
    """Extract raw text from a PDF (every page) or a UTF-8 text document.

    Raises ExtractionError if the document can't be read or holds no text.
    """
    if PDF_MAGIC in document[:PDF_MAGIC_WINDOW]:
        text = _extract_pdf(document)
    else:
        text = _extract_plain(document)

    logger.info("Extracted text length: %d characters", len(text))
    if not text.strip():
        raise ExtractionError("Document contains no extractable text")
    return text


class TextExtractor:
    """Callable-object form of extract(), for injection into RehearsalManager."""

    def extract(self, document: bytes) -> str:
        return extract(document)
