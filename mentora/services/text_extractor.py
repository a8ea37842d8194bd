"""Text extraction for uploaded study materials, using PyMuPDF for PDFs."""

import logging
import re

import pymupdf  # PyMuPDF

logger = logging.getLogger(__name__)

UNSUPPORTED_FORMAT_TEXT = "File uploaded successfully (text extraction not supported for this format)"
EXTRACTION_FAILED_TEXT = "Error extracting text from file"

# Control characters that are noise in a prompt (NUL, etc.)
_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class TextExtractor:
    """Turns uploaded file bytes into plain text for prompt grounding."""

    @staticmethod
    def extract_pdf(pdf_bytes: bytes) -> str:
        """
        Extract text from PDF bytes.

        Pages are joined with a blank line. Raises whatever PyMuPDF raises
        for unreadable input.
        """
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:
            text_pages = [page.get_text() for page in doc]
        return _ILLEGAL_CHARS.sub("", "\n\n".join(text_pages))

    @staticmethod
    def extract_plain(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    async def extract(self, data: bytes, content_type: str | None) -> str:
        """
        Extract text by MIME type.

        Parameters such as ``; charset=utf-8`` are ignored. Never raises:
        unsupported formats and failed extractions return a placeholder
        sentence instead, which still gets recorded.
        """
        media_type = (content_type or "").split(";")[0].strip().lower()
        try:
            if media_type == "text/plain":
                return self.extract_plain(data)
            if media_type == "application/pdf":
                return self.extract_pdf(data)
        except Exception:
            logger.exception("Text extraction failed for %s upload", media_type)
            return EXTRACTION_FAILED_TEXT
        return UNSUPPORTED_FORMAT_TEXT


# Singleton instance
text_extractor = TextExtractor()
