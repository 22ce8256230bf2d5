"""PDF text extraction for statement files."""
import io
from pathlib import Path
from typing import BinaryIO, Optional

import pdfplumber
import pypdf

from statementflow.utils import get_logger, PDFError

logger = get_logger()


class PDFProcessor:
    """Extracts text from PDF files."""

    MIN_TEXT_LENGTH = 50

    def __init__(self, min_text_length: Optional[int] = None):
        """
        Initialize PDF processor.

        Args:
            min_text_length: Shortest extraction accepted before falling back
                to the next extractor
        """
        self.min_text_length = min_text_length if min_text_length is not None else self.MIN_TEXT_LENGTH

    def extract_text(self, pdf_path: Path) -> str:
        """
        Extract text from PDF file.

        Args:
            pdf_path: Path to PDF file

        Returns:
            Extracted text

        Raises:
            PDFError: If the file is missing, extraction fails or text is too short
        """
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise PDFError(f"PDF file not found: {pdf_path}")

        with open(pdf_path, "rb") as f:
            return self._extract(f, pdf_path.name)

    def extract_text_from_bytes(self, data: bytes, name: str = "upload.pdf") -> str:
        """
        Extract text from an in-memory PDF (e.g. an uploaded file).

        Args:
            data: Raw PDF bytes
            name: Name used in log messages

        Returns:
            Extracted text

        Raises:
            PDFError: If the buffer is empty, extraction fails or text is too short
        """
        if not data:
            raise PDFError(f"No PDF data received for {name}")
        return self._extract(io.BytesIO(data), name)

    def validate_extraction(self, text: Optional[str]) -> bool:
        """
        Validate extracted text.

        Args:
            text: Extracted text

        Returns:
            True if valid, False otherwise
        """
        return bool(text) and len(text) >= self.min_text_length

    def _extract(self, stream: BinaryIO, name: str) -> str:
        # Try pdfplumber first
        text = self._extract_with_pdfplumber(stream, name)

        if not self.validate_extraction(text):
            logger.info(f"pdfplumber extracted {len(text) if text else 0} chars, trying pypdf for {name}")
            stream.seek(0)
            text = self._extract_with_pypdf(stream, name)

        if not self.validate_extraction(text):
            raise PDFError(
                f"Extracted text too short ({len(text) if text else 0} chars, minimum {self.min_text_length}). "
                f"File may be scanned or corrupted."
            )

        logger.info(f"Successfully extracted {len(text)} characters from {name}")
        return text

    def _extract_with_pdfplumber(self, stream: BinaryIO, name: str) -> Optional[str]:
        """
        Extract text using pdfplumber.

        Returns:
            Extracted text or None if failed
        """
        try:
            with pdfplumber.open(stream) as pdf:
                text_parts = []
                logger.debug(f"pdfplumber: Processing {len(pdf.pages)} pages from {name}")
                for i, page in enumerate(pdf.pages, 1):
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
                        logger.debug(f"pdfplumber: Page {i} extracted {len(page_text)} chars")
                    else:
                        logger.debug(f"pdfplumber: Page {i} extracted no text")

                text = "\n".join(text_parts)
                return text if text else None

        except Exception as e:
            logger.warning(f"pdfplumber extraction failed for {name}: {e}")
            return None

    def _extract_with_pypdf(self, stream: BinaryIO, name: str) -> Optional[str]:
        """
        Extract text using pypdf (fallback).

        Returns:
            Extracted text or None if failed
        """
        try:
            reader = pypdf.PdfReader(stream)
            text_parts = []
            logger.debug(f"pypdf: Processing {len(reader.pages)} pages from {name}")

            for i, page in enumerate(reader.pages, 1):
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
                    logger.debug(f"pypdf: Page {i} extracted {len(page_text)} chars")

            text = "\n".join(text_parts)
            return text if text else None

        except Exception as e:
            logger.error(f"pypdf extraction failed for {name}: {e}")
            return None
