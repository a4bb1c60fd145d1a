"""pypdf backend implementation for PDF Inspect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Mapping, Sequence

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..exceptions import EncryptedPDFError, InvalidPDFError
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n"


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader
    stream: BinaryIO

    def extract_text(self, page_indexes: Sequence[int]) -> str:
        texts = []
        for index in page_indexes:
            texts.append(self.reader.pages[index].extract_text() or "")
        return PAGE_SEPARATOR.join(texts)

    def info(self) -> Mapping[str, object]:
        metadata = self.reader.metadata
        if not metadata:
            return {}
        cleaned: Dict[str, object] = {}
        for key, value in metadata.items():
            normalized_key = key[1:] if key.startswith("/") else key
            if hasattr(value, "get_object"):
                value = value.get_object()
            cleaned[normalized_key] = value
        return cleaned

    def close(self) -> None:
        self.stream.close()


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str) -> PypdfDocument:
        path = Path(pdf_path).expanduser()
        try:
            stream = path.open("rb")
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = self._open_reader(stream, pdf_path)
            num_pages = len(reader.pages)
        except Exception:
            stream.close()
            raise

        LOGGER.debug("Opened %s (%d pages)", pdf_path, num_pages)
        return PypdfDocument(num_pages=num_pages, reader=reader, stream=stream)

    @staticmethod
    def _open_reader(stream: BinaryIO, pdf_path: str) -> PdfReader:
        try:
            reader = PdfReader(stream)
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:
                raise EncryptedPDFError(f"Failed to decrypt PDF: {exc}") from exc
            if decrypted == 0:
                raise EncryptedPDFError("PDF is encrypted. A password is required to read this file.")

        return reader
