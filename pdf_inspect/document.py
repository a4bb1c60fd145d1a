"""Scoped access to PDF documents via pluggable backends."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from .backends import BackendDocument, PypdfBackend
from .backends.base import PDFBackend
from .exceptions import DocumentNotFoundError
from .types import ToolResult

LOGGER = logging.getLogger(__name__)

DocumentBody = Callable[[BackendDocument], ToolResult]


class DocumentAccessor:
    """Opens one document per call and always releases it."""

    def __init__(self, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()

    @staticmethod
    def ensure_exists(pdf_path: str) -> Path:
        path = Path(pdf_path).expanduser()
        if not path.is_file():
            raise DocumentNotFoundError(pdf_path)
        return path

    @contextmanager
    def open(self, pdf_path: str) -> Iterator[BackendDocument]:
        """Yield an opened document, closing it on every exit path."""

        self.ensure_exists(pdf_path)
        document = self.backend.load(pdf_path)
        try:
            yield document
        finally:
            document.close()
            LOGGER.debug("Closed %s", pdf_path)

    def with_document(self, pdf_path: str, body: DocumentBody) -> ToolResult:
        """Run ``body`` against the document at ``pdf_path``.

        Failures are converted into error results; nothing propagates.
        """

        try:
            with self.open(pdf_path) as document:
                return body(document)
        except DocumentNotFoundError as exc:
            LOGGER.warning("%s", exc.message)
            return ToolResult.error(exc.message)
        except Exception as exc:
            LOGGER.warning("Error processing %s: %s", pdf_path, exc)
            return ToolResult.error(f"Error processing file: {exc}")


__all__ = ["DocumentAccessor", "DocumentBody"]
