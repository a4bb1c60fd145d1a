"""Backend protocol for read-only PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence


@dataclass
class BackendDocument:
    """Represents an opened PDF document with backend-specific helpers."""

    num_pages: int

    def extract_text(self, page_indexes: Sequence[int]) -> str:
        """Return the text of the given zero-based pages, in order."""
        raise NotImplementedError

    def info(self) -> Mapping[str, object]:
        """Return the raw document information dictionary."""
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading."""

    def load(self, pdf_path: str) -> BackendDocument:
        """Open a PDF file and return a backend document wrapper."""
