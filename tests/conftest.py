from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import DictionaryObject, NameObject, NumberObject, StreamObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_inspect.backends.base import BackendDocument


def write_text_pdf(path: Path, page_texts: Sequence[str]) -> Path:
    """Write a PDF whose pages each draw one line of Helvetica text."""
    writer = PdfWriter()
    font_dict = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
        }
    )
    font_ref = writer._add_object(font_dict)
    for text in page_texts:
        page = writer.add_blank_page(width=200, height=200)
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font_ref})}
        )
        content_bytes = f"BT /F1 12 Tf 20 100 Td ({text}) Tj ET".encode("utf-8")
        stream = StreamObject()
        stream[NameObject("/Length")] = NumberObject(len(content_bytes))
        stream._data = content_bytes
        page[NameObject("/Contents")] = writer._add_object(stream)
    with path.open("wb") as handle:
        writer.write(handle)
    return path


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    writer = PdfWriter()
    for _ in range(5):
        writer.add_blank_page(width=200, height=200)
    writer.add_metadata(
        {
            "/Title": "Sample",
            "/Subject": "Testing",
            "/Keywords": "pdf,inspect",
            "/Creator": "pytest",
            "/Producer": "pdf-inspect-tests",
            "/CreationDate": "D:20230501120000+01'00'",
            "/ModDate": "D:20230502130000Z",
        }
    )
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def one_page_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "one.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def text_pdf(tmp_path: Path) -> Path:
    return write_text_pdf(tmp_path / "text.pdf", ["Alpha page", "Bravo page", "Charlie page"])


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "corrupt.pdf"
    pdf_path.write_bytes(b"this is not a pdf document")
    return pdf_path


@pytest.fixture()
def missing_pdf(tmp_path: Path) -> Path:
    return tmp_path / "missing.pdf"


@dataclass
class RecordingDocument(BackendDocument):
    backend: "RecordingBackend" = None  # type: ignore[assignment]

    def extract_text(self, page_indexes: Sequence[int]) -> str:
        self.backend.extracted.append(list(page_indexes))
        return "|".join(f"page {index + 1}" for index in page_indexes)

    def info(self) -> Mapping[str, object]:
        return dict(self.backend.info)

    def close(self) -> None:
        self.backend.closes += 1


@dataclass
class RecordingBackend:
    """In-memory backend counting every open and close."""

    num_pages: int = 3
    info: Mapping[str, object] = field(default_factory=dict)
    fail_with: Optional[Exception] = None
    loads: int = 0
    closes: int = 0
    extracted: List[List[int]] = field(default_factory=list)

    def load(self, pdf_path: str) -> RecordingDocument:
        self.loads += 1
        if self.fail_with is not None:
            raise self.fail_with
        return RecordingDocument(num_pages=self.num_pages, backend=self)


@pytest.fixture()
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[[str, Sequence[str]], Path]:
    def _create(filename: str, page_texts: Sequence[str]) -> Path:
        return write_text_pdf(tmp_path / filename, page_texts)

    return _create
