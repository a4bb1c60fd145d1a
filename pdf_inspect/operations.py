"""Argument models and handlers for the registered inspection operations."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .backends.base import BackendDocument
from .document import DocumentAccessor
from .exceptions import InvalidRangeError
from .ranges import PageRange, parse_page_range
from .registry import OperationRegistry, OperationSpec, ParameterSpec
from .types import PDFMetadata, ToolResult
from .utils import format_pdf_date, text_value

LOGGER = logging.getLogger(__name__)

ALL_PAGES = "all"

FILE_PATH_PARAMETER = ParameterSpec(
    name="file_path",
    type="string",
    description="Path to the PDF file",
    required=True,
)
PAGE_RANGE_PARAMETER = ParameterSpec(
    name="page_range",
    type="string",
    description="Page range (e.g., '1-5', '3' or 'all')",
)


class FileArguments(BaseModel):
    """Arguments shared by every operation."""

    file_path: str = Field(..., description="Path to the PDF file")

    model_config = ConfigDict(frozen=True)


class ExtractTextArguments(FileArguments):
    """Arguments for ``extract_text``.

    The page selection is either a ``page_range`` expression or the
    ``start_page``/``end_page`` integer pair, never both.
    """

    page_range: Optional[str] = Field(None, description="Page range (e.g., '1-5' or 'all')")
    start_page: Optional[int] = Field(None, ge=1, description="Starting page number (1-based)")
    end_page: Optional[int] = Field(None, ge=1, description="Ending page number (1-based)")

    @model_validator(mode="after")
    def _single_selection_shape(self) -> "ExtractTextArguments":
        if self.uses_bounds and self.page_range not in (None, ALL_PAGES):
            raise ValueError("page_range cannot be combined with start_page/end_page")
        return self

    @property
    def uses_bounds(self) -> bool:
        return self.start_page is not None or self.end_page is not None

    def requested_range(self) -> Optional[PageRange]:
        """Validate the page selection without touching the document.

        Returns ``None`` when the whole document (or an open-ended integer
        bound) was requested.
        """
        if self.uses_bounds:
            if (
                self.start_page is not None
                and self.end_page is not None
                and self.end_page < self.start_page
            ):
                raise InvalidRangeError(f"{self.start_page}-{self.end_page}")
            return None

        if self.page_range is None or self.page_range == ALL_PAGES:
            return None

        parsed = parse_page_range(self.page_range)
        if parsed is None:
            raise InvalidRangeError(self.page_range)
        return parsed

    def page_indexes(self, page_count: int) -> range:
        """Return the zero-based pages to extract from a document of ``page_count`` pages."""
        if self.uses_bounds:
            bounds = PageRange.from_bounds(self.start_page, self.end_page, page_count)
            return bounds.clamp(page_count) if bounds is not None else range(0)

        requested = self.requested_range()
        if requested is None:
            return range(page_count)
        return requested.clamp(page_count)


def _text_field(info: Mapping[str, object], key: str) -> Optional[str]:
    return text_value(info.get(key))


def build_metadata(info: Mapping[str, object], page_count: int) -> PDFMetadata:
    """Map a raw document information dictionary onto :class:`PDFMetadata`."""

    return PDFMetadata(
        page_count=page_count,
        title=_text_field(info, "Title"),
        author=_text_field(info, "Author"),
        subject=_text_field(info, "Subject"),
        keywords=_text_field(info, "Keywords"),
        creator=_text_field(info, "Creator"),
        producer=_text_field(info, "Producer"),
        creation_date=format_pdf_date(info.get("CreationDate")),
        modification_date=format_pdf_date(info.get("ModDate")),
    )


def extract_text(accessor: DocumentAccessor, arguments: ExtractTextArguments) -> ToolResult:
    # Rejects a bad selection before the file is opened.
    arguments.requested_range()

    def _extract(document: BackendDocument) -> ToolResult:
        pages = arguments.page_indexes(document.num_pages)
        LOGGER.info(
            "Extracting %d of %d pages from %s", len(pages), document.num_pages, arguments.file_path
        )
        return ToolResult.text(document.extract_text(pages))

    return accessor.with_document(arguments.file_path, _extract)


def get_metadata(accessor: DocumentAccessor, arguments: FileArguments) -> ToolResult:
    def _metadata(document: BackendDocument) -> ToolResult:
        LOGGER.info("Extracting metadata from %s", arguments.file_path)
        metadata = build_metadata(document.info(), document.num_pages)
        return ToolResult.text(metadata.to_json())

    return accessor.with_document(arguments.file_path, _metadata)


def get_page_count(accessor: DocumentAccessor, arguments: FileArguments) -> ToolResult:
    return accessor.with_document(
        arguments.file_path,
        lambda document: ToolResult.text(f"Page count: {document.num_pages}"),
    )


REGISTRY = OperationRegistry(
    [
        OperationSpec(
            name="extract_text",
            description="Extract text content from a PDF file",
            parameters=(FILE_PATH_PARAMETER, PAGE_RANGE_PARAMETER),
            arguments_model=ExtractTextArguments,
            handler=extract_text,
        ),
        OperationSpec(
            name="get_metadata",
            description="Extract metadata from a PDF file",
            parameters=(FILE_PATH_PARAMETER,),
            arguments_model=FileArguments,
            handler=get_metadata,
        ),
        OperationSpec(
            name="get_page_count",
            description="Get the number of pages in a PDF file",
            parameters=(FILE_PATH_PARAMETER,),
            arguments_model=FileArguments,
            handler=get_page_count,
        ),
    ]
)

__all__ = [
    "ALL_PAGES",
    "ExtractTextArguments",
    "FileArguments",
    "REGISTRY",
    "build_metadata",
    "extract_text",
    "get_metadata",
    "get_page_count",
]
