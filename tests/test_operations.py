from __future__ import annotations

import json
from pathlib import Path

import pytest
from pypdf.generic import ByteStringObject

from pdf_inspect.dispatcher import Dispatcher
from pdf_inspect.document import DocumentAccessor
from pdf_inspect.operations import ExtractTextArguments, build_metadata
from pdf_inspect.types import ToolResult


@pytest.fixture()
def dispatcher() -> Dispatcher:
    return Dispatcher()


def test_get_page_count_one_page(dispatcher: Dispatcher, one_page_pdf: Path) -> None:
    result = dispatcher.call("get_page_count", {"file_path": str(one_page_pdf)})

    assert result == ToolResult.text("Page count: 1")


def test_get_page_count_multi_page(dispatcher: Dispatcher, sample_pdf: Path) -> None:
    result = dispatcher.call("get_page_count", {"file_path": str(sample_pdf)})

    assert result.content == "Page count: 5"


@pytest.mark.parametrize("operation", ["extract_text", "get_metadata", "get_page_count"])
def test_missing_file_for_every_operation(
    dispatcher: Dispatcher, missing_pdf: Path, operation: str
) -> None:
    result = dispatcher.call(operation, {"file_path": str(missing_pdf)})

    assert result.is_error
    assert result.content == f"File not found: {missing_pdf}"


@pytest.mark.parametrize("operation", ["extract_text", "get_metadata", "get_page_count"])
def test_corrupt_file_for_every_operation(
    dispatcher: Dispatcher, corrupt_pdf: Path, operation: str
) -> None:
    result = dispatcher.call(operation, {"file_path": str(corrupt_pdf)})

    assert result.is_error
    assert result.content.startswith("Error processing file: ")


def test_extract_text_all_pages(dispatcher: Dispatcher, text_pdf: Path) -> None:
    result = dispatcher.call("extract_text", {"file_path": str(text_pdf)})

    assert not result.is_error
    text = result.content
    assert text.index("Alpha") < text.index("Bravo") < text.index("Charlie")


def test_extract_text_literal_all(dispatcher: Dispatcher, text_pdf: Path) -> None:
    default = dispatcher.call("extract_text", {"file_path": str(text_pdf)})
    explicit = dispatcher.call("extract_text", {"file_path": str(text_pdf), "page_range": "all"})

    assert explicit == default


def test_extract_text_single_page(dispatcher: Dispatcher, text_pdf: Path) -> None:
    result = dispatcher.call("extract_text", {"file_path": str(text_pdf), "page_range": "2"})

    assert "Bravo" in result.content
    assert "Alpha" not in result.content
    assert "Charlie" not in result.content


def test_extract_text_range_past_last_page_is_clamped(
    dispatcher: Dispatcher, text_pdf: Path
) -> None:
    result = dispatcher.call("extract_text", {"file_path": str(text_pdf), "page_range": "2-10"})

    assert not result.is_error
    assert "Alpha" not in result.content
    assert result.content.index("Bravo") < result.content.index("Charlie")


def test_extract_text_start_past_last_page_is_empty(
    dispatcher: Dispatcher, text_pdf: Path
) -> None:
    result = dispatcher.call("extract_text", {"file_path": str(text_pdf), "page_range": "7-9"})

    assert result == ToolResult.text("")


def test_extract_text_reversed_range_never_opens(one_page_pdf: Path, recording_backend) -> None:
    dispatcher = Dispatcher(accessor=DocumentAccessor(recording_backend))

    result = dispatcher.call("extract_text", {"file_path": str(one_page_pdf), "page_range": "2-1"})

    assert result == ToolResult.error("Invalid page range: 2-1")
    assert recording_backend.loads == 0


@pytest.mark.parametrize("page_range", ["abc", "0", "3-", "1-2-3", ""])
def test_extract_text_invalid_range_is_rejected(
    dispatcher: Dispatcher, text_pdf: Path, page_range: str
) -> None:
    result = dispatcher.call(
        "extract_text", {"file_path": str(text_pdf), "page_range": page_range}
    )

    assert result == ToolResult.error(f"Invalid page range: {page_range}")


def test_extract_text_invalid_range_checked_before_existence(
    dispatcher: Dispatcher, missing_pdf: Path
) -> None:
    result = dispatcher.call("extract_text", {"file_path": str(missing_pdf), "page_range": "5-3"})

    assert result.content == "Invalid page range: 5-3"


def test_extract_text_integer_bounds(dispatcher: Dispatcher, text_pdf: Path) -> None:
    tail = dispatcher.call("extract_text", {"file_path": str(text_pdf), "start_page": 2})
    head = dispatcher.call("extract_text", {"file_path": str(text_pdf), "end_page": 1})

    assert "Alpha" not in tail.content and "Charlie" in tail.content
    assert "Alpha" in head.content and "Bravo" not in head.content


def test_extract_text_integer_bounds_clamped(one_page_pdf: Path, recording_backend) -> None:
    dispatcher = Dispatcher(accessor=DocumentAccessor(recording_backend))

    result = dispatcher.call(
        "extract_text", {"file_path": str(one_page_pdf), "start_page": 2, "end_page": 40}
    )

    assert result == ToolResult.text("page 2|page 3")
    assert recording_backend.extracted == [[1, 2]]


def test_extract_text_reversed_integer_bounds(one_page_pdf: Path, recording_backend) -> None:
    dispatcher = Dispatcher(accessor=DocumentAccessor(recording_backend))

    result = dispatcher.call(
        "extract_text", {"file_path": str(one_page_pdf), "start_page": 3, "end_page": 2}
    )

    assert result == ToolResult.error("Invalid page range: 3-2")
    assert recording_backend.loads == 0


def test_extract_text_rejects_both_selection_shapes(dispatcher: Dispatcher, text_pdf: Path) -> None:
    result = dispatcher.call(
        "extract_text", {"file_path": str(text_pdf), "page_range": "1-2", "start_page": 1}
    )

    assert result.is_error
    assert result.content.startswith("Invalid arguments for extract_text:")
    assert "cannot be combined" in result.content


def test_extract_text_arguments_page_indexes() -> None:
    arguments = ExtractTextArguments(file_path="x.pdf", page_range="2-4")

    assert list(arguments.page_indexes(10)) == [1, 2, 3]
    assert list(arguments.page_indexes(2)) == [1]
    assert list(ExtractTextArguments(file_path="x.pdf").page_indexes(3)) == [0, 1, 2]


def test_get_metadata_record(dispatcher: Dispatcher, sample_pdf: Path) -> None:
    result = dispatcher.call("get_metadata", {"file_path": str(sample_pdf)})

    assert not result.is_error
    metadata = json.loads(result.content)
    assert metadata == {
        "title": "Sample",
        "author": None,
        "subject": "Testing",
        "keywords": "pdf,inspect",
        "creator": "pytest",
        "producer": "pdf-inspect-tests",
        "creation_date": "2023-05-01T12:00:00+01:00",
        "modification_date": "2023-05-02T13:00:00+00:00",
        "page_count": 5,
    }


def test_get_metadata_is_pretty_printed(dispatcher: Dispatcher, sample_pdf: Path) -> None:
    result = dispatcher.call("get_metadata", {"file_path": str(sample_pdf)})

    assert result.content.startswith("{\n  ")


def test_get_metadata_without_information(recording_backend, one_page_pdf: Path) -> None:
    dispatcher = Dispatcher(accessor=DocumentAccessor(recording_backend))

    metadata = json.loads(dispatcher.call("get_metadata", {"file_path": str(one_page_pdf)}).content)

    assert metadata["page_count"] == 3
    assert all(metadata[key] is None for key in metadata if key != "page_count")


def test_build_metadata_handles_odd_values() -> None:
    metadata = build_metadata(
        {"Title": "", "Author": "Jane Doe", "CreationDate": "last tuesday", "ModDate": None},
        page_count=2,
    )

    assert metadata.title is None
    assert metadata.author == "Jane Doe"
    assert metadata.creation_date == "last tuesday"
    assert metadata.modification_date is None
    assert metadata.page_count == 2


def test_build_metadata_decodes_byte_strings() -> None:
    metadata = build_metadata(
        {"Title": ByteStringObject(b"R\xe9sum\xe9"), "Author": ByteStringObject(b"Jane Doe")},
        page_count=1,
    )

    assert metadata.title == "Résumé"
    assert metadata.author == "Jane Doe"
