"""
PDF Inspect - read-only PDF inspection operations for calling agents.

A caller hands the dispatcher an operation name and a loosely-typed argument
mapping; the dispatcher validates the arguments, opens the document for the
duration of the call and always answers with a :class:`ToolResult`.

Quick Start:
    >>> from pdf_inspect import Dispatcher
    >>> dispatcher = Dispatcher()
    >>> dispatcher.call('get_page_count', {'file_path': 'input.pdf'}).content
    'Page count: 3'

Operations:
    - extract_text: Text of all pages or of a page range
    - get_metadata: Document information as a JSON object
    - get_page_count: Number of pages

For serving requests over stdio, use the 'pdf-inspect serve' command after
installation.
"""

# Core classes
from pdf_inspect.dispatcher import Dispatcher
from pdf_inspect.document import DocumentAccessor
from pdf_inspect.operations import REGISTRY
from pdf_inspect.registry import OperationRegistry, OperationSpec, ParameterSpec
from pdf_inspect.server import ServerInfo, create_server, run_stdio

# Data types
from pdf_inspect.ranges import PageRange, parse_page_range
from pdf_inspect.types import PDFMetadata, ToolResult

# Exceptions
from pdf_inspect.exceptions import (
    PDFInspectException,
    DocumentNotFoundError,
    InvalidArgumentError,
    InvalidRangeError,
    ProcessingError,
    InvalidPDFError,
    EncryptedPDFError,
    UnknownOperationError,
)

__version__ = "1.0.0"
__author__ = "PDF Inspect Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "Dispatcher",
    "DocumentAccessor",
    "OperationRegistry",
    "OperationSpec",
    "ParameterSpec",
    "REGISTRY",
    "ServerInfo",
    "create_server",
    "run_stdio",
    # Data types
    "PageRange",
    "PDFMetadata",
    "ToolResult",
    "parse_page_range",
    # Exceptions
    "PDFInspectException",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "ProcessingError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "UnknownOperationError",
]
