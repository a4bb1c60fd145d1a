"""
Type definitions and dataclasses for PDF Inspect.

This module defines the result envelope and the records operations return.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ToolResult:
    """
    Uniform success/error envelope returned for every operation call.

    Attributes:
        content: Text payload, or a human-readable diagnostic on failure
        is_error: Whether the call failed
    """
    content: str
    is_error: bool = False

    @classmethod
    def text(cls, content: str) -> "ToolResult":
        return cls(content=content, is_error=False)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=message, is_error=True)


@dataclass(frozen=True)
class PDFMetadata:
    """
    Document information reported by ``get_metadata``.

    Attributes:
        page_count: Number of pages in the PDF
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        keywords: PDF keywords metadata
        creator: PDF creator application
        producer: PDF producer application
        creation_date: Creation timestamp as an ISO-8601 string
        modification_date: Modification timestamp as an ISO-8601 string
    """
    page_count: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[str] = None
    modification_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        page_count = data.pop("page_count")
        data["page_count"] = page_count
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
