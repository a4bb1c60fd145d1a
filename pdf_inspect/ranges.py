"""Page range parsing for text extraction requests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_PAGE_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PageRange:
    """Represents an inclusive, 1-based page range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError("Page numbers must be positive integers")
        if self.start > self.end:
            raise ValueError("Page range start must be less than or equal to end")

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    def clamp(self, page_count: int) -> range:
        """Return the zero-based page indexes of this range that exist in a document."""

        return range(self.start - 1, min(self.end, page_count))

    @classmethod
    def from_bounds(
        cls,
        start: Optional[int],
        end: Optional[int],
        page_count: int,
    ) -> Optional["PageRange"]:
        """Build a range from optional integer bounds.

        A missing ``start`` means the first page and a missing ``end`` means
        the last page of the document. Returns ``None`` when the bounds are
        out of order.
        """

        first = 1 if start is None else start
        last = max(page_count, first) if end is None else end
        if first < 1 or last < first:
            return None
        return cls(first, last)


def _page_number(token: str) -> Optional[int]:
    token = token.strip()
    if not _PAGE_NUMBER.fullmatch(token):
        return None
    return int(token)


def parse_page_range(expression: object) -> Optional[PageRange]:
    """Parse ``"3"`` or ``"2-5"`` into a :class:`PageRange`.

    Returns ``None`` for a missing or blank expression as well as for any
    expression that does not describe a valid range; callers decide which
    of the two cases is an error. Never raises.
    """

    if not isinstance(expression, str) or not expression.strip():
        return None

    parts = expression.split("-")
    if len(parts) == 1:
        page = _page_number(parts[0])
        if page is None or page < 1:
            return None
        return PageRange(page, page)

    if len(parts) == 2 and parts[0].strip() and parts[1].strip():
        start = _page_number(parts[0])
        end = _page_number(parts[1])
        if start is None or end is None or start < 1 or end < start:
            return None
        return PageRange(start, end)

    return None


__all__ = ["PageRange", "parse_page_range"]
