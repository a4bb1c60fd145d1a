"""Utility helpers for PDF Inspect."""
from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure package-wide logging.

    Records go to stderr; stdout carries protocol traffic when serving.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT, stream=sys.stderr)


def parse_pdf_date(raw: Optional[str]) -> Optional[datetime]:
    """Parse a PDF date string into a timezone-aware :class:`datetime`."""
    if not raw:
        return None
    text = raw.strip()
    if text.startswith("D:"):
        text = text[2:]
    try:
        base = datetime.strptime(text[:14], "%Y%m%d%H%M%S")
    except ValueError:
        return None
    tz_sign = text[14:15]
    if tz_sign in {"+", "-"}:
        try:
            hours = int(text[15:17])
            minutes = int(text[18:20]) if len(text) >= 20 else 0
        except ValueError:
            hours = minutes = 0
        delta = timedelta(hours=hours, minutes=minutes)
        if tz_sign == "-":
            delta = -delta
        tz = timezone(delta)
    else:
        tz = timezone.utc
    return base.replace(tzinfo=tz)


def text_value(raw: object) -> Optional[str]:
    """Return a metadata value as text, or ``None`` when it is empty.

    pypdf hands back undecodable strings as bytes; those are decoded as
    UTF-16 when they carry a byte order mark, else UTF-8, else Latin-1.
    """
    if raw is None:
        return None
    if isinstance(raw, bytes):
        if raw[:2] in (b"\xfe\xff", b"\xff\xfe"):
            text = raw.decode("utf-16", errors="replace")
        else:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                text = raw.decode("latin-1")
    else:
        text = str(raw)
    return text or None


def format_pdf_date(raw: object) -> Optional[str]:
    """Render a PDF date value as an ISO-8601 timestamp.

    Values that are present but cannot be parsed are returned verbatim.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.isoformat()
    text = (text_value(raw) or "").strip()
    if not text:
        return None
    parsed = parse_pdf_date(text)
    if parsed is None:
        return text
    return parsed.isoformat()
