"""Shared utility functions."""
import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional, Union
from urllib.parse import urlsplit

from dateutil import parser as dateparser

logger = logging.getLogger(__name__)

# Schemes that need an authority component to be a usable URL
_SPECIAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def to_rfc822_date(dt: datetime) -> str:
    """Format a datetime the way RSS wants it, e.g. 'Mon, 01 Jan 2024 00:00:00 GMT'.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters. '&' goes first so entities aren't doubled."""
    for raw, entity in _XML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def parse_iso_date(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 date/datetime string. Returns None if it doesn't parse."""
    try:
        return dateparser.isoparse(value.strip())
    except (ValueError, OverflowError, TypeError):
        return None


def format_pub_date(value: Union[datetime, str]) -> str:
    """Render a date_published value: datetimes and ISO strings are
    normalized, anything else is passed through untouched."""
    if isinstance(value, datetime):
        try:
            return to_rfc822_date(value)
        except (OverflowError, ValueError):
            logger.debug(f"[Date] Out of range in UTC, emitting ISO form: {value!r}")
            return value.isoformat()
    if not isinstance(value, str):
        return str(value)
    dt = parse_iso_date(value)
    if dt is None:
        logger.debug(f"[Date] Not ISO-8601, emitting verbatim: {value!r}")
        return value
    try:
        return to_rfc822_date(dt)
    except (OverflowError, ValueError):
        logger.debug(f"[Date] Out of range in UTC, emitting verbatim: {value!r}")
        return value


def is_absolute_url(value: str) -> bool:
    """True if value is a syntactically valid absolute URL (scheme + rest)."""
    if not value or any(c.isspace() for c in value):
        return False
    if not _SCHEME_RE.match(value):
        return False
    try:
        parts = urlsplit(value)
        scheme = parts.scheme.lower()
        if scheme in _SPECIAL_SCHEMES and not parts.netloc:
            # Special schemes tolerate missing or extra slashes: http:host, http:///host
            rest = value[len(parts.scheme) + 1:].lstrip("/\\")
            parts = urlsplit(f"{scheme}://{rest}")
        parts.port  # raises ValueError for a bad or out-of-range port
    except ValueError:
        return False
    if scheme in _SPECIAL_SCHEMES:
        return bool(parts.hostname)
    return True


def json_to_xml_url(url: str) -> str:
    """Presume the RSS feed lives beside the JSON feed, with a .xml extension.

    Only the first '.json' in the string is swapped, even when it is not the
    trailing one.
    """
    if url.endswith(".json"):
        return url.replace(".json", ".xml", 1)
    return url
