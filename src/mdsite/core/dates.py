"""Best-effort date resolution from frontmatter and filenames, plus display formats"""

import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Callable, Optional


ISO_PREFIX_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})')
HUMAN_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)

DateStrategy = Callable[[str, str], Optional[datetime]]


def _utc(value: datetime) -> datetime:
    """Anchor naive datetimes to UTC and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso_prefix(text: str) -> Optional[datetime]:
    """Build a UTC midnight datetime from a leading YYYY-MM-DD token."""
    m = ISO_PREFIX_RE.match(text.strip())
    if not m:
        return None
    try:
        return datetime(int(m[1]), int(m[2]), int(m[3]), tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_generic(text: str) -> Optional[datetime]:
    """Try ISO-8601, RFC-822, then a few common human-written formats."""
    text = text.strip()
    if not text:
        return None
    try:
        return _utc(datetime.fromisoformat(text))
    except ValueError:
        pass
    try:
        return _utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        pass
    for fmt in HUMAN_FORMATS:
        try:
            return _utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    return None


def frontmatter_iso_prefix(raw: str, filename: str) -> Optional[datetime]:
    return parse_iso_prefix(raw) if raw else None


def generic_parse(raw: str, filename: str) -> Optional[datetime]:
    return parse_generic(raw) if raw else None


def filename_prefix(raw: str, filename: str) -> Optional[datetime]:
    return parse_iso_prefix(filename)


# Tried in order; the first strategy returning a datetime wins.
DATE_STRATEGIES: tuple[DateStrategy, ...] = (frontmatter_iso_prefix, generic_parse, filename_prefix)


def resolve_date(raw: str, filename: str, strategies: tuple[DateStrategy, ...] = DATE_STRATEGIES) -> Optional[datetime]:
    """Return the first date any strategy can derive, or None. Never raises."""
    raw = (raw or "").strip()
    for strategy in strategies:
        if (resolved := strategy(raw, filename)) is not None:
            return resolved
    return None


def format_display_date(resolved: Optional[datetime], raw: str = "") -> str:
    """Long calendar date, e.g. 'January 5, 2024'; falls back to the raw text."""
    if resolved is None:
        return raw
    return f"{resolved:%B} {resolved.day}, {resolved.year}"


def format_rss_date(resolved: Optional[datetime], raw: str = "", now: datetime = None) -> str:
    """RFC-822 date for <pubDate>; raw text if unparseable, current time if there is none."""
    if resolved is not None:
        return format_datetime(_utc(resolved), usegmt=True)
    if raw:
        return raw
    return format_datetime(_utc(now or datetime.now(timezone.utc)), usegmt=True)


def format_iso_date(resolved: Optional[datetime], now: datetime = None) -> str:
    """YYYY-MM-DD for sitemap <lastmod> and <time datetime=...>."""
    value = resolved or now or datetime.now(timezone.utc)
    return value.date().isoformat()
