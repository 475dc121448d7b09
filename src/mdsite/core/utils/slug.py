"""Slug and filename generation for newly scaffolded documents"""

import re
import unicodedata
from datetime import date


_UNSAFE_RE = re.compile(r'[^\w\s-]')
_SEPARATOR_RE = re.compile(r'[\s_-]+')


def slugify(text: str, fallback: str = "untitled") -> str:
    """Convert a title to a lowercase, hyphen-separated ASCII slug."""
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = _UNSAFE_RE.sub('', text.lower())
    return _SEPARATOR_RE.sub('-', text).strip('-') or fallback


def dated_filename(title: str, on: date, suffix: str = ".md") -> str:
    """'Hello World' on 2024-03-01 -> '2024-03-01-hello-world.md'."""
    return f"{on.isoformat()}-{slugify(title)}{suffix}"
