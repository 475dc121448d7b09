"""Data models shared by the loader, renderers, and build orchestrator"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class RawSource:
    """One discovered file: its name and full text contents."""
    identifier: str     # file name, e.g. "2024-03-01-hello.md"
    raw_text:   str


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: tuple[str, ...] = ()


FrontmatterValue = Union[Scalar, ListValue]


@dataclass(frozen=True)
class Frontmatter:
    """Ordered key -> Scalar | ListValue mapping parsed from a document header."""
    fields: dict[str, FrontmatterValue] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str) -> Optional[FrontmatterValue]:
        return self.fields.get(key)

    def text(self, key: str, default: str = "") -> str:
        """Return a field as plain text; list values are joined with ', '."""
        match self.fields.get(key):
            case Scalar(value=value):
                return value
            case ListValue(items=items):
                return ", ".join(items)
            case _:
                return default


@dataclass(frozen=True)
class Document:
    """A parsed, derived document ready for rendering; discarded after the build."""
    slug:            str
    filename:        str
    title:           str
    raw_date:        str
    resolved_date:   Optional[datetime]
    excerpt:         str
    reading_minutes: int
    tags:            tuple[str, ...]
    body_html:       str
    is_draft:        bool = False


@dataclass
class LoadResult:
    published:  list[Document] = field(default_factory=list)
    discovered: int = 0
    drafts:     int = 0
    failures:   list[tuple[str, str]] = field(default_factory=list)   # (filename, message)


@dataclass
class BuildReport:
    discovered: int = 0
    built:      int = 0
    drafts:     int = 0
    failures:   list[tuple[str, str]] = field(default_factory=list)
    outputs:    list[Path] = field(default_factory=list)
