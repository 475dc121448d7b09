"""Tag list normalization, anchor slugs, and the tag index"""

import re
from typing import Optional

from mdsite.core.models import Document, FrontmatterValue, ListValue, Scalar


_WHITESPACE_RE = re.compile(r'\s+')


def tag_slug(tag: str) -> str:
    """Lower-case a tag and collapse whitespace runs to single hyphens ('Web Dev' -> 'web-dev')."""
    return _WHITESPACE_RE.sub('-', tag.strip().lower())


def normalize_tags(value: Optional[FrontmatterValue]) -> tuple[str, ...]:
    """Return trimmed, non-empty tag strings in authoring order."""
    match value:
        case ListValue(items=items):
            raw = items
        case Scalar(value=text):
            raw = text.split(',')
        case _:
            return ()
    return tuple(t for t in (item.strip() for item in raw) if t)


def build_tag_index(documents: list[Document]) -> dict[str, list[Document]]:
    """Group documents by tag, alphabetically by tag.

    Spellings that share an anchor slug ('Python', 'python') are merged under
    the first spelling seen; documents keep their incoming order.
    """
    labels: dict[str, str] = {}
    groups: dict[str, list[Document]] = {}
    for doc in documents:
        for tag in doc.tags:
            slug = tag_slug(tag)
            label = labels.setdefault(slug, tag)
            members = groups.setdefault(label, [])
            if not any(d is doc for d in members):
                members.append(doc)
    return dict(sorted(groups.items(), key=lambda kv: (kv[0].lower(), kv[0])))
