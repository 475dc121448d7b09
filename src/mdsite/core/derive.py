"""Excerpt and reading-time derivation from markdown body text"""

import math
import re


ELLIPSIS = "..."
DEFAULT_EXCERPT_LENGTH = 200
WORDS_PER_MINUTE = 200

FENCE_RE = re.compile(r'^[ \t]*(?P<fence>`{3,}|~{3,})[^\n]*\n.*?^[ \t]*(?P=fence)[ \t]*$', re.MULTILINE | re.DOTALL)
HEADING_RE = re.compile(r'^[ \t]*#{1,6}[ \t]+', re.MULTILINE)
LINK_RE = re.compile(r'!?\[([^\]]*)\]\([^)]*\)')
INLINE_CODE_RE = re.compile(r'`([^`\n]*)`')
BOLD_RE = re.compile(r'(\*\*|__)(.+?)\1', re.DOTALL)
ITALIC_STAR_RE = re.compile(r'\*(?!\s)(.+?)\*', re.DOTALL)
ITALIC_UNDERSCORE_RE = re.compile(r'(?<!\w)_(?!\s)(.+?)_(?!\w)', re.DOTALL)
PARAGRAPH_BREAK_RE = re.compile(r'\n[ \t]*\n')


def strip_markdown(text: str) -> str:
    """Remove heading markers, link syntax, inline code ticks, and emphasis markers."""
    text = HEADING_RE.sub('', text)
    text = LINK_RE.sub(r'\1', text)
    text = INLINE_CODE_RE.sub(r'\1', text)
    text = BOLD_RE.sub(r'\2', text)
    text = ITALIC_STAR_RE.sub(r'\1', text)
    return ITALIC_UNDERSCORE_RE.sub(r'\1', text)


def make_excerpt(body: str, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Return the first paragraph of plain text, truncated to max_length plus an ellipsis."""
    plain = strip_markdown(body.replace('\r\n', '\n')).strip()
    paragraph = PARAGRAPH_BREAK_RE.split(plain, maxsplit=1)[0]
    paragraph = ' '.join(paragraph.split())
    if len(paragraph) > max_length:
        return paragraph[:max_length].rstrip() + ELLIPSIS
    return paragraph


def count_words(body: str) -> int:
    """Count whitespace-separated words, ignoring fenced code blocks and markup."""
    text = FENCE_RE.sub('', body.replace('\r\n', '\n'))
    return len(strip_markdown(text).split())


def reading_minutes(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated minutes to read, rounded up, never below 1."""
    return max(1, math.ceil(count_words(body) / words_per_minute))
