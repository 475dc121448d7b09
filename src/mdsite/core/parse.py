"""File discovery, source reading, and RawSource -> Document derivation"""

from pathlib import Path
from typing import Optional

from markdown_it import MarkdownIt

from mdsite.core.dates import resolve_date
from mdsite.core.derive import DEFAULT_EXCERPT_LENGTH, WORDS_PER_MINUTE, make_excerpt, reading_minutes
from mdsite.core.frontmatter import parse_frontmatter
from mdsite.core.models import Document, Frontmatter, RawSource, Scalar
from mdsite.core.tags import normalize_tags


MD_EXTENSIONS = {'.md', '.markdown'}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name. Raises ValueError for unknown presets."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False, "breaks": True})
    except KeyError as e:
        raise ValueError(f"Unknown markdown-it preset: {preset!r}") from e


def discover_files(source_dir: Path) -> list[Path]:
    """Return markdown files directly inside source_dir, sorted by name."""
    if not source_dir.is_dir():
        return []
    return sorted(p for p in source_dir.iterdir() if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def read_source(path: Path) -> RawSource:
    """Read a document; raises OSError or UnicodeDecodeError."""
    return RawSource(identifier=path.name, raw_text=path.read_text(encoding='utf-8'))


def is_draft(frontmatter: Frontmatter) -> bool:
    """True when the draft field reads 'true' (unquoted YAML-style booleans arrive as text)."""
    match frontmatter.get('draft'):
        case Scalar(value=value):
            return value.strip().lower() == 'true'
        case _:
            return False


def parse_document(
    source: RawSource,
    parser: Optional[MarkdownIt] = None,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    words_per_minute: int = WORDS_PER_MINUTE,
    ) -> Document:
    """Derive a Document from a RawSource. Drafts skip markdown rendering.

    Pass a parser built once by make_parser when loading many documents.
    """
    frontmatter, body = parse_frontmatter(source.raw_text)
    slug = Path(source.identifier).stem
    raw_date = frontmatter.text('date').strip()
    draft = is_draft(frontmatter)

    return Document(
        slug=slug,
        filename=source.identifier,
        title=frontmatter.text('title').strip() or slug,
        raw_date=raw_date,
        resolved_date=resolve_date(raw_date, source.identifier),
        excerpt=frontmatter.text('excerpt') or make_excerpt(body, excerpt_length),
        reading_minutes=reading_minutes(body, words_per_minute),
        tags=normalize_tags(frontmatter.get('tags')),
        body_html='' if draft else (parser if parser is not None else make_parser()).render(body),
        is_draft=draft,
    )
