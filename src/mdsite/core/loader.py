"""Document Loader: discover, parse, filter drafts, and order the published collection"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Union

from markdown_it import MarkdownIt

from mdsite.config import Settings
from mdsite.core.models import Document, LoadResult
from mdsite.core.parse import discover_files, make_parser, parse_document, read_source


logger = logging.getLogger(__name__)

# Page names written by the site-level renderers.
RESERVED_SLUGS = {"index", "tags", "404"}


def sort_documents(documents: list[Document]) -> list[Document]:
    """Newest first; undated documents last. Ties fall back to filename descending."""
    by_name = sorted(documents, key=lambda d: d.filename, reverse=True)
    return sorted(
        by_name,
        key=lambda d: (d.resolved_date is None, -d.resolved_date.timestamp() if d.resolved_date else 0.0),
    )


def _load_one(path: Path, parser: MarkdownIt, settings: Settings) -> Union[Document, str]:
    """Return a Document, or an error message if the file cannot be read or parsed."""
    try:
        source = read_source(path)
        return parse_document(
            source,
            parser=parser,
            excerpt_length=settings.excerpt_length,
            words_per_minute=settings.words_per_minute,
        )
    except (OSError, ValueError) as e:
        return f"{type(e).__name__}: {e}"


def load_documents(source_dir: Path, settings: Settings) -> LoadResult:
    """Build the published collection from every markdown file in source_dir.

    Unreadable or unparseable files are logged and excluded; drafts are
    counted as discovered but never published. An unknown parser preset
    raises ValueError before any file is read.
    """
    if not source_dir.is_dir():
        logger.warning("Source directory not found: %s", source_dir)
    parser = make_parser(settings.parser_config)
    files = discover_files(source_dir)
    result = LoadResult(discovered=len(files))
    logger.info("Found %d markdown file(s) in %s", len(files), source_dir)

    if settings.workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=min(settings.workers, len(files))) as executor:
            loaded = list(executor.map(lambda p: _load_one(p, parser, settings), files))
    else:
        loaded = [_load_one(p, parser, settings) for p in files]

    seen: dict[str, str] = {}
    published = []
    for path, item in zip(files, loaded):
        if isinstance(item, str):
            logger.warning("Skipping %s: %s", path.name, item)
            result.failures.append((path.name, item))
            continue
        if item.is_draft:
            logger.info("Skipping draft: %s", path.name)
            result.drafts += 1
            continue
        if item.slug in RESERVED_SLUGS:
            message = f"slug '{item.slug}' is reserved for a generated page"
        elif item.slug in seen:
            message = f"duplicate slug '{item.slug}' (already used by {seen[item.slug]})"
        else:
            message = ""
        if message:
            logger.warning("Skipping %s: %s", path.name, message)
            result.failures.append((path.name, message))
            continue
        seen[item.slug] = path.name
        logger.debug("Loaded %s -> %s.html", path.name, item.slug)
        published.append(item)

    result.published = sort_documents(published)
    return result
