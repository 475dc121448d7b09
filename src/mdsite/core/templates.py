"""Template resolution and literal placeholder substitution"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

POST_TEMPLATE = "post.html"
INDEX_TEMPLATE = "index.html"
TAGS_TEMPLATE = "tags.html"
NOT_FOUND_TEMPLATE = "404.html"

TITLE = "{{TITLE}}"
DATE = "{{DATE}}"
READING_TIME = "{{READING_TIME}}"
TAGS = "{{TAGS}}"
CONTENT = "{{CONTENT}}"
POSTS = "{{POSTS}}"
TAGS_CONTENT = "{{TAGS_CONTENT}}"
SITE_TITLE = "{{SITE_TITLE}}"
SITE_DESCRIPTION = "{{SITE_DESCRIPTION}}"
META_TAGS = "{{META_TAGS}}"


class MissingTemplateError(RuntimeError):
    """A required template could not be found; the build cannot continue."""


@dataclass(frozen=True)
class Templates:
    post:      str
    index:     str
    tags:      Optional[str] = None
    not_found: Optional[str] = None


def _read_optional(path: Path) -> Optional[str]:
    if not path.is_file():
        logger.info("Optional template not found, skipping output: %s", path.name)
        return None
    return path.read_text(encoding='utf-8')


def _read_required(path: Path) -> str:
    if not path.is_file():
        raise MissingTemplateError(f"Required template not found: {path}")
    return path.read_text(encoding='utf-8')


def load_templates(templates_dir: Path) -> Templates:
    """Resolve every template once. Raises MissingTemplateError for post/index."""
    return Templates(
        post=_read_required(templates_dir / POST_TEMPLATE),
        index=_read_required(templates_dir / INDEX_TEMPLATE),
        tags=_read_optional(templates_dir / TAGS_TEMPLATE),
        not_found=_read_optional(templates_dir / NOT_FOUND_TEMPLATE),
    )


def fill(template: str, values: dict[str, str]) -> str:
    """Replace each placeholder token with its value by exact string match.

    Substitution is a single pass over the template, so inserted values are
    never scanned for further tokens.
    """
    if not values:
        return template
    pattern = re.compile("|".join(re.escape(token) for token in values))
    return pattern.sub(lambda m: values[m[0]], template)
