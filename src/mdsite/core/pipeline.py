"""Build orchestration: templates -> loader -> renderers -> output files"""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from mdsite.config import Settings
from mdsite.core.feeds import FEED_FILE, SITEMAP_FILE, render_rss, render_sitemap
from mdsite.core.loader import load_documents
from mdsite.core.models import BuildReport
from mdsite.core.pages import (
    INDEX_PAGE,
    NOT_FOUND_PAGE,
    TAGS_PAGE,
    render_index,
    render_not_found,
    render_post,
    render_tags,
)
from mdsite.core.templates import load_templates


logger = logging.getLogger(__name__)


def clean_output_dir(output_dir: Path, project_root: Path, protected: Iterable[Path] = ()) -> None:
    """Remove output_dir, refusing the project root itself or anything outside it.

    Also refuses when output_dir is, or contains, any of the protected
    directories (the markdown sources and templates).
    """
    if not output_dir.exists():
        return
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved:
        raise ValueError("Refusing to clean the project root.")
    if not output_resolved.is_relative_to(root_resolved):
        raise ValueError(f"Refusing to clean output directory outside project root: {output_dir}")
    for path in protected:
        if path.resolve().is_relative_to(output_resolved):
            raise ValueError(f"Refusing to clean output directory {output_dir}: it contains {path}")
    shutil.rmtree(output_dir)


def _write(path: Path, text: str, report: BuildReport) -> None:
    path.write_text(text, encoding='utf-8')
    report.outputs.append(path)
    logger.debug("Wrote %s", path)


def copy_static(files: list[str], output_dir: Path, report: BuildReport) -> None:
    for name in files:
        src = Path(name)
        if not src.is_file():
            logger.info("Static file not found, skipping: %s", src)
            continue
        dest = output_dir / src.name
        try:
            shutil.copy2(src, dest)
        except OSError as e:
            logger.warning("Could not copy static file %s: %s", src, e)
            continue
        report.outputs.append(dest)


def run_build(settings: Settings, now: datetime = None) -> BuildReport:
    """Run a full build. Raises MissingTemplateError when post/index templates are absent.

    Per-document read/parse/write failures are recorded in the report rather
    than raised.
    """
    now = now or datetime.now(timezone.utc)
    templates = load_templates(Path(settings.templates_dir))
    site = settings.site()
    output_dir = Path(settings.output_dir)

    if settings.clean:
        protected = (Path(settings.source_dir), Path(settings.templates_dir))
        clean_output_dir(output_dir, Path.cwd(), protected)
    output_dir.mkdir(parents=True, exist_ok=True)

    loaded = load_documents(Path(settings.source_dir), settings)
    report = BuildReport(discovered=loaded.discovered, drafts=loaded.drafts, failures=list(loaded.failures))
    link_tags = templates.tags is not None

    documents = []
    for doc in loaded.published:
        try:
            _write(output_dir / f"{doc.slug}.html", render_post(doc, site, templates.post, link_tags), report)
        except OSError as e:
            logger.warning("Could not write %s.html: %s", doc.slug, e)
            report.failures.append((doc.filename, f"{type(e).__name__}: {e}"))
            continue
        documents.append(doc)
    report.built = len(documents)

    _write(output_dir / INDEX_PAGE, render_index(documents, site, templates.index, link_tags), report)
    _write(output_dir / FEED_FILE, render_rss(documents, site, now), report)
    _write(output_dir / SITEMAP_FILE, render_sitemap(documents, site, now), report)
    if templates.tags is not None:
        _write(output_dir / TAGS_PAGE, render_tags(documents, site, templates.tags), report)
    if (not_found := render_not_found(site, templates.not_found)) is not None:
        _write(output_dir / NOT_FOUND_PAGE, not_found, report)

    copy_static(settings.static_files, output_dir, report)
    logger.info("Built %d of %d document(s)", report.built, report.discovered)
    return report
