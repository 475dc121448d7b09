"""CLI command implementations"""

import logging
from datetime import date
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdsite.config import Settings, load_config
from mdsite.core.dates import format_iso_date
from mdsite.core.frontmatter import dump_frontmatter
from mdsite.core.loader import load_documents
from mdsite.core.models import Frontmatter, ListValue, Scalar
from mdsite.core.pipeline import run_build
from mdsite.core.templates import MissingTemplateError
from mdsite.core.utils.slug import dated_filename


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", force=True)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def build_cmd(
    source: Annotated[Optional[str], typer.Option("--source", help="Directory containing markdown documents")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    templates: Annotated[Optional[str], typer.Option("--templates", help="Templates directory")] = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Public base URL")] = None,
    site_title: Annotated[Optional[str], typer.Option("--site-title", help="Site title")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Threads used to parse documents")] = None,
    clean: Annotated[Optional[bool], typer.Option("--clean/--no-clean", help="Remove the output directory first")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")] = False,
    ):
    """Build the whole site: one page per document plus index, feed, sitemap, and tags."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "source_dir": source, "output_dir": out, "templates_dir": templates,
        "site_url": site_url, "site_title": site_title, "workers": workers, "clean": clean,
    })

    try:
        report = run_build(settings)
    except MissingTemplateError as e:
        _fail(str(e))
    except ValueError as e:
        _fail("Build failed", e)

    typer.echo(f"Found {report.discovered} markdown file(s)")
    for filename, message in report.failures:
        typer.echo(f"  failed: {filename} ({message})", err=True)
    for path in report.outputs:
        typer.echo(f"  -> {path}")
    typer.echo(
        f"Built {report.built} of {report.discovered} document(s) "
        f"({report.drafts} draft(s), {len(report.failures)} failed) into {settings.output_dir}/"
    )


def list_cmd(
    source: Annotated[Optional[str], typer.Option("--source", help="Directory containing markdown documents")] = None,
    ):
    """List published documents in build order."""
    settings = _settings(overrides={"source_dir": source})
    loaded = load_documents(Path(settings.source_dir), settings)
    if not loaded.published:
        typer.echo(f"No published documents found in {settings.source_dir}/")
        raise typer.Exit(1)
    for doc in loaded.published:
        when = format_iso_date(doc.resolved_date) if doc.resolved_date else "undated   "
        tags = f"  [{', '.join(doc.tags)}]" if doc.tags else ""
        typer.echo(f"{when}  {doc.slug}  {doc.title}{tags}")
    typer.echo(f"{len(loaded.published)} published, {loaded.drafts} draft(s), {len(loaded.failures)} failed")


def new_cmd(
    title: Annotated[str, typer.Argument(help="Title of the new document")],
    source: Annotated[Optional[str], typer.Option("--source", help="Directory containing markdown documents")] = None,
    tags: Annotated[Optional[str], typer.Option("--tags", help="Comma-separated tags")] = None,
    draft: Annotated[bool, typer.Option("--draft", help="Mark the document as a draft")] = False,
    ):
    """Create a dated markdown file with a frontmatter skeleton."""
    settings = _settings(overrides={"source_dir": source})
    today = date.today()
    path = Path(settings.source_dir) / dated_filename(title, today)
    if path.exists():
        _fail(f"{path} already exists")

    fields = {"title": Scalar(title), "date": Scalar(today.isoformat())}
    if tags:
        fields["tags"] = ListValue(tuple(t.strip() for t in tags.split(",") if t.strip()))
    if draft:
        fields["draft"] = Scalar("true")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_frontmatter(Frontmatter(fields)) + "\n", encoding="utf-8")
    typer.echo(f"Created {path}")
