"""Page renderers: per-document, index, tag-index, and not-found pages

Every renderer is a pure function of its inputs; nothing here touches disk.
"""

from typing import Optional

from mdsite.config import SiteConfig
from mdsite.core import templates as tpl
from mdsite.core.dates import format_display_date, format_iso_date
from mdsite.core.models import Document
from mdsite.core.tags import build_tag_index, tag_slug
from mdsite.core.utils.escape import escape_html
from mdsite.core.utils.urls import join_url, page_url


INDEX_PAGE = "index.html"
TAGS_PAGE = "tags.html"
NOT_FOUND_PAGE = "404.html"


def _meta(name: str, content: str) -> str:
    return f'<meta name="{name}" content="{escape_html(content)}">'


def _prop(prop: str, content: str) -> str:
    return f'<meta property="{prop}" content="{escape_html(content)}">'


def date_markup(doc: Document) -> str:
    """<time> element for a document, or '' when there is nothing to show."""
    display = format_display_date(doc.resolved_date, doc.raw_date)
    if not display:
        return ''
    attr = f' datetime="{format_iso_date(doc.resolved_date)}"' if doc.resolved_date else ''
    return f'<time class="post-date"{attr}>{escape_html(display)}</time>'


def reading_time_markup(doc: Document) -> str:
    return f'<span class="reading-time">{doc.reading_minutes} min read</span>'


def tags_markup(doc: Document, link_tags: bool = True) -> str:
    """Tag list for a document; links point at tags.html anchors when link_tags is set."""
    if not doc.tags:
        return ''
    items = []
    for tag in doc.tags:
        label = escape_html(tag)
        if link_tags:
            items.append(f'<li><a href="{TAGS_PAGE}#{escape_html(tag_slug(tag))}">{label}</a></li>')
        else:
            items.append(f'<li>{label}</li>')
    return f'<ul class="post-tags">{"".join(items)}</ul>'


def post_meta_tags(doc: Document, site: SiteConfig) -> str:
    """SEO and social metadata (description, canonical, Open Graph, Twitter Card)."""
    url = page_url(site.url, doc.slug)
    lines = [
        _meta("description", doc.excerpt),
        f'<link rel="canonical" href="{escape_html(url)}">',
        _prop("og:type", "article"),
        _prop("og:title", doc.title),
        _prop("og:description", doc.excerpt),
        _prop("og:url", url),
        _prop("og:site_name", site.title),
    ]
    if doc.resolved_date:
        lines.append(_prop("article:published_time", doc.resolved_date.isoformat()))
    for tag in doc.tags:
        lines.append(_prop("article:tag", tag))
    if site.author:
        lines.append(_meta("author", site.author))
    lines += [
        _meta("twitter:card", "summary"),
        _meta("twitter:title", doc.title),
        _meta("twitter:description", doc.excerpt),
    ]
    return "\n".join(lines)


def site_meta_tags(site: SiteConfig, path: str = "", title: str = "") -> str:
    """Metadata for site-level pages (index, tags, 404), including the feed link."""
    url = join_url(site.url, path)
    lines = [
        _meta("description", site.description),
        f'<link rel="canonical" href="{escape_html(url)}">',
        f'<link rel="alternate" type="application/rss+xml" title="{escape_html(site.title)}" '
        f'href="{escape_html(join_url(site.url, "feed.xml"))}">',
        _prop("og:type", "website"),
        _prop("og:title", title or site.title),
        _prop("og:description", site.description),
        _prop("og:url", url),
        _meta("twitter:card", "summary"),
        _meta("twitter:title", title or site.title),
    ]
    if site.author:
        lines.append(_meta("author", site.author))
    return "\n".join(lines)


def render_post(doc: Document, site: SiteConfig, template: str, link_tags: bool = True) -> str:
    return tpl.fill(template, {
        tpl.TITLE: escape_html(doc.title),
        tpl.DATE: date_markup(doc),
        tpl.READING_TIME: reading_time_markup(doc),
        tpl.TAGS: tags_markup(doc, link_tags),
        tpl.SITE_TITLE: escape_html(site.title),
        tpl.META_TAGS: post_meta_tags(doc, site),
        tpl.CONTENT: doc.body_html,
    })


def post_preview(doc: Document, link_tags: bool = True) -> str:
    parts = [
        '<article class="post-preview">',
        f'<h2><a href="{escape_html(doc.slug)}.html">{escape_html(doc.title)}</a></h2>',
        date_markup(doc),
        reading_time_markup(doc),
    ]
    if doc.excerpt:
        parts.append(f'<p class="post-excerpt">{escape_html(doc.excerpt)}</p>')
    parts.append(tags_markup(doc, link_tags))
    parts.append('</article>')
    return "\n".join(p for p in parts if p)


def render_index(documents: list[Document], site: SiteConfig, template: str, link_tags: bool = True) -> str:
    """Index page listing documents in the order given."""
    return tpl.fill(template, {
        tpl.SITE_TITLE: escape_html(site.title),
        tpl.SITE_DESCRIPTION: escape_html(site.description),
        tpl.META_TAGS: site_meta_tags(site),
        tpl.POSTS: "\n".join(post_preview(d, link_tags) for d in documents),
    })


def tag_section(tag: str, documents: list[Document]) -> str:
    anchor = escape_html(tag_slug(tag))
    count = len(documents)
    items = "\n".join(
        f'<li><a href="{escape_html(d.slug)}.html">{escape_html(d.title)}</a> {date_markup(d)}'.rstrip() + '</li>'
        for d in documents
    )
    return (
        f'<section class="tag-section" id="{anchor}">\n'
        f'<h2>{escape_html(tag)} <span class="tag-count">({count} {"post" if count == 1 else "posts"})</span></h2>\n'
        f'<ul>\n{items}\n</ul>\n'
        f'</section>'
    )


def render_tags(documents: list[Document], site: SiteConfig, template: str) -> str:
    """Tag index: a navigation list plus one anchored section per tag."""
    index = build_tag_index(documents)
    nav = "".join(
        f'<li><a href="#{escape_html(tag_slug(tag))}">{escape_html(tag)}</a> ({len(docs)})</li>'
        for tag, docs in index.items()
    )
    sections = "\n".join(tag_section(tag, docs) for tag, docs in index.items())
    content = f'<ul class="tag-list">{nav}</ul>\n{sections}' if index else '<p>No tags yet.</p>'
    return tpl.fill(template, {
        tpl.SITE_TITLE: escape_html(site.title),
        tpl.META_TAGS: site_meta_tags(site, TAGS_PAGE, f"Tags | {site.title}"),
        tpl.TAGS_CONTENT: content,
    })


def render_not_found(site: SiteConfig, template: Optional[str]) -> Optional[str]:
    """404 page, or None when no template was supplied."""
    if template is None:
        return None
    return tpl.fill(template, {
        tpl.SITE_TITLE: escape_html(site.title),
        tpl.META_TAGS: site_meta_tags(site, NOT_FOUND_PAGE, f"Not found | {site.title}"),
    })
