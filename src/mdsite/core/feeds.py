"""RSS 2.0 feed and Sitemap 0.9 generators"""

from datetime import datetime, timezone

from mdsite.config import SiteConfig
from mdsite.core.dates import format_iso_date, format_rss_date
from mdsite.core.models import Document
from mdsite.core.utils.escape import escape_xml
from mdsite.core.utils.urls import join_url, page_url


FEED_FILE = "feed.xml"
SITEMAP_FILE = "sitemap.xml"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _item(doc: Document, site: SiteConfig, now: datetime) -> str:
    link = escape_xml(page_url(site.url, doc.slug))
    lines = [
        "<item>",
        f"<title>{escape_xml(doc.title)}</title>",
        f"<link>{link}</link>",
        f'<guid isPermaLink="true">{link}</guid>',
        f"<pubDate>{escape_xml(format_rss_date(doc.resolved_date, doc.raw_date, now))}</pubDate>",
        f"<description>{escape_xml(doc.excerpt)}</description>",
    ]
    lines += [f"<category>{escape_xml(tag)}</category>" for tag in doc.tags]
    lines.append("</item>")
    return "\n".join(lines)


def render_rss(documents: list[Document], site: SiteConfig, now: datetime = None) -> str:
    """RSS 2.0 with an Atom self link; one <item> per document in the order given."""
    now = now or datetime.now(timezone.utc)
    lines = [
        XML_DECLARATION,
        '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
        "<channel>",
        f"<title>{escape_xml(site.title)}</title>",
        f"<link>{escape_xml(join_url(site.url, ''))}</link>",
        f"<description>{escape_xml(site.description)}</description>",
        f"<language>{escape_xml(site.language)}</language>",
        f"<lastBuildDate>{format_rss_date(now)}</lastBuildDate>",
        f'<atom:link href="{escape_xml(join_url(site.url, FEED_FILE))}" rel="self" type="application/rss+xml" />',
    ]
    if site.author:
        lines.append(f"<managingEditor>{escape_xml(site.author)}</managingEditor>")
    lines += [_item(doc, site, now) for doc in documents]
    lines += ["</channel>", "</rss>", ""]
    return "\n".join(lines)


def _url(loc: str, lastmod: str) -> str:
    return "\n".join(["<url>", f"<loc>{escape_xml(loc)}</loc>", f"<lastmod>{lastmod}</lastmod>", "</url>"])


def render_sitemap(documents: list[Document], site: SiteConfig, now: datetime = None) -> str:
    """Homepage plus one <url> per document; lastmod is the resolved date or now."""
    now = now or datetime.now(timezone.utc)
    entries = [_url(join_url(site.url, ''), format_iso_date(None, now))]
    entries += [_url(page_url(site.url, d.slug), format_iso_date(d.resolved_date, now)) for d in documents]
    return "\n".join([
        XML_DECLARATION,
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        *entries,
        "</urlset>",
        "",
    ])
