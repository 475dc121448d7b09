"""URL joining for canonical links, feed items, and sitemap entries"""


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return f"{base}/"
    return f"{base}/{path}"


def page_url(base: str, slug: str) -> str:
    """Public URL of a document page."""
    return join_url(base, f"{slug}.html")
