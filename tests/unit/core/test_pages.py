"""Unit tests for core/pages.py"""

from mdsite.config import SiteConfig
from mdsite.core.pages import (
    INDEX_PAGE,
    TAGS_PAGE,
    date_markup,
    post_meta_tags,
    render_index,
    render_not_found,
    render_post,
    render_tags,
    tags_markup,
)


POST = "<title>{{TITLE}}</title>{{META_TAGS}}|{{DATE}}|{{READING_TIME}}|{{TAGS}}|{{SITE_TITLE}}|{{CONTENT}}"
INDEX = "<title>{{SITE_TITLE}}</title>{{META_TAGS}}<p>{{SITE_DESCRIPTION}}</p>{{POSTS}}"
TAGS = "{{SITE_TITLE}}{{META_TAGS}}{{TAGS_CONTENT}}"


# --- fragments ---

def test_date_markup_resolved(make_doc, utc):
    markup = date_markup(make_doc("a", utc(2024, 1, 5)))
    assert markup == '<time class="post-date" datetime="2024-01-05">January 5, 2024</time>'


def test_date_markup_raw_only(make_doc):
    assert date_markup(make_doc("a", raw_date="spring <2024>")) == '<time class="post-date">spring &lt;2024&gt;</time>'


def test_date_markup_empty(make_doc):
    assert date_markup(make_doc("a")) == ""


def test_tags_markup_links_to_anchor(make_doc):
    markup = tags_markup(make_doc("a", tags=("Go", "Web Dev")))
    assert '<a href="tags.html#web-dev">Web Dev</a>' in markup
    assert '<a href="tags.html#go">Go</a>' in markup


def test_tags_markup_without_links(make_doc):
    markup = tags_markup(make_doc("a", tags=("Go",)), link_tags=False)
    assert markup == '<ul class="post-tags"><li>Go</li></ul>'


def test_tags_markup_empty(make_doc):
    assert tags_markup(make_doc("a")) == ""


# --- render_post ---

def test_render_post_substitutes_placeholders(make_doc, utc, site):
    doc = make_doc("hello", utc(2024, 1, 5), title="Tom & Jerry's", reading_minutes=3, tags=("Go",))
    html = render_post(doc, site, POST)
    assert "<title>Tom &amp; Jerry&#039;s</title>" in html
    assert "3 min read" in html
    assert "January 5, 2024" in html
    assert "|Test Site|" in html
    assert html.endswith("<p>hello</p>\n")
    assert "{{" not in html


def test_render_post_title_with_placeholder_text(make_doc, site):
    doc = make_doc(
        "templating",
        title="Using {{CONTENT}} and {{SITE_TITLE}}",
        excerpt="Write {{TITLE}} in a template",
        body_html="<p>SECRET BODY</p>\n",
    )
    html = render_post(doc, site, POST)
    assert html.count("SECRET BODY") == 1
    assert "<title>Using {{CONTENT}} and {{SITE_TITLE}}</title>" in html
    assert 'content="Write {{TITLE}} in a template"' in html


def test_post_meta_tags(make_doc, utc, site):
    doc = make_doc("hello", utc(2024, 1, 5), title='Say "hi"', excerpt="An <intro>", tags=("Go",))
    meta = post_meta_tags(doc, site)
    assert '<meta name="description" content="An &lt;intro&gt;">' in meta
    assert '<link rel="canonical" href="https://example.com/hello.html">' in meta
    assert '<meta property="og:title" content="Say &quot;hi&quot;">' in meta
    assert '<meta property="og:type" content="article">' in meta
    assert '<meta property="article:published_time" content="2024-01-05T00:00:00+00:00">' in meta
    assert '<meta property="article:tag" content="Go">' in meta
    assert '<meta name="twitter:card" content="summary">' in meta
    assert '<meta name="author" content="Tester">' in meta


def test_post_meta_tags_undated_no_author(make_doc):
    meta = post_meta_tags(make_doc("x"), SiteConfig(title="S"))
    assert "article:published_time" not in meta
    assert 'name="author"' not in meta
    assert '<link rel="canonical" href="/x.html">' in meta


# --- render_index ---

def test_render_index_lists_in_given_order(make_doc, utc, site):
    docs = [make_doc("new", utc(2024, 2, 1)), make_doc("old", utc(2023, 2, 1))]
    html = render_index(docs, site, INDEX)
    assert html.index('href="new.html"') < html.index('href="old.html"')
    assert "<p>A test site</p>" in html
    assert 'type="application/rss+xml"' in html
    assert '<p class="post-excerpt">About new</p>' in html


def test_render_index_empty(site):
    html = render_index([], site, INDEX)
    assert "post-preview" not in html


def test_render_index_excerpt_with_placeholder_text(make_doc, site):
    html = render_index([make_doc("a", excerpt="Set {{SITE_DESCRIPTION}} in config")], site, INDEX)
    assert '<p class="post-excerpt">Set {{SITE_DESCRIPTION}} in config</p>' in html
    assert "<p>A test site</p>" in html


# --- render_tags ---

def test_render_tags_sections(make_doc, site):
    docs = [make_doc("a", tags=("Web Dev", "Go")), make_doc("b", tags=("Web Dev",))]
    html = render_tags(docs, site, TAGS)
    assert '<section class="tag-section" id="web-dev">' in html
    assert '<section class="tag-section" id="go">' in html
    assert "(2 posts)" in html
    assert "(1 post)" in html
    assert html.index('id="go"') < html.index('id="web-dev"')
    assert '<a href="#web-dev">Web Dev</a> (2)' in html


def test_render_tags_no_tags(make_doc, site):
    assert "No tags yet." in render_tags([make_doc("a")], site, TAGS)


# --- render_not_found ---

def test_render_not_found(site):
    assert render_not_found(site, "<h1>{{SITE_TITLE}}</h1>{{META_TAGS}}").startswith("<h1>Test Site</h1>")


def test_render_not_found_without_template(site):
    assert render_not_found(site, None) is None


def test_tag_links_target_generated_tag_page(make_doc, site):
    doc = make_doc("a", tags=("Go",))
    assert f'href="{TAGS_PAGE}#go"' in tags_markup(doc)
    assert f'href="{TAGS_PAGE}#go"' in render_index([doc], site, INDEX)
    assert INDEX_PAGE == "index.html"
