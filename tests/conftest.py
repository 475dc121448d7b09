"""Root test configuration: shared template, posts, and settings fixtures"""

from pathlib import Path

import pytest

from mdsite.config import Settings


POST_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<title>{{TITLE}} | {{SITE_TITLE}}</title>
{{META_TAGS}}
</head>
<body>
<h1>{{TITLE}}</h1>
{{DATE}} {{READING_TIME}}
{{TAGS}}
<main>{{CONTENT}}</main>
</body>
</html>
"""

INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<title>{{SITE_TITLE}}</title>
{{META_TAGS}}
</head>
<body>
<p>{{SITE_DESCRIPTION}}</p>
{{POSTS}}
</body>
</html>
"""

TAGS_TEMPLATE = "<html><head><title>Tags | {{SITE_TITLE}}</title>{{META_TAGS}}</head><body>{{TAGS_CONTENT}}</body></html>\n"

NOT_FOUND_TEMPLATE = "<html><head><title>{{SITE_TITLE}}</title>{{META_TAGS}}</head><body>Not found</body></html>\n"


@pytest.fixture(name="templates_dir")
def templates_dir_fixture(tmp_path) -> Path:
    """A templates directory with every template present."""
    d = tmp_path / "templates"
    d.mkdir()
    (d / "post.html").write_text(POST_TEMPLATE)
    (d / "index.html").write_text(INDEX_TEMPLATE)
    (d / "tags.html").write_text(TAGS_TEMPLATE)
    (d / "404.html").write_text(NOT_FOUND_TEMPLATE)
    return d


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path) -> Path:
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="settings")
def settings_fixture(tmp_path, templates_dir, posts_dir, monkeypatch) -> Settings:
    """Settings pointing at tmp_path, with the working directory moved there."""
    monkeypatch.chdir(tmp_path)
    return Settings(
        site_title="Test Site",
        site_url="https://example.com",
        site_description="A test site",
        site_author="Tester",
        source_dir=str(posts_dir),
        output_dir=str(tmp_path / "dist"),
        templates_dir=str(templates_dir),
    )
