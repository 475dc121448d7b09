"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone

import pytest

from mdsite.config import SiteConfig
from mdsite.core.models import Document


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [link](https://example.com).

## Heading 2

- item one
- item two

```python
print("hello")
```
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
date: 2024-01-05
tags: [Go, "Web Dev"]
---

First paragraph of the body.

Second paragraph.
"""


def _make_doc(slug: str, date: datetime = None, **kwargs) -> Document:
    values = {
        "slug": slug,
        "filename": f"{slug}.md",
        "title": slug.replace("-", " ").title(),
        "raw_date": date.date().isoformat() if date else "",
        "resolved_date": date,
        "excerpt": f"About {slug}",
        "reading_minutes": 1,
        "tags": (),
        "body_html": f"<p>{slug}</p>\n",
    }
    values.update(kwargs)
    return Document(**values)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory building Documents with sensible defaults for renderer and ordering tests."""
    return _make_doc


@pytest.fixture(name="utc")
def utc_fixture():
    """Factory for UTC midnight datetimes: utc(2024, 1, 5)."""
    return lambda y, m, d: datetime(y, m, d, tzinfo=timezone.utc)


@pytest.fixture(name="site")
def site_fixture() -> SiteConfig:
    return SiteConfig(title="Test Site", url="https://example.com", description="A test site", author="Tester")


@pytest.fixture(name="now")
def now_fixture() -> datetime:
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="sample_md")
def sample_md_fixture() -> str:
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture() -> str:
    return SAMPLE_FM_MD
