"""Unit tests for core/tags.py"""

import pytest

from mdsite.core.models import ListValue, Scalar
from mdsite.core.tags import build_tag_index, normalize_tags, tag_slug


@pytest.mark.parametrize("tag,expected", [
    ("Web Dev", "web-dev"),
    ("Go", "go"),
    ("  Machine   Learning ", "machine-learning"),
    ("c++", "c++"),
    ("tabs\tand\nnewlines", "tabs-and-newlines"),
])
def test_tag_slug(tag, expected):
    assert tag_slug(tag) == expected


def test_normalize_tags_list():
    assert normalize_tags(ListValue(("Go", " Web Dev ", ""))) == ("Go", "Web Dev")


def test_normalize_tags_scalar_is_split():
    assert normalize_tags(Scalar("a, b ,c")) == ("a", "b", "c")


def test_normalize_tags_missing():
    assert normalize_tags(None) == ()


def test_normalize_tags_keeps_duplicates_and_order():
    assert normalize_tags(ListValue(("b", "a", "b"))) == ("b", "a", "b")


def test_build_tag_index_alphabetical(make_doc):
    docs = [make_doc("one", tags=("python", "Web Dev")), make_doc("two", tags=("Go",))]
    index = build_tag_index(docs)
    assert list(index) == ["Go", "python", "Web Dev"]
    assert [d.slug for d in index["Web Dev"]] == ["one"]


def test_build_tag_index_preserves_document_order(make_doc):
    docs = [make_doc("newer", tags=("x",)), make_doc("older", tags=("x",))]
    assert [d.slug for d in build_tag_index(docs)["x"]] == ["newer", "older"]


def test_build_tag_index_merges_slug_collisions(make_doc):
    """Spellings sharing an anchor slug land under the first spelling seen."""
    docs = [make_doc("a", tags=("Web Dev",)), make_doc("b", tags=("web  dev",))]
    index = build_tag_index(docs)
    assert list(index) == ["Web Dev"]
    assert [d.slug for d in index["Web Dev"]] == ["a", "b"]


def test_build_tag_index_lists_document_once_per_tag(make_doc):
    index = build_tag_index([make_doc("a", tags=("x", "X", "x"))])
    assert [d.slug for d in index["x"]] == ["a"]


def test_build_tag_index_empty():
    assert build_tag_index([]) == {}
