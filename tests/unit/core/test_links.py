"""Unit tests for core/links.py"""

from datetime import date

from mdposts.core.links import Heading, Link, extract_links, outline, slug_refs, unresolved_refs
from mdposts.core.models import Collection, Document, SourceDoc


def _source(slug: str, body: str) -> SourceDoc:
    return SourceDoc(source=f"{slug}/index.md", slug=slug, document=Document(title=slug, date=date(2023, 10, 1), body=body))


def test_extract_links_finds_links_and_images(sample_body):
    """Links and images are reported in order with their body line."""
    links = extract_links(sample_body)
    assert links == [
        Link("link", "https://example.com/page", 3),
        Link("link", "/posts/other-post/#section", 3),
        Link("image", "./diagram.png", 6),
        Link("link", "/posts/other-post/", 16),
    ]


def test_extract_links_ignores_code(sample_body):
    """Link syntax inside fenced code is not a link."""
    body = "```\n[not a link](/posts/x/)\n```\n"
    assert extract_links(body) == []


def test_slug_refs_dedupes_and_strips_fragment(sample_body):
    assert slug_refs(sample_body) == ["other-post"]


def test_slug_refs_ignores_external_and_images():
    body = "[ext](https://site.test/posts/remote/) ![img](/posts/pic/) [ok](/posts/local)\n"
    assert slug_refs(body) == ["local"]


def test_slug_refs_custom_prefix():
    body = "[a](/blog/first/) [b](/posts/second/)\n"
    assert slug_refs(body, prefix="/blog/") == ["first"]


def test_outline(sample_body):
    """Headings come back with level, text and anchor."""
    assert outline(sample_body) == [
        Heading(1, "Why Optional?", "why-optional"),
        Heading(2, "Pitfalls", "pitfalls"),
        Heading(3, "Fixing it", "fixing-it"),
    ]


def test_unresolved_refs():
    """Only links to slugs outside the collection are reported."""
    collection = Collection(documents=[
        _source("a", "[b](/posts/b/) [gone](/posts/gone/)\n"),
        _source("b", "[a](/posts/a/)\n"),
    ])
    assert unresolved_refs(collection) == [("a", "gone")]
