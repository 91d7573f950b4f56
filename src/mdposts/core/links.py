"""Body inspection with markdown-it: link/image references, slug links, heading outline"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from markdown_it import MarkdownIt

from mdposts.core.models import Collection
from mdposts.core.slug import slugify


@dataclass(frozen=True)
class Link:
    kind:   str             # 'link' or 'image'
    target: str
    line:   Optional[int]   # 1-based line within the body


@dataclass(frozen=True)
class Heading:
    level:  int
    text:   str
    anchor: str


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def extract_links(body: str, parser_config: str = 'gfm-like') -> list[Link]:
    """Return every link and image reference in the body, in document order."""
    links: list[Link] = []
    for tok in _make_parser(parser_config).parse(body):
        if tok.type != 'inline' or not tok.children:
            continue
        line = tok.map[0] + 1 if tok.map else None
        for child in tok.children:
            if child.type == 'link_open':
                links.append(Link('link', str(child.attrGet('href') or ''), line))
            elif child.type == 'image':
                links.append(Link('image', str(child.attrGet('src') or ''), line))
    return links


def slug_refs(body: str, prefix: str = '/posts/', parser_config: str = 'gfm-like') -> list[str]:
    """Slugs of site-relative links under prefix (e.g. /posts/<slug>/), de-duplicated."""
    refs: list[str] = []
    for link in extract_links(body, parser_config):
        if link.kind != 'link':
            continue
        parts = urlsplit(link.target)
        if parts.scheme or parts.netloc or not parts.path.startswith(prefix):
            continue
        slug = parts.path[len(prefix):].strip('/').split('/')[0]
        if slug and slug not in refs:
            refs.append(slug)
    return refs


def outline(body: str, parser_config: str = 'gfm-like') -> list[Heading]:
    """Heading level, text, and anchor for each heading in the body."""
    tokens = _make_parser(parser_config).parse(body)
    headings = []
    for i, tok in enumerate(tokens):
        level = _heading_level(tok)
        if level is None or i + 1 >= len(tokens):
            continue
        text = tokens[i + 1].content.strip()
        headings.append(Heading(level=level, text=text, anchor=slugify(text)))
    return headings


def unresolved_refs(
    collection: Collection,
    prefix: str = '/posts/',
    parser_config: str = 'gfm-like',
    ) -> list[tuple[str, str]]:
    """(source slug, target slug) pairs whose target is not in the collection."""
    known = collection.by_slug()
    return [
        (doc.slug, ref)
        for doc in collection.documents
        for ref in slug_refs(doc.document.body, prefix, parser_config)
        if ref not in known
    ]
