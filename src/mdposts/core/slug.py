"""Slug generation for document identifiers"""

import re
from pathlib import Path


BUNDLE_STEMS = {"index", "_index"}


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def slug_for(path: Path, document=None) -> str:
    """Slug for a post: front-matter 'slug', else page-bundle dir name, else file stem."""
    if document is not None and document.extra.get("slug"):
        return slugify(str(document.extra["slug"]))
    path = Path(path)
    if path.stem in BUNDLE_STEMS and path.parent.name:
        return slugify(path.parent.name)
    return slugify(path.stem)
