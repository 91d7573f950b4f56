"""Writing Document records back to front-matter + body text"""

from typing import Any

import yaml

from mdposts.core.models import Document
from mdposts.core.parse import DELIMITER


def dump_frontmatter(doc: Document) -> str:
    """Return the metadata block, delimiter lines included.

    `toc` is written only when False; an absent key reads back as True.
    """
    fm: dict[str, Any] = {"title": doc.title, "date": doc.date.isoformat()}
    if not doc.toc:
        fm["toc"] = False
    fm.update(doc.extra)
    header = yaml.safe_dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False, width=1000)
    return f"{DELIMITER}\n{header}{DELIMITER}\n"


def to_text(doc: Document) -> str:
    """Serialize a Document so that parse_text(to_text(doc)) == doc."""
    return dump_frontmatter(doc) + doc.body
