"""Front-matter splitting and decoding of raw post text into Document records"""

import re
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mdposts.core.errors import InvalidDate, MalformedDocument
from mdposts.core.models import KNOWN_KEYS, Document, SourceDoc
from mdposts.core.slug import slug_for


DELIMITER = "---"
DELIMITER_LINES = (DELIMITER + "\n", DELIMITER + "\r\n", DELIMITER)
DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
REQUIRED_KEYS = ("title", "date")


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as the literal text the author wrote."""


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _is_delimiter(line: str) -> bool:
    return line in DELIMITER_LINES


def split_frontmatter(text: str) -> tuple[str, str]:
    """Return (metadata_text, body); body is everything after the closing delimiter line."""
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        raise MalformedDocument(f"Missing opening {DELIMITER!r} delimiter on the first line")
    for i in range(1, len(lines)):
        if _is_delimiter(lines[i]):
            return "".join(lines[1:i]), "".join(lines[i + 1:])
    raise MalformedDocument(f"Missing closing {DELIMITER!r} delimiter")


def _decode_metadata(meta_text: str) -> dict[str, Any]:
    try:
        data = yaml.load(meta_text, Loader=_FrontmatterLoader)
    except yaml.YAMLError as e:
        raise MalformedDocument(f"Invalid YAML front-matter: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedDocument(f"Invalid YAML front-matter: expected a mapping, got {type(data).__name__}")
    return data


def parse_date(value: Any) -> date:
    """Parse a strict YYYY-MM-DD string into a date."""
    if not isinstance(value, str) or not DATE_RE.match(value.strip()):
        raise InvalidDate(value)
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDate(value) from e


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def parse_text(text: str) -> Document:
    """Parse raw post text (front-matter block + markdown body) into a Document.

    Raises MalformedDocument for structural problems and missing required keys,
    InvalidDate when the date is not a real YYYY-MM-DD calendar date.
    """
    meta_text, body = split_frontmatter(text)
    data = _decode_metadata(meta_text)

    missing = [key for key in REQUIRED_KEYS if data.get(key) is None]
    if missing:
        raise MalformedDocument(f"Missing required front-matter key(s): {', '.join(missing)}")

    fields: dict[str, Any] = {
        "title": data["title"],
        "date": parse_date(data["date"]),
        "body": body,
        "extra": {k: v for k, v in data.items() if k not in KNOWN_KEYS},
    }
    if "toc" in data:
        fields["toc"] = data["toc"]

    try:
        return Document(**fields)
    except ValidationError as e:
        raise MalformedDocument(f"Invalid front-matter: {_summarize(e)}") from e


def parse_file(path: Path, encoding: str = "utf-8") -> SourceDoc:
    """Read and parse a single post file, attaching its slug."""
    path = Path(path)
    document = parse_text(path.read_text(encoding=encoding))
    return SourceDoc(source=str(path), slug=slug_for(path, document), document=document)
