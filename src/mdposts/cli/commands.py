"""CLI command implementations"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdposts.config import Settings, load_config
from mdposts.core.errors import DocumentError
from mdposts.core.links import outline, slug_refs, unresolved_refs
from mdposts.core.load import load_collection
from mdposts.core.models import Collection, Document, SourceDoc
from mdposts.core.parse import parse_date, parse_file
from mdposts.core.serialize import to_text
from mdposts.core.slug import slugify
from mdposts.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _load(path: Optional[str], settings: Settings) -> Collection:
    """Load the collection at path, or at the configured content_dir when omitted."""
    root = Path(path) if path else Path(settings.content_dir)
    if not root.exists():
        _fail(f"Path not found: {root}")
    return load_collection(root, settings.encoding)


def _parse_one(file: str, settings: Settings) -> SourceDoc:
    try:
        return parse_file(Path(file), settings.encoding)
    except DocumentError as e:
        _fail(f"{file}: {type(e).__name__}", e)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {file}", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Front-matter tools for markdown blog posts."""
    level = logging.DEBUG if verbose else _settings().log_level
    configure_logging(level)


def check_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to check")] = None,
    ):
    """Parse every post and report the ones that fail."""
    settings = _settings()
    collection = _load(path, settings)
    for failure in collection.failures:
        typer.echo(f"{failure.source}: {failure.reason}", err=True)
    total = len(collection) + len(collection.failures)
    typer.echo(f"Checked {total} file(s): {len(collection)} ok, {len(collection.failures)} failed")
    if not collection.ok:
        raise typer.Exit(1)


def show_cmd(
    file: Annotated[str, typer.Argument(help="Post file to display")],
    show_outline: Annotated[bool, typer.Option("--outline", help="Also print the heading outline")] = False,
    ):
    """Print a post's parsed metadata."""
    settings = _settings()
    parsed = _parse_one(file, settings)
    doc = parsed.document
    typer.echo(f"title: {doc.title}")
    typer.echo(f"date:  {doc.date.isoformat()}")
    typer.echo(f"toc:   {str(doc.toc).lower()}")
    typer.echo(f"slug:  {parsed.slug}")
    for key, value in doc.extra.items():
        typer.echo(f"{key}: {value}")
    if show_outline:
        for heading in outline(doc.body, settings.parser_config):
            typer.echo(f"{'  ' * (heading.level - 1)}- {heading.text} (#{heading.anchor})")


def fmt_cmd(
    file: Annotated[str, typer.Argument(help="Post file to normalize")],
    write: Annotated[bool, typer.Option("--write", help="Rewrite the file in place")] = False,
    ):
    """Print (or write back) the post with a normalized front-matter block."""
    settings = _settings()
    text = to_text(_parse_one(file, settings).document)
    if not write:
        typer.echo(text, nl=False)
        return
    Path(file).write_text(text, encoding=settings.encoding)
    typer.echo(f"Formatted {file}")


def links_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to inspect")] = None,
    unresolved: Annotated[bool, typer.Option("--unresolved", help="Only show links to unknown slugs")] = False,
    ):
    """List slug links between posts."""
    settings = _settings()
    collection = _load(path, settings)
    if unresolved:
        missing = unresolved_refs(collection, settings.posts_prefix, settings.parser_config)
        for source, target in missing:
            typer.echo(f"{source} -> {target}")
        if missing:
            typer.echo(f"{len(missing)} unresolved reference(s)", err=True)
            raise typer.Exit(1)
        typer.echo("All references resolve.")
        return

    for doc in collection.documents:
        refs = slug_refs(doc.document.body, settings.posts_prefix, settings.parser_config)
        if refs:
            typer.echo(f"{doc.slug}: {', '.join(refs)}")


def index_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to index")] = None,
    out: Annotated[Optional[str], typer.Option("--out", help="Write JSON here instead of stdout")] = None,
    ):
    """Emit a JSON index of post metadata, newest first."""
    settings = _settings()
    collection = _load(path, settings)
    entries = sorted(collection.documents, key=lambda d: (-d.document.date.toordinal(), d.slug))
    payload = [
        {
            "slug": d.slug,
            "source": d.source,
            "title": d.document.title,
            "date": d.document.date.isoformat(),
            "toc": d.document.toc,
            "extra": d.document.extra,
        }
        for d in entries
    ]
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    if not out:
        typer.echo(text)
        return
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Indexed {len(payload)} document(s) to {out_path}")


def new_cmd(
    title: Annotated[str, typer.Argument(help="Post title")],
    published: Annotated[Optional[str], typer.Option("--date", help="YYYY-MM-DD; defaults to today")] = None,
    no_toc: Annotated[bool, typer.Option("--no-toc", help="Disable the table of contents")] = False,
    directory: Annotated[Optional[str], typer.Option("--dir", help="Content directory")] = None,
    ):
    """Scaffold a new page-bundle post: <content_dir>/<slug>/index.md."""
    settings = _settings(overrides={"content_dir": directory})
    try:
        doc = Document(title=title, date=parse_date(published) if published else date.today(), toc=not no_toc)
    except DocumentError as e:
        _fail(f"--date: {type(e).__name__}", e)
    except ValidationError as e:
        _fail("Invalid post metadata", e)

    slug = slugify(title)
    if not slug:
        _fail(f"Cannot derive a slug from title {title!r}")
    target = Path(settings.content_dir) / slug / "index.md"
    if target.exists():
        _fail(f"{target} already exists")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(to_text(doc), encoding=settings.encoding)
    typer.echo(f"Created {target}")
