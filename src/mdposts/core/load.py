"""File discovery and collection loading with per-document failure isolation"""

from pathlib import Path
from typing import Iterable, Iterator, Union

from mdposts.core.errors import DocumentError, MalformedDocument
from mdposts.core.models import Collection, LoadFailure, SourceDoc
from mdposts.core.parse import parse_file, parse_text
from mdposts.core.slug import slug_for
from mdposts.log import get_logger


logger = get_logger(__name__)

MD_EXTENSIONS = {'.md', '.markdown'}

LoadResult = Union[SourceDoc, LoadFailure]


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    path = Path(path)
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def iter_sources(sources: Iterable[tuple[str, str]]) -> Iterator[LoadResult]:
    """Parse (name, text) blobs lazily, yielding a SourceDoc or a LoadFailure for each."""
    for name, text in sources:
        try:
            document = parse_text(text)
        except DocumentError as e:
            yield LoadFailure(source=name, error=e)
            continue
        yield SourceDoc(source=name, slug=slug_for(Path(name), document), document=document)


def iter_documents(path: Path, encoding: str = 'utf-8') -> Iterator[LoadResult]:
    """Parse every markdown file under path lazily; unreadable files become failures."""
    for p in discover_files(path):
        try:
            yield parse_file(p, encoding)
        except DocumentError as e:
            yield LoadFailure(source=str(p), error=e)
        except (OSError, UnicodeDecodeError) as e:
            yield LoadFailure(source=str(p), error=MalformedDocument(f"Unreadable file: {e}"))


def collect(results: Iterable[LoadResult]) -> Collection:
    """Split load results into documents and failures, logging each failure."""
    collection = Collection()
    for result in results:
        if isinstance(result, LoadFailure):
            logger.warning("Skipping %s: %s", result.source, result.reason)
            collection.failures.append(result)
        else:
            logger.debug("Loaded %s as %r", result.source, result.slug)
            collection.documents.append(result)
    return collection


def load_collection(path: Path, encoding: str = 'utf-8') -> Collection:
    """Eagerly load every post under path; one bad file never stops the batch."""
    collection = collect(iter_documents(path, encoding))
    logger.info("Loaded %d document(s) from %s, %d failure(s)", len(collection), path, len(collection.failures))
    return collection
