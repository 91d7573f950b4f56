"""Document records and the results of loading a collection of them"""

import datetime
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from mdposts.core.errors import DocumentError


KNOWN_KEYS = ("title", "date", "toc")


class Document(BaseModel):
    """A single content file: front-matter fields plus the markdown body."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    date:  datetime.date
    toc:   StrictBool = True
    body:  str = ""
    extra: dict[str, Any] = Field(default_factory=dict)     # unrecognised front-matter keys, in file order

    # frozen, but the extra dict makes instances unhashable
    __hash__ = None

    @field_validator("extra")
    @classmethod
    def _no_known_keys(cls, extra: dict[str, Any]) -> dict[str, Any]:
        clashing = [key for key in KNOWN_KEYS if key in extra]
        if clashing:
            raise ValueError(f"extra must not repeat front-matter fields: {', '.join(clashing)}")
        return extra

    def revise(self, body: str) -> "Document":
        """Return a copy carrying a new body and the same metadata."""
        return self.model_copy(update={"body": body})


@dataclass(frozen=True)
class SourceDoc:
    """A parsed Document plus the identity it was loaded under."""
    source:   str           # file path or blob name
    slug:     str
    document: Document


@dataclass(frozen=True)
class LoadFailure:
    """A source that could not be parsed; the rest of the batch is unaffected."""
    source: str
    error:  DocumentError

    @property
    def reason(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


@dataclass
class Collection:
    """Eagerly loaded documents and the per-source failures met along the way."""
    documents: list[SourceDoc] = field(default_factory=list)
    failures:  list[LoadFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def __len__(self) -> int:
        return len(self.documents)

    def by_slug(self) -> dict[str, SourceDoc]:
        """Map slug -> SourceDoc; on duplicate slugs the first loaded wins."""
        index: dict[str, SourceDoc] = {}
        for doc in self.documents:
            index.setdefault(doc.slug, doc)
        return index
