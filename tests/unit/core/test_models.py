"""Unit tests for core/models.py"""

from datetime import date

import pytest
from pydantic import ValidationError

from mdposts.core.models import Document
from mdposts.core.parse import parse_text
from mdposts.core.serialize import to_text


@pytest.mark.parametrize("extra", [
    {"title": "Other"},
    {"toc": False},
    {"date": "1999-01-01"},
])
def test_extra_rejects_known_keys(extra):
    """extra cannot shadow title/date/toc, so serialization never overwrites them."""
    with pytest.raises(ValidationError, match="must not repeat"):
        Document(title="T", date=date(2023, 10, 1), extra=extra)


def test_extra_with_other_keys_round_trips():
    doc = Document(title="T", date=date(2023, 10, 1), extra={"draft": True})
    assert parse_text(to_text(doc)) == doc


@pytest.mark.parametrize("toc", ["false", "yes", 1, 0])
def test_toc_must_be_a_real_boolean(toc):
    with pytest.raises(ValidationError):
        Document(title="T", date=date(2023, 10, 1), toc=toc)


def test_document_is_not_hashable():
    """Documents compare by value but are not usable as set or dict keys."""
    doc = Document(title="T", date=date(2023, 10, 1), extra={"tags": ["a"]})
    with pytest.raises(TypeError):
        hash(doc)
    with pytest.raises(TypeError):
        {doc}


def test_document_is_frozen():
    doc = Document(title="T", date=date(2023, 10, 1))
    with pytest.raises(ValidationError):
        doc.title = "Other"
