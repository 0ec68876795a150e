"""Tests for Snapshot construction."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from poststore.core.document import Document
from poststore.core.store import Snapshot


def _doc(identifier: str, day: int) -> Document:
    return Document(
        identifier=identifier,
        title=identifier,
        published_at=datetime(2025, 1, day, tzinfo=timezone.utc),
    )


def test_of_sorts_documents() -> None:
    snapshot = Snapshot.of([_doc("b", 2), _doc("a", 3), _doc("c", 1)])
    assert [d.identifier for d in snapshot.documents] == ["c", "b", "a"]


def test_lookup() -> None:
    snapshot = Snapshot.of([_doc("a", 1)])
    assert snapshot.lookup("a") is snapshot.documents[0]
    assert snapshot.lookup("z") is None


def test_duplicate_identifiers_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        Snapshot.of([_doc("a", 1), _doc("a", 2)])


def test_snapshot_is_frozen() -> None:
    snapshot = Snapshot.of([])
    with pytest.raises(AttributeError):
        snapshot.documents = ()  # type: ignore[misc]
