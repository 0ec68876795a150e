"""Immutable loaded state of a document collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from poststore.core.document import Document


@dataclass(frozen=True)
class LoadFailure:
    """A file that was excluded from a snapshot.

    Attributes:
        path: The offending file.
        reason: Human-readable cause (the ``ParseError`` message).
    """

    path: Path
    reason: str


@dataclass(frozen=True)
class Snapshot:
    """One consistent view of the collection.

    Documents are held sorted by ``(published_at, identifier)``. Build
    instances with ``Snapshot.of`` so the ordering and index are set up.

    Attributes:
        documents: Documents in listing order.
        failures: Files excluded at load time.
    """

    documents: tuple[Document, ...] = ()
    failures: tuple[LoadFailure, ...] = ()
    _index: Mapping[str, Document] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @classmethod
    def of(
        cls,
        documents: Iterable[Document],
        failures: Iterable[LoadFailure] = (),
    ) -> Snapshot:
        """Sort ``documents`` and index them by identifier.

        Raises:
            ValueError: If two documents share an identifier.
        """
        ordered = tuple(sorted(documents, key=lambda d: d.sort_key))
        index: dict[str, Document] = {}
        for doc in ordered:
            if doc.identifier in index:
                raise ValueError(f"Duplicate document identifier: {doc.identifier}")
            index[doc.identifier] = doc
        return cls(
            documents=ordered,
            failures=tuple(failures),
            _index=MappingProxyType(index),
        )

    def lookup(self, identifier: str) -> Document | None:
        return self._index.get(identifier)

    def __len__(self) -> int:
        return len(self.documents)
