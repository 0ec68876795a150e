"""The read-only Document Store.

``DocumentStore`` wraps one immutable ``Snapshot`` at a time. Lookups and
listings read the snapshot reference once and work on it alone, so a
``reload`` that swaps in a new snapshot never changes what an in-progress
listing yields.

Example::

    store = DocumentStore.from_directory(Path("site"))
    for doc in store.list():
        print(doc.published_at.date(), doc.title)
    intro = store.get("2025-05-26-program-verification-intro")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

from poststore.config import StoreConfig, load_config
from poststore.core.document import Document
from poststore.core.store.loader import load_snapshot
from poststore.core.store.snapshot import LoadFailure, Snapshot
from poststore.exceptions import NotFound

logger = logging.getLogger(__name__)

SnapshotSource = Callable[[], Snapshot]


class DocumentStore:
    """Ordered, read-only collection of documents.

    Args:
        source: Zero-argument callable producing a fresh ``Snapshot``.
            Called once on construction and again on every ``reload``.
    """

    def __init__(self, source: SnapshotSource) -> None:
        self._source = source
        self._snapshot = source()

    @classmethod
    def from_directory(
        cls,
        root: Path,
        config: StoreConfig | None = None,
    ) -> DocumentStore:
        """Create a store over a site directory.

        Args:
            root: Site root containing the posts directory.
            config: Loader settings. When omitted, read from the site's
                ``_config.yml`` (re-read on every reload).

        Raises:
            ConfigError: If ``_config.yml`` is present but unusable.
        """
        root = Path(root)
        if config is not None:
            return cls(lambda: load_snapshot(root, config))
        return cls(lambda: load_snapshot(root, load_config(root)))

    @classmethod
    def from_documents(cls, documents: tuple[Document, ...]) -> DocumentStore:
        """Create a store over in-memory documents (reload is a no-op)."""
        snapshot = Snapshot.of(documents)
        return cls(lambda: snapshot)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def failures(self) -> tuple[LoadFailure, ...]:
        """Files excluded from the current snapshot."""
        return self._snapshot.failures

    def list(self, category: str | None = None) -> Iterator[Document]:
        """Iterate documents in ascending publication order.

        Each call returns a new iterator over the snapshot current at the
        time of the call.

        Args:
            category: When given, yield only documents carrying this
                category.
        """
        documents = self._snapshot.documents
        if category is None:
            return iter(documents)
        return (doc for doc in documents if category in doc.categories)

    def get(self, identifier: str) -> Document:
        """Return the document with ``identifier``.

        Raises:
            NotFound: If no such document is in the current snapshot.
        """
        doc = self._snapshot.lookup(identifier)
        if doc is None:
            raise NotFound(identifier)
        return doc

    def categories(self) -> dict[str, int]:
        """Document count per category, sorted by category name."""
        counts: dict[str, int] = {}
        for doc in self._snapshot.documents:
            for category in doc.categories:
                counts[category] = counts.get(category, 0) + 1
        return dict(sorted(counts.items()))

    def reload(self) -> Snapshot:
        """Load a fresh snapshot and swap it in.

        The previous snapshot is left untouched; iterators already handed
        out keep reading it.

        Returns:
            The new snapshot.
        """
        snapshot = self._source()
        self._snapshot = snapshot
        logger.info("Reloaded store: %d documents", len(snapshot))
        return snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self._snapshot.lookup(identifier) is not None
