"""Document Store --- immutable snapshots of a post collection.

- ``snapshot``: ``Snapshot`` and ``LoadFailure`` data classes.
- ``loader``: builds a ``Snapshot`` from a site directory.
- ``store``: ``DocumentStore`` with ``list``, ``get`` and ``reload``.
"""

from poststore.core.store.loader import load_snapshot
from poststore.core.store.snapshot import LoadFailure, Snapshot
from poststore.core.store.store import DocumentStore

__all__ = ["DocumentStore", "LoadFailure", "Snapshot", "load_snapshot"]
