"""Publication manifest --- recorded hashes of published documents.

The manifest (``posts-lock.json``) captures the content hash of every
document in a store at the time it was frozen. Checking a later store
against it detects published documents that were edited or removed,
which would break the collection's append-only rule.

- ``models``: ``ManifestEntry``, ``Violation`` and ``ViolationKind``.
- ``manifest``: the ``Manifest`` class with serialization and checking.
"""

from poststore.core.manifest.manifest import MANIFEST_FILENAME, Manifest
from poststore.core.manifest.models import ManifestEntry, Violation, ViolationKind

__all__ = [
    "MANIFEST_FILENAME",
    "Manifest",
    "ManifestEntry",
    "Violation",
    "ViolationKind",
]
