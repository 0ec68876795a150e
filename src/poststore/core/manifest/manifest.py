"""Manifest core class --- freezing, serialization and checking.

Determinism guarantee: ``to_json()`` output depends only on the entries.
Entries are sorted by identifier and every dictionary key is sorted, so
freezing the same collection twice produces byte-identical files. No
generation timestamp is written for the same reason.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from poststore import __version__
from poststore.core.manifest.models import (
    ManifestEntry,
    Violation,
    ViolationKind,
    _HASH_RE,
)
from poststore.core.store import DocumentStore
from poststore.exceptions import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "posts-lock.json"


class Manifest:
    """Recorded content hashes of a published collection.

    Example::

        manifest = Manifest.from_store(store)
        manifest.write(root / MANIFEST_FILENAME)
        ...
        violations = Manifest.read(root / MANIFEST_FILENAME).check(store)
    """

    MANIFEST_VERSION: str = "1.0"

    def __init__(self) -> None:
        self._entries: dict[str, ManifestEntry] = {}

    # -- Entry management ---------------------------------------------------

    def add_entry(self, entry: ManifestEntry) -> None:
        """Add an entry, replacing any existing one with the same identifier."""
        self._entries[entry.identifier] = entry

    def get_entry(self, identifier: str) -> ManifestEntry | None:
        return self._entries.get(identifier)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def identifiers(self) -> list[str]:
        """Sorted identifiers of all recorded documents."""
        return sorted(self._entries)

    @classmethod
    def from_store(cls, store: DocumentStore) -> Manifest:
        """Record every document currently in ``store``."""
        manifest = cls()
        for doc in store.list():
            manifest.add_entry(ManifestEntry(
                identifier=doc.identifier,
                content_hash=doc.content_hash,
                published_at=doc.published_at.isoformat(),
                title=doc.title,
                source_path=str(doc.source_path),
            ))
        return manifest

    # -- Checking -----------------------------------------------------------

    def check(self, store: DocumentStore) -> list[Violation]:
        """Compare ``store`` against the recorded entries.

        Documents present in the store but not in the manifest are new
        publications and are not violations.

        Returns:
            Violations sorted by identifier. Empty means the store only
            grew since the manifest was written.
        """
        violations: list[Violation] = []
        for identifier in self.identifiers:
            entry = self._entries[identifier]
            if identifier not in store:
                violations.append(Violation(
                    identifier=identifier,
                    kind=ViolationKind.REMOVED,
                    detail=f"published document is missing (was {entry.source_path})",
                ))
                continue
            current = store.get(identifier)
            if current.content_hash != entry.content_hash:
                violations.append(Violation(
                    identifier=identifier,
                    kind=ViolationKind.MODIFIED,
                    detail=f"content hash changed from {entry.content_hash} to {current.content_hash}",
                ))
        if violations:
            logger.warning("Manifest check found %d violation(s)", len(violations))
        return violations

    def validate(self) -> list[str]:
        """Check the manifest itself for malformed entries.

        Returns:
            Error messages. Empty means the manifest is well-formed.
        """
        errors: list[str] = []
        for identifier in self.identifiers:
            entry = self._entries[identifier]
            if not _HASH_RE.match(entry.content_hash):
                errors.append(f"{identifier}: malformed content hash {entry.content_hash!r}")
            if not entry.published_at:
                errors.append(f"{identifier}: missing published_at")
        return errors

    # -- Serialization ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        documents: dict[str, Any] = {}
        for identifier in self.identifiers:
            entry = self._entries[identifier]
            documents[identifier] = {
                "content_hash": entry.content_hash,
                "published_at": entry.published_at,
                "title": entry.title,
                "source_path": entry.source_path,
            }
        return {
            "manifest_version": self.MANIFEST_VERSION,
            "generated_by": f"poststore {__version__}",
            "total_documents": len(documents),
            "documents": documents,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    def write(self, path: Path) -> None:
        """Write the manifest as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        """Deserialize the dict format produced by ``to_dict()``.

        Raises:
            ManifestError: If required structure is missing.
        """
        if not isinstance(data, dict):
            raise ManifestError("manifest must be a JSON object")
        documents = data.get("documents")
        if not isinstance(documents, dict):
            raise ManifestError("manifest has no 'documents' object")

        manifest = cls()
        for identifier, entry in documents.items():
            if not isinstance(entry, dict) or "content_hash" not in entry:
                raise ManifestError(f"entry {identifier!r} has no content_hash")
            manifest.add_entry(ManifestEntry(
                identifier=identifier,
                content_hash=str(entry["content_hash"]),
                published_at=str(entry.get("published_at", "")),
                title=str(entry.get("title", "")),
                source_path=str(entry.get("source_path", "")),
            ))
        return manifest

    @classmethod
    def from_json(cls, json_str: str) -> Manifest:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"manifest is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def read(cls, path: Path) -> Manifest:
        """Read a manifest from disk.

        Raises:
            ManifestError: If the file cannot be read or parsed.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(f"cannot read manifest {path}: {exc}") from exc
        return cls.from_json(text)
