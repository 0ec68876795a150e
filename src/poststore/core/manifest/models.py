"""Manifest data models --- ManifestEntry and Violation.

Pure data holders with no business logic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Integrity hash format: "sha256:<64-hex-characters>"
_HASH_RE = re.compile(r"^sha256:[0-9a-f]{64}$")


@dataclass(frozen=True)
class ManifestEntry:
    """The recorded state of one published document.

    Attributes:
        identifier: Document identifier.
        content_hash: ``sha256:<hex>`` of the raw file text.
        published_at: ISO-8601 publication instant.
        title: Title at freeze time (informational).
        source_path: File path at freeze time (informational).
    """

    identifier: str
    content_hash: str
    published_at: str
    title: str = ""
    source_path: str = ""


class ViolationKind(Enum):
    """Ways a store can break the append-only rule."""

    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class Violation:
    """A published document that no longer matches the manifest.

    Attributes:
        identifier: The affected document.
        kind: Whether it disappeared or changed.
        detail: Human-readable explanation.
    """

    identifier: str
    kind: ViolationKind
    detail: str
