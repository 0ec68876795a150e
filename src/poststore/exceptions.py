"""poststore exception hierarchy.

All public exceptions inherit from PostStoreError, giving callers a single
base class to catch when they want to handle any poststore-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class PostStoreError(Exception):
    """Base exception for all poststore errors."""


class ParseError(PostStoreError):
    """Raised when a document file cannot be loaded.

    Covers a missing or unterminated front-matter block, invalid YAML,
    missing required fields, and unreadable dates. A file that raises
    this is excluded from the snapshot until it is corrected.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        self.reason = message
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class NotFound(PostStoreError, LookupError):
    """Raised when no document matches the requested identifier."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No document with identifier {identifier!r}")


class ConfigError(PostStoreError):
    """Raised when the site configuration cannot be used.

    Covers an unreadable ``_config.yml``, a non-mapping document, and
    unknown timezone names.
    """


class ManifestError(PostStoreError):
    """Raised for publication manifest read or format failures."""
