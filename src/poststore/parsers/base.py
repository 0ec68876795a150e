"""Base interface for post file parsers.

Every parser implements the ``DocumentParser`` abstract base class, which
provides two methods:

- ``can_parse(path)`` -- Cheap check of whether a file is in a format this
  parser understands, based on its name only.
- ``parse(path)`` -- Read the file and build a ``Document``.

Unlike a discovery scan, ``parse`` is strict: a file that cannot be turned
into a complete document raises ``ParseError`` so the loader can exclude it
and report why.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from poststore.core.document import Document


class DocumentParser(ABC):
    """Abstract base class for document parsers."""

    @abstractmethod
    def can_parse(self, path: Path) -> bool:
        """Return True if ``path`` looks like a file this parser handles.

        Args:
            path: Candidate file.
        """

    @abstractmethod
    def parse(self, path: Path) -> Document:
        """Parse a single file into a ``Document``.

        Args:
            path: File to read.

        Returns:
            The loaded document.

        Raises:
            ParseError: If the file is unreadable or its metadata is
                incomplete or malformed.
        """
