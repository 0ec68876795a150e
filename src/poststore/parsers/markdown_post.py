"""Parser for Markdown posts with YAML front matter.

Parse logic per file:
    1. Read the text as UTF-8.
    2. Split off and validate the front matter (``front_matter``).
    3. Resolve the publication date, falling back to the date in a
       ``YYYY-MM-DD-name`` file name as Jekyll does.
    4. Segment the body into blocks (``markdown_body``).
    5. Derive the identifier (``identifiers``).
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from poststore.config import StoreConfig
from poststore.core.document import Document
from poststore.exceptions import ParseError
from poststore.parsers.base import DocumentParser
from poststore.parsers.front_matter import (
    parse_categories,
    parse_date,
    parse_title,
    split_front_matter,
)
from poststore.parsers.identifiers import derive_identifier, filename_date
from poststore.parsers.markdown_body import parse_body

logger = logging.getLogger(__name__)


class MarkdownPostParser(DocumentParser):
    """Parser for ``_posts/*.md`` style files.

    Args:
        config: Site configuration; supplies the accepted extensions and
            the timezone for naive dates.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self.config = config or StoreConfig()

    def can_parse(self, path: Path) -> bool:
        return path.is_file() and self.config.matches(path)

    def parse(self, path: Path) -> Document:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(f"cannot read file: {exc}", path) from exc

        try:
            return self.parse_text(raw, path)
        except ParseError as exc:
            if exc.path is not None:
                raise
            raise ParseError(exc.reason, path) from exc

    def parse_text(self, raw: str, path: Path) -> Document:
        """Build a document from already-read file text.

        Raises:
            ParseError: Without a path; ``parse`` attaches it.
        """
        split = split_front_matter(raw)
        data = split.data

        title = parse_title(data)
        published_at = self._resolve_date(data, path)
        body = parse_body(split.body, source=str(path))
        identifier = derive_identifier(path, title, published_at, data, self.config.tz)
        logger.debug("Parsed %s as %s (%d blocks)", path, identifier, len(body))

        return Document(
            identifier=identifier,
            title=title,
            published_at=published_at,
            categories=parse_categories(data),
            layout=str(data.get("layout") or "post"),
            body=body,
            source_path=path,
            raw=raw,
            metadata=data,
        )

    def _resolve_date(self, data: dict, path: Path) -> datetime:
        value = data.get("date")
        if value is None:
            value = filename_date(path)
        if value is None:
            raise ParseError("missing required field 'date'")
        return parse_date(value, self.config.tz)
