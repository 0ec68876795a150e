"""Data classes for loaded documents.

A ``Document`` is the in-memory form of one essay file: its front-matter
metadata plus the body split into ``Block`` instances. Every class here is
frozen. Once a document is loaded nothing in poststore changes it; a reload
produces new instances instead.

Ordering
--------
Documents sort by ``(published_at, identifier)``. The identifier breaks
ties between posts published at the same instant so that listing is a
total order and two loads of the same files list identically.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


class BlockKind(Enum):
    """Structural kinds of body blocks."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE = "code"
    IMAGE = "image"
    LIST = "list"
    QUOTE = "quote"


@dataclass(frozen=True)
class Link:
    """An inline hyperlink found in a body block.

    Attributes:
        text: The bracketed link text.
        url: The link target as written.
    """

    text: str
    url: str


_LINK = re.compile(r'(?<!!)\[([^\]]+)\]\(\s*([^)\s]+)(?:\s+"[^"]*")?\s*\)')


def extract_links(text: str) -> list[Link]:
    """Return inline ``[text](url)`` links in order; image embeds excluded."""
    return [Link(text=m.group(1), url=m.group(2)) for m in _LINK.finditer(text)]


@dataclass(frozen=True)
class Block:
    """One structural unit of a document body.

    Attributes:
        kind: What sort of block this is.
        text: Block text. For headings the heading text without ``#``
            markers, for code the fence contents verbatim, for images the
            alt text, for lists the item texts joined by newlines.
        level: Heading depth (1-6). ``None`` for other kinds.
        language: Info string of a fenced code block (may be empty).
        src: Image target for image blocks.
        items: Individual entries of a list block.
    """

    kind: BlockKind
    text: str
    level: int | None = None
    language: str | None = None
    src: str | None = None
    items: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting unset fields."""
        out: dict[str, Any] = {"kind": self.kind.value, "text": self.text}
        if self.level is not None:
            out["level"] = self.level
        if self.language is not None:
            out["language"] = self.language
        if self.src is not None:
            out["src"] = self.src
        if self.items:
            out["items"] = list(self.items)
        return out


@dataclass(frozen=True)
class Document:
    """An immutable authored essay.

    Attributes:
        identifier: Unique key within a snapshot, e.g.
            ``"2025-05-26-program-verification-intro"``.
        title: Display title from front matter.
        published_at: Publication instant, timezone-aware, in UTC.
        categories: Category tags. Order is irrelevant.
        layout: Front-matter ``layout`` value (``"post"`` when absent).
        body: Body blocks in document order.
        source_path: File the document was loaded from.
        raw: The complete original file text.
        metadata: Every front-matter key as written. Read-only and
            excluded from equality.
    """

    identifier: str
    title: str
    published_at: datetime
    categories: frozenset[str] = frozenset()
    layout: str = "post"
    body: tuple[Block, ...] = ()
    source_path: Path = Path()
    raw: str = ""
    metadata: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(
                self, "metadata", MappingProxyType(dict(self.metadata))
            )

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return (self.published_at, self.identifier)

    @property
    def content_hash(self) -> str:
        """SHA-256 of the raw file text, formatted ``sha256:<hex>``."""
        digest = hashlib.sha256(self.raw.encode("utf-8")).hexdigest()
        return f"sha256:{digest}"

    @property
    def tags(self) -> frozenset[str]:
        raw_tags = self.metadata.get("tags") or []
        if isinstance(raw_tags, str):
            raw_tags = raw_tags.split()
        return frozenset(str(t) for t in raw_tags)

    @property
    def excerpt(self) -> str:
        """Front-matter ``excerpt`` or the text of the first paragraph."""
        explicit = self.metadata.get("excerpt")
        if isinstance(explicit, str) and explicit.strip():
            return explicit.strip()
        for block in self.body:
            if block.kind is BlockKind.PARAGRAPH:
                return block.text
        return ""

    @property
    def links(self) -> tuple[Link, ...]:
        """All inline hyperlinks outside code blocks, in body order."""
        found: list[Link] = []
        for block in self.body:
            if block.kind in (BlockKind.CODE, BlockKind.IMAGE):
                continue
            found.extend(extract_links(block.text))
        return tuple(found)

    def to_dict(self, include_body: bool = True) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict.

        Args:
            include_body: When False, only the metadata fields are emitted.
        """
        out: dict[str, Any] = {
            "identifier": self.identifier,
            "title": self.title,
            "published_at": self.published_at.isoformat(),
            "categories": sorted(self.categories),
            "layout": self.layout,
            "source_path": str(self.source_path),
            "content_hash": self.content_hash,
            "excerpt": self.excerpt,
        }
        if include_body:
            out["body"] = [block.to_dict() for block in self.body]
            out["links"] = [
                {"text": link.text, "url": link.url} for link in self.links
            ]
        return out
