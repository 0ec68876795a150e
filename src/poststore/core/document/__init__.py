"""Document model --- immutable essays and their body blocks.

Re-exports the public names from ``models`` so that callers can write
``from poststore.core.document import Document``.
"""

from poststore.core.document.models import (
    Block,
    BlockKind,
    Document,
    Link,
    extract_links,
)

__all__ = ["Block", "BlockKind", "Document", "Link", "extract_links"]
