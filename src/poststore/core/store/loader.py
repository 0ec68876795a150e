"""Build a ``Snapshot`` from a site directory.

Discovery Algorithm
-------------------
1. Walk ``<root>/<posts_dir>`` recursively, in sorted path order.
2. Keep files whose extension is listed in ``markdown_ext``.
3. Parse each file on its own. A ``ParseError`` excludes the file and is
   recorded as a ``LoadFailure``; the rest of the collection still loads.
4. Skip documents marked ``published: false`` unless the config allows
   unpublished posts.
5. When two files produce the same identifier, the first in path order is
   kept and the second is recorded as a failure.
"""

from __future__ import annotations

import logging
from pathlib import Path

from poststore.config import StoreConfig
from poststore.core.document import Document
from poststore.core.store.snapshot import LoadFailure, Snapshot
from poststore.exceptions import ParseError
from poststore.parsers.base import DocumentParser
from poststore.parsers.front_matter import is_published
from poststore.parsers.markdown_post import MarkdownPostParser

logger = logging.getLogger(__name__)


def _candidate_files(posts_dir: Path, parser: DocumentParser) -> list[Path]:
    """Post files under ``posts_dir``, skipping dot-files and dot-dirs."""
    found: list[Path] = []
    for path in sorted(posts_dir.rglob("*")):
        relative = path.relative_to(posts_dir)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if parser.can_parse(path):
            found.append(path)
    return found


def load_snapshot(
    root: Path,
    config: StoreConfig | None = None,
    parser: DocumentParser | None = None,
) -> Snapshot:
    """Load every post under ``root`` into a new snapshot.

    Args:
        root: Site root directory.
        config: Loader settings. Defaults to ``StoreConfig()``.
        parser: Parser to use. Defaults to ``MarkdownPostParser(config)``.

    Returns:
        The loaded snapshot, including any per-file failures.
    """
    config = config or StoreConfig()
    parser = parser or MarkdownPostParser(config)
    posts_dir = root / config.posts_dir

    if not posts_dir.is_dir():
        logger.warning("Posts directory %s does not exist; store is empty", posts_dir)
        return Snapshot.of([])

    documents: dict[str, Document] = {}
    failures: list[LoadFailure] = []
    skipped = 0

    for path in _candidate_files(posts_dir, parser):
        try:
            doc = parser.parse(path)
        except ParseError as exc:
            logger.warning("Excluding %s: %s", path, exc.reason)
            failures.append(LoadFailure(path=path, reason=exc.reason))
            continue

        if not config.unpublished and not is_published(dict(doc.metadata)):
            logger.debug("Skipping unpublished %s", path)
            skipped += 1
            continue

        existing = documents.get(doc.identifier)
        if existing is not None:
            reason = (
                f"duplicate identifier {doc.identifier!r} "
                f"(already loaded from {existing.source_path})"
            )
            logger.warning("Excluding %s: %s", path, reason)
            failures.append(LoadFailure(path=path, reason=reason))
            continue

        documents[doc.identifier] = doc

    snapshot = Snapshot.of(documents.values(), failures)
    logger.info(
        "Loaded %d documents from %s (%d failed, %d unpublished skipped)",
        len(snapshot), posts_dir, len(failures), skipped,
    )
    return snapshot
