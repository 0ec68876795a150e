"""Document identifier derivation.

Identifiers follow Jekyll's post naming: ``YYYY-MM-DD-slug``. The slug is
chosen in this order:

1. an explicit ``slug:`` in the front matter;
2. the file stem, when it already has the ``YYYY-MM-DD-name`` shape
   (the stem is then the identifier as-is);
3. the slugified title.

The date part is the publication date in the site timezone, the same
calendar date the author wrote and the one a dated file name carries.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import date, datetime, timezone, tzinfo
from pathlib import Path
from typing import Any

_DATED_STEM = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")
_NON_SLUG = re.compile(r"[^a-z0-9]+")
_APOSTROPHES = re.compile(r"'")


def slugify(text: str) -> str:
    """Lower-case ASCII slug of ``text``, words joined by hyphens.

    >>> slugify("Code's Deeper Truths")
    'codes-deeper-truths'
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    ascii_text = _APOSTROPHES.sub("", ascii_text.lower())
    return _NON_SLUG.sub("-", ascii_text).strip("-")


def filename_date(path: Path) -> date | None:
    """Return the date encoded in a ``YYYY-MM-DD-name`` file stem, if any."""
    match = _DATED_STEM.match(path.stem)
    if match is None:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def derive_identifier(
    path: Path,
    title: str,
    published_at: datetime,
    data: dict[str, Any],
    tz: tzinfo = timezone.utc,
) -> str:
    """Compute the identifier for a document.

    Args:
        path: Source file.
        title: Parsed title.
        published_at: Parsed publication instant (UTC).
        data: Front-matter mapping, consulted for ``slug``.
        tz: Site timezone; the date prefix is the local publication date.
    """
    prefix = published_at.astimezone(tz).strftime("%Y-%m-%d")

    explicit = data.get("slug")
    if explicit is not None and slugify(str(explicit)):
        return f"{prefix}-{slugify(str(explicit))}"

    if filename_date(path) is not None:
        return path.stem

    slug = slugify(title) or "untitled"
    return f"{prefix}-{slug}"
