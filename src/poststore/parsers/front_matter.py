"""Front-matter extraction and field normalisation.

A post file opens with a YAML block fenced by ``---`` lines::

    ---
    layout: post
    title: "Code's Deeper Truths"
    date: 2025-05-26 10:00:00 +0000
    categories: verification essays
    ---

The block is parsed with ``yaml.safe_load``. The helpers in this module
turn the raw values into the types ``Document`` carries. Each raises
``ParseError`` without a path; ``MarkdownPostParser`` attaches the path.

Dates
-----
PyYAML already turns ``2025-05-26`` into a ``date`` and
``2025-05-26 10:00:00`` into a naive ``datetime``, but it leaves the form
Jekyll writes by default (``+0000`` offset without a colon) as a string.
Strings are therefore tried against a short list of formats before falling
back to ``datetime.fromisoformat``. Values without an offset are read in
the configured site timezone. Every result is converted to UTC.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import Any

import yaml

from poststore.exceptions import ParseError

# Opening fence on the first line, closing fence on its own line.
_FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)

_OPENING_PATTERN = re.compile(r"\A---[ \t]*\r?\n")

_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M %z",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)


@dataclass(frozen=True)
class SplitSource:
    """A file's text divided at the front-matter boundary.

    Attributes:
        data: Parsed front-matter mapping.
        body: Everything after the closing fence.
    """

    data: dict[str, Any]
    body: str


def split_front_matter(text: str) -> SplitSource:
    """Separate and parse the front-matter block of ``text``.

    Raises:
        ParseError: If the block is missing or unterminated, is not valid
            YAML, or does not hold a mapping.
    """
    text = text.lstrip("\ufeff")
    match = _FRONT_MATTER_PATTERN.match(text)
    if match is None:
        if _OPENING_PATTERN.match(text):
            raise ParseError("front matter is not terminated by a '---' line")
        raise ParseError("missing front matter block")

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML in front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )
    return SplitSource(data={str(k): v for k, v in data.items()}, body=text[match.end():])


def parse_date(value: Any, tz: tzinfo = timezone.utc) -> datetime:
    """Normalise a front-matter date to an aware UTC ``datetime``.

    Args:
        value: A ``datetime``, ``date`` or string from the front matter.
        tz: Zone applied when the value carries no offset.

    Raises:
        ParseError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_date_string(value.strip())
    else:
        raise ParseError(f"date must be a date or string, got {type(value).__name__}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed.astimezone(timezone.utc)


def _parse_date_string(text: str) -> datetime:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ParseError(f"unrecognised date {text!r}") from exc


def parse_categories(data: dict[str, Any]) -> frozenset[str]:
    """Read ``categories`` (or Jekyll's singular ``category``).

    Lists are taken item by item; strings are split on whitespace.
    """
    raw = data.get("categories", data.get("category"))
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        return frozenset(raw.split())
    if isinstance(raw, (list, tuple, set)):
        return frozenset(str(item).strip() for item in raw if str(item).strip())
    return frozenset([str(raw)])


def parse_title(data: dict[str, Any]) -> str:
    """Return the required, non-empty ``title``.

    Raises:
        ParseError: If the title is missing or blank.
    """
    title = data.get("title")
    if title is None:
        raise ParseError("missing required field 'title'")
    title = str(title).strip()
    if not title:
        raise ParseError("field 'title' is empty")
    return title


def is_published(data: dict[str, Any]) -> bool:
    """Jekyll's ``published`` flag; anything but an explicit false counts."""
    return data.get("published", True) is not False
