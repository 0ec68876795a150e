"""Tests for slugs and identifier derivation."""

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from poststore.parsers.identifiers import derive_identifier, filename_date, slugify

PUBLISHED = datetime(2025, 5, 26, 9, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Code's Deeper Truths", "codes-deeper-truths"),
        ("  Rice's Theorem, Revisited!  ", "rices-theorem-revisited"),
        ("Café Über Straße", "cafe-uber-strae"),
        ("---", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


class TestFilenameDate:
    def test_dated_stem(self) -> None:
        assert filename_date(Path("2025-08-09-hyperproperties.md")) == date(2025, 8, 9)

    def test_undated_stem(self) -> None:
        assert filename_date(Path("hyperproperties.md")) is None

    def test_impossible_date(self) -> None:
        assert filename_date(Path("2025-13-40-nope.md")) is None


class TestDeriveIdentifier:
    def test_dated_file_stem_wins_over_title(self) -> None:
        path = Path("_posts/2025-05-26-program-verification-intro.md")
        ident = derive_identifier(path, "Code's Deeper Truths", PUBLISHED, {})
        assert ident == "2025-05-26-program-verification-intro"

    def test_explicit_slug_wins(self) -> None:
        path = Path("_posts/2025-05-26-program-verification-intro.md")
        ident = derive_identifier(path, "Title", PUBLISHED, {"slug": "Deeper Truths"})
        assert ident == "2025-05-26-deeper-truths"

    def test_undated_file_uses_title(self) -> None:
        ident = derive_identifier(Path("draft.md"), "Code's Deeper Truths", PUBLISHED, {})
        assert ident == "2025-05-26-codes-deeper-truths"

    def test_title_without_slug_characters(self) -> None:
        ident = derive_identifier(Path("draft.md"), "???", PUBLISHED, {})
        assert ident == "2025-05-26-untitled"

    def test_date_prefix_uses_site_timezone(self) -> None:
        # 2025-05-26 00:00 in Tokyo is 2025-05-25 15:00 UTC.
        published = datetime(2025, 5, 25, 15, 0, tzinfo=timezone.utc)
        ident = derive_identifier(
            Path("intro.md"), "Intro", published, {}, ZoneInfo("Asia/Tokyo")
        )
        assert ident == "2025-05-26-intro"

    def test_date_prefix_defaults_to_utc(self) -> None:
        published = datetime(2025, 5, 25, 15, 0, tzinfo=timezone.utc)
        assert derive_identifier(Path("intro.md"), "Intro", published, {}) == "2025-05-25-intro"
