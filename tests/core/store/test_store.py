"""Tests for DocumentStore listing, lookup and reload."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from poststore.config import StoreConfig
from poststore.core.store import DocumentStore
from poststore.exceptions import NotFound

from tests.helpers import FIXTURE_SITE, HYPER_ID, INTRO_ID, post_text


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore.from_directory(FIXTURE_SITE)


class TestFixtureSite:
    def test_lists_in_publication_order(self, store: DocumentStore) -> None:
        docs = list(store.list())
        assert [d.identifier for d in docs] == [INTRO_ID, HYPER_ID]
        assert docs[0].published_at.date().isoformat() == "2025-05-26"
        assert docs[1].published_at.date().isoformat() == "2025-08-09"

    def test_get_by_identifier(self, store: DocumentStore) -> None:
        assert store.get(INTRO_ID).title == "Code's Deeper Truths"

    def test_get_unknown_raises_not_found(self, store: DocumentStore) -> None:
        with pytest.raises(NotFound) as excinfo:
            store.get("nonexistent-id")
        assert excinfo.value.identifier == "nonexistent-id"

    def test_not_found_is_lookup_error(self, store: DocumentStore) -> None:
        with pytest.raises(LookupError):
            store.get("nonexistent-id")

    def test_list_is_restartable(self, store: DocumentStore) -> None:
        assert list(store.list()) == list(store.list())

    def test_list_is_lazy_iterator(self, store: DocumentStore) -> None:
        listing = store.list()
        assert next(listing).identifier == INTRO_ID

    def test_category_filter(self, store: DocumentStore) -> None:
        assert [d.identifier for d in store.list(category="essays")] == [INTRO_ID]
        assert len(list(store.list(category="verification"))) == 2
        assert list(store.list(category="cooking")) == []

    def test_categories_counts(self, store: DocumentStore) -> None:
        assert store.categories() == {"essays": 1, "verification": 2}

    def test_len_and_contains(self, store: DocumentStore) -> None:
        assert len(store) == 2
        assert INTRO_ID in store
        assert "nonexistent-id" not in store
        assert 42 not in store

    def test_no_failures(self, store: DocumentStore) -> None:
        assert store.failures == ()


class TestLoadFailures:
    def test_malformed_document_excluded(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        bad = write_post("2025-06-01-broken.md", "---\ndate: 2025-06-01\n---\nNo title.\n")
        with caplog.at_level(logging.WARNING, logger="poststore.core.store.loader"):
            store = DocumentStore.from_directory(site_dir)
        assert len(store) == 2
        assert [f.path for f in store.failures] == [bad]
        assert "title" in store.failures[0].reason
        assert "Excluding" in caplog.text

    def test_duplicate_identifier_keeps_first_path(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        dup = write_post(
            "nested/2025-05-26-program-verification-intro.md",
            post_text("Impostor", "2025-05-26"),
        )
        store = DocumentStore.from_directory(site_dir)
        assert store.get(INTRO_ID).title == "Code's Deeper Truths"
        assert [f.path for f in store.failures] == [dup]
        assert "duplicate identifier" in store.failures[0].reason

    def test_missing_posts_dir_is_empty(self, tmp_path: Path) -> None:
        store = DocumentStore.from_directory(tmp_path)
        assert len(store) == 0
        assert list(store.list()) == []

    def test_non_markdown_and_hidden_files_ignored(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        write_post("notes.txt", "not a post")
        write_post(".2025-01-01-hidden.md", post_text("Hidden", "2025-01-01"))
        write_post(".drafts/2025-01-02-draft.md", post_text("Draft", "2025-01-02"))
        store = DocumentStore.from_directory(site_dir)
        assert len(store) == 2
        assert store.failures == ()


class TestUnpublished:
    def test_skipped_by_default(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        write_post("2025-09-01-wip.md", post_text("WIP", "2025-09-01", published="false"))
        store = DocumentStore.from_directory(site_dir)
        assert "2025-09-01-wip" not in store

    def test_loaded_when_config_allows(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        write_post("2025-09-01-wip.md", post_text("WIP", "2025-09-01", published="false"))
        store = DocumentStore.from_directory(site_dir, StoreConfig(unpublished=True))
        assert "2025-09-01-wip" in store

    def test_site_config_file_read(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        (site_dir / "_config.yml").write_text("unpublished: true\n")
        write_post("2025-09-01-wip.md", post_text("WIP", "2025-09-01", published="false"))
        store = DocumentStore.from_directory(site_dir)
        assert "2025-09-01-wip" in store


class TestOrdering:
    def test_same_instant_ordered_by_identifier(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        write_post("2025-07-01-zeta.md", post_text("Zeta", "2025-07-01"))
        write_post("2025-07-01-alpha.md", post_text("Alpha", "2025-07-01"))
        ids = [d.identifier for d in DocumentStore.from_directory(site_dir).list()]
        assert ids == [INTRO_ID, "2025-07-01-alpha", "2025-07-01-zeta", HYPER_ID]

    def test_front_matter_date_beats_filename(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        write_post("2025-01-01-late.md", post_text("Late", "2025-12-31 23:00:00 +0000"))
        docs = list(DocumentStore.from_directory(site_dir).list())
        assert docs[-1].identifier == "2025-01-01-late"
        assert docs[-1].published_at == datetime(2025, 12, 31, 23, 0, tzinfo=timezone.utc)


class TestReload:
    def test_reload_picks_up_new_document(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        store = DocumentStore.from_directory(site_dir)
        write_post("2025-10-01-new.md", post_text("New", "2025-10-01"))
        assert "2025-10-01-new" not in store
        snapshot = store.reload()
        assert "2025-10-01-new" in store
        assert store.snapshot is snapshot
        assert len(snapshot) == 3

    def test_iterator_keeps_old_snapshot(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        store = DocumentStore.from_directory(site_dir)
        listing = store.list()
        write_post("2025-10-01-new.md", post_text("New", "2025-10-01"))
        store.reload()
        assert [d.identifier for d in listing] == [INTRO_ID, HYPER_ID]
        assert len(list(store.list())) == 3

    def test_old_snapshot_unchanged(
        self, site_dir: Path, write_post: Callable[[str, str], Path],
    ) -> None:
        store = DocumentStore.from_directory(site_dir)
        before = store.snapshot
        write_post("2025-10-01-new.md", post_text("New", "2025-10-01"))
        store.reload()
        assert len(before) == 2
        assert before.lookup("2025-10-01-new") is None


class TestFromDocuments:
    def test_in_memory_store(self) -> None:
        docs = tuple(DocumentStore.from_directory(FIXTURE_SITE).list())
        store = DocumentStore.from_documents(tuple(reversed(docs)))
        assert list(store.list()) == list(docs)
        store.reload()
        assert len(store) == 2
