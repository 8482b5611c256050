"""Tests for cross-checking the sidebar against the content store."""

from __future__ import annotations

import typing as typ

import pytest

from hosttale_site.content import load_all
from hosttale_site.errors import IntegrityError
from hosttale_site.integrity import check_integrity
from hosttale_site.navigation import build_navigation

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


@pytest.fixture
def store_docs(docs_root: Path, write_doc: cabc.Callable[..., Path]) -> Path:
    """Write a small SimpleScripting tree and return its root."""
    for slug in (
        "simplescripting/overview",
        "simplescripting/introduction",
        "simplescripting/limitations",
        "guides/commands",
    ):
        write_doc(f"{slug}.md", title=slug.rsplit("/", 1)[-1])
    return docs_root


def test_clean_sidebar_passes(store_docs: Path) -> None:
    """Every leaf resolves, so the report carries no errors."""
    tree = build_navigation(
        [
            {
                "label": "SimpleScripting",
                "items": [
                    {"label": "Overview", "slug": "simplescripting/overview"},
                    {"label": "Introduction", "slug": "simplescripting/introduction"},
                ],
            }
        ]
    )
    store = load_all(store_docs)
    report = check_integrity(tree, store)

    assert report.ok
    report.raise_for_errors()
    for _, leaf in tree.leaves():
        assert store.find(leaf.collection, leaf.slug) is not None


def test_all_broken_links_are_reported_together(store_docs: Path) -> None:
    """The check batches every missing document rather than stopping early."""
    tree = build_navigation(
        [
            {
                "label": "SimpleScripting",
                "items": [
                    {"label": "Overview", "slug": "simplescripting/overview"},
                    {"label": "Missing", "slug": "simplescripting/missing-page"},
                    {
                        "label": "Runtime API",
                        "items": [{"label": "Database", "slug": "simplescripting/api/database"}],
                    },
                ],
            },
            {"label": "Gone", "slug": "guides/gone"},
        ]
    )
    report = check_integrity(tree, load_all(store_docs))

    assert [error.slug for error in report.errors] == [
        "simplescripting/missing-page",
        "simplescripting/api/database",
        "guides/gone",
    ]
    assert report.errors[0].label == "Missing"
    assert report.errors[1].path == (0, 2, 0)

    with pytest.raises(IntegrityError) as excinfo:
        report.raise_for_errors()
    assert len(excinfo.value.errors) == 3
    message = str(excinfo.value)
    assert "simplescripting/missing-page" in message
    assert "sidebar[0].items[2].items[0]" in message


def test_orphans_are_warnings_only(
    store_docs: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Unlisted documents are reported but do not fail the check."""
    tree = build_navigation([{"label": "Overview", "slug": "simplescripting/overview"}])
    with caplog.at_level("WARNING", logger="hosttale_site.integrity"):
        report = check_integrity(tree, load_all(store_docs))

    assert report.ok
    assert [entry.slug for entry in report.orphans] == [
        "guides/commands",
        "simplescripting/introduction",
        "simplescripting/limitations",
    ]
    assert "guides/commands" in caplog.text


def test_duplicate_listings_are_noted(store_docs: Path) -> None:
    """A slug listed twice is noted but remains valid."""
    tree = build_navigation(
        [
            {"label": "Overview", "slug": "simplescripting/overview"},
            {"label": "G", "items": [{"label": "Again", "slug": "simplescripting/overview"}]},
        ]
    )
    report = check_integrity(tree, load_all(store_docs))
    assert report.ok
    assert report.duplicates == (
        "'simplescripting/overview' is listed at sidebar[0], sidebar[1].items[0]",
    )


def test_leaf_in_other_collection_is_broken(store_docs: Path) -> None:
    """Lookups respect the leaf's collection."""
    tree = build_navigation(
        [{"label": "Overview", "slug": "simplescripting/overview", "collection": "blog"}]
    )
    report = check_integrity(tree, load_all(store_docs))
    assert [(error.collection, error.slug) for error in report.errors] == [
        ("blog", "simplescripting/overview")
    ]
