"""Unit tests for frontmatter splitting and field validation."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from hosttale_site.content.frontmatter import (
    read_head,
    read_sitemap,
    require_text,
    split_frontmatter,
)
from hosttale_site.errors import ParseError, SchemaError

FILE = Path("docs/page.md")


def test_split_returns_mapping_and_body() -> None:
    """The YAML block is parsed and the body is returned untouched."""
    meta, body = split_frontmatter(
        "---\ntitle: Commands\ndescription: Chat commands\n---\n# Commands\n", FILE
    )
    assert meta == {"title": "Commands", "description": "Chat commands"}
    assert body == "# Commands\n"


def test_split_tolerates_byte_order_mark() -> None:
    """A UTF-8 BOM before the opening delimiter is ignored."""
    meta, _ = split_frontmatter("\ufeff---\ntitle: A\ndescription: B\n---\n", FILE)
    assert meta["title"] == "A"


@pytest.mark.parametrize(
    ("text", "cause"),
    [
        ("# No frontmatter\n", "missing opening"),
        ("---\ntitle: A\n", "unterminated"),
        ("---\n- just\n- a list\n---\n", "mapping"),
        ("---\ntitle: [unclosed\n---\n", ""),
    ],
)
def test_split_rejects_malformed_blocks(text: str, cause: str) -> None:
    """Malformed blocks raise ParseError naming the file."""
    with pytest.raises(ParseError) as excinfo:
        split_frontmatter(text, FILE)
    assert excinfo.value.file == FILE
    assert cause in excinfo.value.cause, (
        f"expected cause containing {cause!r}, got {excinfo.value.cause!r}"
    )
    assert str(FILE) in str(excinfo.value)


def test_empty_block_yields_empty_mapping() -> None:
    """An empty block parses; the schema check reports missing fields later."""
    meta, _ = split_frontmatter("---\n---\nbody\n", FILE)
    assert meta == {}
    with pytest.raises(SchemaError) as excinfo:
        require_text(meta, "title", FILE)
    assert excinfo.value.field == "title"


@pytest.mark.parametrize("value", ["", "   ", None])
def test_require_text_rejects_blank_values(value: object) -> None:
    """Blank or missing required fields are schema errors."""
    with pytest.raises(SchemaError, match="description"):
        require_text({"description": value}, "description", FILE)


def test_require_text_rejects_structured_values() -> None:
    """Lists and mappings are not acceptable titles."""
    with pytest.raises(SchemaError, match="must be a string"):
        require_text({"title": ["a", "b"]}, "title", FILE)


def test_read_head_parses_tag_records() -> None:
    """Head records keep their tag, attribute order and content."""
    tags = read_head(
        {
            "head": [
                {"tag": "meta", "attrs": {"name": "robots", "content": "noindex"}},
                {"tag": "script", "content": "console.log(1)"},
            ]
        },
        FILE,
    )
    assert [tag.tag for tag in tags] == ["meta", "script"]
    assert tags[0].attrs == (("name", "robots"), ("content", "noindex"))
    assert tags[1].content == "console.log(1)"


@pytest.mark.parametrize(
    "head",
    [
        "not-a-list",
        [{"attrs": {}}],
        [{"tag": "div"}],
        [{"tag": "meta", "attrs": ["x"]}],
    ],
)
def test_read_head_rejects_malformed_records(head: object) -> None:
    """Malformed head entries are reported against the ``head`` field."""
    with pytest.raises(SchemaError) as excinfo:
        read_head({"head": head}, FILE)
    assert excinfo.value.field == "head"


def test_read_sitemap_applies_overrides() -> None:
    """Sitemap overrides and ``lastUpdated`` are normalised."""
    overrides = read_sitemap(
        {
            "lastUpdated": dt.date(2025, 1, 31),
            "sitemap": {"changefreq": "Monthly", "priority": 0.8},
        },
        FILE,
    )
    assert overrides.change_frequency == "monthly"
    assert overrides.priority == pytest.approx(0.8)
    assert overrides.last_modified == dt.datetime(2025, 1, 31, tzinfo=dt.UTC)


def test_sitemap_lastmod_wins_over_last_updated() -> None:
    """An explicit ``sitemap.lastmod`` takes precedence."""
    overrides = read_sitemap(
        {"lastUpdated": "2024-01-01", "sitemap": {"lastmod": "2025-02-03T10:00:00Z"}},
        FILE,
    )
    assert overrides.last_modified == dt.datetime(2025, 2, 3, 10, tzinfo=dt.UTC)


def test_boolean_last_updated_carries_no_date() -> None:
    """``lastUpdated: false`` only toggles the theme footer."""
    assert read_sitemap({"lastUpdated": False}, FILE).last_modified is None


@pytest.mark.parametrize(
    ("meta", "field"),
    [
        ({"sitemap": {"changefreq": "sometimes"}}, "sitemap.changefreq"),
        ({"sitemap": {"priority": 2}}, "sitemap.priority"),
        ({"sitemap": {"priority": "high"}}, "sitemap.priority"),
        ({"sitemap": "weekly"}, "sitemap"),
        ({"lastUpdated": "yesterday"}, "lastUpdated"),
    ],
)
def test_read_sitemap_rejects_invalid_values(meta: dict[str, object], field: str) -> None:
    """Invalid sitemap values fail with the offending field name."""
    with pytest.raises(SchemaError) as excinfo:
        read_sitemap(meta, FILE)
    assert excinfo.value.field == field
