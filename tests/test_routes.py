"""Tests for route emission and sitemap rendering.

Routes come from the content store, not the sidebar, so these tests build a
store directly and compare route counts, ordering and per-document sitemap
overrides. Sitemap XML is inspected with BeautifulSoup.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

import pytest
from bs4 import BeautifulSoup

from hosttale_site._constants import SITEMAP_NAMESPACE
from hosttale_site.config import SitemapDefaults
from hosttale_site.content import load_all
from hosttale_site.emitter import ArtifactRenderer, build_routes
from hosttale_site.emitter.models import Route
from hosttale_site.integrity import check_integrity
from hosttale_site.navigation import build_navigation

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from hosttale_site.config import SiteConfig

BUILD_TIME = dt.datetime(2026, 10, 1, 12, 30, tzinfo=dt.UTC)


def test_one_route_per_document(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Each document yields exactly one route with its slug as source."""
    for relative in ("index.mdx", "guides/index.md", "guides/commands.md"):
        write_doc(relative)
    store = load_all(docs_root)

    routes = build_routes(store, make_config(), build_time=BUILD_TIME)

    assert len(routes) == len(store)
    assert sorted(route.source_slug for route in routes) == sorted(
        entry.slug for entry in store.entries()
    )
    assert [route.path for route in routes] == ["/", "/guides", "/guides/commands"]
    assert routes[0].location == "https://wiki.example.test/"
    assert routes[2].location == "https://wiki.example.test/guides/commands"


def test_sitemap_includes_unlisted_documents(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """80 documents with only 60 in the sidebar still produce 80 entries."""
    for index in range(80):
        write_doc(f"pages/page-{index:02d}.md", title=f"Page {index}")
    sidebar = [
        {"label": f"Page {index}", "slug": f"pages/page-{index:02d}"}
        for index in range(60)
    ]
    store = load_all(docs_root)
    report = check_integrity(build_navigation(sidebar), store)
    routes = build_routes(store, make_config(sidebar), build_time=BUILD_TIME)

    xml = ArtifactRenderer().render_sitemap(routes)
    soup = BeautifulSoup(xml.encode("utf-8"), "xml")

    assert report.ok
    assert len(report.orphans) == 20
    assert len(soup.find_all("url")) == 80, "every document must be sitemapped"
    assert len(routes) == len(store) == 80


def test_defaults_and_overrides(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Per-document overrides win; otherwise site defaults and build time apply."""
    write_doc("guides/commands.md")
    write_doc(
        "guides/ecs/overview.md",
        extra=(
            "lastUpdated: 2025-03-01\n"
            "sitemap:\n"
            "  changefreq: daily\n"
            "  priority: 0.9\n"
        ),
    )
    config = make_config(sitemap=SitemapDefaults(change_frequency="monthly", priority=0.3))
    default_route, override_route = build_routes(
        load_all(docs_root), config, build_time=BUILD_TIME
    )

    assert default_route.path == "/guides/commands"
    assert default_route.change_frequency == "monthly"
    assert default_route.priority == pytest.approx(0.3)
    assert default_route.last_modified == BUILD_TIME
    assert override_route.change_frequency == "daily"
    assert override_route.priority == pytest.approx(0.9)
    assert override_route.lastmod == "2025-03-01T00:00:00+00:00"


def test_zero_priority_override_is_respected(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """A priority of 0.0 is an explicit value, not a missing one."""
    write_doc("archive.md", extra="sitemap:\n  priority: 0\n")
    (route,) = build_routes(load_all(docs_root), make_config(), build_time=BUILD_TIME)
    assert route.priority == 0.0
    assert route.priority_text == "0.0"


def test_routes_are_sorted_regardless_of_discovery_order(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Output order is by path so sitemap diffs stay stable."""
    for relative in ("zeta.md", "alpha/beta.md", "alpha.md", "mid/index.md"):
        write_doc(relative)
    routes = build_routes(load_all(docs_root), make_config(), build_time=BUILD_TIME)
    paths = [route.path for route in routes]
    assert paths == sorted(paths)


def test_sitemap_xml_structure(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Each ``url`` carries loc, lastmod, changefreq and priority."""
    write_doc("guides/commands.md")
    config = make_config()
    routes = build_routes(load_all(docs_root), config, build_time=BUILD_TIME)

    xml = ArtifactRenderer().render_sitemap(routes)
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    soup = BeautifulSoup(xml.encode("utf-8"), "xml")
    urlset = soup.find("urlset")
    assert urlset is not None
    assert urlset.get("xmlns") == SITEMAP_NAMESPACE
    url = soup.find("url")
    assert url is not None
    assert url.find("loc").get_text() == "https://wiki.example.test/guides/commands"
    assert url.find("lastmod").get_text() == "2026-10-01T12:30:00+00:00"
    assert url.find("changefreq").get_text() == "weekly"
    assert url.find("priority").get_text() == "0.5"


def test_sitemap_escapes_locations(make_config: cabc.Callable[..., SiteConfig]) -> None:
    """Reserved XML characters in URLs are escaped."""
    config = make_config(base_url="https://wiki.example.test/a&b")
    route = Route(
        path="/guides",
        source_slug="guides",
        collection="docs",
        location=config.absolute_url("/guides"),
        last_modified=BUILD_TIME,
        change_frequency="weekly",
        priority=0.5,
    )
    xml = ArtifactRenderer().render_sitemap([route])
    assert "https://wiki.example.test/a&amp;b/guides" in xml


def test_robots_points_at_sitemap(make_config: cabc.Callable[..., SiteConfig]) -> None:
    """robots.txt allows crawling and references the sitemap URL."""
    robots = ArtifactRenderer().render_robots(make_config())
    assert "User-agent: *" in robots
    assert "Sitemap: https://wiki.example.test/sitemap.xml" in robots


def test_config_is_not_mutated_by_route_building(
    docs_root: Path,
    write_doc: cabc.Callable[..., Path],
    make_config: cabc.Callable[..., SiteConfig],
) -> None:
    """SiteConfig is read-only input to the emitter."""
    write_doc("guides/commands.md")
    config = make_config()
    before = dc.asdict(config)
    build_routes(load_all(docs_root), config, build_time=BUILD_TIME)
    assert dc.asdict(config) == before
