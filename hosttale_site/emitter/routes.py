"""Flatten the content store into the final, sorted route list."""

from __future__ import annotations

import datetime as dt
import typing as typ

from hosttale_site.content.slugs import route_path

from .models import Route

if typ.TYPE_CHECKING:
    from hosttale_site.config import SiteConfig
    from hosttale_site.content import ContentStore, DocumentEntry


def build_routes(
    store: ContentStore, config: SiteConfig, *, build_time: dt.datetime | None = None
) -> list[Route]:
    """Return one Route per document in ``store``, sorted by path.

    Routes are derived from the store rather than the sidebar, so documents
    that no sidebar entry references still appear in the sitemap.

    Parameters
    ----------
    store : ContentStore
        Validated content store.
    config : SiteConfig
        Supplies the base URL and sitemap defaults.
    build_time : datetime, optional
        Fallback ``lastmod`` for documents without one; defaults to now (UTC).

    Returns
    -------
    list[Route]
        Routes ordered by ``path`` so sitemap diffs stay stable.
    """
    generated_at = build_time or dt.datetime.now(dt.UTC)
    routes = [build_route(entry, config, generated_at) for entry in store.entries()]
    return sorted(routes, key=lambda route: (route.path, route.collection))


def build_route(
    entry: DocumentEntry, config: SiteConfig, build_time: dt.datetime
) -> Route:
    """Build the Route for a single document, applying sitemap defaults."""
    path = route_path(entry.slug)
    overrides = entry.sitemap
    return Route(
        path=path,
        source_slug=entry.slug,
        collection=entry.collection,
        location=config.absolute_url(path),
        last_modified=overrides.last_modified or build_time,
        change_frequency=overrides.change_frequency
        or config.sitemap.change_frequency,
        priority=(
            overrides.priority
            if overrides.priority is not None
            else config.sitemap.priority
        ),
    )


__all__ = ["build_route", "build_routes"]
