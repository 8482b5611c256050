"""Dataclasses describing loaded content documents."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from hosttale_site.metadata import SitemapOverrides

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

    from hosttale_site.metadata import HeadTag


@dc.dataclass(frozen=True, slots=True)
class DocumentEntry:
    """A validated document from a content collection.

    Attributes
    ----------
    collection : str
        Content collection identifier (for example ``"docs"``).
    slug : str
        Path-derived identifier, unique within ``collection``.
    title : str
        Required, non-empty page title from frontmatter.
    description : str
        Required, non-empty page description from frontmatter.
    source_path : Path
        File the entry was loaded from.
    extra_head : tuple[HeadTag, ...]
        Head tags declared under the ``head`` frontmatter key.
    sitemap : SitemapOverrides
        Per-document sitemap overrides; unset fields use site defaults.
    """

    collection: str
    slug: str
    title: str
    description: str
    source_path: Path
    extra_head: tuple[HeadTag, ...] = ()
    sitemap: SitemapOverrides = dc.field(default_factory=SitemapOverrides)

    @property
    def key(self) -> tuple[str, str]:
        """Return the ``(collection, slug)`` lookup key."""
        return (self.collection, self.slug)

    @property
    def last_modified(self) -> dt.datetime | None:
        """Return the document's own last-modified timestamp, if declared."""
        return self.sitemap.last_modified


__all__ = ["DocumentEntry"]
