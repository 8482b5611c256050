"""Typed dataclasses describing the wiki's site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from hosttale_site._constants import DEFAULT_COLLECTION

if typ.TYPE_CHECKING:
    from hosttale_site.metadata import HeadTag


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SocialLinkConfig:
    """Social link advertised in the site header and structured data."""

    icon: str
    label: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class SitemapDefaults:
    """Sitemap metadata applied to routes whose documents set none."""

    change_frequency: str = "weekly"
    priority: float = 0.5


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Global, read-only configuration resolved once per build.

    Attributes
    ----------
    title : str
        Site name used in titles, Open Graph and structured data.
    base_url : str
        Absolute site URL without a trailing slash.
    content_root : Path
        Directory holding the documents of ``collection``.
    sidebar : tuple[Any, ...]
        Raw sidebar definition; compiled by
        :func:`hosttale_site.navigation.build_navigation`.
    head : tuple[HeadTag, ...]
        Head tags added to every page after the built-in SEO tags.
    """

    title: str
    base_url: str
    content_root: Path
    output_dir: Path = Path("dist")
    collection: str = DEFAULT_COLLECTION
    description: str | None = None
    favicon: str | None = "/favicon.svg"
    locale: str = "en_US"
    application_name: str | None = None
    social: tuple[SocialLinkConfig, ...] = ()
    head: tuple[HeadTag, ...] = ()
    sidebar: tuple[typ.Any, ...] = ()
    sitemap: SitemapDefaults = dc.field(default_factory=SitemapDefaults)

    def absolute_url(self, path: str) -> str:
        """Join a canonical route path onto the site base URL."""
        if path == "/":
            return f"{self.base_url}/"
        return f"{self.base_url}{path}"


__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "SitemapDefaults",
    "SocialLinkConfig",
]
