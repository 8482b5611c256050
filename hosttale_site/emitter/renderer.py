"""Render sitemap, robots and head-fragment artifacts with Jinja2."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from hosttale_site._constants import SITEMAP_FILENAME, SITEMAP_NAMESPACE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from hosttale_site.config import SiteConfig
    from hosttale_site.metadata import HeadTag

    from .models import Route

RAW_TEXT_TAGS = frozenset({"script", "style"})


def raw_text(content: str | None) -> str:
    """Return ``script``/``style`` content that cannot close its element early."""
    return (content or "").replace("</", "<\\/")


class ArtifactRenderer:
    """Render the text artifacts consumed by the external site renderer."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the ``*.jinja`` templates. Defaults to the
            ``hosttale_site/templates`` directory when ``None``.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html.jinja", "xml.jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["raw_text"] = raw_text

    def render_sitemap(self, routes: cabc.Sequence[Route]) -> str:
        """Render a sitemap-protocol ``urlset`` with one ``url`` per route."""
        template = self.env.get_template("sitemap.xml.jinja")
        return template.render(routes=routes, namespace=SITEMAP_NAMESPACE)

    def render_robots(self, config: SiteConfig) -> str:
        """Render ``robots.txt`` pointing crawlers at the sitemap."""
        template = self.env.get_template("robots.txt.jinja")
        sitemap_url = config.absolute_url(f"/{SITEMAP_FILENAME}")
        return template.render(sitemap_url=sitemap_url)

    def render_head(self, tags: cabc.Sequence[HeadTag]) -> str:
        """Render head tags as an HTML fragment, one element per line."""
        template = self.env.get_template("head.html.jinja")
        return template.render(tags=tags, raw_text_tags=RAW_TEXT_TAGS)


__all__ = ["RAW_TEXT_TAGS", "ArtifactRenderer", "raw_text"]
