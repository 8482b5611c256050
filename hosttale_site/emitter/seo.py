"""Compose the ordered head tags injected into every page.

Global tags always come first, in a fixed order: Open Graph type and locale,
the Twitter card, the page-level Open Graph and canonical links, the favicon,
and a single JSON-LD block. Site-wide ``head`` defaults from the
configuration follow, and the document's own ``head`` entries come last.
Some consumers honour the first occurrence of a tag, so that order is kept
verbatim and nothing is de-duplicated.
"""

from __future__ import annotations

import mimetypes
import typing as typ

import msgspec.json as msgspec_json

from hosttale_site.metadata import HeadTag

if typ.TYPE_CHECKING:
    from hosttale_site.config import SiteConfig
    from hosttale_site.content import DocumentEntry

    from .models import Route

OG_TYPE = "article"
TWITTER_CARD = "summary_large_image"
JSON_LD_TYPE = "application/ld+json"


def compose_head(
    route: Route, document: DocumentEntry, config: SiteConfig
) -> list[HeadTag]:
    """Return the ordered head tags for ``route``.

    Parameters
    ----------
    route : Route
        Emitted route for ``document``; supplies the canonical URL.
    document : DocumentEntry
        Source document; supplies title, description and ``extra_head``.
    config : SiteConfig
        Supplies locale, site title, favicon and site-wide head tags.

    Returns
    -------
    list[HeadTag]
        Global tags, then ``config.head``, then ``document.extra_head``.
    """
    tags = [
        _meta_property("og:type", OG_TYPE),
        _meta_property("og:locale", config.locale),
        HeadTag.create("meta", {"name": "twitter:card", "content": TWITTER_CARD}),
        _meta_property("og:title", document.title),
        _meta_property("og:description", document.description),
        _meta_property("og:url", route.location),
        _meta_property("og:site_name", config.title),
        HeadTag.create("link", {"rel": "canonical", "href": route.location}),
    ]
    if config.favicon:
        tags.append(_favicon_link(config.favicon))
    tags.append(
        HeadTag.create(
            "script",
            {"type": JSON_LD_TYPE},
            structured_data(route, document, config),
        )
    )
    tags.extend(config.head)
    tags.extend(document.extra_head)
    return tags


def structured_data(route: Route, document: DocumentEntry, config: SiteConfig) -> str:
    """Return the JSON-LD payload describing the page as a TechArticle."""
    website: dict[str, typ.Any] = {
        "@type": "WebSite",
        "name": config.title,
        "url": config.absolute_url("/"),
    }
    if config.social:
        website["sameAs"] = [link.href for link in config.social]
    payload = {
        "@context": "https://schema.org",
        "@type": "TechArticle",
        "headline": document.title,
        "description": document.description,
        "url": route.location,
        "inLanguage": config.locale.replace("_", "-"),
        "dateModified": route.lastmod,
        "isPartOf": website,
        "about": {
            "@type": "SoftwareApplication",
            "name": config.application_name or config.title,
        },
    }
    encoded = msgspec_json.encode(payload).decode("utf-8")
    # ``</`` would close the surrounding <script> element early.
    return encoded.replace("</", "<\\/")


def _meta_property(name: str, content: str) -> HeadTag:
    return HeadTag.create("meta", {"property": name, "content": content})


def _favicon_link(href: str) -> HeadTag:
    attrs = {"rel": "shortcut icon", "href": href}
    mime_type, _encoding = mimetypes.guess_type(href)
    if href.endswith(".svg"):
        mime_type = "image/svg+xml"
    if mime_type:
        attrs["type"] = mime_type
    return HeadTag.create("link", attrs)


__all__ = ["JSON_LD_TYPE", "OG_TYPE", "TWITTER_CARD", "compose_head", "structured_data"]
