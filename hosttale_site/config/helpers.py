"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from hosttale_site.metadata import (
    HeadTag,
    coerce_change_frequency,
    coerce_head_tags,
    coerce_priority,
)

from .models import SiteConfigError, SitemapDefaults, SocialLinkConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, section: str) -> str:
    """Return a required non-empty string or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"Missing required '{section}.{key}' in site configuration."
        raise SiteConfigError(msg)
    return value


def _mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{section}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _normalize_base_url(value: str) -> str:
    """Validate an absolute http(s) URL and strip any trailing slash."""
    if not value.startswith(("http://", "https://")):
        msg = f"'site.base_url' must be an absolute http(s) URL, got {value!r}."
        raise SiteConfigError(msg)
    return value.rstrip("/")


def _resolve_path(value: object, *, base_dir: Path, default: str) -> Path:
    """Resolve a configured path relative to the configuration file."""
    path = Path(_optional_str(value) or default)
    if path.is_absolute():
        return path
    return base_dir / path


def _build_sitemap_defaults(payload: typ.Mapping[str, typ.Any]) -> SitemapDefaults:
    """Build SitemapDefaults from the ``sitemap`` section."""
    base = SitemapDefaults()
    try:
        change_frequency = coerce_change_frequency(
            payload.get("changefreq", base.change_frequency)
        )
        priority = coerce_priority(payload.get("priority", base.priority))
    except ValueError as exc:
        msg = f"Invalid 'sitemap' defaults: {exc}"
        raise SiteConfigError(msg) from exc
    return SitemapDefaults(change_frequency=change_frequency, priority=priority)


def _build_social_links(value: object) -> tuple[SocialLinkConfig, ...]:
    """Build social link configs from the ``site.social`` list."""
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = "'site.social' must be a list."
        raise SiteConfigError(msg)
    links: list[SocialLinkConfig] = []
    for index, entry in enumerate(value):
        section = f"site.social[{index}]"
        payload = _mapping(entry, section)
        links.append(
            SocialLinkConfig(
                icon=_require_str(payload, "icon", section),
                label=_require_str(payload, "label", section),
                href=_require_str(payload, "href", section),
            )
        )
    return tuple(links)


def _build_head_defaults(value: object) -> tuple[HeadTag, ...]:
    """Build the site-wide head tags from the ``site.head`` list."""
    try:
        return coerce_head_tags(value)
    except ValueError as exc:
        msg = f"Invalid 'site.head': {exc}"
        raise SiteConfigError(msg) from exc


__all__ = [
    "_build_head_defaults",
    "_build_sitemap_defaults",
    "_build_social_links",
    "_mapping",
    "_normalize_base_url",
    "_optional_str",
    "_require_str",
    "_resolve_path",
]
