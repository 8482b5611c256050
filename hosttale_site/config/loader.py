"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from hosttale_site._constants import DEFAULT_COLLECTION

from .helpers import (
    _build_head_defaults,
    _build_sitemap_defaults,
    _build_social_links,
    _mapping,
    _normalize_base_url,
    _optional_str,
    _require_str,
    _resolve_path,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site, content and sidebar.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative paths inside the file are resolved
        against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed, read-only site configuration including the raw sidebar
        definition and sitemap defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the YAML cannot be parsed, the top level is not a mapping, or
        required sections or fields are missing or invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> from hosttale_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'HostTale'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = loader.load(handle) or {}
        except YAMLError as exc:
            msg = f"Could not parse '{path}': {exc}"
            raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    site = _mapping(raw.get("site"), "site")
    content = _mapping(raw.get("content"), "content")
    sitemap = _mapping(raw.get("sitemap"), "sitemap")

    sidebar = raw.get("sidebar") or []
    if not isinstance(sidebar, list):
        msg = "'sidebar' must be a list of navigation entries."
        raise SiteConfigError(msg)

    title = _require_str(site, "title", "site")
    return SiteConfig(
        title=title,
        base_url=_normalize_base_url(_require_str(site, "base_url", "site")),
        description=_optional_str(site.get("description")),
        favicon=_optional_str(site.get("favicon", "/favicon.svg")),
        locale=_optional_str(site.get("locale")) or "en_US",
        application_name=_optional_str(site.get("application_name")) or title,
        social=_build_social_links(site.get("social")),
        head=_build_head_defaults(site.get("head")),
        content_root=_resolve_path(
            content.get("root"), base_dir=base_dir, default="src/content/docs"
        ),
        collection=_optional_str(content.get("collection")) or DEFAULT_COLLECTION,
        output_dir=_resolve_path(raw.get("output_dir"), base_dir=base_dir, default="dist"),
        sidebar=tuple(sidebar),
        sitemap=_build_sitemap_defaults(sitemap),
    )


__all__ = ["load_site_config"]
