"""Load and validate the wiki's site configuration YAML.

This subpackage parses ``config/site.yaml``, applies defaults for the sitemap
and head metadata, resolves the content root relative to the configuration
file, and produces a read-only :class:`SiteConfig` that every build stage
receives explicitly. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from hosttale_site.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.collection  # doctest: +SKIP
'docs'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, SitemapDefaults, SocialLinkConfig

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "SitemapDefaults",
    "SocialLinkConfig",
    "load_site_config",
]
