"""Route, sitemap and SEO head-tag emission for validated content."""

from .models import Route
from .renderer import ArtifactRenderer
from .routes import build_routes
from .seo import compose_head

__all__ = ["ArtifactRenderer", "Route", "build_routes", "compose_head"]
