"""Content collection loading: frontmatter, slugs and the document store."""

from .models import DocumentEntry
from .slugs import resolve_slug, route_path
from .store import ContentStore, load_all

__all__ = [
    "ContentStore",
    "DocumentEntry",
    "load_all",
    "resolve_slug",
    "route_path",
]
