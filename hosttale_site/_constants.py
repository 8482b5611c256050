"""Common literal values used across hosttale_site.

These constants keep artifact filenames and sitemap vocabulary centralized so
the emitter, the CLI, and tests can import the same values without drifting.
Intended for internal use within the hosttale_site package.

Examples
--------
>>> from hosttale_site import _constants
>>> _constants.HEAD_FRAGMENT_TEMPLATE.format(name="guides/get-started")
'_head/guides/get-started.html'
>>> ".mdx" in _constants.CONTENT_EXTENSIONS
True
"""

CONTENT_EXTENSIONS = frozenset({".md", ".mdx"})
DEFAULT_COLLECTION = "docs"

SITEMAP_FILENAME = "sitemap.xml"
ROBOTS_FILENAME = "robots.txt"
ROUTES_MANIFEST = "routes.json"
NAVIGATION_MANIFEST = "navigation.json"
HEAD_FRAGMENT_DIR = "_head"
HEAD_FRAGMENT_TEMPLATE = HEAD_FRAGMENT_DIR + "/{name}.html"
ROOT_FRAGMENT_NAME = "index"

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
CHANGE_FREQUENCIES = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)
