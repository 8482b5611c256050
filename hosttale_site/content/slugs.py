r"""Derive document slugs and route paths from content file locations.

Slugs depend only on a file's path relative to the content root, never on
its contents, so resolving the same tree twice (or in any order) yields the
same slug set. Each path segment is normalised the way Astro's content
collections slug files: lowercased, whitespace turned into ``-``, and
punctuation other than ``-`` and ``_`` dropped. An ``index`` file stands for
its parent directory.

Examples
--------
>>> from pathlib import Path
>>> resolve_slug(Path("docs/guides/index.md"), Path("docs"))
'guides'
>>> resolve_slug(Path("docs/Guides/Get Started.mdx"), Path("docs"))
'guides/get-started'
>>> route_path("guides/get-started")
'/guides/get-started'
>>> route_path("")
'/'
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

_PUNCTUATION = re.compile(r"[^\w\s-]", re.UNICODE)
_WHITESPACE = re.compile(r"\s")
_REPEATED_SLASHES = re.compile(r"/{2,}")
INDEX_BASENAME = "index"


def slugify_segment(segment: str) -> str:
    """Normalise a single path segment into its slug form."""
    lowered = segment.strip().lower()
    return _WHITESPACE.sub("-", _PUNCTUATION.sub("", lowered))


def resolve_slug(path: Path, content_root: Path) -> str:
    """Return the slug for ``path`` relative to ``content_root``.

    Parameters
    ----------
    path : Path
        Location of a content file beneath ``content_root``.
    content_root : Path
        Root directory of the content collection.

    Returns
    -------
    str
        Slash-separated slug; the empty string for the root ``index`` file.

    Raises
    ------
    ValueError
        If ``path`` does not live under ``content_root``.
    """
    relative = path.relative_to(content_root)
    directories = [slugify_segment(part) for part in relative.parts[:-1]]
    basename = slugify_segment(relative.stem)
    segments = directories if basename == INDEX_BASENAME else [*directories, basename]
    return "/".join(segment for segment in segments if segment)


def normalize_slug(slug: str) -> str:
    """Strip surrounding whitespace and slashes from an authored slug."""
    return _REPEATED_SLASHES.sub("/", slug.strip()).strip("/")


def route_path(slug: str) -> str:
    """Return the canonical URL path for ``slug``.

    The path is lowercase, carries a single leading slash, and has no trailing
    slash except for the site root.
    """
    normalized = normalize_slug(slug).lower()
    return f"/{normalized}" if normalized else "/"


__all__ = [
    "INDEX_BASENAME",
    "normalize_slug",
    "resolve_slug",
    "route_path",
    "slugify_segment",
]
