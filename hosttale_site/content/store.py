"""Discover, validate and index the documents of a content collection.

:func:`load_all` walks the content root, validates every recognised file's
frontmatter, and returns an immutable :class:`ContentStore`. Loading is
all-or-nothing: the first malformed document or slug collision aborts with a
:class:`~hosttale_site.errors.SiteBuildError` naming the offending file.

Example
-------
>>> from pathlib import Path
>>> from hosttale_site.content import load_all
>>> store = load_all(Path("src/content/docs"))  # doctest: +SKIP
>>> store.find("docs", "guides/get-started").title  # doctest: +SKIP
'Get started'
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import types
import typing as typ

from hosttale_site._constants import CONTENT_EXTENSIONS, DEFAULT_COLLECTION
from hosttale_site.errors import DuplicateSlugError, ParseError

from .frontmatter import read_head, read_sitemap, require_text, split_frontmatter
from .models import DocumentEntry
from .slugs import normalize_slug, resolve_slug

if typ.TYPE_CHECKING:
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


class ContentStore:
    """Read-only index of documents keyed by ``(collection, slug)``."""

    def __init__(self, entries: cabc.Iterable[DocumentEntry] = ()) -> None:
        index: dict[tuple[str, str], DocumentEntry] = {}
        for entry in entries:
            existing = index.get(entry.key)
            if existing is not None:
                raise DuplicateSlugError(
                    entry.slug, [existing.source_path, entry.source_path]
                )
            index[entry.key] = entry
        self._index = types.MappingProxyType(index)

    def find(self, collection: str, slug: str) -> DocumentEntry | None:
        """Return the entry for ``slug`` in ``collection`` or None."""
        return self._index.get((collection, normalize_slug(slug)))

    def entries(self) -> list[DocumentEntry]:
        """Return every entry ordered by collection and slug."""
        return [self._index[key] for key in sorted(self._index)]

    def slugs(self, collection: str | None = None) -> set[str]:
        """Return the slug set, optionally restricted to one collection."""
        return {
            slug for name, slug in self._index if collection in (None, name)
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> cabc.Iterator[DocumentEntry]:
        return iter(self.entries())


def load_all(content_root: Path, collection: str = DEFAULT_COLLECTION) -> ContentStore:
    """Load every document under ``content_root`` into a ContentStore.

    Parameters
    ----------
    content_root : Path
        Directory holding the collection's ``.md``/``.mdx`` files.
    collection : str, optional
        Collection identifier recorded on each entry; ``"docs"`` by default.

    Returns
    -------
    ContentStore
        Immutable store containing one entry per content file.

    Raises
    ------
    FileNotFoundError
        If ``content_root`` is not a directory.
    ParseError
        If a file is not UTF-8 or its frontmatter block is malformed.
    SchemaError
        If a required field is missing or an optional field is invalid.
    DuplicateSlugError
        If two files resolve to the same slug.
    """
    if not content_root.is_dir():
        msg = f"Content root '{content_root}' is not a directory."
        raise FileNotFoundError(msg)

    entries = [
        load_document(path, content_root, collection)
        for path in discover_content_files(content_root)
    ]
    store = ContentStore(entries)
    LOGGER.debug("loaded %d documents from %s", len(store), content_root)
    return store


def discover_content_files(content_root: Path) -> list[Path]:
    """Return content files beneath ``content_root`` in sorted order.

    Files and directories whose names start with ``.`` or ``_`` are skipped.
    """
    found: list[Path] = []
    for path in sorted(content_root.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in CONTENT_EXTENSIONS:
            continue
        relative = path.relative_to(content_root)
        if any(part.startswith((".", "_")) for part in relative.parts):
            continue
        found.append(path)
    return found


def load_document(path: Path, content_root: Path, collection: str) -> DocumentEntry:
    """Parse and validate a single content file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(path, "file is not valid UTF-8") from exc
    meta, _body = split_frontmatter(text, path)
    title = require_text(meta, "title", path)
    description = require_text(meta, "description", path)
    return DocumentEntry(
        collection=collection,
        slug=resolve_slug(path, content_root),
        title=title,
        description=description,
        source_path=path,
        extra_head=read_head(meta, path),
        sitemap=read_sitemap(meta, path),
    )


__all__ = ["ContentStore", "discover_content_files", "load_all", "load_document"]
