"""Build-fatal error taxonomy for the wiki's structural-integrity checks.

Every error raised while loading content, compiling the sidebar, or
cross-checking the two derives from :class:`SiteBuildError`. Each carries the
structured location (file path or sidebar index chain) alongside a
human-readable message so the CLI can report it verbatim on standard error.

Examples
--------
>>> from pathlib import Path
>>> from hosttale_site.errors import SchemaError
>>> str(SchemaError(Path("docs/intro.md"), "title"))
"docs/intro.md: missing required frontmatter field 'title'"
>>> from hosttale_site.errors import format_index_chain
>>> format_index_chain((1, 2, 0))
'sidebar[1].items[2].items[0]'
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class SiteBuildError(ValueError):
    """Base class for validation failures that abort a site build."""


class ParseError(SiteBuildError):
    """Raised when a content file's frontmatter block cannot be parsed."""

    def __init__(self, file: Path, cause: str) -> None:
        self.file = file
        self.cause = cause
        super().__init__(f"{file}: malformed frontmatter ({cause})")


class SchemaError(SiteBuildError):
    """Raised when a frontmatter field is missing or has an invalid value."""

    def __init__(self, file: Path, field: str, reason: str | None = None) -> None:
        self.file = file
        self.field = field
        self.reason = reason
        if reason:
            msg = f"{file}: invalid frontmatter field '{field}' ({reason})"
        else:
            msg = f"{file}: missing required frontmatter field '{field}'"
        super().__init__(msg)


class DuplicateSlugError(SiteBuildError):
    """Raised when two content files resolve to the same slug."""

    def __init__(self, slug: str, files: cabc.Sequence[Path]) -> None:
        self.slug = slug
        self.files = list(files)
        listed = ", ".join(str(path) for path in self.files)
        super().__init__(f"duplicate slug '{slug}' produced by: {listed}")


class SpecShapeError(SiteBuildError):
    """Raised when a sidebar node does not match the leaf/group shape."""

    def __init__(self, path: cabc.Sequence[int], reason: str) -> None:
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"{format_index_chain(self.path)}: {reason}")


class BrokenLinkError(SiteBuildError):
    """A sidebar leaf that references a document missing from the store."""

    def __init__(
        self,
        label: str,
        slug: str,
        *,
        collection: str,
        path: cabc.Sequence[int] = (),
    ) -> None:
        self.label = label
        self.slug = slug
        self.collection = collection
        self.path = tuple(path)
        location = format_index_chain(self.path) if self.path else "sidebar"
        super().__init__(
            f"{location}: entry '{label}' links to missing document "
            f"'{collection}/{slug}'"
        )


class IntegrityError(SiteBuildError):
    """Aggregate of every broken sidebar link found in one check."""

    def __init__(self, errors: cabc.Sequence[BrokenLinkError]) -> None:
        self.errors = list(errors)
        lines = [f"{len(self.errors)} broken sidebar link(s):"]
        lines.extend(f"  - {error}" for error in self.errors)
        super().__init__("\n".join(lines))


def format_index_chain(path: cabc.Sequence[int]) -> str:
    """Render a sidebar index chain as ``sidebar[i].items[j]...``."""
    if not path:
        return "sidebar"
    head, *rest = path
    parts = [f"sidebar[{head}]"]
    parts.extend(f"items[{index}]" for index in rest)
    return ".".join(parts)


__all__ = [
    "BrokenLinkError",
    "DuplicateSlugError",
    "IntegrityError",
    "ParseError",
    "SchemaError",
    "SiteBuildError",
    "SpecShapeError",
    "format_index_chain",
]
