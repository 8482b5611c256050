r"""Split and validate the YAML frontmatter block of a content file.

Every document starts with a ``---`` delimited YAML block that must contain a
non-empty ``title`` and ``description``. Optional keys understood here are
``head`` (extra head tags), ``lastUpdated`` (a date, or a boolean that defers
to the build time) and ``sitemap`` (``changefreq``/``priority``/``lastmod``
overrides). The body after the block is returned untouched; rendering it is
somebody else's job.

Example
-------
>>> from pathlib import Path
>>> meta, body = split_frontmatter(
...     "---\ntitle: Intro\ndescription: Start here\n---\n# Hi\n", Path("intro.md")
... )
>>> meta["title"], body
('Intro', '# Hi\n')
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from hosttale_site.errors import ParseError, SchemaError
from hosttale_site.metadata import (
    SitemapOverrides,
    coerce_change_frequency,
    coerce_head_tags,
    coerce_priority,
    coerce_timestamp,
)

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

    from hosttale_site.metadata import HeadTag

DELIMITER = "---"
REQUIRED_FIELDS = ("title", "description")


def split_frontmatter(text: str, file: Path) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed frontmatter mapping and the remaining body.

    Raises
    ------
    ParseError
        If the delimiters are missing, the YAML is malformed, or the block
        does not hold a mapping.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        raise ParseError(file, "missing opening '---' delimiter")
    closing = next(
        (index for index, line in enumerate(lines[1:], 1) if line.strip() == DELIMITER),
        None,
    )
    if closing is None:
        raise ParseError(file, "unterminated frontmatter block")

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load("".join(lines[1:closing]))
    except YAMLError as exc:
        raise ParseError(file, _first_line(str(exc))) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ParseError(file, "frontmatter must be a key/value mapping")
    return dict(loaded), "".join(lines[closing + 1 :])


def _first_line(text: str) -> str:
    return text.strip().splitlines()[0] if text.strip() else "invalid YAML"


def require_text(meta: typ.Mapping[str, typ.Any], field: str, file: Path) -> str:
    """Return a required non-empty string field or raise SchemaError."""
    value = meta.get(field)
    if value is None:
        raise SchemaError(file, field)
    if isinstance(value, dict | list | bool):
        raise SchemaError(file, field, "must be a string")
    text = str(value).strip()
    if not text:
        raise SchemaError(file, field)
    return text


def read_head(meta: typ.Mapping[str, typ.Any], file: Path) -> tuple[HeadTag, ...]:
    """Return the document's extra head tags."""
    try:
        return coerce_head_tags(meta.get("head"))
    except ValueError as exc:
        raise SchemaError(file, "head", str(exc)) from exc


def read_sitemap(meta: typ.Mapping[str, typ.Any], file: Path) -> SitemapOverrides:
    """Return sitemap overrides from ``sitemap`` and ``lastUpdated``."""
    payload = meta.get("sitemap") or {}
    if not isinstance(payload, dict):
        raise SchemaError(file, "sitemap", "must be a mapping")

    change_frequency = None
    if payload.get("changefreq") is not None:
        try:
            change_frequency = coerce_change_frequency(payload["changefreq"])
        except ValueError as exc:
            raise SchemaError(file, "sitemap.changefreq", str(exc)) from exc

    priority = None
    if payload.get("priority") is not None:
        try:
            priority = coerce_priority(payload["priority"])
        except ValueError as exc:
            raise SchemaError(file, "sitemap.priority", str(exc)) from exc

    last_modified = _read_timestamp(payload.get("lastmod"), file, "sitemap.lastmod")
    if last_modified is None:
        last_modified = _read_timestamp(meta.get("lastUpdated"), file, "lastUpdated")

    return SitemapOverrides(
        change_frequency=change_frequency,
        priority=priority,
        last_modified=last_modified,
    )


def _read_timestamp(value: object, file: Path, field: str) -> dt.datetime | None:
    # ``lastUpdated: true|false`` toggles the theme's footer; it carries no date.
    if value is None or isinstance(value, bool):
        return None
    try:
        return coerce_timestamp(value)
    except ValueError as exc:
        raise SchemaError(file, field, str(exc)) from exc


__all__ = [
    "DELIMITER",
    "REQUIRED_FIELDS",
    "read_head",
    "read_sitemap",
    "require_text",
    "split_frontmatter",
]
