"""Shared head-tag and sitemap metadata value types.

Head-tag descriptors and sitemap values are accepted from two places: the
site-wide defaults in ``config/site.yaml`` and the per-document frontmatter.
Both sources are coerced through the helpers below so that validation rules
stay identical. The coercion helpers raise :class:`ValueError` with a short
reason; callers wrap that reason into the error type of their own layer
(``SiteConfigError`` or ``SchemaError``).
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from ._constants import CHANGE_FREQUENCIES

_VOID_TAGS = frozenset({"base", "link", "meta"})
_HEAD_TAGS = _VOID_TAGS | {"noscript", "script", "style", "title"}


@dc.dataclass(frozen=True, slots=True)
class HeadTag:
    """A single element injected into a rendered page's ``<head>``.

    Attributes
    ----------
    tag : str
        Element name (``meta``, ``link``, ``script``, ...).
    attrs : tuple[tuple[str, str], ...]
        Attribute pairs in declaration order.
    content : str | None
        Inline content for non-void elements such as ``script``.
    """

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    content: str | None = None

    @classmethod
    def create(
        cls,
        tag: str,
        attrs: typ.Mapping[str, str] | None = None,
        content: str | None = None,
    ) -> HeadTag:
        """Build a tag from an attribute mapping, preserving its order."""
        return cls(tag=tag, attrs=tuple((attrs or {}).items()), content=content)

    @property
    def is_void(self) -> bool:
        """Return True when the element has no closing tag."""
        return self.tag in _VOID_TAGS

    def attr(self, name: str) -> str | None:
        """Return the value of attribute ``name`` if present."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly mapping of the tag."""
        return {"tag": self.tag, "attrs": dict(self.attrs), "content": self.content}


@dc.dataclass(frozen=True, slots=True)
class SitemapOverrides:
    """Per-document sitemap metadata; ``None`` fields fall back to defaults."""

    change_frequency: str | None = None
    priority: float | None = None
    last_modified: dt.datetime | None = None


def coerce_head_tags(value: object) -> tuple[HeadTag, ...]:
    """Validate a list of ``{tag, attrs?, content?}`` records.

    Raises
    ------
    ValueError
        If the payload is not a list of well-formed records.
    """
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = "expected a list of head tag records"
        raise ValueError(msg)
    tags: list[HeadTag] = []
    for index, record in enumerate(value):
        if not isinstance(record, dict):
            msg = f"entry {index} must be a mapping"
            raise ValueError(msg)
        tag = record.get("tag")
        if not isinstance(tag, str) or tag.strip().lower() not in _HEAD_TAGS:
            msg = f"entry {index} has unsupported tag {tag!r}"
            raise ValueError(msg)
        attrs = record.get("attrs") or {}
        if not isinstance(attrs, dict):
            msg = f"entry {index} attrs must be a mapping"
            raise ValueError(msg)
        content = record.get("content")
        if content is not None and not isinstance(content, str):
            msg = f"entry {index} content must be a string"
            raise ValueError(msg)
        tags.append(
            HeadTag.create(
                tag.strip().lower(),
                {str(key): _attr_value(attr) for key, attr in attrs.items()},
                content,
            )
        )
    return tuple(tags)


def _attr_value(value: object) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case None:
            return ""
        case _:
            return str(value)


def coerce_change_frequency(value: object) -> str:
    """Return a sitemap ``changefreq`` value or raise ValueError."""
    text = str(value).strip().lower() if value is not None else ""
    if text not in CHANGE_FREQUENCIES:
        allowed = ", ".join(CHANGE_FREQUENCIES)
        msg = f"{value!r} is not one of: {allowed}"
        raise ValueError(msg)
    return text


def coerce_priority(value: object) -> float:
    """Return a sitemap priority in ``[0.0, 1.0]`` or raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        msg = f"{value!r} is not a number"
        raise ValueError(msg)
    try:
        priority = float(value)
    except ValueError as exc:
        msg = f"{value!r} is not a number"
        raise ValueError(msg) from exc
    if not 0.0 <= priority <= 1.0:
        msg = f"{priority} is outside 0.0-1.0"
        raise ValueError(msg)
    return priority


def coerce_timestamp(value: object) -> dt.datetime:
    """Return a timezone-aware UTC datetime parsed from ``value``.

    Dates become midnight UTC; naive datetimes are assumed to be UTC.
    """
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError as exc:
                msg = f"{text!r} is not an ISO 8601 date"
                raise ValueError(msg) from exc
        case _:
            msg = f"{value!r} is not a date"
            raise ValueError(msg)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "HeadTag",
    "SitemapOverrides",
    "coerce_change_frequency",
    "coerce_head_tags",
    "coerce_priority",
    "coerce_timestamp",
]
