"""Shared dataclasses produced by the route emitter."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt


@dc.dataclass(frozen=True, slots=True)
class Route:
    """A routable page and its sitemap metadata.

    Attributes
    ----------
    path : str
        Canonical URL path (lowercase, leading slash, no trailing slash
        except ``/``).
    source_slug : str
        Slug of the document the route was generated from.
    collection : str
        Collection of the source document.
    location : str
        Absolute URL used for ``<loc>`` and canonical links.
    last_modified : datetime
        Document timestamp, or the build time when the document sets none.
    change_frequency : str
        Sitemap ``changefreq`` value.
    priority : float
        Sitemap priority between 0.0 and 1.0.
    """

    path: str
    source_slug: str
    collection: str
    location: str
    last_modified: dt.datetime
    change_frequency: str
    priority: float

    @property
    def lastmod(self) -> str:
        """Return ``last_modified`` as a W3C datetime string."""
        return self.last_modified.isoformat(timespec="seconds")

    @property
    def priority_text(self) -> str:
        """Return the priority with at most two decimals (``0.5``, ``1.0``)."""
        text = f"{self.priority:.2f}".rstrip("0")
        return f"{text}0" if text.endswith(".") else text

    @property
    def fragment_name(self) -> str:
        """Return the artifact name used for this route's head fragment."""
        return self.path.strip("/") or "index"


__all__ = ["Route"]
