"""Compile the declarative sidebar definition into a navigation tree.

The sidebar is authored as an ordered, nested list of records shaped like
``{label, slug?, items?, collapsed?}``. Exactly one of ``slug`` (a leaf that
links to a document) or ``items`` (a group of further entries) must be set.
:func:`build_navigation` validates that shape and returns a
:class:`NavigationTree` of :class:`Leaf` and :class:`Group` nodes in declared
order; the order is meaningful because it drives the rendered sidebar.

Shape errors raise :class:`~hosttale_site.errors.SpecShapeError` with the
node's index chain. Empty groups are legal but questionable, so they are
recorded as :class:`NavigationWarning` entries and logged instead.

Examples
--------
>>> tree = build_navigation(
...     [{"label": "Guides", "items": [{"label": "Start", "slug": "guides/start"}]}]
... )
>>> [(path, leaf.slug) for path, leaf in tree.leaves()]
[((0, 0), 'guides/start')]
>>> build_navigation([{"label": "Broken"}])
Traceback (most recent call last):
...
hosttale_site.errors.SpecShapeError: sidebar[0]: node sets neither 'slug' nor 'items'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_COLLECTION
from .content.slugs import normalize_slug, route_path
from .errors import SpecShapeError, format_index_chain

LOGGER = logging.getLogger(__name__)

IndexChain: typ.TypeAlias = tuple[int, ...]


@dc.dataclass(frozen=True, slots=True)
class Leaf:
    """Clickable sidebar entry pointing at a document."""

    label: str
    slug: str
    collection: str = DEFAULT_COLLECTION

    @property
    def href(self) -> str:
        """Return the canonical route path of the referenced document."""
        return route_path(self.slug)


@dc.dataclass(frozen=True, slots=True)
class Group:
    """Non-clickable sidebar container holding further entries."""

    label: str
    children: tuple[NavigationNode, ...] = ()
    collapsed: bool = False


NavigationNode: typ.TypeAlias = Leaf | Group


@dc.dataclass(frozen=True, slots=True)
class NavigationWarning:
    """Non-fatal authoring issue found while compiling the sidebar."""

    path: IndexChain
    message: str

    def __str__(self) -> str:
        return f"{format_index_chain(self.path)}: {self.message}"


@dc.dataclass(frozen=True, slots=True)
class NavigationTree:
    """Compiled sidebar: top-level nodes plus any authoring warnings."""

    nodes: tuple[NavigationNode, ...] = ()
    warnings: tuple[NavigationWarning, ...] = ()

    def leaves(self) -> cabc.Iterator[tuple[IndexChain, Leaf]]:
        """Yield ``(index_chain, leaf)`` pairs in declared order."""
        yield from _walk_leaves(self.nodes, ())

    def to_manifest(self) -> list[dict[str, typ.Any]]:
        """Return the sidebar as JSON-friendly records with resolved hrefs."""
        return [_node_manifest(node) for node in self.nodes]


def build_navigation(
    spec: cabc.Sequence[typ.Any], *, collection: str = DEFAULT_COLLECTION
) -> NavigationTree:
    """Validate ``spec`` and compile it into a NavigationTree.

    Parameters
    ----------
    spec : Sequence
        Ordered sidebar records as loaded from ``config/site.yaml``.
    collection : str, optional
        Collection that leaves reference unless they set ``collection``.

    Returns
    -------
    NavigationTree
        Nodes in declared order alongside warnings for empty groups.

    Raises
    ------
    SpecShapeError
        If any node is not a mapping, lacks a label, sets both or neither of
        ``slug``/``items``, or carries a value of the wrong type.
    """
    if isinstance(spec, str | bytes) or not isinstance(spec, cabc.Sequence):
        raise SpecShapeError((), "sidebar must be a list of entries")
    warnings: list[NavigationWarning] = []
    nodes = tuple(
        _build_node(payload, (index,), collection, warnings)
        for index, payload in enumerate(spec)
    )
    for warning in warnings:
        LOGGER.warning("sidebar: %s", warning)
    return NavigationTree(nodes=nodes, warnings=tuple(warnings))


def _build_node(
    payload: object,
    path: IndexChain,
    collection: str,
    warnings: list[NavigationWarning],
) -> NavigationNode:
    if not isinstance(payload, cabc.Mapping):
        raise SpecShapeError(path, "expected a mapping with 'label' and 'slug' or 'items'")
    label = payload.get("label")
    if not isinstance(label, str) or not label.strip():
        raise SpecShapeError(path, "missing or empty 'label'")
    label = label.strip()

    has_slug = "slug" in payload
    has_items = "items" in payload
    if has_slug and has_items:
        raise SpecShapeError(path, "node sets both 'slug' and 'items'")
    if not has_slug and not has_items:
        raise SpecShapeError(path, "node sets neither 'slug' nor 'items'")

    if has_slug:
        return _build_leaf(payload, label, path, collection)

    items = payload["items"]
    if isinstance(items, str | bytes) or not isinstance(items, cabc.Sequence):
        raise SpecShapeError(path, "'items' must be a list")
    collapsed = payload.get("collapsed", False)
    if not isinstance(collapsed, bool):
        raise SpecShapeError(path, "'collapsed' must be true or false")
    if not items:
        warnings.append(NavigationWarning(path, f"group '{label}' has no items"))
    children = tuple(
        _build_node(child, (*path, index), collection, warnings)
        for index, child in enumerate(items)
    )
    return Group(label=label, children=children, collapsed=collapsed)


def _build_leaf(
    payload: cabc.Mapping[str, typ.Any], label: str, path: IndexChain, collection: str
) -> Leaf:
    slug = payload["slug"]
    if not isinstance(slug, str) or not normalize_slug(slug):
        raise SpecShapeError(path, "'slug' must be a non-empty string")
    leaf_collection = payload.get("collection", collection)
    if not isinstance(leaf_collection, str) or not leaf_collection.strip():
        raise SpecShapeError(path, "'collection' must be a non-empty string")
    return Leaf(
        label=label, slug=normalize_slug(slug), collection=leaf_collection.strip()
    )


def _walk_leaves(
    nodes: cabc.Sequence[NavigationNode], prefix: IndexChain
) -> cabc.Iterator[tuple[IndexChain, Leaf]]:
    for index, node in enumerate(nodes):
        path = (*prefix, index)
        match node:
            case Leaf():
                yield path, node
            case Group(children=children):
                yield from _walk_leaves(children, path)


def _node_manifest(node: NavigationNode) -> dict[str, typ.Any]:
    match node:
        case Leaf(label=label):
            return {"type": "link", "label": label, "href": node.href}
        case Group(label=label, children=children, collapsed=collapsed):
            return {
                "type": "group",
                "label": label,
                "collapsed": collapsed,
                "entries": [_node_manifest(child) for child in children],
            }
    raise TypeError(node)  # pragma: no cover - exhaustive match


__all__ = [
    "Group",
    "Leaf",
    "NavigationNode",
    "NavigationTree",
    "NavigationWarning",
    "build_navigation",
]
