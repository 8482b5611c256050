"""Cross-check the compiled sidebar against the content store.

This is the only stage that batches failures: every sidebar leaf is looked up
in the store and every miss is collected as a
:class:`~hosttale_site.errors.BrokenLinkError`, so authors can fix a large
sidebar in one pass. Documents that no leaf references are orphans; they stay
routable and are reported at warning level only.

Example
-------
>>> from hosttale_site.content import ContentStore
>>> from hosttale_site.navigation import build_navigation
>>> tree = build_navigation([{"label": "Gone", "slug": "missing"}])
>>> report = check_integrity(tree, ContentStore())
>>> [error.slug for error in report.errors]
['missing']
"""

from __future__ import annotations

import collections
import dataclasses as dc
import logging
import typing as typ

from .errors import BrokenLinkError, IntegrityError, format_index_chain

if typ.TYPE_CHECKING:
    from .content import ContentStore, DocumentEntry
    from .navigation import NavigationTree

LOGGER = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class IntegrityReport:
    """Outcome of an integrity check.

    Attributes
    ----------
    errors : tuple[BrokenLinkError, ...]
        Every sidebar leaf whose document is missing, in sidebar order.
    orphans : tuple[DocumentEntry, ...]
        Documents not referenced by any leaf, ordered by slug.
    duplicates : tuple[str, ...]
        Human-readable notes for slugs listed more than once.
    """

    errors: tuple[BrokenLinkError, ...] = ()
    orphans: tuple[DocumentEntry, ...] = ()
    duplicates: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when no broken links were found."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise IntegrityError carrying every broken link, if any."""
        if self.errors:
            raise IntegrityError(self.errors)


def check_integrity(tree: NavigationTree, store: ContentStore) -> IntegrityReport:
    """Validate every sidebar leaf against ``store``.

    Parameters
    ----------
    tree : NavigationTree
        Compiled sidebar.
    store : ContentStore
        Fully loaded content store.

    Returns
    -------
    IntegrityReport
        Broken links (fatal once raised), orphans and duplicate listings.
    """
    errors: list[BrokenLinkError] = []
    referenced: set[tuple[str, str]] = set()
    listings: collections.defaultdict[tuple[str, str], list[tuple[int, ...]]] = (
        collections.defaultdict(list)
    )
    for path, leaf in tree.leaves():
        listings[(leaf.collection, leaf.slug)].append(path)
        entry = store.find(leaf.collection, leaf.slug)
        if entry is None:
            errors.append(
                BrokenLinkError(
                    leaf.label, leaf.slug, collection=leaf.collection, path=path
                )
            )
            continue
        referenced.add(entry.key)

    duplicates = tuple(
        f"'{slug}' is listed at "
        + ", ".join(format_index_chain(path) for path in paths)
        for (_collection, slug), paths in listings.items()
        if len(paths) > 1
    )
    orphans = tuple(entry for entry in store.entries() if entry.key not in referenced)

    for note in duplicates:
        LOGGER.warning("sidebar: %s", note)
    for entry in orphans:
        LOGGER.warning(
            "document '%s' (%s) is not listed in the sidebar",
            entry.slug,
            entry.source_path,
        )
    return IntegrityReport(
        errors=tuple(errors), orphans=orphans, duplicates=duplicates
    )


__all__ = ["IntegrityReport", "check_integrity"]
