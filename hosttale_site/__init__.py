"""Structural-integrity tooling for the HostTale wiki.

This package validates the wiki's content collection and sidebar against
each other and emits the sitemap, route manifest and SEO head fragments used
by the static site build. It exposes the CLI entry points used by
``uv run site``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from hosttale_site import main
>>> main()  # doctest: +SKIP
>>> from hosttale_site import app
>>> app.name  # doctest: +SKIP
('site',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
