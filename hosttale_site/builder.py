"""Staged build pipeline: load, compile, cross-check, emit.

:class:`SiteBuilder` runs the stages in order and stops at the first stage
that fails. Content loading and sidebar compilation are independent; the
integrity check needs both complete, and only a clean check lets routes,
head tags and the sitemap be emitted. Every rebuild constructs the whole model
from scratch.

Example
-------
>>> from pathlib import Path
>>> from hosttale_site.config import load_site_config
>>> from hosttale_site.builder import SiteBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('dist/sitemap.xml'), PosixPath('dist/robots.txt'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import shutil
import typing as typ

import msgspec.json as msgspec_json

from ._constants import (
    HEAD_FRAGMENT_DIR,
    HEAD_FRAGMENT_TEMPLATE,
    NAVIGATION_MANIFEST,
    ROBOTS_FILENAME,
    ROUTES_MANIFEST,
    SITEMAP_FILENAME,
)
from .content import load_all
from .emitter import ArtifactRenderer, build_routes, compose_head
from .integrity import check_integrity
from .navigation import build_navigation

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig
    from .content import ContentStore
    from .emitter import Route
    from .integrity import IntegrityReport
    from .metadata import HeadTag
    from .navigation import NavigationTree

LOGGER = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class SiteModel:
    """Validated in-memory model of one build."""

    store: ContentStore
    navigation: NavigationTree
    report: IntegrityReport
    routes: tuple[Route, ...]
    heads: dict[str, tuple[HeadTag, ...]]
    built_at: dt.datetime

    def route_manifest(self) -> list[dict[str, typ.Any]]:
        """Return routes with their sitemap metadata and head tags."""
        manifest: list[dict[str, typ.Any]] = []
        for route in self.routes:
            document = self.store.find(route.collection, route.source_slug)
            manifest.append(
                {
                    "path": route.path,
                    "source_slug": route.source_slug,
                    "collection": route.collection,
                    "location": route.location,
                    "title": document.title if document else None,
                    "lastmod": route.lastmod,
                    "changefreq": route.change_frequency,
                    "priority": route.priority,
                    "head": [tag.to_dict() for tag in self.heads[route.path]],
                }
            )
        return manifest


class SiteBuilder:
    """Validate the wiki's content and sidebar and write build artifacts."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        build_time: dt.datetime | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Read-only site configuration shared by every stage.
        templates_dir : Path, optional
            Override for the Jinja template directory.
        build_time : datetime, optional
            Timestamp used as ``lastmod`` fallback; defaults to now (UTC) at
            the start of each build.
        """
        self.config = config
        self.renderer = ArtifactRenderer(templates_dir=templates_dir)
        self.build_time = build_time

    def validate(self) -> SiteModel:
        """Run every stage in memory and return the validated model.

        Raises
        ------
        SiteBuildError
            ``ParseError``, ``SchemaError`` or ``DuplicateSlugError`` from the
            content store, ``SpecShapeError`` from the sidebar, or
            ``IntegrityError`` listing every broken sidebar link.
        """
        built_at = self.build_time or dt.datetime.now(dt.UTC)
        store = load_all(self.config.content_root, self.config.collection)
        navigation = build_navigation(
            self.config.sidebar, collection=self.config.collection
        )
        report = check_integrity(navigation, store)
        report.raise_for_errors()

        routes = tuple(build_routes(store, self.config, build_time=built_at))
        heads: dict[str, tuple[HeadTag, ...]] = {}
        for route in routes:
            document = store.find(route.collection, route.source_slug)
            if document is None:  # pragma: no cover - routes come from the store
                msg = f"route {route.path} has no source document"
                raise RuntimeError(msg)
            heads[route.path] = tuple(compose_head(route, document, self.config))
        LOGGER.info(
            "validated %d documents, %d routes, %d orphan(s)",
            len(store),
            len(routes),
            len(report.orphans),
        )
        return SiteModel(
            store=store,
            navigation=navigation,
            report=report,
            routes=routes,
            heads=heads,
            built_at=built_at,
        )

    def run(self, output_dir: Path | None = None) -> list[Path]:
        """Validate the site and write every artifact.

        Parameters
        ----------
        output_dir : Path, optional
            Override for ``config.output_dir``.

        Returns
        -------
        list[Path]
            Paths of the written artifacts: sitemap, robots file, route and
            navigation manifests, then one head fragment per route.
        """
        model = self.validate()
        return self.write(model, output_dir or self.config.output_dir)

    def write(self, model: SiteModel, output_dir: Path) -> list[Path]:
        """Write the artifacts of a validated ``model`` into ``output_dir``.

        Head fragments from a previous run are removed first so the fragment
        set always matches the current routes.
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        fragments_dir = output_dir / HEAD_FRAGMENT_DIR
        if fragments_dir.exists():
            LOGGER.debug("removing stale head fragments in %s", fragments_dir)
            shutil.rmtree(fragments_dir)
        written = [
            _write(output_dir / SITEMAP_FILENAME, self.renderer.render_sitemap(model.routes)),
            _write(output_dir / ROBOTS_FILENAME, self.renderer.render_robots(self.config)),
            _write(output_dir / ROUTES_MANIFEST, _encode_json(model.route_manifest())),
            _write(
                output_dir / NAVIGATION_MANIFEST,
                _encode_json(model.navigation.to_manifest()),
            ),
        ]
        for route in model.routes:
            fragment = HEAD_FRAGMENT_TEMPLATE.format(name=route.fragment_name)
            html = self.renderer.render_head(model.heads[route.path])
            written.append(_write(output_dir / fragment, html))
        return written


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _encode_json(payload: object) -> str:
    return msgspec_json.format(msgspec_json.encode(payload), indent=2).decode("utf-8") + "\n"


__all__ = ["SiteBuilder", "SiteModel"]
