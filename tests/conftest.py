"""Shared fixtures for building throwaway content trees and site configs.

The fixtures write real ``.md`` files beneath ``tmp_path`` so tests exercise
the same filesystem discovery the build uses. ``write_doc`` renders a
frontmatter block from keyword arguments; pass ``None`` for ``title`` or
``description`` to omit the field entirely.
"""

from __future__ import annotations

import typing as typ

import pytest

from hosttale_site.config import SiteConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

BASE_URL = "https://wiki.example.test"


def render_document(
    *,
    title: str | None = "Title",
    description: str | None = "Description",
    extra: str = "",
    body: str = "Body text.\n",
) -> str:
    """Return a content file with a YAML frontmatter block."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if description is not None:
        lines.append(f"description: {description}")
    if extra:
        lines.append(extra.strip("\n"))
    lines.extend(["---", "", body])
    return "\n".join(lines)


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Return an empty ``src/content/docs`` directory under ``tmp_path``."""
    root = tmp_path / "src" / "content" / "docs"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_doc(docs_root: Path) -> cabc.Callable[..., Path]:
    """Return a helper that writes a document relative to ``docs_root``."""

    def _write(relative: str, **kwargs: typ.Any) -> Path:
        path = docs_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_document(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_config(
    docs_root: Path, tmp_path: Path
) -> cabc.Callable[..., SiteConfig]:
    """Return a factory for SiteConfig objects rooted at ``docs_root``."""

    def _make(
        sidebar: cabc.Sequence[typ.Any] = (), **overrides: typ.Any
    ) -> SiteConfig:
        params: dict[str, typ.Any] = {
            "title": "HostTale",
            "base_url": BASE_URL,
            "content_root": docs_root,
            "output_dir": tmp_path / "dist",
            "sidebar": tuple(sidebar),
        }
        params.update(overrides)
        return SiteConfig(**params)

    return _make
