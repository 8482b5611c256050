"""Cyclopts CLI entrypoint for validating the wiki and emitting its artifacts.

The ``site`` console script defined here loads ``config/site.yaml``, checks
every content file and sidebar entry, and writes the sitemap, robots file,
route/navigation manifests and per-page head fragments. ``site check`` runs
the same validation without writing anything, and ``site dev`` keeps
rebuilding whenever content or configuration changes. Any validation failure
is printed to standard error and exits with status 1.

Examples
--------
Validate and build with the default configuration:

>>> from hosttale_site.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from hosttale_site.cli import app
>>> app(["build", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import SiteBuilder
from .config import SiteConfigError, load_site_config
from .errors import SiteBuildError
from .watch import watch

DEFAULT_CONFIG = Path("config/site.yaml")
_FAILURES = (SiteBuildError, SiteConfigError, FileNotFoundError)

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: Exception) -> typ.NoReturn:
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


@app.command(help="Validate content and sidebar, then write build artifacts.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Validate the site and write its artifacts.

    Parameters
    ----------
    config : Path, optional
        Path to ``site.yaml`` (overridable via ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Log at DEBUG instead of INFO.

    Raises
    ------
    SystemExit
        With status 1 when configuration, content or sidebar validation fails.
    """
    _setup_logging(verbose)
    try:
        site_config = load_site_config(config)
        written = SiteBuilder(site_config).run(output_dir)
    except _FAILURES as exc:
        _fail(exc)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate content and sidebar without writing artifacts.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Run every validation stage and print a one-line summary."""
    _setup_logging(verbose)
    try:
        site_config = load_site_config(config)
        model = SiteBuilder(site_config).validate()
    except _FAILURES as exc:
        _fail(exc)
    print(
        f"ok: {len(model.store)} documents, {len(model.routes)} routes, "
        f"{len(model.report.orphans)} unlisted, "
        f"{len(model.navigation.warnings)} sidebar warning(s)"
    )


@app.command(help="Rebuild whenever content or configuration changes.")
def dev(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    interval: typ.Annotated[
        float, Parameter(help="Seconds between change polls")
    ] = 0.5,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build once, then rebuild from scratch on every change until interrupted."""
    _setup_logging(verbose)
    watched: list[Path] = [config]

    def _rebuild() -> None:
        try:
            site_config = load_site_config(config)
            watched[:] = [config, site_config.content_root]
            written = SiteBuilder(site_config).run(output_dir)
        except _FAILURES as exc:
            print(f"error: {exc}", file=sys.stderr)
            return
        print(f"rebuilt {len(written)} artifact(s)")

    try:
        watch(lambda: watched, _rebuild, interval=interval)
    except KeyboardInterrupt:  # pragma: no cover - interactive exit
        return


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
