"""Polling rebuild loop used by ``site dev``.

The loop snapshots modification times of the configuration file and every
content file, and whenever the snapshot changes it discards the previous
model and rebuilds from scratch. Validation failures are reported and the
loop keeps watching, so authors can fix a page without restarting.
"""

from __future__ import annotations

import logging
import time
import typing as typ

from ._constants import CONTENT_EXTENSIONS

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

Snapshot: typ.TypeAlias = dict[str, int]


def snapshot(paths: cabc.Iterable[Path]) -> Snapshot:
    """Return ``{path: mtime_ns}`` for the watched files under ``paths``.

    Directories are scanned recursively for content files; plain files are
    recorded as-is. Missing paths are skipped.
    """
    state: Snapshot = {}
    for root in paths:
        if root.is_dir():
            for path in root.rglob("*"):
                if path.is_file() and path.suffix.lower() in CONTENT_EXTENSIONS:
                    state[str(path)] = path.stat().st_mtime_ns
        elif root.is_file():
            state[str(root)] = root.stat().st_mtime_ns
    return state


def watch(
    paths: cabc.Callable[[], cabc.Sequence[Path]],
    rebuild: cabc.Callable[[], None],
    *,
    interval: float = 0.5,
    max_cycles: int | None = None,
    sleep: cabc.Callable[[float], None] = time.sleep,
) -> int:
    """Call ``rebuild`` once, then again whenever a watched file changes.

    Parameters
    ----------
    paths : Callable[[], Sequence[Path]]
        Returns the paths to watch; re-evaluated after each rebuild because a
        configuration change can move the content root.
    rebuild : Callable[[], None]
        Performs a full build. Exceptions propagate to the caller.
    interval : float, optional
        Seconds between polls.
    max_cycles : int, optional
        Stop after this many polls; ``None`` watches until interrupted.
    sleep : Callable[[float], None], optional
        Sleep function, replaceable in tests.

    Returns
    -------
    int
        Number of rebuilds performed, including the initial one.
    """
    rebuild()
    builds = 1
    previous = snapshot(paths())
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        sleep(interval)
        cycles += 1
        current = snapshot(paths())
        if current == previous:
            continue
        LOGGER.info("change detected, rebuilding")
        rebuild()
        builds += 1
        previous = snapshot(paths())
    return builds


__all__ = ["Snapshot", "snapshot", "watch"]
