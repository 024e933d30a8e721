"""Detection: is a directory inside a jj workspace?

Runs on every prompt redraw in every directory, so it only looks at the
filesystem and never starts jj.
"""
from __future__ import annotations

from pathlib import Path

from jj_prompt.contract import WORKSPACE_MARKER


def find_workspace_root(start: Path) -> Path | None:
    """Walk from ``start`` up to the filesystem root looking for ``.jj``.

    Returns:
        The first directory containing a ``.jj`` directory, or None.
    """
    current = start.absolute()
    for candidate in (current, *current.parents):
        if (candidate / WORKSPACE_MARKER).is_dir():
            return candidate
    return None


def detect(cwd: Path) -> bool:
    """True when the full prompt should be rendered for ``cwd``."""
    return find_workspace_root(cwd) is not None
