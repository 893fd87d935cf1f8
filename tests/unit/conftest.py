"""Shared helpers for unit tests."""

from __future__ import annotations

import re
import stat
from pathlib import Path
from typing import Any

from fls.classify import classify
from fls.entry import Entry

_ESCAPES = re.compile(r"\x1b\]8;;[^\x1b]*\x1b\\|\x1b\[[0-9;]*m")


def strip_escapes(text: str) -> str:
    """Remove SGR color codes and OSC 8 hyperlink wrappers."""
    return _ESCAPES.sub("", text)


def make_entry(
    name: str,
    *,
    mode: int = stat.S_IFREG | 0o644,
    size: int = 0,
    modified_at: float | None = 0.0,
    uid: int | None = 0,
    gid: int | None = 0,
    parent: Path | None = None,
    **kwargs: Any,
) -> Entry:
    """Build an Entry without touching the filesystem."""
    return Entry(
        name=name,
        path=(parent or Path("/srv/data")) / name,
        kind=classify(mode),
        mode=mode,
        size=size,
        modified_at=modified_at,
        uid=uid,
        gid=gid,
        **kwargs,
    )


def make_tree(root: Path, spec: dict[str, Any]) -> None:
    """Create files and directories under *root* from a nested dict.

    String values become file contents; dict values become subdirectories.
    """
    for name, value in spec.items():
        target = root / name
        if isinstance(value, dict):
            target.mkdir()
            make_tree(target, value)
        else:
            target.write_text(str(value))
