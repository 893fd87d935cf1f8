"""Tree renderer: depth-first directory walk with connector glyphs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from fls.decorate import decorate_name, style_root
from fls.entry import Entry, read_entries, visible
from fls.formatting import display_text

log = logging.getLogger(__name__)

BRANCH = "├── "
LAST = "└── "
VERTICAL = "│   "
SPACE = "    "

Reader = Callable[[Path], list[Entry]]


def render_tree(
    root_label: str,
    children: list[Entry],
    *,
    depth_limit: int,
    show_hidden: bool = False,
    decorate: Callable[[Entry], str] = decorate_name,
    reader: Reader = read_entries,
) -> Iterator[str]:
    """Yield the styled root label followed by its subtree, line by line.

    Args:
        root_label: Text printed on the first line.
        children: Unfiltered entries of the root directory.
        depth_limit: Number of levels to print below the root (>= 1).
        show_hidden: Keep dot-files.
        decorate: Produces the display form of an entry name.
        reader: Reads a subdirectory into entries; OSError omits the subtree.
    """
    yield style_root(display_text(root_label))
    yield from _walk(
        visible(children, show_hidden=show_hidden),
        "",
        0,
        depth_limit=depth_limit,
        show_hidden=show_hidden,
        decorate=decorate,
        reader=reader,
    )


def _walk(
    entries: list[Entry],
    prefix: str,
    depth: int,
    *,
    depth_limit: int,
    show_hidden: bool,
    decorate: Callable[[Entry], str],
    reader: Reader,
) -> Iterator[str]:
    if depth >= depth_limit:
        return
    for i, child in enumerate(entries):
        is_last = i == len(entries) - 1
        connector = LAST if is_last else BRANCH
        yield prefix + connector + decorate(child)

        if not child.is_dir or depth + 1 >= depth_limit:
            continue
        try:
            sub = reader(child.path)
        except OSError as exc:
            log.debug("skipping unreadable directory %s: %s", child.path, exc)
            continue
        yield from _walk(
            visible(sub, show_hidden=show_hidden),
            prefix + (SPACE if is_last else VERTICAL),
            depth + 1,
            depth_limit=depth_limit,
            show_hidden=show_hidden,
            decorate=decorate,
            reader=reader,
        )
