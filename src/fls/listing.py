"""Listing orchestrator: read the root, filter, sort and dispatch."""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Iterator
from pathlib import Path

from fls.config import ListingConfig, RenderMode
from fls.decorate import PALETTES, decorate_name
from fls.entry import Entry, read_entries, visible
from fls.formatting import display_text
from fls.render import render_document, render_flat, render_table, render_tree
from fls.render.tree import Reader

log = logging.getLogger(__name__)


class ListingError(Exception):
    """The listing root could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{display_text(path)}: {reason}")
        self.path = path
        self.reason = reason


def collect(config: ListingConfig, reader: Reader = read_entries) -> list[Entry]:
    """Read the listing root.

    Raises:
        ListingError: The root is missing, not a directory or unreadable.
    """
    try:
        entries = reader(Path(config.path))
    except OSError as exc:
        raise ListingError(config.path, exc.strerror or str(exc)) from exc
    log.debug("read %d entries from %s", len(entries), config.path)
    return entries


def render(
    config: ListingConfig,
    entries: list[Entry],
    reader: Reader = read_entries,
) -> Iterator[str]:
    """Dispatch *entries* to the renderer selected by *config*."""
    mode = config.mode
    palette = PALETTES[config.color_scheme]
    log.debug("rendering %s as %s", config.path, mode.value)

    if mode is RenderMode.JSON:
        doc = render_document(
            entries,
            show_hidden=config.show_hidden,
            nested_depth=config.depth_limit if config.tree else 0,
            reader=reader,
        )
        return iter([json.dumps(doc, default=str, indent=2)])

    if mode is RenderMode.TREE:
        return render_tree(
            config.path,
            entries,
            depth_limit=config.depth_limit,
            show_hidden=config.show_hidden,
            decorate=functools.partial(
                decorate_name, interactive=config.interactive, palette=palette
            ),
            reader=reader,
        )

    shown = visible(entries, show_hidden=config.show_hidden)
    if mode is RenderMode.TABLE:
        return iter(render_table(shown, interactive=config.interactive, palette=palette))
    return iter(render_flat(shown, interactive=config.interactive, palette=palette))


def list_directory(config: ListingConfig, reader: Reader = read_entries) -> Iterator[str]:
    """Read and render one listing root, returning its output lines.

    The root is read eagerly, so :class:`ListingError` is raised here rather
    than while iterating.
    """
    return render(config, collect(config, reader), reader)
