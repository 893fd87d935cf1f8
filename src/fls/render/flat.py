"""Flat renderer: one decorated name per line."""

from __future__ import annotations

from fls.decorate import DEFAULT_PALETTE, Palette, decorate_name
from fls.entry import Entry


def render_flat(
    entries: list[Entry],
    *,
    interactive: bool = False,
    palette: Palette = DEFAULT_PALETTE,
) -> list[str]:
    """Render entries in the order given, one per line."""
    return [decorate_name(e, interactive=interactive, palette=palette) for e in entries]
