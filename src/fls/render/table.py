"""Table renderer: bordered grid of classified fields.

Layout and decoration are separate passes. The grid is laid out from plain
text only, so column widths follow visible width; colored names, hyperlinks
and colored sizes are then substituted into the finished text cell by cell.
Escape sequences never reach the width computation.
"""

from __future__ import annotations

import io
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from fls.decorate import DEFAULT_PALETTE, Palette, colorize_size, decorate_name
from fls.entry import Entry
from fls.formatting import format_size, format_timestamp, resolve_owner

BORDER = "│"

COLUMNS: tuple[str, ...] = (
    "Name",
    "Type",
    "User Permission",
    "Group Permission",
    "Other Permission",
    "Octal",
    "Owner",
    "Size",
    "Modified",
)

RenderRow = dict[str, str]


@dataclass(frozen=True)
class DecoratedCells:
    """Plain and decorated forms of one entry's Name and Size cells."""

    name: str
    decorated_name: str
    size: str
    decorated_size: str


# Console width only needs to exceed any realistic grid; rows never wrap.
_CONSOLE_WIDTH = 100_000


def build_row(entry: Entry) -> RenderRow:
    """Plain-text fields for one entry, keyed by column name."""
    user, group, other = entry.profile.rendered()
    return {
        "Name": entry.display_name,
        "Type": entry.kind.value,
        "User Permission": user,
        "Group Permission": group,
        "Other Permission": other,
        "Octal": entry.profile.octal,
        "Owner": resolve_owner(entry.uid, entry.gid),
        "Size": format_size(entry.size),
        "Modified": format_timestamp(entry.modified_at),
    }


def layout_grid(rows: list[RenderRow]) -> str:
    """Lay rows out as an undecorated box-drawing grid."""
    table = Table(box=box.SQUARE, show_lines=True, highlight=False)
    for col in COLUMNS:
        table.add_column(col, no_wrap=True, justify="right" if col == "Size" else "left")
    for row in rows:
        table.add_row(*(Text(row[col]) for col in COLUMNS))

    buf = io.StringIO()
    console = Console(
        file=buf,
        width=_CONSOLE_WIDTH,
        color_system=None,
        no_color=True,
        force_terminal=False,
        highlight=False,
        legacy_windows=False,
    )
    console.print(table)
    return buf.getvalue().rstrip("\n")


def _is_data_line(line: str) -> bool:
    return line.startswith(BORDER)


def _replace_name(line: str, plain: str, decorated: str) -> str | None:
    """Substitute the Name cell if it holds exactly *plain*, else None."""
    prefix = f"{BORDER} {plain} "
    if not line.startswith(prefix):
        return None
    rest = line[len(prefix) :]
    if not rest.lstrip(" ").startswith(BORDER):
        return None
    return f"{BORDER} {decorated} " + rest


def _replace_size(line: str, plain: str, decorated: str) -> str:
    """Substitute the Size cell (second from the right) if it holds *plain*."""
    parts = line.rsplit(BORDER, 3)
    if len(parts) != 4 or parts[1].strip() != plain:
        return line
    parts[1] = parts[1].replace(f" {plain} ", f" {decorated} ", 1)
    return BORDER.join(parts)


def decorate_grid(grid: str, cells: list[DecoratedCells]) -> str:
    """Substitute decorated names and sizes into a rendered grid.

    Names are matched only as a whole Name cell and each data line is
    claimed by at most one entry, longest plain name first. The size is
    then colored on the line its entry claimed.
    """
    lines = grid.split("\n")
    # line 0 is the top border, line 1 the header row
    data_idx = [i for i, line in enumerate(lines) if i > 1 and _is_data_line(line)]
    claimed: set[int] = set()

    for cell in sorted(cells, key=lambda c: len(c.name), reverse=True):
        for i in data_idx:
            if i in claimed:
                continue
            replaced = _replace_name(lines[i], cell.name, cell.decorated_name)
            if replaced is not None:
                lines[i] = _replace_size(replaced, cell.size, cell.decorated_size)
                claimed.add(i)
                break

    return "\n".join(lines)


def render_table(
    entries: list[Entry],
    *,
    interactive: bool = False,
    palette: Palette = DEFAULT_PALETTE,
) -> list[str]:
    """Render entries as a decorated grid; no entries yields no lines."""
    if not entries:
        return []
    rows = [build_row(e) for e in entries]
    grid = layout_grid(rows)
    cells = [
        DecoratedCells(
            name=row["Name"],
            decorated_name=decorate_name(entry, interactive=interactive, palette=palette),
            size=row["Size"],
            decorated_size=colorize_size(row["Size"], entry.size),
        )
        for entry, row in zip(entries, rows)
    ]
    return decorate_grid(grid, cells).split("\n")
