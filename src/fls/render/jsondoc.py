"""JSON document view of a listing."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fls.entry import Entry, visible
from fls.formatting import display_text, format_size, group_name, owner_name
from fls.render.tree import Reader

log = logging.getLogger(__name__)


def _iso(ts: float | None) -> str | None:
    if ts is None:
        return None
    try:
        return datetime.fromtimestamp(ts).astimezone().isoformat(timespec="seconds")
    except (OverflowError, OSError, ValueError):
        return None


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    profile = entry.profile
    return {
        "name": entry.display_name,
        "path": display_text(str(entry.path)),
        "type": entry.kind.value,
        "size_bytes": entry.size,
        "size_human": format_size(entry.size),
        "permissions": {
            "user": list(profile.user),
            "group": list(profile.group),
            "other": list(profile.other),
        },
        "octal": profile.octal,
        "owner": owner_name(entry.uid),
        "group": group_name(entry.gid),
        "modified": _iso(entry.modified_at),
    }


def render_document(
    entries: list[Entry],
    *,
    show_hidden: bool = False,
    nested_depth: int = 0,
    reader: Reader | None = None,
) -> dict[str, Any]:
    """Build ``{"files": [...]}`` for *entries*.

    With ``nested_depth > 0`` directories gain a ``children`` list read
    through *reader*, down to that many levels below the root.
    """
    return {"files": _files(entries, show_hidden, nested_depth, 1, reader)}


def _files(
    entries: list[Entry],
    show_hidden: bool,
    nested_depth: int,
    depth: int,
    reader: Reader | None,
) -> list[dict[str, Any]]:
    files: list[dict[str, Any]] = []
    for entry in visible(entries, show_hidden=show_hidden):
        item = entry_to_dict(entry)
        if entry.is_dir and reader is not None and depth < nested_depth:
            try:
                sub = reader(entry.path)
            except OSError as exc:
                log.debug("skipping unreadable directory %s: %s", entry.path, exc)
            else:
                item["children"] = _files(sub, show_hidden, nested_depth, depth + 1, reader)
        files.append(item)
    return files
