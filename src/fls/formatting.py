"""Human-readable field formatting: sizes, timestamps and ownership."""

from __future__ import annotations

from datetime import datetime

from fls import _platform

_KIB = 1024
_UNITS = "KMG"

TIME_FORMAT = "%b %d %H:%M"


def format_size(size: int) -> str:
    """Format a byte count with 1024-based units and one decimal place.

    A value that would round up to ``1024.0`` of one unit is shown in the
    next unit instead, so ``1048575`` reads ``1.0M`` rather than ``1024.0K``.

    >>> format_size(1023), format_size(1024), format_size(1048576)
    ('1023B', '1.0K', '1.0M')
    """
    if size < _KIB:
        return f"{size}B"
    value = size / _KIB
    for unit in _UNITS[:-1]:
        if float(f"{value:.1f}") < _KIB:
            return f"{value:.1f}{unit}"
        value /= _KIB
    return f"{value:.1f}{_UNITS[-1]}"


def format_timestamp(ts: float | None) -> str:
    """Render a modification time as ``Mon DD HH:MM`` in local time."""
    if ts is None:
        return "Unknown"
    try:
        return datetime.fromtimestamp(ts).strftime(TIME_FORMAT)
    except (OverflowError, OSError, ValueError):
        return "Unknown"


def resolve_owner(uid: int | None, gid: int | None) -> str:
    """Return ``user/group``, falling back to numeric ids per half."""
    return f"{owner_name(uid)}/{group_name(gid)}"


def owner_name(uid: int | None) -> str:
    if uid is None:
        return "unknown"
    return _platform.user_name(uid) or str(uid)


def group_name(gid: int | None) -> str:
    if gid is None:
        return "unknown"
    return _platform.group_name(gid) or str(gid)


def display_text(text: str) -> str:
    """Printable form of a file name or path.

    Undecodable bytes (surrogate escapes from ``os.scandir``) become U+FFFD
    and control characters become ``?``, so a name always occupies one line.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    lossy = raw.decode("utf-8", "replace")
    return "".join("?" if ord(c) < 32 or ord(c) == 127 else c for c in lossy)
