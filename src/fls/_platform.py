"""Host lookups used by the listing: owner names and the working directory.

User and group names come from the POSIX password and group databases;
hosts without them report no name and callers show the numeric id.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

_WIN: bool = sys.platform == "win32"


def user_name(uid: int) -> str | None:
    """Return the login name for *uid*, or None if it cannot be resolved."""
    if _WIN:  # pragma: no cover
        return None
    import pwd

    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return None


def group_name(gid: int) -> str | None:
    """Return the group name for *gid*, or None if it cannot be resolved."""
    if _WIN:  # pragma: no cover
        return None
    import grp

    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return None


def working_dir() -> Path:
    """Return the process working directory, or ``/`` if it has been removed."""
    try:
        return Path(os.getcwd())
    except OSError:
        return Path("/")
