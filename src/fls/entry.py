"""Entry snapshots and the directory reader that produces them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from fls.classify import Kind, PermissionProfile, classify, permissions
from fls.formatting import display_text

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One filesystem object, captured once per listing pass.

    Metadata is taken without following symlinks so a link is reported as
    a link rather than as its target.
    """

    name: str
    path: Path
    kind: Kind = Kind.FILE
    mode: int = 0
    size: int = 0
    modified_at: float | None = None
    uid: int | None = None
    gid: int | None = None

    @property
    def hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def display_name(self) -> str:
        return display_text(self.name)

    @property
    def is_dir(self) -> bool:
        return self.kind is Kind.DIRECTORY

    @property
    def profile(self) -> PermissionProfile:
        return permissions(self.mode)

    @classmethod
    def from_stat(cls, name: str, path: Path, st: os.stat_result) -> Entry:
        return cls(
            name=name,
            path=path,
            kind=classify(st.st_mode),
            mode=st.st_mode,
            size=max(st.st_size, 0),
            modified_at=st.st_mtime,
            uid=st.st_uid,
            gid=st.st_gid,
        )


def entry_from_dirent(dirent: os.DirEntry[str], parent: Path) -> Entry:
    """Snapshot a scandir entry; unreadable metadata degrades to defaults."""
    path = parent / dirent.name
    try:
        st = dirent.stat(follow_symlinks=False)
    except OSError as exc:
        log.debug("metadata unavailable for %s: %s", path, exc)
        return Entry(name=dirent.name, path=path)
    return Entry.from_stat(dirent.name, path, st)


def read_entries(directory: str | Path) -> list[Entry]:
    """Read one directory into an unordered list of entries.

    Raises:
        OSError: The directory itself cannot be opened.
    """
    parent = Path(directory)
    with os.scandir(parent) as it:
        return [entry_from_dirent(d, parent) for d in it]


def visible(entries: list[Entry], *, show_hidden: bool) -> list[Entry]:
    """Apply the hidden-file policy and sort by name, byte-wise."""
    kept = [e for e in entries if show_hidden or not e.hidden]
    return sorted(kept, key=lambda e: os.fsencode(e.name))
