"""Metadata classifier: file kind, permission triads and octal mode."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum

EXEC_BITS = 0o111

_TRIAD_BITS: tuple[tuple[int, str], ...] = ((4, "Read"), (2, "Write"), (1, "Execute"))


class Kind(Enum):
    DIRECTORY = "Directory"
    SYMLINK = "Symlink"
    EXECUTABLE = "Executable"
    FILE = "File"


@dataclass(frozen=True)
class PermissionProfile:
    """User/group/other triads plus the octal form, all from one mode value."""

    user: tuple[str, ...]
    group: tuple[str, ...]
    other: tuple[str, ...]
    octal: str

    @staticmethod
    def render_triad(triad: tuple[str, ...]) -> str:
        return ", ".join(triad) if triad else "None"

    def rendered(self) -> tuple[str, str, str]:
        return (
            self.render_triad(self.user),
            self.render_triad(self.group),
            self.render_triad(self.other),
        )


def is_executable(mode: int) -> bool:
    return bool(mode & EXEC_BITS)


def classify(mode: int) -> Kind:
    """Resolve a file kind from a raw ``st_mode``.

    Directory wins over symlink, symlink over the executable bits.
    """
    if stat.S_ISDIR(mode):
        return Kind.DIRECTORY
    if stat.S_ISLNK(mode):
        return Kind.SYMLINK
    if is_executable(mode):
        return Kind.EXECUTABLE
    return Kind.FILE


def triad(bits: int) -> tuple[str, ...]:
    """Decode the low three bits of *bits* into Read/Write/Execute names."""
    return tuple(name for mask, name in _TRIAD_BITS if bits & mask)


def octal(mode: int) -> str:
    """Low 12 mode bits as base-8 text, zero-padded to three digits."""
    return format(mode & 0o7777, "03o")


def permissions(mode: int) -> PermissionProfile:
    return PermissionProfile(
        user=triad(mode >> 6),
        group=triad(mode >> 3),
        other=triad(mode),
        octal=octal(mode),
    )
