"""Color and terminal hyperlink decoration for rendered names and sizes.

Every function here takes already-formatted plain text and returns a
decorated copy; nothing in this module influences layout.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

import click

from fls import _platform
from fls.classify import Kind, is_executable
from fls.entry import Entry

_MIB = 1024**2
_GIB = 1024**3

OSC8 = "\x1b]8;;"
ST = "\x1b\\"

_URL_SAFE = frozenset(b"/:abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


class ColorClass(Enum):
    HIDDEN = "hidden"
    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    PLAIN = "plain"


Palette = Mapping[ColorClass, Mapping[str, Any]]


def _palette(
    hidden: dict[str, Any],
    directory: dict[str, Any],
    executable: dict[str, Any],
    plain: dict[str, Any],
) -> Palette:
    return MappingProxyType(
        {
            ColorClass.HIDDEN: MappingProxyType(hidden),
            ColorClass.DIRECTORY: MappingProxyType(directory),
            ColorClass.EXECUTABLE: MappingProxyType(executable),
            ColorClass.PLAIN: MappingProxyType(plain),
        }
    )


DEFAULT_PALETTE = _palette(
    hidden={"fg": "bright_black"},
    directory={"fg": "blue", "bold": True},
    executable={"fg": "green", "bold": True},
    plain={},
)

PALETTES: Mapping[str, Palette] = MappingProxyType(
    {
        "default": DEFAULT_PALETTE,
        "high-contrast": _palette(
            hidden={"fg": "bright_black"},
            directory={"fg": "bright_blue", "bold": True},
            executable={"fg": "bright_green", "bold": True},
            plain={"fg": "bright_white"},
        ),
        "monochrome": _palette(
            hidden={"dim": True},
            directory={"bold": True},
            executable={"underline": True},
            plain={},
        ),
        # solarized base01 / blue / green / base0
        "solarized": _palette(
            hidden={"fg": (88, 110, 117)},
            directory={"fg": (38, 139, 210), "bold": True},
            executable={"fg": (133, 153, 0), "bold": True},
            plain={"fg": (131, 148, 150)},
        ),
    }
)

ROOT_STYLE: Mapping[str, Any] = MappingProxyType({"fg": "bright_blue", "bold": True})


def _style(text: str, spec: Mapping[str, Any]) -> str:
    # click.style appends a reset even with no attributes; plain stays plain.
    if not spec:
        return text
    return click.style(text, **spec)


def color_token(entry: Entry) -> ColorClass:
    """Hidden beats directory, directory beats executable.

    Executable is any execute bit on the unfollowed mode, so symlinks
    (usually 0777) color as executables.
    """
    if entry.hidden:
        return ColorClass.HIDDEN
    if entry.kind is Kind.DIRECTORY:
        return ColorClass.DIRECTORY
    if is_executable(entry.mode):
        return ColorClass.EXECUTABLE
    return ColorClass.PLAIN


def style_for(token: ColorClass, palette: Palette = DEFAULT_PALETTE) -> Mapping[str, Any]:
    return palette[token]


def colorize_name(entry: Entry, palette: Palette = DEFAULT_PALETTE) -> str:
    return _style(entry.display_name, style_for(color_token(entry), palette))


def colorize_size(size_str: str, size_bytes: int) -> str:
    """Color a formatted size by its byte count.

    Bands are half-open and checked from the largest down:
    >= 1 GiB red+bold, >= 100 MiB magenta, >= 1 MiB yellow, else green.
    """
    if size_bytes >= _GIB:
        return click.style(size_str, fg="red", bold=True)
    if size_bytes >= 100 * _MIB:
        return click.style(size_str, fg="magenta")
    if size_bytes >= _MIB:
        return click.style(size_str, fg="yellow")
    return click.style(size_str, fg="green")


def style_root(text: str) -> str:
    return _style(text, ROOT_STYLE)


def file_url(path: str | Path) -> str:
    """Build a ``file://`` URL for *path*, resolved against the working dir.

    Every byte other than ASCII alphanumerics, ``/`` and ``:`` is
    percent-encoded.
    """
    p = Path(path)
    if not p.is_absolute():
        p = _platform.working_dir() / p
    text = str(p)
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    encoded = "".join(chr(b) if b in _URL_SAFE else f"%{b:02X}" for b in raw)
    return "file://" + encoded


def make_link(path: str | Path, text: str) -> str:
    """Wrap *text* in an OSC 8 terminal hyperlink pointing at *path*."""
    return f"{OSC8}{file_url(path)}{ST}{text}{OSC8}{ST}"


def decorate_name(
    entry: Entry,
    *,
    interactive: bool = False,
    palette: Palette = DEFAULT_PALETTE,
) -> str:
    """Colorized name, wrapped in a hyperlink when *interactive*."""
    colored = colorize_name(entry, palette)
    if interactive:
        return make_link(entry.path, colored)
    return colored
