"""Tests for name/size colorization and terminal hyperlinks."""

from __future__ import annotations

import stat
from pathlib import Path

import click
import pytest
from conftest import make_entry, strip_escapes

from fls import _platform
from fls.decorate import (
    DEFAULT_PALETTE,
    PALETTES,
    ColorClass,
    color_token,
    colorize_name,
    colorize_size,
    decorate_name,
    file_url,
    make_link,
)

_MIB = 1024**2


class TestColorToken:
    def test_hidden_beats_directory(self) -> None:
        entry = make_entry(".git", mode=stat.S_IFDIR | 0o755)
        assert color_token(entry) is ColorClass.HIDDEN

    def test_hidden_beats_executable(self) -> None:
        entry = make_entry(".run", mode=stat.S_IFREG | 0o755)
        assert color_token(entry) is ColorClass.HIDDEN

    def test_directory(self) -> None:
        assert color_token(make_entry("src", mode=stat.S_IFDIR | 0o755)) is ColorClass.DIRECTORY

    def test_executable(self) -> None:
        assert color_token(make_entry("run.sh", mode=stat.S_IFREG | 0o755)) is ColorClass.EXECUTABLE

    def test_symlink_colored_by_its_own_exec_bits(self) -> None:
        assert color_token(make_entry("link", mode=stat.S_IFLNK | 0o777)) is ColorClass.EXECUTABLE

    def test_symlink_without_exec_bits_is_plain(self) -> None:
        assert color_token(make_entry("link", mode=stat.S_IFLNK | 0o644)) is ColorClass.PLAIN

    def test_regular_file_is_plain(self) -> None:
        assert color_token(make_entry("a.txt")) is ColorClass.PLAIN


class TestColorizeName:
    def test_plain_is_unstyled(self) -> None:
        assert colorize_name(make_entry("a.txt")) == "a.txt"

    def test_directory_blue_bold(self) -> None:
        entry = make_entry("sub", mode=stat.S_IFDIR | 0o755)
        assert colorize_name(entry) == click.style("sub", fg="blue", bold=True)

    def test_executable_green_bold(self) -> None:
        entry = make_entry("run", mode=stat.S_IFREG | 0o700)
        assert colorize_name(entry) == click.style("run", fg="green", bold=True)

    def test_hidden_dimmed(self) -> None:
        assert colorize_name(make_entry(".cfg")) == click.style(".cfg", fg="bright_black")

    @pytest.mark.parametrize("scheme", sorted(PALETTES))
    def test_every_palette_covers_every_class(self, scheme: str) -> None:
        assert set(PALETTES[scheme]) == set(ColorClass)

    def test_alternate_palette(self) -> None:
        entry = make_entry("sub", mode=stat.S_IFDIR | 0o755)
        assert colorize_name(entry, PALETTES["monochrome"]) == click.style("sub", bold=True)

    def test_default_palette_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_PALETTE[ColorClass.PLAIN] = {"fg": "red"}  # type: ignore[index]


class TestColorizeSize:
    @pytest.mark.parametrize(
        ("size", "style"),
        [
            (0, {"fg": "green"}),
            (_MIB - 1, {"fg": "green"}),
            (_MIB, {"fg": "yellow"}),
            (100 * _MIB - 1, {"fg": "yellow"}),
            (100 * _MIB, {"fg": "magenta"}),
            (1024 * _MIB - 1, {"fg": "magenta"}),
            (1024 * _MIB, {"fg": "red", "bold": True}),
        ],
    )
    def test_bands(self, size: int, style: dict[str, object]) -> None:
        assert colorize_size("X", size) == click.style("X", **style)


class TestMakeLink:
    def test_osc8_wrapper(self) -> None:
        link = make_link("/tmp/a.txt", "a.txt")
        assert link == "\x1b]8;;file:///tmp/a%2Etxt\x1b\\a.txt\x1b]8;;\x1b\\"
        assert strip_escapes(link) == "a.txt"

    def test_percent_encodes_everything_but_alnum_slash_colon(self) -> None:
        assert file_url("/srv/my file_v1-2.txt") == "file:///srv/my%20file%5Fv1%2D2%2Etxt"

    def test_non_ascii_is_utf8_encoded(self) -> None:
        assert file_url("/srv/café") == "file:///srv/caf%C3%A9"

    def test_relative_path_resolved_against_cwd(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(_platform, "working_dir", lambda: Path("/home/u"))
        assert file_url("docs/x") == "file:///home/u/docs/x"

    def test_decorate_name_interactive_links_colored_name(self) -> None:
        entry = make_entry("sub", mode=stat.S_IFDIR | 0o755, parent=Path("/srv"))
        out = decorate_name(entry, interactive=True)
        assert out.startswith("\x1b]8;;file:///srv/sub\x1b\\")
        assert click.style("sub", fg="blue", bold=True) in out

    def test_decorate_name_non_interactive_has_no_link(self) -> None:
        assert "\x1b]8" not in decorate_name(make_entry("a.txt"))
