from __future__ import annotations

import logging
import sys

import click

from fls import __version__
from fls.config import ListingConfig
from fls.decorate import PALETTES
from fls.listing import ListingError, list_directory


def _configure_logging(verbose: bool) -> None:
    """Send ``fls`` debug records to stderr when --verbose is given."""
    if not verbose:
        return
    logger = logging.getLogger("fls")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fls")
@click.argument("path", default=".")
@click.option("-a", "--all", "show_hidden", is_flag=True, help="Show hidden files.")
@click.option("-l", "--long", "long_format", is_flag=True, help="Detailed table format.")
@click.option(
    "-i",
    "--interactive",
    is_flag=True,
    help="Clickable file names (terminal with OSC 8 support).",
)
@click.option("-t", "--tree", is_flag=True, help="Tree view (overrides --long).")
@click.option(
    "-d",
    "--depth",
    "tree_depth",
    type=click.IntRange(min=1),
    default=None,
    envvar="FLS_TREE_DEPTH",
    show_envvar=True,
    help="Maximum tree depth.",
)
@click.option("--json", "use_json", is_flag=True, help="JSON output.")
@click.option(
    "--colors",
    "color_scheme",
    type=click.Choice(sorted(PALETTES)),
    default="default",
    envvar="FLS_COLORS",
    show_default=True,
    show_envvar=True,
    help="Color scheme for file names.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable ANSI styling (default: only on a terminal).",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def main(
    path: str,
    show_hidden: bool,
    long_format: bool,
    interactive: bool,
    tree: bool,
    tree_depth: int | None,
    use_json: bool,
    color_scheme: str,
    color: bool | None,
    verbose: bool,
) -> None:
    """fls: ls with readable permissions, tables and trees."""
    _configure_logging(verbose)
    config = ListingConfig(
        path=path,
        show_hidden=show_hidden,
        long_format=long_format,
        interactive=interactive,
        tree=tree,
        tree_depth=tree_depth,
        json_output=use_json,
        color_scheme=color_scheme,
    )
    try:
        lines = list_directory(config)
    except ListingError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None

    for line in lines:
        click.echo(line, color=color)


if __name__ == "__main__":
    main()
