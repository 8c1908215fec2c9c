"""i3keys CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from i3keys import __version__
from i3keys.errors import SettingsError


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name="i3keys")
@click.argument(
    "config",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings YAML (default: $XDG_CONFIG_HOME/i3keys/config.yml).",
)
@click.option(
    "--mode",
    "modes",
    multiple=True,
    help="Mode to show (repeatable). Overrides show_modes from settings.",
)
@click.option("--all-modes", is_flag=True, help="Show every parsed mode.")
@click.option("--width", default=None, help="Report width in columns, or 'auto'.")
@click.option("--key-column", type=int, default=None, help="Width of the key column.")
@click.option("--color/--no-color", default=None, help="Force colored output on or off.")
@click.option("--json", "output_json", is_flag=True, help="Output the parsed keymap as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
def main(
    config: Path | None,
    *,
    settings_path: Path | None,
    modes: tuple[str, ...],
    all_modes: bool,
    width: str | None,
    key_column: int | None,
    color: bool | None,
    output_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Show the keybindings of an i3 config as a cheat sheet.

    CONFIG defaults to $XDG_CONFIG_HOME/i3/config (or ~/.config/i3/config).
    Comments directly above a binding become its description; otherwise the
    description is inferred from the bound command.
    """
    from i3keys.keymap import CommentFilter, parse_config
    from i3keys.report import format_keymap_json, format_keymap_report, select_modes
    from i3keys.settings import default_i3_config_path, load_settings, parse_width

    _configure_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_settings(settings_path).with_overrides(
            show_modes=modes or None,
            width=parse_width(width) if width is not None else None,
            key_column=key_column,
            color=color,
        )
    except SettingsError as exc:
        click.echo(f"Error: invalid settings: {exc}", err=True)
        sys.exit(2)

    i3_config = config or default_i3_config_path()
    if not i3_config.is_file():
        click.echo(f"Error: i3 config not found at {i3_config}", err=True)
        sys.exit(1)

    try:
        keymap = parse_config(i3_config, comment_filter=CommentFilter.from_settings(settings))
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: cannot read {i3_config}: {exc}", err=True)
        sys.exit(1)

    if output_json:
        click.echo(json.dumps(format_keymap_json(keymap), ensure_ascii=False, indent=2))
        return

    shown = select_modes(keymap, settings.show_modes, all_modes=all_modes)
    # Without --color/--no-color click strips styling when stdout is not a tty.
    click.echo(format_keymap_report(keymap, settings, modes=shown), nl=False, color=color)
