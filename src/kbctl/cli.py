from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

import click
from tabulate import tabulate

from kblib.config import CONFIG_ENV_VAR, Config, load_config, pick_config_path
from kblib.errors import ConfigLoadError, UnrecognizedArgument, format_config_error
from kblib.table import table_columns, table_rows

PROG_NAME = "kbctl"


@click.command(name=PROG_NAME, add_help_option=False)
@click.option(
    "--config",
    "config_path",
    default="",
    help=f"path to JSON or YAML config file (falls back to ${CONFIG_ENV_VAR})",
)
def cli(config_path: str) -> None:
    """Neovim keybinding helper.

    Shows a searchable table of keybindings, read from the file given with
    --config or the NVIM_HELPER_CONFIG environment variable, or the built-in
    table when neither is set.
    """
    show_keybindings(pick_config_path(config_path, os.environ.get(CONFIG_ENV_VAR)))


def resolve_config_path(args: Sequence[str], env_value: Optional[str]) -> str:
    """Return the config path selected by ``args`` and ``env_value``.

    Parses ``args`` with the options of the ``kbctl`` command. Raises
    UnrecognizedArgument for anything but ``--config PATH``. An empty result
    means the built-in table.
    """
    try:
        ctx = cli.make_context(PROG_NAME, list(args))
    except click.UsageError as e:
        raise UnrecognizedArgument(e.format_message()) from e
    return pick_config_path(ctx.params.get("config_path"), env_value)


def show_keybindings(path: str) -> None:
    """Load the config at ``path`` and show it, interactively on a terminal."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    log = logging.getLogger("kbctl")

    try:
        log.info("Loading config from %s", path or "<built-in>")
        cfg = load_config(path)
    except ConfigLoadError as e:
        click.echo(format_config_error(e), err=True)
        raise SystemExit(1)

    if not stdout_is_terminal():
        print_table(cfg)
        return

    try:
        from kbtui.app import run_tui
        run_tui(cfg)
    except ImportError as e:
        click.echo(f"TUI dependencies not available: {e}", err=True)
        raise SystemExit(1)


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def print_table(cfg: Config) -> None:
    """Print the keybinding table as plain text."""
    log = logging.getLogger("kbctl")
    headers = [title for title, _width in table_columns(cfg.columns)]
    log.info("Rendering %d keybindings as text", len(cfg.rows))
    click.echo(tabulate(table_rows(cfg.rows, cfg.columns), headers=headers))


def main(argv: Optional[Sequence[str]] = None) -> None:  # entry point
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = resolve_config_path(args, os.environ.get(CONFIG_ENV_VAR))
    except UnrecognizedArgument as e:
        click.echo(format_config_error(e), err=True)
        raise SystemExit(2)
    show_keybindings(path)


if __name__ == "__main__":  # pragma: no cover
    main()
