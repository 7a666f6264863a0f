"""
vimkeys CLI Package.

- keymaps.py: parse, import, show and clear commands
- utils.py: Shared utilities
"""

import sys

import typer

from vimkeys.cli.keymaps import clear_command, import_command, parse_command, show_command
from vimkeys.cli.utils import version_callback

app = typer.Typer(
    help="vimkeys – extract key mappings from vim configuration files",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """vimkeys CLI main callback for global options."""
    pass


app.command(name="parse")(parse_command)
app.command(name="import")(import_command)
app.command(name="show")(show_command)
app.command(name="clear")(clear_command)


__all__ = ["app", "main", "version_callback"]


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
