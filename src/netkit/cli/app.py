"""CLI application using Typer."""

import sys

import typer

from netkit.cli.commands.config import config_app
from netkit.cli.commands.fetch import fetch
from netkit.cli.console import print_error
from netkit.exceptions import NetkitError

__all__ = ["app", "main"]

app = typer.Typer(
    name="netkit",
    help="Fetch typed resources from a configured environment.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    netkit CLI entry point.
    """
    from netkit.cli.utils import load_settings
    from netkit.logging import configure_logging

    configure_logging("DEBUG" if verbose else load_settings().log_level)


app.add_typer(config_app, name="config")
app.command(name="fetch")(fetch)


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except NetkitError as e:
        print_error(e.message)
        sys.exit(1)
    except Exception as e:
        print_error(f"An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
