import typer
from rich.table import Table

from netkit.cli.console import console
from netkit.cli.utils import load_settings
from netkit.constants import API_KEY_HEADER
from netkit.environments import environment_from_settings

config_app = typer.Typer(no_args_is_help=True, help="Inspect netkit configuration.")


@config_app.command()
def show() -> None:
    """Display the environment the current settings resolve to."""
    settings = load_settings()
    environment = environment_from_settings(settings)

    table = Table(title=f"Environment: {environment.name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Base URL", environment.base_url)
    table.add_row("Timeout", f"{environment.transport.timeout}s")
    table.add_row("Cache policy", str(environment.transport.cache_policy))
    for name, value in environment.transport.request_headers().items():
        shown = "********" if name == API_KEY_HEADER else value
        table.add_row(f"Header {name}", shown)
    table.add_row("Log level", settings.log_level)

    console.print(table)
