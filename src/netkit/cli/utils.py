import typer
from pydantic import ValidationError
from rich.console import Console

from netkit.models.config import Settings

__all__ = ["handle_validation_error", "load_settings", "parse_headers"]


def handle_validation_error(e: ValidationError) -> None:
    console = Console(stderr=True)
    console.print("[bold red]Configuration Error:[/bold red]")
    for error in e.errors():
        field_name = ".".join(str(loc) for loc in error["loc"]) or "Global Config"
        message = error["msg"]
        input_value = error.get("input")
        console.print(
            f"  Field [bold]{field_name}[/bold]: {message} "
            f"(Invalid Value: [red]{input_value!r}[/red])"
        )


def load_settings() -> Settings:
    """Load settings, exiting with a readable report if they are invalid."""
    try:
        return Settings()
    except ValidationError as e:
        handle_validation_error(e)
        raise typer.Exit(1) from e


def parse_headers(values: list[str]) -> dict[str, str]:
    """Parse ``Name: value`` strings given on the command line."""
    headers: dict[str, str] = {}
    for value in values:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(
                f"Expected 'Name: value', got {value!r}", param_hint="--header"
            )
        headers[name.strip()] = content.strip()
    return headers
