from rich.console import Console

__all__ = [
    "console",
    "err_console",
    "print_error",
]

# Global console instances using rich defaults
console = Console()
"""Standard console for stdout."""

err_console = Console(stderr=True)
"""Error console for stderr."""


def print_error(message: str) -> None:
    """Print an error message to stderr with consistent styling."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")

