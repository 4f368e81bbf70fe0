"""Typed application context and factory for CLI commands."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from rich.console import Console

from netkit.cli.console import console as _console
from netkit.cli.console import err_console as _err_console
from netkit.cli.utils import load_settings
from netkit.client import AsyncNetworkManager
from netkit.constants import EnvironmentName
from netkit.environments import environment_from_settings
from netkit.models.config import Settings
from netkit.models.environment import AppEnvironment

__all__ = ["AppContext", "get_app_context"]


@dataclass(frozen=True)
class AppContext:
    """Typed container for shared CLI dependencies."""

    settings: Settings
    environment: AppEnvironment
    manager: AsyncNetworkManager
    console: Console = field(default_factory=lambda: _console)
    err_console: Console = field(default_factory=lambda: _err_console)


@asynccontextmanager
async def get_app_context(
    environment: EnvironmentName | None = None,
) -> AsyncIterator[AppContext]:
    """Async context manager for dependency initialization.

    ``environment`` overrides the one selected by settings. The manager is
    created inside the running event loop and closed on exit.
    """
    settings = load_settings()
    if environment is not None:
        settings = settings.model_copy(update={"environment": environment})

    app_environment = environment_from_settings(settings)
    async with AsyncNetworkManager(app_environment) as manager:
        yield AppContext(settings=settings, environment=app_environment, manager=manager)
