import asyncio
from typing import Annotated, Any

import typer
from pydantic_core import from_json

from netkit.cli.console import print_error
from netkit.cli.context import get_app_context
from netkit.cli.utils import parse_headers
from netkit.constants import DEFAULT_RETRY_DELAY, EnvironmentName
from netkit.exceptions import NetkitError
from netkit.models.endpoint import Endpoint, HTTPMethod


async def _fetch_async(
    endpoint: Endpoint[Any],
    environment: EnvironmentName | None,
    body: bytes | None,
    attempts: int | None,
    delay: float,
    fallback: tuple[Any] | None,
) -> None:
    """Asynchronous implementation of the fetch command."""
    async with get_app_context(environment) as ctx:
        if attempts is None and fallback is None:
            result = await ctx.manager.fetch(endpoint, body)
        elif attempts is None:
            result = await ctx.manager.fetch_or_default(endpoint, fallback[0], body)
        else:
            try:
                result = await ctx.manager.fetch_with_retry(
                    endpoint, body, attempts=attempts, delay=delay
                )
            except NetkitError as e:
                if fallback is None:
                    raise
                ctx.err_console.print(f"[yellow]Using default value:[/yellow] {e.message}")
                result = fallback[0]

        ctx.console.print_json(data=result)


def fetch(
    path: Annotated[str, typer.Argument(help="Resource path, relative to the base URL")],
    env: Annotated[
        EnvironmentName | None,
        typer.Option("--env", "-e", help="Environment to use instead of NETKIT_ENVIRONMENT"),
    ] = None,
    method: Annotated[
        HTTPMethod, typer.Option("--method", "-X", case_sensitive=False, help="HTTP method")
    ] = HTTPMethod.GET,
    header: Annotated[
        list[str] | None, typer.Option("--header", "-H", help="Extra header, 'Name: value'")
    ] = None,
    key_path: Annotated[
        str | None, typer.Option("--key-path", "-k", help="Only decode this dot-separated path")
    ] = None,
    data: Annotated[str | None, typer.Option("--data", "-d", help="Request body")] = None,
    attempts: Annotated[
        int | None, typer.Option("--attempts", "-n", min=1, help="Total attempts before failing")
    ] = None,
    delay: Annotated[
        float, typer.Option("--delay", min=0.0, help="Seconds between attempts")
    ] = DEFAULT_RETRY_DELAY,
    default: Annotated[
        str | None, typer.Option("--default", help="JSON value to print if the fetch fails")
    ] = None,
) -> None:
    """
    Fetch a resource from the selected environment and print it as JSON.
    """
    fallback: tuple[Any] | None = None
    if default is not None:
        try:
            fallback = (from_json(default),)
        except ValueError as e:
            raise typer.BadParameter(f"Not valid JSON: {e}", param_hint="--default") from e

    try:
        endpoint: Endpoint[Any] = Endpoint(
            path=path,
            response_type=Any,  # type: ignore[arg-type]
            method=method,
            headers=parse_headers(header or []),
            key_path=key_path,
        )
        body = data.encode("utf-8") if data is not None else None
        asyncio.run(_fetch_async(endpoint, env, body, attempts, delay, fallback))
    except NetkitError as e:
        print_error(e.message)
        raise typer.Exit(1) from e
