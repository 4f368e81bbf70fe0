"""httpx clients configured from an environment's transport settings."""

import httpx

from netkit.models.environment import AppEnvironment

__all__ = ["build_async_client", "build_client"]

DEFAULT_LIMITS = httpx.Limits(max_keepalive_connections=20, max_connections=100)


def build_client(
    environment: AppEnvironment,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Create a synchronous client bound to ``environment``.

    Args:
        environment: Supplies the timeout and the headers sent on every request.
        transport: Transport that performs the actual I/O. Defaults to a
            pooled ``httpx.HTTPTransport``.
    """
    if transport is None:
        transport = httpx.HTTPTransport(limits=DEFAULT_LIMITS)

    return httpx.Client(
        transport=transport,
        timeout=httpx.Timeout(environment.transport.timeout),
        headers=environment.transport.request_headers(),
    )


def build_async_client(
    environment: AppEnvironment,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Asynchronous counterpart of :func:`build_client`."""
    if transport is None:
        transport = httpx.AsyncHTTPTransport(limits=DEFAULT_LIMITS)

    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(environment.transport.timeout),
        headers=environment.transport.request_headers(),
    )
