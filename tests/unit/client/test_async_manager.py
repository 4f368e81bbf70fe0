import asyncio

import httpx
import pytest

from netkit.client import AsyncNetworkManager
from netkit.exceptions import PathNotFoundError, TransportFailure
from netkit.models.endpoint import Endpoint


def _manager(environment, handler) -> AsyncNetworkManager:
    return AsyncNetworkManager(environment, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_async_fetch_decodes_key_path(environment):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response": {"user": {"address": {"city": "Cupertino"}}}})

    endpoint = Endpoint(path="user.json", response_type=str, key_path="response.user.address.city")

    async with _manager(environment, handler) as manager:
        assert await manager.fetch(endpoint) == "Cupertino"


@pytest.mark.asyncio
async def test_async_fetch_missing_key_path(environment):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response": {"user": {"address": {"city": "Cupertino"}}}})

    endpoint = Endpoint(path="user.json", response_type=str, key_path="response.user.address.zip")

    with pytest.raises(PathNotFoundError) as exc_info:
        await _manager(environment, handler).fetch(endpoint)

    assert exc_info.value.segment == "zip"


@pytest.mark.asyncio
async def test_async_retry_invokes_transport_exactly_attempts_times(
    environment, headlines, failing_handler
):
    manager = _manager(environment, failing_handler)

    with pytest.raises(TransportFailure):
        await manager.fetch_with_retry(headlines, attempts=3, delay=0)

    assert len(failing_handler.calls) == 3


@pytest.mark.asyncio
async def test_async_default_on_failure(environment, headlines, failing_handler):
    manager = _manager(environment, failing_handler)

    assert await manager.fetch_or_default(headlines, []) == []
    assert len(failing_handler.calls) == 1


@pytest.mark.asyncio
async def test_cancel_during_retry_delay_stops_further_attempts(environment, headlines):
    calls: list[httpx.Request] = []
    first_call = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        first_call.set()
        raise httpx.ConnectError("Connection refused", request=request)

    manager = _manager(environment, handler)
    task = asyncio.create_task(manager.fetch_with_retry(headlines, attempts=3, delay=30))

    await first_call.wait()
    # Let the failed attempt settle into the inter-attempt sleep.
    await asyncio.sleep(0.05)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    await asyncio.sleep(0.05)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_cancel_during_transport_is_not_a_transport_failure(environment, headlines):
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.sleep(30)
        return httpx.Response(200, json=[])

    manager = _manager(environment, handler)
    task = asyncio.create_task(manager.fetch_or_default(headlines, ["fallback"]))

    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_concurrent_fetches_are_independent(environment):
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/broken.json":
            return httpx.Response(500)
        await asyncio.sleep(0.01)
        return httpx.Response(200, json={"path": request.url.path})

    ok = Endpoint(path="ok.json", response_type=dict[str, str])
    broken = Endpoint(path="broken.json", response_type=dict[str, str])

    async with _manager(environment, handler) as manager:
        results = await asyncio.gather(
            manager.fetch(ok),
            manager.fetch(broken),
            manager.fetch_or_default(broken, {"path": "default"}),
            return_exceptions=True,
        )

    assert results[0] == {"path": "/ok.json"}
    assert isinstance(results[1], TransportFailure)
    assert results[2] == {"path": "default"}
