import json
from collections.abc import Callable

import httpx
import pytest
from pydantic import BaseModel

from netkit.models.endpoint import Endpoint
from netkit.models.environment import AppEnvironment, TransportConfig


class News(BaseModel):
    id: int
    title: str
    strap: str
    url: str


@pytest.fixture
def environment() -> AppEnvironment:
    """Fixture that returns a testing environment with an API key header."""
    return AppEnvironment(
        name="testing",
        base_url="https://hws.dev",
        transport=TransportConfig(timeout=5.0, default_headers={"APIKey": "test-key"}),
    )


@pytest.fixture
def headlines() -> Endpoint[list[News]]:
    return Endpoint(path="headlines.json", response_type=list[News])


@pytest.fixture
def json_handler() -> Callable[[object], Callable[[httpx.Request], httpx.Response]]:
    """Build a MockTransport handler that always answers 200 with ``data`` as JSON."""

    def factory(data: object) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps(data).encode())

        return handler

    return factory


@pytest.fixture
def failing_handler() -> Callable[[httpx.Request], httpx.Response]:
    """MockTransport handler that always fails to connect, counting its calls."""
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    handler.calls = calls  # type: ignore[attr-defined]
    return handler
