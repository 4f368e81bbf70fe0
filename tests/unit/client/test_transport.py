import httpx

from netkit.client import build_async_client, build_client
from netkit.models.environment import AppEnvironment, CachePolicy, TransportConfig


def _environment() -> AppEnvironment:
    return AppEnvironment(
        name="testing",
        base_url="https://hws.dev",
        transport=TransportConfig(
            timeout=7.0,
            cache_policy=CachePolicy.RELOAD_IGNORING_CACHE,
            default_headers={"APIKey": "test-key"},
        ),
    )


def test_build_client_applies_environment():
    transport = httpx.MockTransport(lambda request: httpx.Response(204))

    with build_client(_environment(), transport) as client:
        assert client.timeout == httpx.Timeout(7.0)
        assert client.headers["APIKey"] == "test-key"
        assert client.headers["Cache-Control"] == "no-cache"

        response = client.get("https://hws.dev/ping")

    assert response.status_code == 204
    assert response.request.headers["APIKey"] == "test-key"


def test_build_client_defaults_to_http_transport():
    client = build_client(_environment())

    assert isinstance(client._transport, httpx.HTTPTransport)
    client.close()


def test_clients_do_not_share_headers():
    first = build_client(_environment(), httpx.MockTransport(lambda r: httpx.Response(200)))
    second = build_client(_environment(), httpx.MockTransport(lambda r: httpx.Response(200)))

    first.headers["APIKey"] = "changed"

    assert second.headers["APIKey"] == "test-key"


def test_build_async_client_applies_environment():
    client = build_async_client(_environment(), httpx.MockTransport(lambda r: httpx.Response(200)))

    assert client.timeout == httpx.Timeout(7.0)
    assert client.headers["Cache-Control"] == "no-cache"
    assert isinstance(client, httpx.AsyncClient)
