import types
from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from netkit.client.extractor import extract_key_path
from netkit.client.transport import build_async_client, build_client
from netkit.constants import DEFAULT_RETRY_DELAY
from netkit.exceptions import (
    DecodeFailure,
    NetkitError,
    TransportFailure,
    UnsupportedTargetError,
)
from netkit.models.endpoint import Endpoint
from netkit.models.environment import AppEnvironment
from netkit.models.retry import RetryPolicy

__all__ = ["AsyncNetworkManager", "NetworkManager"]

T = TypeVar("T")


class _BaseNetworkManager:
    """Request building and decoding shared by the sync and async managers."""

    def __init__(self, environment: AppEnvironment) -> None:
        self.environment = environment

    def resolve(self, endpoint: Endpoint[Any]) -> httpx.URL:
        """
        Resolve the endpoint path against the environment's base URL.

        Raises:
            UnsupportedTargetError: If the result is not a valid absolute URL.
        """
        try:
            url = self.environment.url.join(endpoint.path)
        except httpx.InvalidURL as e:
            raise UnsupportedTargetError(self.environment.base_url, endpoint.path) from e
        if not url.is_absolute_url:
            raise UnsupportedTargetError(self.environment.base_url, endpoint.path)
        return url

    def _build_request(
        self, client: httpx.Client | httpx.AsyncClient, endpoint: Endpoint[Any], body: bytes | None
    ) -> httpx.Request:
        url = self.resolve(endpoint)
        try:
            # Client headers come from the environment; endpoint headers win on collision.
            return client.build_request(
                endpoint.method.value, url, content=body, headers=dict(endpoint.headers)
            )
        except UnicodeEncodeError as e:
            raise TransportFailure(
                f"Cannot encode request headers for {url}: {e}", url=str(url)
            ) from e

    @staticmethod
    def _decode(endpoint: Endpoint[T], payload: bytes) -> T:
        if endpoint.key_path is not None:
            payload = extract_key_path(payload, endpoint.key_path)
        try:
            return endpoint.decode(payload)
        except ValidationError as e:
            raise DecodeFailure(
                f"Response from {endpoint.path!r} does not match the expected type: {e}"
            ) from e

    @staticmethod
    def _retry_options(attempts: int, delay: float) -> dict[str, Any]:
        policy = RetryPolicy(attempts=attempts, delay=delay)
        return {
            "stop": stop_after_attempt(policy.attempts),
            "wait": wait_fixed(policy.delay),
            "retry": retry_if_exception_type(NetkitError),
            "before_sleep": _log_retry,
            "reraise": True,
        }


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    sleep = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(f"Attempt {retry_state.attempt_number} failed ({error}); retrying in {sleep}s")


def _transport_failure(request: httpx.Request, error: httpx.RequestError) -> TransportFailure:
    return TransportFailure(f"{request.method} {request.url} failed: {error}", url=str(request.url))


def _status_failure(error: httpx.HTTPStatusError) -> TransportFailure:
    response = error.response
    return TransportFailure(
        f"{error.request.method} {error.request.url} returned {response.status_code}",
        url=str(error.request.url),
        status_code=response.status_code,
    )


class NetworkManager(_BaseNetworkManager):
    """
    Blocking request executor bound to one environment.

    Holds a single ``httpx.Client`` built from the environment and no
    per-request state, so one instance can serve many threads.
    """

    def __init__(
        self, environment: AppEnvironment, transport: httpx.BaseTransport | None = None
    ) -> None:
        """
        Initialize the manager.

        Args:
            environment: The deployment target every request is issued against.
            transport: Optional transport performing the I/O (e.g. a mock in tests).
        """
        super().__init__(environment)
        self._client = build_client(environment, transport)

    def fetch(self, endpoint: Endpoint[T], body: bytes | None = None) -> T:
        """
        Issue one request for ``endpoint`` and decode the response.

        Raises:
            UnsupportedTargetError: If the path cannot be resolved.
            TransportFailure: On connectivity errors, timeouts or non-2xx responses.
            DecodeFailure: If the payload (or its key-path sub-tree) is not a ``T``.
        """
        request = self._build_request(self._client, endpoint, body)
        logger.debug(f"{request.method} {request.url}")
        try:
            response = self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise _status_failure(e) from e
        except httpx.RequestError as e:
            raise _transport_failure(request, e) from e
        return self._decode(endpoint, response.content)

    def fetch_with_retry(
        self,
        endpoint: Endpoint[T],
        body: bytes | None = None,
        *,
        attempts: int,
        delay: float = DEFAULT_RETRY_DELAY,
    ) -> T:
        """
        Like :meth:`fetch`, retried up to ``attempts`` times in total with a
        fixed ``delay`` (seconds) between tries. The last error is re-raised
        unchanged.
        """
        retrying = Retrying(**self._retry_options(attempts, delay))
        return retrying(self.fetch, endpoint, body)

    def fetch_or_default(self, endpoint: Endpoint[T], default: T, body: bytes | None = None) -> T:
        """Like :meth:`fetch`, but return ``default`` instead of raising."""
        try:
            return self.fetch(endpoint, body)
        except NetkitError as e:
            logger.debug(f"Using default value for {endpoint.path!r}: {e}")
            return default

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "NetworkManager":
        self._client.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: types.TracebackType | None = None,
    ) -> None:
        self._client.__exit__(exc_type, exc_value, traceback)


class AsyncNetworkManager(_BaseNetworkManager):
    """
    Asynchronous request executor bound to one environment.

    Cancelling a call, during the request or while waiting between retries,
    raises ``asyncio.CancelledError`` and no further attempt is made.
    """

    def __init__(
        self, environment: AppEnvironment, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        super().__init__(environment)
        self._client = build_async_client(environment, transport)

    async def fetch(self, endpoint: Endpoint[T], body: bytes | None = None) -> T:
        """See :meth:`NetworkManager.fetch`."""
        request = self._build_request(self._client, endpoint, body)
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise _status_failure(e) from e
        except httpx.RequestError as e:
            raise _transport_failure(request, e) from e
        return self._decode(endpoint, response.content)

    async def fetch_with_retry(
        self,
        endpoint: Endpoint[T],
        body: bytes | None = None,
        *,
        attempts: int,
        delay: float = DEFAULT_RETRY_DELAY,
    ) -> T:
        """See :meth:`NetworkManager.fetch_with_retry`."""
        retrying = AsyncRetrying(**self._retry_options(attempts, delay))
        return await retrying(self.fetch, endpoint, body)

    async def fetch_or_default(
        self, endpoint: Endpoint[T], default: T, body: bytes | None = None
    ) -> T:
        """See :meth:`NetworkManager.fetch_or_default`."""
        try:
            return await self.fetch(endpoint, body)
        except NetkitError as e:
            logger.debug(f"Using default value for {endpoint.path!r}: {e}")
            return default

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncNetworkManager":
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: types.TracebackType | None = None,
    ) -> None:
        await self._client.__aexit__(exc_type, exc_value, traceback)
