"""Typed descriptors for remote resources."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Generic, TypeVar

import httpx
from pydantic import TypeAdapter

from netkit.constants import KEY_PATH_SEPARATOR
from netkit.exceptions import InvalidEndpointError

__all__ = ["Endpoint", "HTTPMethod"]

T = TypeVar("T")


class HTTPMethod(StrEnum):
    """HTTP methods an endpoint may use. Values are the on-the-wire spelling."""

    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"

    @classmethod
    def _missing_(cls, value: object) -> "HTTPMethod | None":
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


def _empty_headers() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """
    Immutable description of one remote resource and the type it decodes to.

    The same endpoint can be used with any environment; ``path`` is always
    resolved relative to the environment's base URL.

    Example:
        headlines = Endpoint(path="headlines.json", response_type=list[News])
    """

    path: str
    response_type: type[T]
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=_empty_headers)
    key_path: str | None = None
    adapter: TypeAdapter[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.path:
            raise InvalidEndpointError("Endpoint path must not be empty.")
        if _is_absolute(self.path):
            raise InvalidEndpointError(
                f"Endpoint path must be relative to the environment, got {self.path!r}"
            )
        if self.key_path is not None and not all(self.key_path.split(KEY_PATH_SEPARATOR)):
            raise InvalidEndpointError(f"Key path has an empty segment: {self.key_path!r}")

        object.__setattr__(self, "method", HTTPMethod(self.method))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "adapter", TypeAdapter(self.response_type))

    def __hash__(self) -> int:
        return hash(
            (
                self.path,
                self.response_type,
                self.method,
                frozenset(self.headers.items()),
                self.key_path,
            )
        )

    def decode(self, payload: bytes) -> T:
        """Validate a JSON payload against ``response_type``."""
        return self.adapter.validate_json(payload)


def _is_absolute(path: str) -> bool:
    """Whether ``path`` carries a scheme or authority of its own."""
    try:
        url = httpx.URL(path)
    except httpx.InvalidURL:
        # Left for resolution to report as an unsupported target.
        return False
    return bool(url.scheme or url.host or path.startswith("//"))

