"""Deployment targets: a base URL plus the transport settings used against it."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

import httpx

from netkit.constants import DEFAULT_TIMEOUT

__all__ = ["AppEnvironment", "CachePolicy", "TransportConfig"]


class CachePolicy(StrEnum):
    """
    How intermediaries should treat cached responses.

    netkit keeps no cache of its own; the policy only controls the
    ``Cache-Control`` header attached to every request.
    """

    USE_PROTOCOL = "use-protocol"
    RELOAD_IGNORING_CACHE = "reload-ignoring-cache"
    NO_STORE = "no-store"

    @property
    def cache_control(self) -> str | None:
        return _CACHE_CONTROL[self]


_CACHE_CONTROL: dict[CachePolicy, str | None] = {
    CachePolicy.USE_PROTOCOL: None,
    CachePolicy.RELOAD_IGNORING_CACHE: "no-cache",
    CachePolicy.NO_STORE: "no-store",
}


def _empty_headers() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class TransportConfig:
    """Settings applied to every request issued under one environment."""

    timeout: float = DEFAULT_TIMEOUT
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL
    default_headers: Mapping[str, str] = field(default_factory=_empty_headers)

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        object.__setattr__(self, "cache_policy", CachePolicy(self.cache_policy))
        # Copy so no two configs ever share a headers dict.
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))

    def request_headers(self) -> dict[str, str]:
        """Headers sent with every request, including the cache policy."""
        headers = dict(self.default_headers)
        cache_control = self.cache_policy.cache_control
        if cache_control is not None:
            headers.setdefault("Cache-Control", cache_control)
        return headers


@dataclass(frozen=True)
class AppEnvironment:
    """
    One deployment target (production, testing, ...).

    Environments are immutable; to talk to a different target, build a new
    manager with a different environment.
    """

    name: str
    base_url: str
    transport: TransportConfig = field(default_factory=TransportConfig)

    def __post_init__(self) -> None:
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid base URL for {self.name!r}: {e}") from e
        if not url.is_absolute_url:
            raise ValueError(
                f"Base URL for {self.name!r} must be absolute, got {self.base_url!r}"
            )

    @property
    def url(self) -> httpx.URL:
        return httpx.URL(self.base_url)
