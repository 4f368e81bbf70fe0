"""Environment-scoped, typed HTTP endpoint client."""

from netkit.client import AsyncNetworkManager, NetworkManager
from netkit.exceptions import (
    DecodeFailure,
    InvalidEndpointError,
    MalformedDocumentError,
    NetkitError,
    PathNotFoundError,
    TransportFailure,
    UnsupportedTargetError,
)
from netkit.models import (
    AppEnvironment,
    CachePolicy,
    Endpoint,
    HTTPMethod,
    RetryPolicy,
    TransportConfig,
)

__all__ = [
    "AppEnvironment",
    "AsyncNetworkManager",
    "CachePolicy",
    "DecodeFailure",
    "Endpoint",
    "HTTPMethod",
    "InvalidEndpointError",
    "MalformedDocumentError",
    "NetkitError",
    "NetworkManager",
    "PathNotFoundError",
    "RetryPolicy",
    "TransportConfig",
    "TransportFailure",
    "UnsupportedTargetError",
]
