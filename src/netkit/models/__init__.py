from .endpoint import Endpoint, HTTPMethod
from .environment import AppEnvironment, CachePolicy, TransportConfig
from .retry import RetryPolicy

__all__ = [
    "AppEnvironment",
    "CachePolicy",
    "Endpoint",
    "HTTPMethod",
    "RetryPolicy",
    "TransportConfig",
]
