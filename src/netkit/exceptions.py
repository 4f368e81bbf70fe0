__all__ = [
    "DecodeFailure",
    "InvalidEndpointError",
    "MalformedDocumentError",
    "NetkitError",
    "PathNotFoundError",
    "TransportFailure",
    "UnsupportedTargetError",
]


class NetkitError(Exception):
    """Base exception for all netkit errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidEndpointError(NetkitError, ValueError):
    """Raised when an endpoint is declared with an absolute or empty path."""


class UnsupportedTargetError(NetkitError):
    """Raised when an endpoint path cannot be resolved against the base URL."""

    def __init__(self, base_url: str, path: str) -> None:
        super().__init__(f"Cannot resolve {path!r} against {base_url!r}")
        self.base_url = base_url
        self.path = path


class TransportFailure(NetkitError):
    """Raised on connectivity errors, timeouts and non-success responses."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeFailure(NetkitError):
    """Raised when a response payload does not match the expected type."""


class MalformedDocumentError(DecodeFailure):
    """Raised when a payload to be narrowed is not a parseable JSON document."""


class PathNotFoundError(DecodeFailure):
    """Raised when a key path does not exist in the response document."""

    def __init__(self, key_path: str, segment: str) -> None:
        super().__init__(f"Key path {key_path!r} not found: no value at {segment!r}")
        self.key_path = key_path
        self.segment = segment
