from .extractor import extract_key_path, walk_key_path
from .manager import AsyncNetworkManager, NetworkManager
from .transport import build_async_client, build_client

__all__ = [
    "AsyncNetworkManager",
    "NetworkManager",
    "build_async_client",
    "build_client",
    "extract_key_path",
    "walk_key_path",
]
