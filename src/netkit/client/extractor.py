"""
Key-path narrowing of JSON documents.

The payload is parsed into a plain JSON tree (dict, list, str, int, float,
bool, None), walked one segment at a time, and only the matched sub-tree is
serialized again. The result can then be validated against a type that
describes just that sub-tree.
"""

from typing import Any, TypeAlias

from loguru import logger
from pydantic_core import from_json, to_json

from netkit.constants import KEY_PATH_SEPARATOR
from netkit.exceptions import MalformedDocumentError, PathNotFoundError

__all__ = ["JSONValue", "extract_key_path", "walk_key_path"]

JSONValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None


def walk_key_path(tree: JSONValue, key_path: str) -> JSONValue:
    """
    Return the node of ``tree`` addressed by a dot-separated ``key_path``.

    Objects are entered by key, arrays by a non-negative integer index.

    Raises:
        PathNotFoundError: With the first segment that could not be resolved.
    """
    node = tree
    for segment in key_path.split(KEY_PATH_SEPARATOR):
        if isinstance(node, dict):
            if segment not in node:
                raise PathNotFoundError(key_path, segment)
            node = node[segment]
        elif isinstance(node, list):
            if not (segment.isascii() and segment.isdigit()) or int(segment) >= len(node):
                raise PathNotFoundError(key_path, segment)
            node = node[int(segment)]
        else:
            raise PathNotFoundError(key_path, segment)
    return node


def extract_key_path(payload: bytes, key_path: str) -> bytes:
    """
    Narrow a JSON payload to the sub-tree at ``key_path``.

    Args:
        payload: Raw response body.
        key_path: Dot-separated path, e.g. ``"response.user.address.city"``.

    Returns:
        The serialized sub-tree. Key order inside it is preserved.

    Raises:
        MalformedDocumentError: If the payload is not a JSON object or array.
        PathNotFoundError: If the path does not exist in the document.
    """
    try:
        tree = from_json(payload)
    except ValueError as e:
        raise MalformedDocumentError(f"Response is not a JSON document: {e}") from e
    if not isinstance(tree, (dict, list)):
        raise MalformedDocumentError("Response root is not a JSON object or array")

    node = walk_key_path(tree, key_path)
    logger.debug(f"Narrowed response to {key_path!r}")
    return to_json(node)
