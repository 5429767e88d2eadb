"""
Nested path access for keyed containers.

Paths use dots for mapping keys and either dots or brackets for list
indexes: "user.name", "items[0].price", "items.0.price".
"""

import re
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any, List, Union

from assertation.exceptions import InvalidContainerException
from assertation.utils.constants import ErrorMessages

PATH_TOKEN_PATTERN = re.compile(r"[^.\[\]]+|\[(\d+)\]")

Key = Union[str, int]


def split_path(path: str) -> List[Key]:
    """Split a dotted/bracketed path into its keys."""
    keys: List[Key] = []
    for match in PATH_TOKEN_PATTERN.finditer(path):
        index = match.group(1)
        keys.append(int(index) if index is not None else match.group(0))
    return keys


def _child(node: Any, key: Key, default: Any = None) -> Any:
    if isinstance(node, Mapping):
        if key in node:
            return node[key]
        if isinstance(key, str) and key.isdigit() and int(key) in node:
            return node[int(key)]
        return default

    if isinstance(node, (list, tuple)):
        try:
            return node[int(key)]
        except (ValueError, IndexError):
            return default

    return default


def get_path(path: str, container: Any, default: Any = None) -> Any:
    """
    Read the value stored at path.

    Returns:
        The value, or default when any segment of the path is missing
    """
    missing = object()
    node = container
    for key in split_path(path):
        node = _child(node, key, missing)
        if node is missing:
            return default
    return node


def set_path(path: str, container: Any, value: Any) -> None:
    """
    Write value at path, creating intermediate containers as needed.

    Lists are padded with None up to an index past their end.

    Raises:
        InvalidContainerException: If a segment of the path crosses a
            non-container value, or names a non-integer key of a list
    """
    keys = split_path(path)
    if not keys:
        raise KeyError(f"Empty path: {path!r}")

    node = container
    for key, next_key in zip(keys, keys[1:]):
        child = _child(node, key)
        if child is None:
            child = [] if isinstance(next_key, int) else {}
            _assign(node, key, child)
        node = child

    _assign(node, keys[-1], value)


def _assign(node: Any, key: Key, value: Any) -> None:
    if isinstance(node, MutableMapping):
        if isinstance(key, str) and key.isdigit() and int(key) in node:
            key = int(key)
        node[key] = value
        return

    if isinstance(node, MutableSequence) and _is_index(key):
        index = int(key)
        if index >= len(node):
            node.extend([None] * (index - len(node) + 1))
        node[index] = value
        return

    raise InvalidContainerException(
        ErrorMessages.CANNOT_ASSIGN_PATH.format(key=key, type_name=type(node).__name__),
        context={"key": key, "container_type": type(node).__name__},
    )


def _is_index(key: Key) -> bool:
    return isinstance(key, int) or key.isdigit()
