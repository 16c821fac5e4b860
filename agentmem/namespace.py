"""Helpers for namespace-style keys such as ``agent/claude/current_task``.

Keys and namespaces are plain strings; each helper validates its inputs and
raises a :class:`~agentmem.errors.ValidationError` for malformed ones.
"""

from __future__ import annotations

from .errors import ValidationError
from .validation import validate_key, validate_key_leaf, validate_namespace

__all__ = [
    "is_key_within_namespace",
    "join_namespace_and_leaf",
    "parent_namespace",
    "namespace_ancestors",
    "namespace_depth",
    "key_depth",
    "namespace_leaf",
    "key_leaf",
    "split_key",
    "common_namespace",
    "trim_outer_separators",
]


def is_key_within_namespace(key: str, namespace: str) -> bool:
    """Return True if ``key`` equals ``namespace`` or lies below it.

    Partial segment matches (``agent/claudex`` under ``agent/claude``) do not count.
    """
    validate_key(key)
    validate_namespace(namespace)
    return key == namespace or key.startswith(namespace + "/")


def join_namespace_and_leaf(namespace: str, leaf: str) -> str:
    """Join a namespace and a leaf segment into a validated key."""
    validate_namespace(namespace)
    validate_key_leaf(leaf)
    return validate_key(f"{namespace}/{leaf}")


def parent_namespace(namespace: str) -> str | None:
    """Return the parent namespace, or None for a single-segment namespace."""
    validate_namespace(namespace)
    parent, separator, _ = namespace.rpartition("/")
    return parent if separator else None


def namespace_ancestors(namespace: str) -> list[str]:
    """Return all ancestor namespaces, nearest first."""
    ancestors = []
    current = parent_namespace(namespace)
    while current is not None:
        ancestors.append(current)
        current = parent_namespace(current)
    return ancestors


def namespace_depth(namespace: str) -> int:
    """Return the number of segments in a namespace."""
    return len(validate_namespace(namespace).split("/"))


def key_depth(key: str) -> int:
    """Return the number of segments in a key."""
    return len(validate_key(key).split("/"))


def namespace_leaf(namespace: str) -> str:
    """Return the last segment of a namespace."""
    return validate_namespace(namespace).rpartition("/")[2]


def key_leaf(key: str) -> str:
    """Return the last segment of a key."""
    return validate_key(key).rpartition("/")[2]


def split_key(key: str) -> tuple[str, str] | None:
    """Split a key into ``(namespace, leaf)``; None if it has a single segment."""
    validate_key(key)
    prefix, separator, leaf = key.rpartition("/")
    if not separator:
        return None
    return validate_namespace(prefix), leaf


def common_namespace(left: str, right: str) -> str | None:
    """Return the longest namespace shared by two keys, or None."""
    shared = []
    for a, b in zip(validate_key(left).split("/"), validate_key(right).split("/")):
        if a != b:
            break
        shared.append(a)

    if not shared:
        return None
    try:
        return validate_namespace("/".join(shared))
    except ValidationError:
        return None


def trim_outer_separators(text: str) -> str:
    """Strip leading and trailing ``/`` without touching inner separators."""
    return text.strip("/")