"""Namespace parsing and resource path filtering."""

from __future__ import annotations

from typing import Tuple

_INVALID_SEGMENT_CHARS = frozenset('/\\:*?"<>|')


class NamespaceError(ValueError):
    """Raised when a namespace cannot be mapped onto a directory path."""


def validate_namespace(namespace: str) -> Tuple[str, ...]:
    """Return the namespace segments, rejecting anything unsafe as a path.

    ``com.foo`` yields ``("com", "foo")``. Empty namespaces, empty segments
    (``com..foo``, ``.com``), whitespace, control characters and characters
    that are not allowed in a path segment raise :class:`NamespaceError`.
    """
    if not isinstance(namespace, str) or not namespace:
        raise NamespaceError("Namespace must be a non-empty dotted identifier")

    segments = tuple(namespace.split("."))
    for segment in segments:
        if not segment:
            raise NamespaceError(f"Namespace contains an empty segment: {namespace!r}")
        for char in segment:
            if char in _INVALID_SEGMENT_CHARS or char.isspace() or not char.isprintable():
                raise NamespaceError(
                    f"Namespace segment {segment!r} contains invalid character {char!r}"
                )
    return segments


def namespace_to_path(namespace: str) -> str:
    """Return the namespace written as ``/``-separated path segments."""
    return "/".join(validate_namespace(namespace))


def in_namespace(resource_path: str, namespace: str) -> bool:
    """Return True when ``resource_path`` lives under the namespace directory."""
    prefix = f"{namespace_to_path(namespace)}/"
    return resource_path.removeprefix("/").startswith(prefix)


__all__ = ["NamespaceError", "in_namespace", "namespace_to_path", "validate_namespace"]
