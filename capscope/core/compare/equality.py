"""Structural equality for JSON-like capability values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _members(value: Any) -> dict[str, Any] | None:
    """Return a container's members keyed by string, or None for scalars.

    Sequences are keyed by index so that they compare like objects with
    numeric keys.
    """
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if isinstance(value, list | tuple):
        return {str(index): item for index, item in enumerate(value)}
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _scalars_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if _is_number(left) or _is_number(right):
        return _is_number(left) and _is_number(right) and left == right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def values_equal(left: Any, right: Any) -> bool:
    """Compare two values recursively, ignoring mapping key order.

    ``None`` equals only ``None``; ``True`` never equals ``1``. Traversal
    uses an explicit stack and remembers visited container pairs, so
    self-referential structures terminate instead of recursing forever.
    Never raises.
    """
    stack: list[tuple[Any, Any]] = [(left, right)]
    visited: set[tuple[int, int]] = set()

    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if a is None or b is None:
            return False

        a_members = _members(a)
        b_members = _members(b)
        if a_members is None or b_members is None:
            if a_members is not None or b_members is not None:
                return False
            if not _scalars_equal(a, b):
                return False
            continue

        pair = (id(a), id(b))
        if pair in visited:
            continue
        visited.add(pair)

        if a_members.keys() != b_members.keys():
            return False
        stack.extend((item, b_members[key]) for key, item in a_members.items())

    return True
