"""Request body serialization."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping

from .errors import InvalidArgumentError


def _children(value: object) -> Iterable[object] | None:
    if isinstance(value, Mapping):
        return value.values()
    if isinstance(value, (list, tuple)):
        return value
    return None


def measure_depth(value: object, *, limit: int | None = None) -> int:
    """Container nesting depth; scalars are 0, a flat object or list is 1.

    Stops descending once ``limit`` is exceeded and returns ``limit + 1``.
    A container that contains itself raises ``InvalidArgumentError``.
    """

    deepest = 0
    on_path: set[int] = set()
    stack: list[tuple[object, int, bool]] = [(value, 1, False)]
    while stack:
        node, depth, leaving = stack.pop()
        if leaving:
            on_path.discard(id(node))
            continue
        children = _children(node)
        if children is None:
            continue
        if id(node) in on_path:
            raise InvalidArgumentError("request body contains a reference to itself")
        if limit is not None and depth > limit:
            return depth
        deepest = max(deepest, depth)
        on_path.add(id(node))
        stack.append((node, depth, True))
        stack.extend((child, depth + 1, False) for child in children)
    return deepest


def encode_body(body: object, *, max_depth: int) -> bytes:
    if measure_depth(body, limit=max_depth) > max_depth:
        raise InvalidArgumentError(
            f"request body nesting exceeds the maximum depth of {max_depth}"
        )
    try:
        text = json.dumps(body, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise InvalidArgumentError(f"request body is not JSON-serializable: {exc}") from exc
    return text.encode("utf-8")


__all__ = [
    "measure_depth",
    "encode_body",
]
