from __future__ import annotations

import re
from typing import Any, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError

from .types import TAG_FAMILIES

T = TypeVar("T")


class BindError(Exception):
    """Base type for bind model errors."""


class UnknownVariantError(BindError, ValueError):
    """A document carries a `type` tag outside the closed enumeration."""

    def __init__(
        self,
        tag: Any,
        *,
        loc: Sequence[str | int] = (),
        expected: Sequence[str] = (),
        document: Any = None,
    ) -> None:
        self.tag = tag
        self.loc = tuple(loc)
        self.expected = tuple(expected)
        self.document = document

        where = ".".join(str(part) for part in self.loc) or "<root>"
        message = f"unknown type tag {tag!r} at {where}"
        if self.expected:
            message += f" (expected one of: {', '.join(self.expected)})"
        super().__init__(message)


class UnimplementedError(BindError, NotImplementedError):
    """The bind variant does not support the requested operation."""

    def __init__(self, bind: Any, operation: str) -> None:
        self.bind = bind
        self.operation = operation
        bind_type = getattr(bind, "bind_type", type(bind).__name__)
        super().__init__(f"{operation} is not supported for {bind_type!s} binds")


def _split_tags(expected_tags: str) -> list[str]:
    return re.findall(r"'([^']*)'", expected_tags)


def _tag_at(document: Any, loc: Sequence[str | int], fallback: Any) -> Any:
    # loc interleaves document keys with union branch labels; skip the labels
    node = document
    for part in loc:
        if isinstance(node, dict) and part in node:
            node = node[part]
        elif isinstance(node, (list, tuple)) and isinstance(part, int) and 0 <= part < len(node):
            node = node[part]
    if isinstance(node, dict) and "type" in node:
        return node["type"]
    return fallback


def _is_known_tag(tag: Any, expected: Sequence[str]) -> bool:
    # known means same family as the tags this position accepts
    if not isinstance(tag, str):
        return False
    return any(tag in family and family.intersection(expected) for family in TAG_FAMILIES)


def validate_tagged(adapter: TypeAdapter[T], document: Any) -> T:
    """Validate a tagged document, reporting unrecognized tags as UnknownVariantError.

    A known tag used where it is not allowed (a wait as a basic trigger, say)
    stays a plain ValidationError.
    """

    try:
        return adapter.validate_python(document)
    except ValidationError as exc:
        for error in exc.errors():
            if error["type"] == "union_tag_invalid":
                ctx = error.get("ctx") or {}
                tag = _tag_at(document, error["loc"], ctx.get("tag"))
                expected = _split_tags(str(ctx.get("expected_tags", "")))
                if _is_known_tag(tag, expected):
                    continue
                raise UnknownVariantError(
                    tag,
                    loc=error["loc"],
                    expected=expected,
                    document=document,
                ) from exc
            if error["type"] == "union_tag_not_found":
                raise UnknownVariantError(None, loc=error["loc"], document=document) from exc
        raise
