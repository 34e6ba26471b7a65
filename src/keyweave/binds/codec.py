from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter

from .errors import validate_tagged
from .ir import Bind

_BIND_ADAPTER: TypeAdapter[Bind] = TypeAdapter(Bind)


def serialize_bind(bind: Bind) -> dict[str, Any]:
    """Bind -> tagged document (`{"type": ..., ...}`), children included."""

    return bind.model_dump(mode="json", by_alias=True)


def deserialize_bind(document: Any) -> Bind:
    """Tagged document -> Bind.

    Raises UnknownVariantError when any `type` tag in the tree, bind or
    trigger, is missing or not recognized.
    """

    return validate_tagged(_BIND_ADAPTER, document)


def dump_bind_json(bind: Bind, *, indent: int | None = None) -> str:
    return json.dumps(serialize_bind(bind), indent=indent)


def load_bind_json(data: str | bytes) -> Bind:
    return deserialize_bind(json.loads(data))
