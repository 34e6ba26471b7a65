from __future__ import annotations

from typing import Annotated, Any, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .errors import validate_tagged
from .types import Duration, TriggerType


class BaseTrigger(BaseModel):
    model_config = ConfigDict(frozen=True)


class KeyPress(BaseTrigger):
    """Fires when `value` goes down."""

    type: Literal[TriggerType.KEY_PRESS] = TriggerType.KEY_PRESS
    value: str


class KeyRelease(BaseTrigger):
    """Fires when `value` comes back up."""

    type: Literal[TriggerType.KEY_RELEASE] = TriggerType.KEY_RELEASE
    value: str


class MinimumWait(BaseTrigger):
    """At least `value` ms must pass before the next step of a sequence."""

    type: Literal[TriggerType.MINIMUM_WAIT] = TriggerType.MINIMUM_WAIT
    value: Duration


class MaximumWait(BaseTrigger):
    """At most `value` ms may pass before the next step of a sequence."""

    type: Literal[TriggerType.MAXIMUM_WAIT] = TriggerType.MAXIMUM_WAIT
    value: Duration


Trigger: TypeAlias = Annotated[
    Union[KeyPress, KeyRelease, MinimumWait, MaximumWait],
    Field(discriminator="type"),
]

# Basic remappings fire on a single key event; waits only make sense in sequences.
BasicTrigger: TypeAlias = Annotated[
    Union[KeyPress, KeyRelease],
    Field(discriminator="type"),
]

_TRIGGER_ADAPTER: TypeAdapter[Trigger] = TypeAdapter(Trigger)


def serialize_trigger(trigger: Trigger) -> dict[str, Any]:
    return trigger.model_dump(mode="json")


def deserialize_trigger(document: Any) -> Trigger:
    return validate_tagged(_TRIGGER_ADAPTER, document)


def triggers_equal(a: Trigger, b: Trigger) -> bool:
    return type(a) is type(b) and a.value == b.value
