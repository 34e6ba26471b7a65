from __future__ import annotations

from typing import Annotated, Literal, Tuple, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from .triggers import Trigger
from .types import BindType, Duration

KeyCode: TypeAlias = str


class BaseBind(BaseModel):
    """Base type for binds: what a key press should do.

    Binds are frozen value trees; `bind_type` is persisted under `type`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PressKey(BaseBind):
    """Send a key press event."""

    bind_type: Literal[BindType.PRESS_KEY] = Field(default=BindType.PRESS_KEY, alias="type")
    value: KeyCode


class ReleaseKey(BaseBind):
    """Send a key release event."""

    bind_type: Literal[BindType.RELEASE_KEY] = Field(default=BindType.RELEASE_KEY, alias="type")
    value: KeyCode


class TapKey(BaseBind):
    """Press then release one key."""

    bind_type: Literal[BindType.TAP_KEY] = Field(default=BindType.TAP_KEY, alias="type")
    value: KeyCode


class Macro(BaseBind):
    """Run child binds one after another, without delays."""

    bind_type: Literal[BindType.MACRO] = Field(default=BindType.MACRO, alias="type")
    binds: Tuple[Bind, ...]


class TimedMacro(BaseBind):
    """Run child binds with a delay after each one.

    `times[i]` (ms) is waited after `binds[i]`. The lengths need not match:
    binds past the end of `times` get no wait, extra times are ignored.
    """

    bind_type: Literal[BindType.TIMED_MACRO] = Field(default=BindType.TIMED_MACRO, alias="type")
    binds: Tuple[Bind, ...]
    times: Tuple[Duration, ...]


class Repeat(BaseBind):
    """Repeat a bind a number of times, cancelable by a trigger."""

    bind_type: Literal[BindType.REPEAT] = Field(default=BindType.REPEAT, alias="type")
    value: Bind
    # ms between executions
    time_delay: Duration
    # 0 never fires
    times_to_execute: NonNegativeInt
    cancel_trigger: Trigger


class SwapLayer(BaseBind):
    """Switch to another layer so its triggers become reachable."""

    bind_type: Literal[BindType.SWITCH_LAYER] = Field(default=BindType.SWITCH_LAYER, alias="type")
    layer_number: int = Field(alias="value")


class AppOpen(BaseBind):
    """Launch an application of the user's choice."""

    bind_type: Literal[BindType.APP_OPEN] = Field(default=BindType.APP_OPEN, alias="type")
    app_name: str


Bind: TypeAlias = Annotated[
    Union[PressKey, ReleaseKey, TapKey, Macro, TimedMacro, Repeat, SwapLayer, AppOpen],
    Field(discriminator="bind_type"),
]

Macro.model_rebuild()
TimedMacro.model_rebuild()
Repeat.model_rebuild()
