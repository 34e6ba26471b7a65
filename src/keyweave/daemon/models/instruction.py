from __future__ import annotations

from typing import Annotated, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field

from keyweave.binds.types import Duration


class BaseInstruction(BaseModel):
    """Daemon low-level instruction; flat, never nested."""

    model_config = ConfigDict(frozen=True)


class LLPressKey(BaseInstruction):
    type: Literal["press_key"] = "press_key"
    value: str


class LLReleaseKey(BaseInstruction):
    type: Literal["release_key"] = "release_key"
    value: str


class LLSwitchLayer(BaseInstruction):
    type: Literal["switch_layer"] = "switch_layer"
    value: int


class LLWait(BaseInstruction):
    """Pause playback for `value` ms."""

    type: Literal["wait"] = "wait"
    value: Duration


LLInstruction: TypeAlias = Annotated[
    Union[LLPressKey, LLReleaseKey, LLSwitchLayer, LLWait],
    Field(discriminator="type"),
]
