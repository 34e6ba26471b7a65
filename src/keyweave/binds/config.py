from __future__ import annotations

from typing import List, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

from .ir import Bind
from .triggers import BasicTrigger, Trigger

# What the daemon does with the input a sequence matched.
Behavior: TypeAlias = Literal["capture", "release", "default"]


class BasicRemapping(BaseModel):
    """One key event -> one bind."""

    model_config = ConfigDict(extra="forbid")

    trigger: BasicTrigger
    bind: Bind


class SequenceRemapping(BaseModel):
    """Ordered trigger sequence (keys and waits) -> one bind."""

    model_config = ConfigDict(extra="forbid")

    triggers: List[Trigger] = Field(min_length=1)
    bind: Bind
    behavior: Behavior = "default"


Remapping: TypeAlias = Union[BasicRemapping, SequenceRemapping]


class Layer(BaseModel):
    layer_name: str
    remappings: List[Remapping] = Field(default_factory=list)


class Profile(BaseModel):
    """A user profile: layers of trigger -> bind remappings."""

    profile_name: str
    default_layer: NonNegativeInt = 0
    layers: List[Layer] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_default_layer(self) -> Profile:
        if self.layers and self.default_layer >= len(self.layers):
            raise ValueError(
                f"default_layer {self.default_layer} out of range ({len(self.layers)} layers)"
            )
        return self
