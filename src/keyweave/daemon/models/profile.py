from __future__ import annotations

from typing import List, TypeAlias, Union

from pydantic import BaseModel, Field

from keyweave.binds.config import Behavior
from keyweave.binds.triggers import BasicTrigger, Trigger

from .instruction import LLInstruction


class LLBasicRemapping(BaseModel):
    trigger: BasicTrigger
    binds: List[LLInstruction]


class LLSequenceRemapping(BaseModel):
    triggers: List[Trigger]
    binds: List[LLInstruction]
    behavior: Behavior


LLRemapping: TypeAlias = Union[LLBasicRemapping, LLSequenceRemapping]


class LLLayer(BaseModel):
    layer_name: str
    remappings: List[LLRemapping] = Field(default_factory=list)


class LLProfile(BaseModel):
    """Daemon top-level profile document."""

    profile_name: str
    default_layer: int = 0
    layers: List[LLLayer]
