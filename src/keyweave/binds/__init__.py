from __future__ import annotations

from .codec import deserialize_bind, dump_bind_json, load_bind_json, serialize_bind
from .config import BasicRemapping, Layer, Profile, Remapping, SequenceRemapping
from .equality import binds_equal
from .errors import BindError, UnimplementedError, UnknownVariantError
from .frontend import ProfileFrontend
from .ir import (
    AppOpen,
    Bind,
    KeyCode,
    Macro,
    PressKey,
    ReleaseKey,
    Repeat,
    SwapLayer,
    TapKey,
    TimedMacro,
)
from .render import describe_bind
from .triggers import (
    BasicTrigger,
    KeyPress,
    KeyRelease,
    MaximumWait,
    MinimumWait,
    Trigger,
    deserialize_trigger,
    serialize_trigger,
    triggers_equal,
)
from .types import BindType, Duration, TriggerType

__all__ = [
    "AppOpen",
    "BasicRemapping",
    "BasicTrigger",
    "Bind",
    "BindError",
    "BindType",
    "Duration",
    "KeyCode",
    "KeyPress",
    "KeyRelease",
    "Layer",
    "Macro",
    "MaximumWait",
    "MinimumWait",
    "PressKey",
    "Profile",
    "ProfileFrontend",
    "ReleaseKey",
    "Remapping",
    "Repeat",
    "SequenceRemapping",
    "SwapLayer",
    "TapKey",
    "TimedMacro",
    "Trigger",
    "TriggerType",
    "UnimplementedError",
    "UnknownVariantError",
    "binds_equal",
    "describe_bind",
    "deserialize_bind",
    "deserialize_trigger",
    "dump_bind_json",
    "load_bind_json",
    "serialize_bind",
    "serialize_trigger",
    "triggers_equal",
]
