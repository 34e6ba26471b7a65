from __future__ import annotations

from typing import List, assert_never

from keyweave.binds.errors import UnimplementedError
from keyweave.binds.ir import (
    AppOpen,
    Bind,
    Macro,
    PressKey,
    ReleaseKey,
    Repeat,
    SwapLayer,
    TapKey,
    TimedMacro,
)

from .models.instruction import LLInstruction, LLPressKey, LLReleaseKey, LLSwitchLayer, LLWait


def to_ll(bind: Bind) -> List[LLInstruction]:
    """Lower a bind tree into a flat daemon instruction sequence.

    Repeat and AppOpen need run-time state the flat vocabulary cannot express
    and raise UnimplementedError, anywhere in the tree.
    """

    match bind:
        case PressKey():
            return [LLPressKey(value=bind.value)]
        case ReleaseKey():
            return [LLReleaseKey(value=bind.value)]
        case TapKey():
            return [LLPressKey(value=bind.value), LLReleaseKey(value=bind.value)]
        case Macro():
            out: List[LLInstruction] = []
            for child in bind.binds:
                out.extend(to_ll(child))
            return out
        case TimedMacro():
            out = []
            for i, child in enumerate(bind.binds):
                out.extend(to_ll(child))
                if i < len(bind.times):
                    out.append(LLWait(value=bind.times[i]))
            return out
        case SwapLayer():
            return [LLSwitchLayer(value=bind.layer_number)]
        case Repeat() | AppOpen():
            raise UnimplementedError(bind, "to_ll")
        case _:
            assert_never(bind)


def is_lowerable(bind: Bind) -> bool:
    """True when `to_ll` succeeds for the whole tree."""

    match bind:
        case PressKey() | ReleaseKey() | TapKey() | SwapLayer():
            return True
        case Macro() | TimedMacro():
            return all(is_lowerable(child) for child in bind.binds)
        case Repeat() | AppOpen():
            return False
        case _:
            assert_never(bind)
