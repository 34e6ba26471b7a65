from __future__ import annotations

from typing import Sequence, assert_never

from .ir import AppOpen, Bind, Macro, PressKey, ReleaseKey, Repeat, SwapLayer, TapKey, TimedMacro
from .triggers import triggers_equal


def binds_equal(a: Bind, b: Bind) -> bool:
    """Structural equality: same variant and recursively equal attributes."""

    if type(a) is not type(b):
        return False

    match a:
        case PressKey() | ReleaseKey() | TapKey():
            return a.value == b.value
        case Macro():
            return _binds_seq_equal(a.binds, b.binds)
        case TimedMacro():
            return _binds_seq_equal(a.binds, b.binds) and tuple(a.times) == tuple(b.times)
        case Repeat():
            return (
                binds_equal(a.value, b.value)
                and a.time_delay == b.time_delay
                and a.times_to_execute == b.times_to_execute
                and triggers_equal(a.cancel_trigger, b.cancel_trigger)
            )
        case SwapLayer():
            return a.layer_number == b.layer_number
        case AppOpen():
            return a.app_name == b.app_name
        case _:
            assert_never(a)


def _binds_seq_equal(left: Sequence[Bind], right: Sequence[Bind]) -> bool:
    if len(left) != len(right):
        return False
    return all(binds_equal(x, y) for x, y in zip(left, right))
