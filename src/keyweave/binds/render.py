from __future__ import annotations

from typing import Iterable, assert_never

from .ir import AppOpen, Bind, Macro, PressKey, ReleaseKey, Repeat, SwapLayer, TapKey, TimedMacro


def describe_bind(bind: Bind) -> str:
    """Human-readable label, e.g. ``Macro: Press: a, Tap: b``."""

    match bind:
        case PressKey():
            return f"Press: {bind.value}"
        case ReleaseKey():
            return f"Release: {bind.value}"
        case TapKey():
            return f"Tap: {bind.value}"
        case Macro():
            return f"Macro: {_join(describe_bind(b) for b in bind.binds)}"
        case TimedMacro():
            parts = []
            for i, child in enumerate(bind.binds):
                label = describe_bind(child)
                if i < len(bind.times):
                    label += f" ({bind.times[i]}ms)"
                parts.append(label)
            return f"Timed Macro: {_join(parts)}"
        case Repeat():
            return (
                f"Repeat: {describe_bind(bind.value)} "
                f"x{bind.times_to_execute} every {bind.time_delay}ms"
            )
        case SwapLayer():
            return f"Swap Layer: {bind.layer_number}"
        case AppOpen():
            return f"Open App: {bind.app_name}"
        case _:
            assert_never(bind)


def _join(labels: Iterable[str]) -> str:
    return ", ".join(labels)
