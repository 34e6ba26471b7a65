from __future__ import annotations

import pytest

from keyweave.binds.errors import UnimplementedError
from keyweave.binds.ir import (
    AppOpen,
    Macro,
    PressKey,
    ReleaseKey,
    Repeat,
    SwapLayer,
    TapKey,
    TimedMacro,
)
from keyweave.binds.triggers import KeyPress
from keyweave.daemon.lowering import is_lowerable, to_ll
from keyweave.daemon.models.instruction import LLPressKey, LLReleaseKey, LLSwitchLayer, LLWait


def _dump(instructions) -> list[dict]:
    return [i.model_dump() for i in instructions]


def test_leaf_binds() -> None:
    assert to_ll(PressKey(value="a")) == [LLPressKey(value="a")]
    assert to_ll(ReleaseKey(value="a")) == [LLReleaseKey(value="a")]
    assert to_ll(SwapLayer(layer_number=3)) == [LLSwitchLayer(value=3)]


def test_tap_key() -> None:
    assert to_ll(TapKey(value="A")) == [LLPressKey(value="A"), LLReleaseKey(value="A")]


def test_macro_concatenates_children() -> None:
    a = TapKey(value="a")
    b = PressKey(value="left_shift")
    c = SwapLayer(layer_number=1)

    assert to_ll(Macro(binds=[a, b, c])) == to_ll(a) + to_ll(b) + to_ll(c)


def test_empty_macro() -> None:
    assert to_ll(Macro(binds=[])) == []


def test_nested_macro_is_flat() -> None:
    bind = Macro(
        binds=[
            Macro(binds=[TapKey(value="a"), Macro(binds=[TapKey(value="b")])]),
            PressKey(value="c"),
        ]
    )

    assert _dump(to_ll(bind)) == [
        {"type": "press_key", "value": "a"},
        {"type": "release_key", "value": "a"},
        {"type": "press_key", "value": "b"},
        {"type": "release_key", "value": "b"},
        {"type": "press_key", "value": "c"},
    ]


def test_timed_macro_interleaves_waits() -> None:
    bind = TimedMacro(binds=[TapKey(value="A"), TapKey(value="B")], times=[100])

    assert to_ll(bind) == [
        LLPressKey(value="A"),
        LLReleaseKey(value="A"),
        LLWait(value=100),
        LLPressKey(value="B"),
        LLReleaseKey(value="B"),
    ]


def test_timed_macro_without_times_has_no_waits() -> None:
    bind = TimedMacro(binds=[TapKey(value="A"), TapKey(value="B")], times=[])

    out = to_ll(bind)

    assert not any(isinstance(i, LLWait) for i in out)
    assert out == to_ll(Macro(binds=[TapKey(value="A"), TapKey(value="B")]))


def test_timed_macro_ignores_extra_times() -> None:
    bind = TimedMacro(binds=[PressKey(value="x")], times=[10, 20, 30])

    assert to_ll(bind) == [LLPressKey(value="x"), LLWait(value=10)]


def test_timed_macro_trailing_wait_when_times_match() -> None:
    bind = TimedMacro(binds=[PressKey(value="x"), ReleaseKey(value="x")], times=[5, 7])

    assert to_ll(bind) == [
        LLPressKey(value="x"),
        LLWait(value=5),
        LLReleaseKey(value="x"),
        LLWait(value=7),
    ]


def test_repeat_is_not_lowerable() -> None:
    bind = Repeat(
        value=TapKey(value="a"),
        time_delay=50,
        times_to_execute=3,
        cancel_trigger=KeyPress(value="escape"),
    )

    with pytest.raises(UnimplementedError) as excinfo:
        to_ll(bind)

    assert excinfo.value.bind == bind
    assert excinfo.value.operation == "to_ll"
    assert not is_lowerable(bind)


def test_app_open_is_not_lowerable() -> None:
    with pytest.raises(UnimplementedError):
        to_ll(AppOpen(app_name="x"))

    # also a NotImplementedError for callers that only know the builtin
    with pytest.raises(NotImplementedError):
        to_ll(AppOpen(app_name="x"))


def test_unlowerable_child_fails_whole_macro() -> None:
    bind = Macro(binds=[TapKey(value="a"), AppOpen(app_name="x")])

    assert not is_lowerable(bind)
    with pytest.raises(UnimplementedError):
        to_ll(bind)


def test_is_lowerable_for_plain_trees() -> None:
    bind = TimedMacro(
        binds=[Macro(binds=[TapKey(value="a")]), SwapLayer(layer_number=0)],
        times=[1],
    )

    assert is_lowerable(bind)


def test_timed_macro_fractional_wait() -> None:
    bind = TimedMacro(binds=[TapKey(value="a"), TapKey(value="b")], times=[12.5, 40])

    out = to_ll(bind)

    assert out[2] == LLWait(value=12.5)
    assert [i.model_dump(mode="json") for i in out if isinstance(i, LLWait)] == [
        {"type": "wait", "value": 12.5},
        {"type": "wait", "value": 40},
    ]
