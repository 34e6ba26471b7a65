from __future__ import annotations

from enum import Enum
from typing import TypeAlias, Union

from pydantic import NonNegativeFloat, NonNegativeInt


class BindType(str, Enum):
    """Persisted tags of the bind variants; closed set."""

    PRESS_KEY = "press_key"
    RELEASE_KEY = "release_key"
    TAP_KEY = "tap_key"
    SWITCH_LAYER = "switch_layer"
    MACRO = "macro"

    # Interpreted by the daemon from the high-level bind, never lowered.
    TIMED_MACRO = "timed_macro_bind"
    REPEAT = "repeat_bind"
    APP_OPEN = "app_open_bind"

    def __str__(self) -> str:
        return self.value


class TriggerType(str, Enum):
    """Input conditions the daemon can match on."""

    KEY_PRESS = "key_press"
    KEY_RELEASE = "key_release"
    MINIMUM_WAIT = "minimum_wait"
    MAXIMUM_WAIT = "maximum_wait"

    def __str__(self) -> str:
        return self.value


# Milliseconds. Whole numbers stay ints so they dump as `100`, not `100.0`.
Duration: TypeAlias = Union[NonNegativeInt, NonNegativeFloat]

TAG_FAMILIES: tuple[frozenset[str], ...] = (
    frozenset(member.value for member in BindType),
    frozenset(member.value for member in TriggerType),
)
