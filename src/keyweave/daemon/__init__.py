from __future__ import annotations

from .backend import DaemonBackend
from .lowering import is_lowerable, to_ll
from .models.instruction import LLInstruction, LLPressKey, LLReleaseKey, LLSwitchLayer, LLWait
from .models.profile import LLBasicRemapping, LLLayer, LLProfile, LLRemapping, LLSequenceRemapping

__all__ = [
    "DaemonBackend",
    "LLBasicRemapping",
    "LLInstruction",
    "LLLayer",
    "LLPressKey",
    "LLProfile",
    "LLReleaseKey",
    "LLRemapping",
    "LLSequenceRemapping",
    "LLSwitchLayer",
    "LLWait",
    "is_lowerable",
    "to_ll",
]
