"""
Input events decoded from script tokens.

A token is either one of the reserved control keys or literal text.
"""

from dataclasses import dataclass
from enum import Enum


class KeyType(str, Enum):
    ENTER = "enter"
    TAB = "tab"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    RUNES = "runes"


@dataclass(frozen=True)
class KeyEvent:
    """
    A single key press.

    Fields:
        type: Which key was pressed
        text: Characters typed, only set for KeyType.RUNES
    """
    type: KeyType
    text: str = ""

    def __str__(self) -> str:
        if self.type is KeyType.RUNES:
            return self.text
        return self.type.value


_CONTROL_KEYS = {
    "enter": KeyType.ENTER,
    "tab": KeyType.TAB,
    "esc": KeyType.ESC,
    "up": KeyType.UP,
    "down": KeyType.DOWN,
}


def decode(token: str) -> KeyEvent:
    """
    Map a script token to a key event.

    Control key names match exactly (case-sensitive). Anything else, including
    the empty string, is literal text delivered as one event.
    """
    key_type = _CONTROL_KEYS.get(token)
    if key_type is None:
        return KeyEvent(type=KeyType.RUNES, text=token)
    return KeyEvent(type=key_type)
