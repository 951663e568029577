"""
Logical commands and the default key bindings.
"""
from enum import Enum
from typing import Dict, Optional


class Command(Enum):
    """Commands produced by the input source."""
    MOVE_UP = "up"
    MOVE_LEFT = "left"
    MOVE_DOWN = "down"
    MOVE_RIGHT = "right"
    TOGGLE_PAUSE = "pause"
    QUIT = "quit"

    @property
    def is_move(self) -> bool:
        return self in (Command.MOVE_UP, Command.MOVE_LEFT, Command.MOVE_DOWN, Command.MOVE_RIGHT)


# Raw key names from the curses ("KEY_UP") and pygame ("up") backends
DEFAULT_KEY_MAP: Dict[str, Command] = {
    "w": Command.MOVE_UP,
    "a": Command.MOVE_LEFT,
    "s": Command.MOVE_DOWN,
    "d": Command.MOVE_RIGHT,
    "KEY_UP": Command.MOVE_UP,
    "KEY_LEFT": Command.MOVE_LEFT,
    "KEY_DOWN": Command.MOVE_DOWN,
    "KEY_RIGHT": Command.MOVE_RIGHT,
    "up": Command.MOVE_UP,
    "left": Command.MOVE_LEFT,
    "down": Command.MOVE_DOWN,
    "right": Command.MOVE_RIGHT,
    "p": Command.TOGGLE_PAUSE,
    "q": Command.QUIT,
    "QUIT": Command.QUIT,
}


def decode_key(key: str, key_map: Optional[Dict[str, Command]] = None) -> Optional[Command]:
    """
    Translate a raw key name into a command.

    Args:
        key: Raw key name from a screen backend
        key_map: Bindings to use (defaults to DEFAULT_KEY_MAP)

    Returns:
        The bound command, or None for unrecognized keys
    """
    if key_map is None:
        key_map = DEFAULT_KEY_MAP
    return key_map.get(key)
