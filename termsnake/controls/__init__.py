"""
Keyboard controls: logical commands and the background input listener.
"""

from .commands import Command, DEFAULT_KEY_MAP, decode_key
from .input_listener import InputListener

__all__ = [
    'Command',
    'DEFAULT_KEY_MAP',
    'decode_key',
    'InputListener',
]
