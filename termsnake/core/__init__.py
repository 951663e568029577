"""
Core abstractions for termsnake.

Provides abstract interfaces that the game, renderer, and display backends implement.
"""

from .game_interface import GameInterface
from .renderer_interface import RendererInterface, PaintedCells
from .screen_interface import Screen, Style, ScreenInitError

__all__ = [
    'GameInterface',
    'RendererInterface',
    'PaintedCells',
    'Screen',
    'Style',
    'ScreenInitError',
]
