"""
Snake game module for termsnake.

Geometry, entities, the engine, and the character-cell renderer.
"""

from .geometry import Point, Direction, Grid
from .entities import Snake, Food, GameState
from .snake_game import SnakeGame, FIELD_WIDTH, FIELD_HEIGHT
from .renderer import SnakeRenderer

__all__ = [
    'Point',
    'Direction',
    'Grid',
    'Snake',
    'Food',
    'GameState',
    'SnakeGame',
    'SnakeRenderer',
    'FIELD_WIDTH',
    'FIELD_HEIGHT',
]
