"""
Abstract renderer interface for termsnake.

Renderers project game state onto a Screen.
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Tuple

from .screen_interface import Screen

# Absolute (x, y) screen cells painted by one frame
PaintedCells = FrozenSet[Tuple[int, int]]


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers never clear the whole screen: each frame reports the cells it
    painted, and the next frame blanks only those that went stale.
    """

    @abstractmethod
    def render(self, game_state: Any, screen: Screen, dirty: PaintedCells = frozenset()) -> PaintedCells:
        """
        Render the game state to a screen.

        Args:
            game_state: State to draw
            screen: Screen to draw on
            dirty: Cells painted by the previous frame

        Returns:
            Cells painted by this frame
        """
        pass

    @abstractmethod
    def render_game_over(self, game_state: Any, screen: Screen) -> None:
        """
        Render the end-of-game summary.

        Args:
            game_state: Final game state
            screen: Screen to draw on
        """
        pass

    @abstractmethod
    def get_field_size(self) -> Tuple[int, int]:
        """
        Get the play field size.

        Returns:
            Tuple of (width, height) in cells
        """
        pass
