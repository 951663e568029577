"""
Abstract game interface for termsnake.

The engine behind the driver loop must implement GameInterface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class GameInterface(ABC):
    """
    Abstract base class for the game engine.

    Games handle the core logic, rules, and state management.
    They know nothing about screens, keyboards, or timing.
    """

    @abstractmethod
    def reset(self) -> Any:
        """
        Reset the game to initial state.

        Returns:
            Initial game state
        """
        pass

    @abstractmethod
    def step(self, command: Optional[Any] = None) -> Any:
        """
        Advance the game by one tick.

        Args:
            command: The command read this tick, or None

        Returns:
            The game state after the tick
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get a plain snapshot of the current game state.

        Returns:
            Dictionary describing the state
        """
        pass

    @property
    @abstractmethod
    def is_over(self) -> bool:
        """Whether the game has reached its terminal state."""
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
