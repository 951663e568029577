"""
Abstract screen interface for termsnake.

A screen is a grid of character cells. Backends (curses, pygame, test doubles)
implement this contract; nothing above it assumes a specific backend.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple


class Style(Enum):
    """Logical cell styles, mapped to colors by each backend."""
    DEFAULT = "default"
    BORDER = "border"
    SNAKE = "snake"
    FOOD = "food"
    TEXT = "text"


class ScreenInitError(Exception):
    """Raised when a display backend cannot be acquired."""


class Screen(ABC):
    """
    Character-cell display surface.

    Coordinates are (x, y) = (column, row) with (0, 0) at the top-left.
    """

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """
        Current surface size.

        Returns:
            Tuple of (width, height) in cells
        """
        pass

    @abstractmethod
    def set_cell(self, x: int, y: int, glyph: str, style: Style = Style.DEFAULT) -> None:
        """
        Paint one cell of the back buffer.

        Args:
            x: Column
            y: Row
            glyph: Single character to draw (" " blanks the cell)
            style: Logical style of the cell
        """
        pass

    @abstractmethod
    def show(self) -> None:
        """Present the back buffer on the visible display."""
        pass

    @abstractmethod
    def fini(self) -> None:
        """Release the display and restore the terminal/window state."""
        pass

    @abstractmethod
    def poll_event(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Block until the next raw key event.

        Args:
            timeout: Seconds to wait; None waits forever

        Returns:
            Key name (e.g. "w", "KEY_UP", "QUIT"), or None on timeout
        """
        pass

    def pump_events(self) -> None:
        """
        Process pending native events on the driver thread.

        Called once per tick, paused or not. Backends whose poll_event reads
        the device directly need nothing here.
        """
        pass
