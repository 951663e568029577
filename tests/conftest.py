"""
Pytest configuration and fixtures for termsnake tests.

This module sets up pygame mocking so the pygame backend can be tested
without a display, and provides a recording fake screen.
"""

import queue
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from termsnake.core.screen_interface import Screen, Style  # noqa: E402


class FakeScreen(Screen):
    """In-memory screen that records every call."""

    def __init__(self, width: int = 80, height: int = 24, events: Optional[List[str]] = None):
        self.width = width
        self.height = height
        self.cells: Dict[Tuple[int, int], Tuple[str, Style]] = {}
        self.set_calls: List[Tuple[int, int, str, Style]] = []
        self.show_count = 0
        self.pump_count = 0
        self.fini_count = 0
        self._events: "queue.Queue[str]" = queue.Queue()
        for event in events or []:
            self._events.put(event)

    def size(self):
        return (self.width, self.height)

    def set_cell(self, x, y, glyph, style=Style.DEFAULT):
        self.set_calls.append((x, y, glyph, style))
        self.cells[(x, y)] = (glyph, style)

    def show(self):
        self.show_count += 1

    def pump_events(self):
        self.pump_count += 1

    def fini(self):
        self.fini_count += 1

    def poll_event(self, timeout=None):
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def text_at(self, x: int, y: int, length: int) -> str:
        """Read back `length` glyphs starting at (x, y)."""
        return "".join(self.cells.get((x + i, y), (" ", Style.DEFAULT))[0] for i in range(length))


def create_mock_pygame():
    """Create a mock of the parts of pygame the window backend uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None
    mock_pygame.error = type("error", (RuntimeError,), {})

    # Display
    mock_surface = MagicMock()
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_pygame.font.SysFont.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_w = 119
    mock_pygame.K_UP = 273

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Runs automatically for all tests so the pygame backend is never
    imported against a real display.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def fake_screen():
    """Provide an 80x24 recording screen."""
    return FakeScreen()


@pytest.fixture
def game():
    """Provide a snake game with seeded food placement."""
    from termsnake.game.snake_game import SnakeGame

    return SnakeGame(rng=random.Random(1234))


@pytest.fixture
def make_screen():
    """Factory for recording screens of any size, optionally with queued key events."""
    return FakeScreen
