"""
Pygame Screen - a graphical window that behaves like a character-cell grid.

Pygame events must be pumped on the main thread, so pump_events() collects
them into a queue and poll_event() only waits on that queue.
"""
import logging
import queue
from typing import Optional, Tuple

import pygame

from ..core.screen_interface import Screen, ScreenInitError, Style

logger = logging.getLogger(__name__)

# Colors
BACKGROUND = (20, 20, 24)
BORDER_COLOR = (70, 130, 180)
SNAKE_COLOR = (80, 200, 80)
FOOD_COLOR = (200, 70, 70)
TEXT_COLOR = (220, 220, 230)

STYLE_COLORS = {
    Style.DEFAULT: TEXT_COLOR,
    Style.BORDER: BORDER_COLOR,
    Style.SNAKE: SNAKE_COLOR,
    Style.FOOD: FOOD_COLOR,
    Style.TEXT: TEXT_COLOR,
}


class PygameScreen(Screen):
    """
    Screen implementation on top of a pygame window.

    Snake, food, and border cells are drawn as shapes; text cells as glyphs.
    """

    def __init__(self, columns: int = 40, rows: int = 22, cell_size: int = 24, title: str = "termsnake"):
        """
        Open the window.

        Args:
            columns: Window width in cells
            rows: Window height in cells
            cell_size: Size of each cell in pixels
            title: Window caption

        Raises:
            ScreenInitError: If pygame cannot open a window
        """
        self.columns = columns
        self.rows = rows
        self.cell_size = cell_size

        try:
            pygame.init()
            self.surface = pygame.display.set_mode((columns * cell_size, rows * cell_size))
        except pygame.error as e:
            raise ScreenInitError(f"Could not open pygame window: {e}") from e

        pygame.display.set_caption(title)
        self.surface.fill(BACKGROUND)
        self.font = pygame.font.SysFont("monospace", cell_size - 4)

        self._events: "queue.Queue[str]" = queue.Queue()
        self._closed = False
        logger.info("Pygame screen ready (%dx%d cells)", columns, rows)

    def size(self) -> Tuple[int, int]:
        return (self.columns, self.rows)

    def set_cell(self, x: int, y: int, glyph: str, style: Style = Style.DEFAULT) -> None:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            return

        rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.surface, BACKGROUND, rect)

        if glyph == " ":
            return

        color = STYLE_COLORS[style]
        if style is Style.SNAKE:
            pygame.draw.rect(self.surface, color, rect.inflate(-2, -2), border_radius=3)
        elif style is Style.FOOD:
            pygame.draw.circle(self.surface, color, rect.center, self.cell_size // 2 - 2)
        elif style is Style.BORDER:
            pygame.draw.rect(self.surface, color, rect.inflate(-self.cell_size // 2, 0))
        else:
            text = self.font.render(glyph, True, color)
            self.surface.blit(text, text.get_rect(center=rect.center))

    def show(self) -> None:
        if self._closed:
            return
        pygame.display.flip()

    def pump_events(self) -> None:
        """Translate pending pygame events into key names."""
        if self._closed:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._events.put("QUIT")
            elif event.type == pygame.KEYDOWN:
                self._events.put(pygame.key.name(event.key))

    def poll_event(self, timeout: Optional[float] = None) -> Optional[str]:
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def fini(self) -> None:
        if self._closed:
            return
        self._closed = True
        pygame.quit()
        logger.info("Pygame window closed")
