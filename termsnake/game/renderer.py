"""
Snake Game Renderer - character-cell visualization implementing RendererInterface.
"""
from typing import Dict, Tuple

from ..core.renderer_interface import PaintedCells, RendererInterface
from ..core.screen_interface import Screen, Style
from .entities import GameState
from .snake_game import FIELD_HEIGHT, FIELD_WIDTH

BORDER_SYMBOL = "‖"
BLANK = " "

Cell = Tuple[int, int]


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game onto a Screen, centered on the surface.

    Keeps no state between frames: the caller threads the cells painted by
    one frame into the next call, and only the stale ones are blanked.
    """

    def __init__(
        self,
        field_width: int = FIELD_WIDTH,
        field_height: int = FIELD_HEIGHT,
        border_symbol: str = BORDER_SYMBOL,
    ):
        """
        Initialize the renderer.

        Args:
            field_width: Play field width in cells
            field_height: Play field height in cells
            border_symbol: Glyph used for the frame around the field
        """
        self._field_width = field_width
        self._field_height = field_height
        self._border_symbol = border_symbol

    def get_field_size(self) -> Tuple[int, int]:
        return (self._field_width, self._field_height)

    def get_origin(self, screen_width: int, screen_height: int) -> Tuple[int, int]:
        """
        Top-left screen cell of the play field.

        Returns:
            Tuple of (row, col); may be negative on small screens
        """
        field_width, field_height = self.get_field_size()
        return (
            screen_height // 2 - field_height // 2,
            screen_width // 2 - field_width // 2,
        )

    def render(self, game_state: GameState, screen: Screen, dirty: PaintedCells = frozenset()) -> PaintedCells:
        """
        Render the game state to a screen.

        Args:
            game_state: State to draw
            screen: Screen to draw on
            dirty: Cells painted by the previous frame

        Returns:
            Cells painted by this frame
        """
        width, height = screen.size()
        top, left = self.get_origin(width, height)

        cells: Dict[Cell, Tuple[str, Style]] = {}
        self._frame_cells(cells, top, left)

        snake = game_state.snake
        for segment in snake.segments:
            cells[(left + segment.col, top + segment.row)] = (snake.symbol, Style.SNAKE)

        food = game_state.food
        cells[(left + food.point.col, top + food.point.row)] = (food.symbol, Style.FOOD)

        status = f"Score: {game_state.score}"
        for offset, glyph in enumerate(status):
            cells[(left - 1 + offset, top - 2)] = (glyph, Style.TEXT)

        # Clip to the surface
        visible = {
            (x, y): value for (x, y), value in cells.items()
            if 0 <= x < width and 0 <= y < height
        }

        for x, y in dirty - visible.keys():
            if 0 <= x < width and 0 <= y < height:
                screen.set_cell(x, y, BLANK, Style.DEFAULT)

        for (x, y), (glyph, style) in visible.items():
            screen.set_cell(x, y, glyph, style)

        screen.show()
        return frozenset(visible)

    def _frame_cells(self, cells: Dict[Cell, Tuple[str, Style]], top: int, left: int) -> None:
        """Add the one-cell border just outside the play field."""
        row0, col0 = top - 1, left - 1
        frame_width = self._field_width + 2
        frame_height = self._field_height + 2
        border = (self._border_symbol, Style.BORDER)

        for c in range(frame_width):
            cells[(col0 + c, row0)] = border
            cells[(col0 + c, row0 + frame_height - 1)] = border

        for r in range(1, frame_height - 1):
            cells[(col0, row0 + r)] = border
            cells[(col0 + frame_width - 1, row0 + r)] = border

    def render_game_over(self, game_state: GameState, screen: Screen) -> None:
        """Draw the centered end-of-game message and final score."""
        width, height = screen.size()
        self._print_centered(screen, width // 2, height // 2, "Game over!")
        self._print_centered(screen, width // 2, height // 2 + 1, f"Your score is {game_state.score}")
        screen.show()

    def _print_centered(self, screen: Screen, center_x: int, y: int, text: str) -> None:
        width, height = screen.size()
        if not 0 <= y < height:
            return
        x = center_x - len(text) // 2
        for offset, glyph in enumerate(text):
            if 0 <= x + offset < width:
                screen.set_cell(x + offset, y, glyph, Style.TEXT)
