"""
Snake Game Core - Pure game logic without rendering.

The engine advances one tick per call to step(). It never touches the
screen, the keyboard, or the clock.
"""
import logging
import random
from typing import Any, Dict, Optional

from ..controls.commands import Command
from ..core.game_interface import GameInterface
from .entities import FOOD_SYMBOL, SNAKE_SYMBOL, Food, GameState, Snake
from .geometry import Direction, Grid, Point

logger = logging.getLogger(__name__)

# Play field size in cells
FIELD_WIDTH = 30
FIELD_HEIGHT = 15

# Starting layout, tail first
INITIAL_SEGMENTS = [Point(9, 3), Point(8, 3), Point(7, 3), Point(6, 3), Point(5, 3)]
INITIAL_DIRECTION = Direction.UP
INITIAL_FOOD = Point(10, 10)

COMMAND_DIRECTIONS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves across a bounded grid and grows by one segment for every
    food it eats. The game ends when the head leaves the grid or runs into
    the rest of the body.
    """

    def __init__(
        self,
        width: int = FIELD_WIDTH,
        height: int = FIELD_HEIGHT,
        rng: Optional[random.Random] = None,
        snake_symbol: str = SNAKE_SYMBOL,
        food_symbol: str = FOOD_SYMBOL,
    ):
        """
        Initialize the game.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            rng: Random source for food placement
            snake_symbol: Glyph drawn for snake segments
            food_symbol: Glyph drawn for food
        """
        self.grid = Grid(width, height)
        self.rng = rng if rng is not None else random.Random()
        self.snake_symbol = snake_symbol
        self.food_symbol = food_symbol

        self.state: GameState = self.reset()

    def _initial_state(self) -> GameState:
        return GameState(
            snake=Snake(INITIAL_SEGMENTS, INITIAL_DIRECTION, self.snake_symbol),
            food=Food(INITIAL_FOOD, self.food_symbol),
        )

    def reset(self) -> GameState:
        """
        Reset game state and return it.

        Returns:
            The initial game state
        """
        self.state = self._initial_state()
        self._place_food()
        return self.state

    def step(self, command: Optional[Command] = None) -> GameState:
        """
        Advance the game by one tick.

        Args:
            command: At most one command read this tick

        Returns:
            The (mutated) game state
        """
        state = self.state
        if state.over:
            return state

        if command is Command.TOGGLE_PAUSE:
            state.paused = not state.paused
            logger.info("Game %s at score %d", "paused" if state.paused else "resumed", state.score)

        if state.paused:
            return state

        if command is not None and command.is_move:
            if not state.snake.turn(COMMAND_DIRECTIONS[command]):
                logger.debug("Rejected reversal to %s", COMMAND_DIRECTIONS[command].name)

        state.ticks += 1
        self._move_snake()

        if not state.over:
            self._place_food()

        return state

    def _move_snake(self) -> None:
        """Move the head, eat or drop the tail, then check collisions."""
        state = self.state
        snake = state.snake
        head = snake.advance()

        if head == state.food.point:
            state.score += 1
            logger.debug("Ate food at %s, score %d", head, state.score)
        else:
            snake.drop_tail()

        if not self.grid.contains(head):
            self._end_game("hit the wall")
        elif head in snake.body:
            self._end_game("ran into itself")

    def _end_game(self, reason: str) -> None:
        self.state.over = True
        logger.info("Game over: snake %s after %d ticks, score %d", reason, self.state.ticks, self.state.score)

    def _place_food(self) -> None:
        """Move the food off the snake, sampling uniformly over the grid."""
        food = self.state.food
        snake = self.state.snake
        attempts = 0

        while food.point in snake:
            if attempts >= self.grid.area:
                # Fallback: choose among the free cells directly
                free = [p for p in self.grid.cells() if p not in snake]
                if not free:
                    self._end_game("filled the board")
                    return
                food.point = self.rng.choice(free)
                return

            food.point = self.grid.random_point(self.rng)
            attempts += 1

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state as a plain dictionary.

        Returns:
            Dictionary containing full game state
        """
        snapshot = self.state.to_dict()
        snapshot["width"] = self.grid.width
        snapshot["height"] = self.grid.height
        return snapshot

    @property
    def is_over(self) -> bool:
        return self.state.over

    def get_score(self) -> int:
        return self.state.score
