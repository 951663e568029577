"""
Game entities - the snake, the food, and the aggregate game state.
"""
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Iterable, List

from .geometry import Direction, Point

SNAKE_SYMBOL = "█"  # full block
FOOD_SYMBOL = "●"  # black circle


class Snake:
    """
    The snake: segments from tail (index 0) to head (last index).

    Points are immutable values, so segments never alias each other or the food.
    """

    def __init__(self, segments: Iterable[Point], direction: Direction, symbol: str = SNAKE_SYMBOL):
        self.segments: Deque[Point] = deque(segments)
        if not self.segments:
            raise ValueError("Snake needs at least one segment")
        self.direction = direction
        self.symbol = symbol

    @property
    def head(self) -> Point:
        return self.segments[-1]

    @property
    def body(self) -> List[Point]:
        """Every segment except the head."""
        return list(self.segments)[:-1]

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, point: object) -> bool:
        return point in self.segments

    def turn(self, direction: Direction) -> bool:
        """
        Change direction unless it would reverse the snake onto its neck.

        Returns:
            True if the direction was applied
        """
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def advance(self) -> Point:
        """Append a new head one step along the current direction."""
        new_head = self.head.offset(self.direction.d_row, self.direction.d_col)
        self.segments.append(new_head)
        return new_head

    def drop_tail(self) -> Point:
        return self.segments.popleft()


@dataclass
class Food:
    """A single food item."""
    point: Point
    symbol: str = FOOD_SYMBOL


@dataclass
class GameState:
    """Everything the engine mutates once per tick."""
    snake: Snake
    food: Food
    score: int = 0
    paused: bool = False
    over: bool = False
    ticks: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot for logging and tests."""
        return {
            "snake": [p.to_dict() for p in self.snake.segments],
            "direction": self.snake.direction.name,
            "food": self.food.point.to_dict(),
            "score": self.score,
            "paused": self.paused,
            "over": self.over,
            "ticks": self.ticks,
        }
