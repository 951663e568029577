"""
Grid geometry - points, directions, and the bounded play field.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator
import random


@dataclass(frozen=True)
class Point:
    """A cell on the play field."""
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Point":
        """Return the point shifted by (d_row, d_col)."""
        return Point(self.row + d_row, self.col + d_col)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"row": self.row, "col": self.col}


class Direction(Enum):
    """Snake velocity vectors as (d_row, d_col)."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.d_row, -self.d_col))


@dataclass(frozen=True)
class Grid:
    """The bounded play field, `width` columns by `height` rows."""
    width: int
    height: int

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside [0, height) x [0, width)."""
        return 0 <= point.row < self.height and 0 <= point.col < self.width

    def random_point(self, rng: random.Random) -> Point:
        """Sample a cell uniformly over the whole field."""
        return Point(rng.randrange(self.height), rng.randrange(self.width))

    def cells(self) -> Iterator[Point]:
        """Iterate over every cell, row by row."""
        for row in range(self.height):
            for col in range(self.width):
                yield Point(row, col)

    @property
    def area(self) -> int:
        return self.width * self.height
