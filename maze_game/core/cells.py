"""Cell, direction and position types shared by the grid and the layout parser."""

from dataclasses import dataclass
from enum import Enum


class CellType(Enum):
    """Types of cells in the maze."""
    WALL = "#"
    PATH = " "
    EXIT = "E"
    START = "P"

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert a layout character to CellType."""
        mapping = {
            "#": cls.WALL,
            "E": cls.EXIT,
            "P": cls.START,
        }
        return mapping.get(char, cls.PATH)


class Direction(Enum):
    """Movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""
    x: int
    y: int

