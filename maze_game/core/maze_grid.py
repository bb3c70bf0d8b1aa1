"""
Maze Game Grid

Core maze model including:
- Wall-filled grid allocation with odd dimensions
- Randomized depth-first maze generation
- Loading from the text layout format
- Move validity and exit detection
- Console rendering

Grid Format:
    # = Wall (impassable)
    E = Exit (goal)
    P = Start position (layout files only)
      = Open path (space, or any other character)
"""

import logging
import random
from pathlib import Path
from typing import Optional, Protocol

from .cells import CellType, Position
from .layout_parser import (
    LayoutParseError,
    ParsedLayout,
    parse_layout_text,
    read_layout_file,
)

logger = logging.getLogger(__name__)

MIN_DIMENSION = 3
DEFAULT_START = (1, 1)
PLAYER_CHAR = "P"


class Locatable(Protocol):
    """Anything with an x/y position that can be drawn on the grid."""
    x: int
    y: int


def _odd_dimension(value: int) -> int:
    value = max(value, MIN_DIMENSION)
    return value + 1 if value % 2 == 0 else value


class MazeGrid:
    """
    Rectangular maze grid for the console maze game.

    The grid starts filled with walls. It becomes playable either through
    generate(), which carves a perfect maze, or through load_from_layout(),
    which copies a hand-authored layout. After that it is only read.

    Example usage:
        grid = MazeGrid(15, 15)
        grid.generate()

        x, y = grid.start_position()
        if grid.is_valid_move(x + 1, y):
            ...
        grid.is_exit(13, 13)  # True
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        """
        Allocate a wall-filled grid.

        Args:
            width: Requested width. Even values are bumped up by one.
            height: Requested height. Even values are bumped up by one.
            seed: Optional seed for the generator. None uses system entropy.
        """
        self.width: int = _odd_dimension(width)
        self.height: int = _odd_dimension(height)
        self.cells: list[list[CellType]] = [
            [CellType.WALL] * self.width for _ in range(self.height)
        ]
        self.start_pos: Optional[Position] = None
        self.exit_pos: Optional[Position] = None
        self._random = random.Random(seed)

    def _set(self, x: int, y: int, cell: CellType) -> None:
        self.cells[y][x] = cell

    def _is_wall(self, x: int, y: int) -> bool:
        return self.cells[y][x] == CellType.WALL

    def _unvisited_neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """Lattice neighbors two steps away that are inside the border and uncarved."""
        candidates = [(x, y - 2), (x, y + 2), (x - 2, y), (x + 2, y)]
        return [
            (nx, ny)
            for nx, ny in candidates
            if 0 < nx < self.width - 1
            and 0 < ny < self.height - 1
            and self._is_wall(nx, ny)
        ]

    def generate(self) -> None:
        """
        Carve a perfect maze with an iterative randomized depth-first search.

        Carving starts at (1, 1) and only visits cells whose coordinates are
        both odd, opening the connector cell between each pair. The exit is
        placed at (width - 2, height - 2).
        """
        x, y = DEFAULT_START
        self._set(x, y, CellType.PATH)
        stack = [(x, y)]

        while stack:
            x, y = stack[-1]
            neighbors = self._unvisited_neighbors(x, y)

            if not neighbors:
                stack.pop()
                continue

            next_x, next_y = self._random.choice(neighbors)
            self._set(x + (next_x - x) // 2, y + (next_y - y) // 2, CellType.PATH)
            self._set(next_x, next_y, CellType.PATH)
            stack.append((next_x, next_y))

        exit_x, exit_y = self.width - 2, self.height - 2
        self._set(exit_x, exit_y, CellType.EXIT)
        self.exit_pos = Position(exit_x, exit_y)

        # Open one side of the exit if the carve left it sealed
        if self._is_wall(exit_x, exit_y - 1) and self._is_wall(exit_x - 1, exit_y):
            if self._random.random() < 0.5:
                self._set(exit_x, exit_y - 1, CellType.PATH)
            else:
                self._set(exit_x - 1, exit_y, CellType.PATH)

        self._set(*DEFAULT_START, CellType.PATH)

        logger.debug(
            f"Generated {self.width}x{self.height} maze "
            f"({self.carved_cells()} open cells, exit at {exit_x},{exit_y})"
        )

    def load_from_layout(self, layout_text: str) -> bool:
        """
        Replace the grid with a parsed text layout.

        The layout is parsed completely before anything is changed, so a
        failed load leaves the grid as it was.

        Args:
            layout_text: Header line "<width> <height>" followed by the rows.

        Returns:
            True if the layout was applied, False if it was malformed.
        """
        try:
            layout = parse_layout_text(layout_text)
        except LayoutParseError as e:
            logger.warning(f"Failed to load maze layout: {e}")
            return False

        self._apply_layout(layout)
        return True

    def load_from_file(self, file_path: Path | str) -> bool:
        """
        Read a layout file and load it.

        Returns:
            True if the file was read and applied, False otherwise.
        """
        try:
            layout_text = read_layout_file(file_path)
        except (FileNotFoundError, LayoutParseError) as e:
            logger.warning(f"Failed to read maze layout: {e}")
            return False

        return self.load_from_layout(layout_text)

    def _apply_layout(self, layout: ParsedLayout) -> None:
        self.width = layout.width
        self.height = layout.height
        self.cells = [
            [CellType.PATH if cell == CellType.START else cell for cell in row]
            for row in layout.cells
        ]
        self.start_pos = Position(*layout.start) if layout.start else None
        self.exit_pos = Position(*layout.exit)

    def get_cell(self, x: int, y: int) -> CellType:
        """Get cell type at position."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return CellType.WALL  # Out of bounds = wall
        return self.cells[y][x]

    def is_valid_move(self, x: int, y: int) -> bool:
        """Check whether (x, y) is inside the grid and not a wall."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return False
        return not self._is_wall(x, y)

    def is_exit(self, x: int, y: int) -> bool:
        """Check whether (x, y) is the recorded exit."""
        return self.exit_pos is not None and self.exit_pos == Position(x, y)

    def start_position(self) -> tuple[int, int]:
        """Start from a loaded layout, or (1, 1) for generated mazes."""
        if self.start_pos is not None:
            return self.start_pos.x, self.start_pos.y
        return DEFAULT_START

    @property
    def exit_position(self) -> Optional[tuple[int, int]]:
        """Recorded exit as an (x, y) tuple, or None before initialization."""
        if self.exit_pos is None:
            return None
        return self.exit_pos.x, self.exit_pos.y

    def carved_cells(self) -> int:
        """Count the cells that are not walls."""
        return sum(
            1 for row in self.cells for cell in row if cell != CellType.WALL
        )

    def get_maze_info(self) -> dict:
        """Get maze metadata."""
        x, y = self.start_position()
        return {
            "width": self.width,
            "height": self.height,
            "start_position": {"x": x, "y": y},
            "exit_position": (
                {"x": self.exit_pos.x, "y": self.exit_pos.y} if self.exit_pos else None
            ),
        }

    def render(self, player: Optional[Locatable] = None) -> str:
        """
        Draw the maze as text, one cell character plus a space per column.

        Args:
            player: If provided, drawn as 'P' at its position.

        Returns:
            Multi-line string without a trailing newline.
        """
        lines = []
        for y, row in enumerate(self.cells):
            line = ""
            for x, cell in enumerate(row):
                if player is not None and x == player.x and y == player.y:
                    line += PLAYER_CHAR + " "
                else:
                    line += cell.value + " "
            lines.append(line)

        return "\n".join(lines)
