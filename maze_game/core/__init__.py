# Core module
from .cells import CellType, Direction, Position
from .maze_grid import MazeGrid
from .layout_parser import (
    LayoutParseError,
    ParsedLayout,
    parse_layout_text,
    read_layout_file,
    load_layout_file,
    validate_layout_text,
)

__all__ = [
    "MazeGrid",
    "CellType",
    "Direction",
    "Position",
    "LayoutParseError",
    "ParsedLayout",
    "parse_layout_text",
    "read_layout_file",
    "load_layout_file",
    "validate_layout_text",
]
