"""
Layout Parser for the maze game.

Reads and validates maze layouts from text or the filesystem.

Layout Format:
    <width> <height>      header line, two integers
    followed by `height` rows of at least `width` characters:
    # = Wall
    P = Start position
    E = Exit
    anything else (conventionally a space) = Open path
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .cells import CellType

LINE_BREAK = re.compile(r"\r\n|\r|\n")
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class LayoutParseError(Exception):
    """Exception raised when a maze layout is malformed."""

    pass


@dataclass
class ParsedLayout:
    """Parsed layout ready to be applied to a grid."""

    width: int
    height: int
    cells: list[list[CellType]]
    exit: tuple[int, int]
    start: Optional[tuple[int, int]] = None


def _parse_header(header: str) -> tuple[int, int]:
    tokens = header.split()
    if len(tokens) < 2:
        raise LayoutParseError(
            f"Header must hold width and height, got {header!r}"
        )

    if not all(INTEGER_TOKEN.fullmatch(token) for token in tokens[:2]):
        raise LayoutParseError(f"Non-numeric dimensions in header {header!r}")

    width, height = int(tokens[0]), int(tokens[1])

    if width <= 0 or height <= 0:
        raise LayoutParseError(f"Dimensions must be positive, got {width}x{height}")

    return width, height


def parse_layout_text(layout_text: str) -> ParsedLayout:
    """
    Parse layout text into cells and marker positions.

    Rows longer than the declared width and lines after the last row are
    ignored. Only the first 'P' and the first 'E' are recorded; any later
    'E' still becomes an exit cell.

    Args:
        layout_text: Header line followed by the maze rows.

    Returns:
        ParsedLayout with cells, start and exit.

    Raises:
        LayoutParseError: If the header or rows are malformed or no exit exists.
    """
    # Only CR, LF and CRLF end a row; other control characters are cells
    lines = LINE_BREAK.split(layout_text) if layout_text else []
    if not lines:
        raise LayoutParseError("Layout is missing the header line")

    width, height = _parse_header(lines[0])
    body = lines[1:]

    if len(body) < height:
        raise LayoutParseError(
            f"Layout declares {height} rows but only {len(body)} were found"
        )

    cells: list[list[CellType]] = []
    start_pos: Optional[tuple[int, int]] = None
    exit_pos: Optional[tuple[int, int]] = None

    for y, line in enumerate(body[:height]):
        if len(line) < width:
            raise LayoutParseError(
                f"Row {y} has {len(line)} characters, expected at least {width}"
            )

        row = []
        for x, char in enumerate(line[:width]):
            cell = CellType.from_char(char)
            row.append(cell)

            # Track special positions
            if cell == CellType.START and start_pos is None:
                start_pos = (x, y)
            elif cell == CellType.EXIT and exit_pos is None:
                exit_pos = (x, y)

        cells.append(row)

    if exit_pos is None:
        raise LayoutParseError("Layout must have an exit position (E)")

    return ParsedLayout(
        width=width,
        height=height,
        cells=cells,
        exit=exit_pos,
        start=start_pos,
    )


def read_layout_file(file_path: Path | str) -> str:
    """
    Read raw layout text from the filesystem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        LayoutParseError: If the path is not a file or cannot be read.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Layout file not found: {file_path}")

    if not file_path.is_file():
        raise LayoutParseError(f"Path is not a file: {file_path}")

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LayoutParseError(f"Failed to read layout file: {e}") from e


def load_layout_file(file_path: Path | str) -> ParsedLayout:
    """
    Load and parse a layout file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        LayoutParseError: If the file cannot be read or parsed.
    """
    return parse_layout_text(read_layout_file(file_path))


def validate_layout_text(layout_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate layout text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_layout_text(layout_text)
        return True, None
    except LayoutParseError as e:
        return False, str(e)
