"""Maze Game - console entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

from maze_game.config import Settings, get_settings
from maze_game.core import MazeGrid
from maze_game.game import MazeGame
from maze_game.player import Player

logger = logging.getLogger("maze_game")


def configure_logging(level: str) -> None:
    """Send log records to stderr so they stay out of the rendered maze."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_grid(settings: Settings, layout_file: Optional[Path] = None) -> MazeGrid:
    """
    Generate a maze, then replace it with a layout file if one is given.

    The generated maze stays in place when the layout cannot be loaded.
    """
    grid = MazeGrid(settings.width, settings.height, seed=settings.seed)
    grid.generate()

    layout_file = layout_file or settings.layout_file
    if layout_file is not None:
        if grid.load_from_file(layout_file):
            logger.info(f"Loaded maze layout from {layout_file}")
        else:
            logger.warning(
                f"Using generated {grid.width}x{grid.height} maze instead of {layout_file}"
            )

    return grid


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        print("Usage: maze-game [LAYOUT_FILE]", file=sys.stderr)
        return 2

    settings = get_settings()
    configure_logging(settings.log_level)

    layout_file = Path(argv[0]) if argv else None
    grid = build_grid(settings, layout_file)
    player = Player(*grid.start_position())

    game = MazeGame(grid, player, echo_moves=settings.debug)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
