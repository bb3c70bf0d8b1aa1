"""
Console game loop for the maze game.

Turns typed commands into player moves on a MazeGrid:
- w / a / s / d move up, left, down, right
- quit ends the game
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Literal, Optional

from maze_game.core import Direction, MazeGrid
from maze_game.player import Player

logger = logging.getLogger(__name__)

WELCOME = "Welcome to the Maze Game!"
INSTRUCTIONS = "Use W (up), A (left), S (down), D (right) to move. Type 'quit' to exit."
PROMPT = "Enter your move (W/A/S/D): "
COMPLETED_MESSAGE = "Congratulations! You've reached the exit!"
QUIT_MESSAGE = "Thanks for playing!"
BLOCKED_MESSAGE = "Invalid move. You can't go through walls!"
INVALID_MESSAGE = "Invalid input. Please use W/A/S/D to move or 'quit' to exit."


class Command(Enum):
    """Commands accepted at the prompt."""
    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"
    QUIT = "quit"

    @property
    def direction(self) -> Optional[Direction]:
        """Movement direction, or None for QUIT."""
        directions = {
            Command.UP: Direction.UP,
            Command.LEFT: Direction.LEFT,
            Command.DOWN: Direction.DOWN,
            Command.RIGHT: Direction.RIGHT,
        }
        return directions.get(self)


def parse_command(raw: str) -> Optional[Command]:
    """Parse a line of input into a Command, or None if unrecognized."""
    try:
        return Command(raw.strip().lower())
    except ValueError:
        return None


@dataclass
class TurnResult:
    """Result of one command."""
    status: Literal["moved", "blocked", "invalid", "quit", "completed"]
    position: tuple[int, int]
    message: Optional[str] = None


class MazeGame:
    """
    One game of a player walking through a maze.

    The grid and the player are passed in; the game only coordinates them.

    Example usage:
        grid = MazeGrid(15, 15)
        grid.generate()
        game = MazeGame(grid, Player(*grid.start_position()))
        game.run()
    """

    def __init__(self, grid: MazeGrid, player: Player, echo_moves: bool = False):
        """
        Args:
            grid: A generated or loaded maze.
            player: The player, normally placed at grid.start_position().
            echo_moves: Report "Moved from ... to ..." after each move.
        """
        self.grid = grid
        self.player = player
        self.echo_moves = echo_moves
        self.quit = False

    @property
    def is_finished(self) -> bool:
        """True once the player stands on the exit."""
        return self.grid.is_exit(self.player.x, self.player.y)

    def step(self, raw_input: str) -> TurnResult:
        """
        Apply one line of input.

        Args:
            raw_input: What the user typed.

        Returns:
            TurnResult describing what happened.
        """
        command = parse_command(raw_input)

        if command is None:
            return TurnResult(
                status="invalid",
                position=self.player.position,
                message=INVALID_MESSAGE,
            )

        if command == Command.QUIT:
            self.quit = True
            logger.info("Player quit")
            return TurnResult(
                status="quit",
                position=self.player.position,
                message=QUIT_MESSAGE,
            )

        old_x, old_y = self.player.position
        dx, dy = command.direction.delta
        new_x, new_y = old_x + dx, old_y + dy

        # Wall collision - can't move
        if not self.grid.is_valid_move(new_x, new_y):
            return TurnResult(
                status="blocked",
                position=self.player.position,
                message=BLOCKED_MESSAGE,
            )

        self.player.move(new_x, new_y)

        if self.is_finished:
            logger.info(f"Player reached the exit at ({new_x},{new_y})")
            return TurnResult(
                status="completed",
                position=self.player.position,
                message=COMPLETED_MESSAGE,
            )

        message = None
        if self.echo_moves:
            message = f"Moved from ({old_x},{old_y}) to ({new_x},{new_y})"

        return TurnResult(
            status="moved",
            position=self.player.position,
            message=message,
        )

    def run(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> bool:
        """
        Play until the exit is reached, the player quits, or input ends.

        Args:
            read_line: Prompts and returns one line. Raises EOFError at end of input.
            write: Receives each block of output.

        Returns:
            True if the player reached the exit.
        """
        write(WELCOME)
        write(INSTRUCTIONS)

        while True:
            write("\n" + self.grid.render(self.player) + "\n")

            if self.is_finished:
                write(COMPLETED_MESSAGE)
                return True

            try:
                raw = read_line(PROMPT)
            except EOFError:
                logger.info("Input closed before reaching the exit")
                write(QUIT_MESSAGE)
                return False

            result = self.step(raw)

            # The completed message is written at the top of the next pass
            if result.message and result.status != "completed":
                write(result.message)

            if result.status == "quit":
                return False
